import logging
from enum import Enum
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import Response

from ..core.layout import Layout
from ..helpers.errors import invalid_input_exception, processing_error_exception
from ..models.CombineModel import CombineModel, CombinedImage
from ..schemas.CombineRequest import CombineRequest
from .dependencies import get_combine_model

logger = logging.getLogger(__name__)

combine_router = APIRouter(tags=["combine"])


class OutputFormat(str, Enum):
    PNG = "png"
    JSON = "json"


@combine_router.post("/combine")
def combine(
    body: Any = Body(...),
    output: Optional[OutputFormat] = Query(None),
    layout: Optional[Layout] = Query(None),
    model: CombineModel = Depends(get_combine_model),
):
    """Summarize the scenes' image URLs, or composite the images into one PNG"""
    try:
        request = CombineRequest.from_body(body)
    except ValueError as e:
        raise invalid_input_exception(str(e))

    # Scene lists default to a JSON summary, a single scene to the merged image
    if output is None:
        output = OutputFormat.JSON if request.is_scene_list else OutputFormat.PNG

    if output == OutputFormat.JSON:
        return model.summarize(request)

    try:
        result = model.combine(request, layout=layout)
    except Exception as e:
        logger.exception("Error processing request")
        raise processing_error_exception(str(e))

    if not isinstance(result, CombinedImage):
        return result

    return Response(
        content=result.content,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )
