import logging
from typing import Optional, Union

from pydantic import BaseModel

from ..core.compositor import ImageCompositor
from ..core.image_downloader import ImageDownloader
from ..core.layout import Layout
from ..schemas.CombineRequest import CombineRequest
from ..schemas.CombineResponse import (
    NoImagesResponse,
    SceneSummary,
    SceneUrlsResponse,
    ScenesSummaryResponse,
)

logger = logging.getLogger(__name__)


class CombinedImage(BaseModel):
    content: bytes
    filename: str
    width: int
    height: int
    image_count: int


class CombineModel:
    def __init__(
        self,
        downloader: ImageDownloader,
        compositor: ImageCompositor,
        default_layout: Layout = Layout.VERTICAL,
    ):
        self.downloader = downloader
        self.compositor = compositor
        self.default_layout = Layout(default_layout)

    def summarize(self, request: CombineRequest) -> Union[ScenesSummaryResponse, SceneUrlsResponse]:
        """Collect image URLs without downloading anything"""
        if not request.is_scene_list:
            urls = request.image_urls
            return SceneUrlsResponse(
                scene_number=request.scene_number,
                image_urls=urls,
                original_count=len(urls),
            )

        summaries = [
            SceneSummary(
                scene_number=scene.scene_number,
                image_urls=scene.image_urls,
                image_count=len(scene.image_urls),
            )
            for scene in request.sorted_scenes()
        ]
        urls = [url for summary in summaries for url in summary.image_urls]
        return ScenesSummaryResponse(scenes=summaries, image_urls=urls, total_count=len(urls))

    def combine(
        self, request: CombineRequest, layout: Optional[Layout] = None
    ) -> Union[CombinedImage, NoImagesResponse]:
        """Download every referenced image and composite them into one PNG"""
        urls = request.image_urls
        if not urls:
            return NoImagesResponse(scene_number=request.scene_number)

        layout = Layout(layout or request.layout or self.default_layout)
        label = "scene list" if request.is_scene_list else f"scene {request.scene_number}"
        logger.info("Merging %d images for %s (%s layout)", len(urls), label, layout.value)

        images = self.downloader.download_images(urls)
        canvas = self.compositor.compose(images, layout)

        return CombinedImage(
            content=self.compositor.encode_png(canvas),
            filename=self.filename_for(request),
            width=canvas.width,
            height=canvas.height,
            image_count=len(images),
        )

    @staticmethod
    def filename_for(request: CombineRequest) -> str:
        if request.is_scene_list:
            return "scenes_combined.png"
        scene_number = request.scene_number
        # 2.0 is named like 2, matching how JSON clients print the number
        if isinstance(scene_number, float) and scene_number.is_integer():
            scene_number = int(scene_number)
        return f"scene_{scene_number}_combined.png"
