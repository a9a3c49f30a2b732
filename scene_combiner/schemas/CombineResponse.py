from typing import List, Optional, Union

from pydantic import BaseModel

SceneNumber = Union[int, float]


class SceneSummary(BaseModel):
    scene_number: SceneNumber
    image_urls: List[str]
    image_count: int


class ScenesSummaryResponse(BaseModel):
    """JSON summary returned for a list of scenes"""

    scenes: List[SceneSummary]
    image_urls: List[str]
    total_count: int


class SceneUrlsResponse(BaseModel):
    """JSON summary returned for a single scene"""

    scene_number: SceneNumber
    image_urls: List[str]
    original_count: int


class NoImagesResponse(BaseModel):
    scene_number: Optional[SceneNumber] = None
    combined_image_url: Optional[str] = None
    original_count: int = 0
    message: str = "No images found to combine"
