from typing import List, Union

from pydantic import BaseModel, Field

from .Visual import Visual


class Scene(BaseModel):
    """Model for a scene and the visuals attached to it"""

    scene_number: Union[int, float]
    visuals: List[Visual] = Field(default_factory=list)

    @property
    def image_urls(self) -> List[str]:
        return [visual.uploaded_image_url for visual in self.visuals if visual.has_image]
