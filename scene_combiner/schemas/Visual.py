from typing import Optional

from pydantic import BaseModel


class Visual(BaseModel):
    """One visual attached to a scene; only uploaded images are combined"""

    type: Optional[str] = None
    name: Optional[str] = None
    uploaded_image_url: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return bool(self.uploaded_image_url)
