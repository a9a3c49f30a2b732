from typing import Any, List, Optional

from pydantic import BaseModel, ValidationError

from ..core.layout import Layout
from .Scene import Scene


class CombineRequest(BaseModel):
    """
    Normalized /combine body.

    The endpoint accepts a single scene wrapper ({scene_number, input}), a flat
    array of scenes, {scenes: [...]}, or nested arrays of scenes. All of them
    end up here as an ordered list of scenes.
    """

    scenes: List[Scene]
    layout: Optional[Layout] = None
    is_scene_list: bool = False

    @property
    def scene_number(self):
        if self.is_scene_list or not self.scenes:
            return None
        return self.scenes[0].scene_number

    @property
    def image_urls(self) -> List[str]:
        """Image URLs in scene_number order, the order both outputs present them in"""
        return [url for scene in self.sorted_scenes() for url in scene.image_urls]

    def sorted_scenes(self) -> List[Scene]:
        return sorted(self.scenes, key=lambda scene: scene.scene_number)

    @classmethod
    def from_body(cls, body: Any) -> "CombineRequest":
        """Parse any accepted body shape; raises ValueError with a client-facing message"""
        if isinstance(body, dict):
            layout = parse_layout(body.get("layout"))
            if "scenes" in body:
                scenes = parse_scene_list(body["scenes"])
                return cls(scenes=scenes, layout=layout, is_scene_list=True)
            scene = parse_scene(body, visuals_key="input")
            return cls(scenes=[scene], layout=layout)

        if isinstance(body, list):
            return cls(scenes=parse_scene_list(body), is_scene_list=True)

        raise ValueError("body must be a scene object or an array of scenes")


def parse_layout(value: Any) -> Optional[Layout]:
    if value is None:
        return None
    try:
        return Layout(value)
    except ValueError:
        choices = ", ".join(layout.value for layout in Layout)
        raise ValueError(f"layout must be one of {choices}") from None


def parse_scene(data: Any, visuals_key: Optional[str] = None) -> Scene:
    if not isinstance(data, dict):
        raise ValueError("each scene must be an object")

    if data.get("scene_number") is None:
        raise ValueError("scene_number is required")

    if visuals_key is None:
        # Scenes in a list carry `visuals`, some clients send the flattened `input`
        visuals_key = "visuals" if "visuals" in data else "input"
        visuals = data.get(visuals_key, [])
    else:
        visuals = data.get(visuals_key)

    if not isinstance(visuals, list):
        raise ValueError(f"{visuals_key} must be an array of visuals")

    try:
        return Scene(scene_number=data["scene_number"], visuals=visuals)
    except ValidationError as e:
        raise ValueError(_first_error(e)) from None


def parse_scene_list(items: Any) -> List[Scene]:
    if not isinstance(items, list):
        raise ValueError("scenes must be an array of scenes")

    scenes = []
    for item in items:
        if isinstance(item, list):
            scenes.extend(parse_scene_list(item))
        else:
            scenes.append(parse_scene(item))
    return scenes


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]
