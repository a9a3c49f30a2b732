from io import BytesIO
from typing import List, Sequence, Tuple

from PIL import Image

from .layout import CanvasLayout, Layout, compute_layout

WHITE = (255, 255, 255, 255)


class ImageCompositor:
    def __init__(
        self,
        canvas_size: Tuple[int, int] = (1080, 1920),
        padding: int = 20,
        background: Tuple[int, int, int, int] = WHITE,
    ) -> None:
        self.canvas_size = canvas_size
        self.padding = padding
        self.background = background

    def plan(self, images: Sequence[Image.Image], layout: Layout) -> CanvasLayout:
        return compute_layout(
            [img.size for img in images],
            canvas=self.canvas_size,
            padding=self.padding,
            layout=layout,
        )

    def compose(self, images: List[Image.Image], layout: Layout = Layout.VERTICAL) -> Image.Image:
        """Scale every image into its slot and flatten them onto one canvas"""
        plan = self.plan(images, layout)
        canvas = Image.new("RGBA", plan.canvas, self.background)

        for img, placement in zip(images, plan.placements):
            if img.mode != "RGBA":
                img = img.convert("RGBA")
            if img.size != (placement.width, placement.height):
                img = img.resize((placement.width, placement.height), Image.LANCZOS)
            # The image's own alpha is the mask so transparent areas keep the background
            canvas.paste(img, (placement.left, placement.top), img)

        return canvas

    @staticmethod
    def encode_png(image: Image.Image) -> bytes:
        buffer = BytesIO()
        image.save(buffer, "PNG")
        return buffer.getvalue()
