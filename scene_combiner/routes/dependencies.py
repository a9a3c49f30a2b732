from ..core.compositor import ImageCompositor
from ..core.image_downloader import ImageDownloader
from ..helpers.config import get_settings
from ..models.CombineModel import CombineModel


def get_combine_model() -> CombineModel:
    """Build the combine pipeline from the current settings"""
    settings = get_settings()
    return CombineModel(
        downloader=ImageDownloader(
            timeout=settings.DOWNLOAD_TIMEOUT,
            max_workers=settings.MAX_DOWNLOAD_WORKERS,
        ),
        compositor=ImageCompositor(
            canvas_size=(settings.CANVAS_WIDTH, settings.CANVAS_HEIGHT),
            padding=settings.CANVAS_PADDING,
        ),
        default_layout=settings.DEFAULT_LAYOUT,
    )
