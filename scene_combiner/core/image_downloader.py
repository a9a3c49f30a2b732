import logging
from concurrent.futures import ThreadPoolExecutor
from io import BytesIO
from typing import List

import requests
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


class ImageDownloader:
    def __init__(self, timeout: int = 30, max_workers: int = 8) -> None:
        self.timeout = timeout
        self.max_workers = max_workers

    def download_image(self, url: str) -> bytes:
        """Fetch the raw bytes behind an image URL"""
        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.content

    def load_image(self, data: bytes, url: str = "") -> Image.Image:
        """Decode image bytes into an RGBA Pillow image"""
        try:
            img = Image.open(BytesIO(data))
            img.load()
        except (UnidentifiedImageError, OSError) as e:
            raise ValueError(f"Could not decode image {url}: {str(e)}") from e

        if img.mode != "RGBA":
            img = img.convert("RGBA")

        return img

    def fetch(self, url: str) -> Image.Image:
        return self.load_image(self.download_image(url), url)

    def download_images(self, urls: List[str]) -> List[Image.Image]:
        """Download every URL concurrently; results keep the order of `urls`"""
        if not urls:
            return []

        workers = max(1, min(self.max_workers, len(urls)))
        logger.info("Downloading %d images with %d workers", len(urls), workers)

        # map() re-raises the first failure, which aborts the whole batch
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.fetch, urls))
