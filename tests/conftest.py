from io import BytesIO
from unittest.mock import Mock

import pytest
from PIL import Image


def _make_png(size=(100, 100), color=(255, 0, 0, 255)) -> bytes:
    buffer = BytesIO()
    Image.new("RGBA", size, color).save(buffer, "PNG")
    return buffer.getvalue()


def _fake_response(content: bytes) -> Mock:
    response = Mock()
    response.status_code = 200
    response.content = content
    response.raise_for_status = Mock()
    return response


@pytest.fixture
def make_png():
    """Builds solid-color PNG bytes: make_png(size, color)"""
    return _make_png


@pytest.fixture
def fake_response():
    """Builds a successful requests response carrying `content`"""
    return _fake_response


@pytest.fixture
def image_server():
    """Maps URL -> PNG bytes; use as side_effect for a patched requests.get"""
    images = {}

    def fake_get(url, timeout=None):
        if url not in images:
            raise AssertionError(f"unexpected download {url}")
        return _fake_response(images[url])

    fake_get.images = images
    return fake_get
