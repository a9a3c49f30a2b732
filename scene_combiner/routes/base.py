from datetime import datetime, timezone

from fastapi import APIRouter

base_router = APIRouter(tags=["base"])


@base_router.get("/")
async def describe():
    """Service description"""
    return {
        "message": "Scene Image URL Combiner API",
        "endpoints": {
            "/combine": "POST - Combine image URLs from scenes",
            "/health": "GET - Health check",
        },
        "usage": {
            "method": "POST",
            "url": "/combine",
            "body": "Scene object with an input array of visuals, or an array of scene objects",
            "query": {"output": "png | json", "layout": "vertical | horizontal | strip"},
        },
    }


@base_router.get("/health")
async def health():
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return {"status": "healthy", "timestamp": timestamp.replace("+00:00", "Z")}
