import logging

import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from scene_combiner.helpers.config import get_settings  # noqa: E402


def run():
    settings = get_settings()
    logging.basicConfig(level=logging.INFO)

    uvicorn.run(
        "scene_combiner.api:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.NODE_ENV == "development",
        log_level="info",
    )


if __name__ == "__main__":
    run()
