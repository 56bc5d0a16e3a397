"""Mensentaal Machine - HTTP server entry point."""
import logging
import sys

import uvicorn

from config import settings
from api import create_app

logging.basicConfig(
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    level=settings.log_level.upper(),
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


def main() -> None:
    app = create_app(settings)
    logger.info("Backend running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
