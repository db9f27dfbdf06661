import argparse
import logging

import uvicorn

from .core.config import get_settings
from .core.logging import configure_logging

logger = logging.getLogger("app")

VARIANTS = {
    "api": "app.main:app",
    "web": "app.web:app",
}


def main(argv=None):
    parser = argparse.ArgumentParser(prog="python -m app", description="Roda um dos servidores HTTP")
    parser.add_argument("variant", nargs="?", default="api", choices=sorted(VARIANTS))
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Server started on port %d", settings.PORT)
    uvicorn.run(VARIANTS[args.variant], host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
