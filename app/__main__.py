import logging

import uvicorn

from app.main import app
from app.shared.config import settings
from app.shared.log import configure_logging

logger = logging.getLogger("app")


def main():
    configure_logging(settings.LOG_LEVEL)
    logger.info("Server started at http://localhost:%d", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
