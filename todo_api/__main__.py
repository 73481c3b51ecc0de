import logging

import uvicorn

from todo_api.core.config import get_settings
from todo_api.core.logging_setup import setup_logging
from todo_api.main import create_app

logger = logging.getLogger("todo_api")


def main():
    settings = get_settings()
    setup_logging(settings.log_level)

    app = create_app(settings)
    logger.info("Server is running on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
