# product_api/server.py
import uvicorn

from .config import get_settings
from .logger import get_logger, setup_logging
from .main import create_app

log = get_logger(__name__)


def main():
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir)
    if not settings.api_key:
        log.warning("API_KEY is not set; every /api/products request will be rejected")

    app = create_app(settings)
    log.info("Server is running on http://{}:{}", settings.host, settings.port)
    # uvicorn's own logging stays quiet, requests are logged by the app
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="warning")


if __name__ == "__main__":
    main()
