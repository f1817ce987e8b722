import logging
import os
from logging.handlers import RotatingFileHandler
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from catalog_api.core.config import Settings, get_settings
from catalog_api.api.routes import products
from catalog_api.services.product_store import ProductStore

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)

_logging_configured = False


def configure_logging(settings: Settings) -> None:
    """Attach console and rotating file handlers to the root logger once."""
    global _logging_configured
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    if _logging_configured:
        return

    log_formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    if settings.log_dir:
        log_dir = os.path.normpath(settings.log_dir)
        os.makedirs(log_dir, exist_ok=True)
        log_file_path = os.path.join(log_dir, "app.log")
        file_handler = RotatingFileHandler(log_file_path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8")
        file_handler.setFormatter(log_formatter)
        root_logger.addHandler(file_handler)

    _logging_configured = True


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug
    )

    # One store per process, handed to routes through a dependency
    app.state.settings = settings
    app.state.product_store = ProductStore(settings.data_file)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(products.router, prefix="/products", tags=["products"])

    @app.get("/")
    async def root():
        return {"message": settings.app_name, "version": settings.version}

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    logger.info("Serving catalog from %s", os.path.abspath(settings.data_file))
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
