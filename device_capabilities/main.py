import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from device_capabilities.api.middleware import log_requests, register_error_handlers
from device_capabilities.api.v1.router import api_router
from device_capabilities.core.config import configure_logging, get_settings
from device_capabilities.db.database import database
from device_capabilities.db.lifespan import lifespan

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Device Capabilities API",
        description="Cellular band, combo and feature support per device, software version and carrier.",
        version="0.1.0",
        lifespan=lifespan,
    )

    # --- CORS Middleware ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    logger.info(f"CORS middleware added for origin {settings.cors_origin}.")

    app.middleware("http")(log_requests)
    register_error_handlers(app, settings)

    # --- Root Endpoint ---
    @app.get("/", tags=["Root"], response_class=PlainTextResponse)
    async def read_root():
        return "We on hono!"

    @app.get("/health", tags=["Root"])
    async def health():
        return {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": settings.node_env.value,
            "database": "connected" if database.is_ready() else "disconnected",
        }

    # --- Include API Routers ---
    app.include_router(api_router, prefix="/api/v1")
    logger.info("Included API router v1 at /api/v1.")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
