"""Entry point for the Ground Booking FastAPI application."""

from fastapi import FastAPI

from groundbooking import models  # noqa: F401  registers tables on Base.metadata
from groundbooking.api.v1 import router as v1_router
from groundbooking.core.config import settings
from groundbooking.core.database import Base, engine
from groundbooking.core.error_handlers import register_exception_handlers
from groundbooking.core.logging import configure_logging


def create_app() -> FastAPI:
    configure_logging()

    # Ensure database tables exist when the application starts (for development purposes).
    Base.metadata.create_all(bind=engine)

    app = FastAPI(title=settings.PROJECT_NAME)
    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.API_PREFIX)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("groundbooking.main:app", host="0.0.0.0", port=8000, reload=True)
