"""FastAPI application factory."""

from fastapi import FastAPI, Request, Response

from traveltribe.infra.settings import Settings, load_settings
from traveltribe.observability.correlation import (
    CORRELATION_ID_HEADER,
    correlation_scope,
)

from .routers import public
from .routes import bookings, profile


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the booking API.

    Args:
        settings: Explicit settings. If None, reads them from the
                  environment (HOSTEL_TIMEZONE, PRICING_STRATEGY).

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="TravelTribe Booking",
        docs_url=None,
        redoc_url=None,
    )
    app.state.settings = settings

    @app.middleware("http")
    async def correlation_id_middleware(request: Request, call_next) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_ID_HEADER)) as cid:
            response = await call_next(request)
            response.headers[CORRELATION_ID_HEADER] = cid
            return response

    app.include_router(public.router)
    app.include_router(bookings.router)
    app.include_router(profile.router)

    return app
