"""
FastAPI app
"""

from importlib.metadata import version

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from evently.core.errors import (
    EventNotFound,
    InsufficientPermission,
    MatchNotFound,
    UserNotAuthorized,
)

from .dependencies import DATABASE_MANAGER, SETTINGS
from .events import event_app

settings = SETTINGS()


async def lifespan(app: FastAPI):
    app.settings = settings

    if settings.create_tables:
        await DATABASE_MANAGER.create_all()

    yield


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def not_authorized_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=403, content={"detail": str(exc)})


def add_exception_handlers(app: FastAPI) -> FastAPI:
    """
    Map the service-layer errors to responses: missing resources are 404s,
    and both non-members and members without the right permission are 403s.
    Storage errors are left alone and become 500s.
    """
    app.add_exception_handler(EventNotFound, not_found_handler)
    app.add_exception_handler(MatchNotFound, not_found_handler)
    app.add_exception_handler(UserNotAuthorized, not_authorized_handler)
    app.add_exception_handler(InsufficientPermission, not_authorized_handler)
    return app


app = FastAPI(
    lifespan=lifespan,
    title="Evently API",
    summary="API endpoints for managing events, their groups, and their matches.",
    version=version("evently"),
)

app = add_exception_handlers(app)

app.include_router(event_app, prefix="/events")
