"""
FastAPI application for the Signup Server.

``create_app`` mounts the landing and signup routers on an app whose
generated documentation pages (``/docs``, ``/redoc``,
``/openapi.json``) are switched off, so those two routes are the whole
HTTP surface.  Building the app has no side effects: logging and the
``Server running at ...`` announcement belong to the launcher in
``signup_server.__main__``, which only announces once the socket is
bound.
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the application from ``app_settings`` (default: environment)."""
    cfg = app_settings or default_settings

    app = FastAPI(
        title=cfg.project_name,
        version=cfg.api_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = cfg
    app.include_router(router)
    return app


# ASGI servers import this, e.g. ``uvicorn signup_server.app.main:app``.
app = create_app()
