"""
Landing page endpoint.

Serves a fixed HTML greeting at the site root.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from signup_server.app.services.request_service import RequestService

LANDING_HTML = "<h1>Hello from your first Node.js server!</h1>"

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def landing_page(request: Request) -> HTMLResponse:
    """Return the landing page greeting."""
    await RequestService.log_body(request, "GET /")
    return HTMLResponse(LANDING_HTML)
