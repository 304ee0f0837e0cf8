"""
Signup endpoint.

Accepts any POST payload and answers with a fixed greeting.  The body
is logged but never parsed, so form data, JSON and empty requests are
all treated the same.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from signup_server.app.services.request_service import RequestService

SIGNUP_TEXT = "Hello World!"

router = APIRouter()


@router.post("/signup", response_class=HTMLResponse)
async def signup(request: Request) -> HTMLResponse:
    """Log the submitted body and return the greeting."""
    await RequestService.log_body(request, "POST /signup")
    return HTMLResponse(SIGNUP_TEXT)
