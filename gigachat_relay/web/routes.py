"""
Web routes for GigaChat Relay
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from ..errors import ChatRelayError, TokenAcquisitionError
from ..models.chat import ChatRequest
from ..utils.debug_logger import debug_logger

TOKEN_FAILURE_MESSAGE = "Failed to obtain GigaChat access token"
CHAT_FAILURE_MESSAGE = "Error contacting GigaChat API"

router = APIRouter()


@router.post("/chat")
async def chat(request: Request):
    """Forward one chat message to GigaChat and return its response verbatim"""
    request_id = getattr(request.state, "request_id", "")

    try:
        body = await request.json()
    except ValueError:
        body = {}
    chat_request = ChatRequest.from_body(body)

    relay_service = request.app.state.relay_service
    try:
        content = await relay_service.relay_chat(chat_request, request_id, request)
    except TokenAcquisitionError:
        debug_logger.log_route(request_id, "Token acquisition failed", request)
        return PlainTextResponse(TOKEN_FAILURE_MESSAGE, status_code=500)
    except ChatRelayError:
        debug_logger.log_route(request_id, "Chat relay failed", request)
        return PlainTextResponse(CHAT_FAILURE_MESSAGE, status_code=500)

    debug_logger.log_route(request_id, "Relayed chat response", request)
    return Response(content=content, media_type="application/json")


@router.get("/health")
def health_check():
    """Health check endpoint for monitoring"""
    return {"status": "healthy", "service": "gigachat-relay"}
