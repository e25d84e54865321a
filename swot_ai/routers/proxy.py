"""Proxy endpoint: the only route that reaches Gemini."""

from fastapi import APIRouter, Depends

from config import Settings, get_settings
from swot_ai.models.proxy import ErrorResponse, ProxyRequest, ProxyResponse
from swot_ai.services.relay import ActionRelay

router = APIRouter(prefix="/api", tags=["proxy"])


def get_relay(settings: Settings = Depends(get_settings)) -> ActionRelay:
    """Build the relay for one request from the injected settings."""
    return ActionRelay.from_settings(settings)


@router.post(
    "/proxy",
    response_model=ProxyResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def proxy(request: ProxyRequest, relay: ActionRelay = Depends(get_relay)):
    """Render the prompt for ``request.action`` and relay Gemini's JSON answer."""
    data = await relay.dispatch(request.action, request.data)
    return ProxyResponse(data=data)
