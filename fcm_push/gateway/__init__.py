"""Gateway transport and dispatcher."""

from fcm_push.gateway.dispatcher import PushDispatcher, build_headers, interpret_response
from fcm_push.gateway.transport import GatewayResponse, HttpxTransport, Transport

__all__ = [
    "GatewayResponse",
    "HttpxTransport",
    "PushDispatcher",
    "Transport",
    "build_headers",
    "interpret_response",
]
