"""Failure kinds recovered at the dispatcher boundary."""

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    CALLER_INPUT = "caller_input"
    TRANSPORT = "transport"
    GATEWAY_REJECTION = "gateway_rejection"


class TransportError(RuntimeError):
    """The request never produced an HTTP response (timeout, connection, DNS)."""


@dataclass(frozen=True, slots=True)
class SendFailure:
    kind: FailureKind
    reason: str
