"""Port interfaces (Hexagonal Architecture)."""

from wutbot.ports.inbound import InboundEvent, EventKind
from wutbot.ports.outbound import (
    REPLY_TAG,
    CtcpReply,
    Join,
    Notice,
    OutboundAction,
    Privmsg,
    ProtocolPort,
    Quit,
    SendError,
    SendRaw,
    TaggedNotice,
)

__all__ = [
    "InboundEvent",
    "EventKind",
    "REPLY_TAG",
    "CtcpReply",
    "Join",
    "Notice",
    "OutboundAction",
    "Privmsg",
    "ProtocolPort",
    "Quit",
    "SendError",
    "SendRaw",
    "TaggedNotice",
]
