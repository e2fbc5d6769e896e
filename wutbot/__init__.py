"""WUTBOT: owner-commanded IRC bot."""

__version__ = "0.1.0"

from wutbot.config import BotConfig, ConfigError
from wutbot.domain import BotIdentity, ConcurrencyGate, EventRouter, is_owner, parse_owner_command
from wutbot.ports import InboundEvent, EventKind, ProtocolPort, SendError

__all__ = [
    "BotConfig",
    "ConfigError",
    "BotIdentity",
    "ConcurrencyGate",
    "EventRouter",
    "is_owner",
    "parse_owner_command",
    "InboundEvent",
    "EventKind",
    "ProtocolPort",
    "SendError",
]
