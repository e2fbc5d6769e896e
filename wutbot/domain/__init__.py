"""Domain layer: pure Python, no framework dependencies."""

from wutbot.domain.models import BotIdentity, Command, Verb
from wutbot.domain.owner import is_owner
from wutbot.domain.command_parser import parse_owner_command
from wutbot.domain.gate import ConcurrencyGate, GateReleaseError
from wutbot.domain.router import EventRouter, parse_channels, reply_notice

__all__ = [
    "BotIdentity",
    "Command",
    "Verb",
    "is_owner",
    "parse_owner_command",
    "ConcurrencyGate",
    "GateReleaseError",
    "EventRouter",
    "parse_channels",
    "reply_notice",
]
