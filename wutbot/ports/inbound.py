"""Inbound port: engine-agnostic view of one protocol event."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Tuple


class EventKind(str, Enum):
    CONNECT = "connect"
    MESSAGE = "message"
    INVITE = "invite"
    CTCP_VERSION = "ctcp_version"
    OTHER = "other"


# Reserved tag names (IRCv3)
ACCOUNT_TAG = "account"
MSGID_TAG = "msgid"

CHANNEL_PREFIX = "#"


@dataclass(frozen=True)
class InboundEvent:
    """Normalized protocol message, created by an adapter per wire message.

    params follows the wire order: for MESSAGE it is [target, body], for
    INVITE it is [invitee, channel].
    """

    kind: EventKind
    source: str = ""
    params: Tuple[str, ...] = ()
    tags: Mapping[str, Optional[str]] = field(default_factory=dict)
    # Engine state snapshot, only filled for CONNECT
    current_nick: str = ""
    features: Mapping[str, str] = field(default_factory=dict)

    def get_tag(self, name: str) -> Tuple[bool, str]:
        """Return (present, value) for a tag. A valueless tag reads as ""."""
        if name not in self.tags:
            return False, ""
        return True, self.tags[name] or ""

    def param(self, index: int) -> str:
        if index < len(self.params):
            return self.params[index]
        return ""

    @property
    def target(self) -> str:
        return self.param(0)

    @property
    def body(self) -> str:
        return self.param(1)

    @property
    def is_channel(self) -> bool:
        return self.target.startswith(CHANNEL_PREFIX)

    @property
    def msgid(self) -> str:
        return self.get_tag(MSGID_TAG)[1]

    @property
    def source_nick(self) -> str:
        """Nick part of a nick!user@host source."""
        return self.source.split("!", 1)[0]

