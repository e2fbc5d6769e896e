"""Outbound ports: actions the core asks the protocol engine to perform."""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Protocol, Tuple, Union, runtime_checkable


REPLY_TAG = "+draft/reply"


class SendError(Exception):
    """Raised by a ProtocolPort when the engine refuses an outbound command."""
    pass


@runtime_checkable
class ProtocolPort(Protocol):
    """Narrow capability interface over the protocol engine.

    All sends are fire-and-forget: they return once the line is queued.
    """

    def send(self, command: str, *params: str) -> None: ...
    def notice(self, target: str, text: str) -> None: ...
    def tagged_notice(self, tags: Mapping[str, str], target: str, text: str) -> None: ...
    def privmsg(self, target: str, text: str) -> None: ...
    def join(self, channel: str) -> None: ...
    def quit(self) -> None: ...
    def ctcp_reply(self, target: str, text: str) -> None: ...
    def current_nick(self) -> str: ...
    def isupport(self) -> Mapping[str, str]: ...


@dataclass(frozen=True)
class SendRaw:
    command: str
    params: Tuple[str, ...] = ()

    def apply(self, port: ProtocolPort) -> None:
        port.send(self.command, *self.params)


@dataclass(frozen=True)
class Join:
    channel: str

    def apply(self, port: ProtocolPort) -> None:
        port.join(self.channel)


@dataclass(frozen=True)
class Notice:
    target: str
    text: str

    def apply(self, port: ProtocolPort) -> None:
        port.notice(self.target, self.text)


@dataclass(frozen=True)
class TaggedNotice:
    target: str
    text: str
    tags: Dict[str, str] = field(default_factory=dict)

    def apply(self, port: ProtocolPort) -> None:
        port.tagged_notice(self.tags, self.target, self.text)


@dataclass(frozen=True)
class Privmsg:
    target: str
    text: str

    def apply(self, port: ProtocolPort) -> None:
        port.privmsg(self.target, self.text)


@dataclass(frozen=True)
class CtcpReply:
    target: str
    text: str

    def apply(self, port: ProtocolPort) -> None:
        port.ctcp_reply(self.target, self.text)


@dataclass(frozen=True)
class Quit:
    """Farewell text is owned by the port (configured version string)."""

    def apply(self, port: ProtocolPort) -> None:
        port.quit()


OutboundAction = Union[SendRaw, Join, Notice, TaggedNotice, Privmsg, CtcpReply, Quit]
