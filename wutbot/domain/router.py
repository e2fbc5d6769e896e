"""EventRouter: owner authorization and reaction rules, no engine dependency.

handle() turns one inbound event into a list of outbound actions and never
touches the network. dispatch() applies those actions to a ProtocolPort,
each one under the concurrency gate.
"""

import sys
from typing import Iterable, List, Optional, Tuple

from wutbot.domain.command_parser import parse_owner_command
from wutbot.domain.gate import ConcurrencyGate
from wutbot.domain.models import BotIdentity, Command, Verb
from wutbot.domain.owner import is_owner
from wutbot.ports.inbound import EventKind, InboundEvent
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

DEFAULT_REPLY = "don't @ me, mortal"
TAUNT_TEMPLATE = "{} isn't a real programmer"
BOT_MODE_FEATURE = "BOT"


def _log(msg: str):
    print(msg, file=sys.stderr)


def parse_channels(raw: str) -> Tuple[str, ...]:
    """Split a comma-delimited channel list, trimming and dropping empties."""
    return tuple(ch.strip() for ch in raw.split(",") if ch.strip())


def reply_notice(target: str, msgid: str, text: str) -> OutboundAction:
    """Notice threaded to msgid when the source message carried one."""
    if not msgid:
        return Notice(target, text)
    return TaggedNotice(target, text, {REPLY_TAG: msgid})


class EventRouter:
    """Reacts to connect, message, invite and CTCP VERSION events.

    Stateless across events; the gate is the only shared mutable state.
    """

    def __init__(
        self,
        identity: BotIdentity,
        channels: Iterable[str] = (),
        gate: Optional[ConcurrencyGate] = None,
        version: str = "",
    ):
        self.identity = identity
        self.channels: Tuple[str, ...] = tuple(channels)
        self.gate = gate or ConcurrencyGate()
        self.version = version

    # -- pure dispatch --

    def handle(self, event: InboundEvent) -> List[OutboundAction]:
        if event.kind is EventKind.CONNECT:
            return self.on_connect(event)
        if event.kind is EventKind.MESSAGE:
            return self.on_message(event)
        if event.kind is EventKind.INVITE:
            return self.on_invite(event)
        if event.kind is EventKind.CTCP_VERSION:
            return self.on_ctcp_version(event)
        return []

    def on_connect(self, event: InboundEvent) -> List[OutboundAction]:
        actions: List[OutboundAction] = []
        bot_mode = event.features.get(BOT_MODE_FEATURE, "")
        if bot_mode:
            nick = event.current_nick or self.identity.nick
            actions.append(SendRaw("MODE", (nick, "+" + bot_mode)))
        actions.extend(Join(channel) for channel in self.channels)
        return actions

    def on_message(self, event: InboundEvent) -> List[OutboundAction]:
        target, body = event.target, event.body
        from_owner = is_owner(event, self.identity.owner)
        # Direct messages from anyone but the owner are dropped silently
        if not event.is_channel and not from_owner:
            return []

        if from_owner:
            command = parse_owner_command(body, self.identity.nick)
            if command is None:
                return []
            _log(f"[{self.identity.nick}] owner command {command.verb.value} in {target}")
            return self.execute(command, target)

        if body.startswith(self.identity.nick):
            return [reply_notice(target, event.msgid, DEFAULT_REPLY)]
        return []

    def on_invite(self, event: InboundEvent) -> List[OutboundAction]:
        if not is_owner(event, self.identity.owner):
            return []
        channel = event.param(1)
        if not channel:
            return []
        return [Join(channel)]

    def on_ctcp_version(self, event: InboundEvent) -> List[OutboundAction]:
        nick = event.source_nick
        if not nick or not self.version:
            return []
        return [CtcpReply(nick, "VERSION " + self.version)]

    def execute(self, command: Command, target: str) -> List[OutboundAction]:
        """Map an owner command to its actions; NOOP yields none."""
        if command.verb is Verb.TAUNT:
            return [Privmsg(target, TAUNT_TEMPLATE.format(command.args[0]))]
        if command.verb is Verb.DISCONNECT:
            return [Quit()]
        return []

    # -- side effects --

    def dispatch(self, event: InboundEvent, port: ProtocolPort) -> int:
        """Apply handle(event) to port. Returns the number of actions applied."""
        applied = 0
        for action in self.handle(event):
            with self.gate.slot() as acquired:
                if not acquired:
                    _log(f"[{self.identity.nick}] gate full ({self.gate.capacity}), skipped {action!r}")
                    continue
                try:
                    action.apply(port)
                except SendError as e:
                    _log(f"[{self.identity.nick}] send failed for {action!r}: {e}")
                    continue
                applied += 1
        return applied
