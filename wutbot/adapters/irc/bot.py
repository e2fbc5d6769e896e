"""IRC adapter: bridges irc.client.Reactor to EventRouter.

WutBot owns the engine objects, converts irc.client.Event into
InboundEvent, and hands every routed event to EventRouter.dispatch.
"""

import functools
import ssl
import sys
from typing import Callable, Iterable, Optional

import irc.client
import irc.connection

from wutbot.adapters.irc.connection import IRCConnectionPort, format_line
from wutbot.adapters.irc.tags import tags_from_engine
from wutbot.config import BotConfig
from wutbot.domain.gate import ConcurrencyGate
from wutbot.domain.router import EventRouter
from wutbot.ports.inbound import EventKind, InboundEvent

REQUESTED_CAPS = ("server-time", "message-tags", "account-tag")
REGISTERED_EVENTS = ("endofmotd", "nomotd", "motdmissing")

_EVENT_KINDS = {
    "pubmsg": EventKind.MESSAGE,
    "privmsg": EventKind.MESSAGE,
    "invite": EventKind.INVITE,
}


def _log(msg: str):
    print(msg, file=sys.stderr)


def to_inbound(event: irc.client.Event, kind: Optional[EventKind] = None) -> InboundEvent:
    """Convert an engine event; params are [target, *arguments] as on the wire."""
    if kind is None:
        kind = _EVENT_KINDS.get(event.type, EventKind.OTHER)
    params = [event.target or ""] + [str(arg) for arg in (event.arguments or [])]
    return InboundEvent(
        kind=kind,
        source=str(event.source or ""),
        params=tuple(params),
        tags=tags_from_engine(getattr(event, "tags", None)),
    )


def _tls_factory(host: str, insecure: bool) -> irc.connection.Factory:
    context = ssl.create_default_context()
    if insecure:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return irc.connection.Factory(
        wrapper=functools.partial(context.wrap_socket, server_hostname=host),
    )


class CapRequestFactory:
    """Connect through the engine factory, then send CAP REQ ahead of NICK/USER.

    The server holds registration until CAP END, so account tags are on from
    the first routed event.
    """

    def __init__(self, factory: Callable, caps: Iterable[str] = REQUESTED_CAPS):
        self._factory = factory
        self._caps = tuple(caps)

    def __call__(self, server_address):
        sock = self._factory(server_address)
        line = format_line("CAP", "REQ", " ".join(self._caps))
        sock.sendall(line.encode("utf-8") + b"\r\n")
        return sock


class WutBot:
    """Single-connection bot: one reactor, one ServerConnection, one router."""

    def __init__(self, config: BotConfig, reactor: Optional[irc.client.Reactor] = None):
        self.config = config
        self.reactor = reactor or irc.client.Reactor()
        self.connection = self.reactor.server()
        self.port = IRCConnectionPort(self.connection, quit_message=config.version)
        self.router = EventRouter(
            config.identity(),
            channels=config.channels,
            gate=ConcurrencyGate(config.concurrency_limit),
            version=config.version,
        )
        self._finished = False
        self._registered = False
        # True while CAP END is ours to send (no SASL)
        self._negotiating_caps = False
        self._register_handlers()

    @property
    def name(self) -> str:
        return self.config.nick

    @property
    def finished(self) -> bool:
        return self._finished

    def _register_handlers(self):
        add = self.reactor.add_global_handler
        add("welcome", self._on_welcome)
        add("cap", self._on_cap)
        # Registration is complete once the MOTD (or its absence) arrives,
        # after ISUPPORT. 422 is named differently across engine releases.
        for name in REGISTERED_EVENTS:
            add(name, self._on_registered)
        add("pubmsg", self._on_routed)
        add("privmsg", self._on_routed)
        add("invite", self._on_routed)
        add("ctcp", self._on_ctcp)
        add("disconnect", self._on_disconnect)
        if self.config.debug:
            add("all_raw_messages", self._on_raw, -10)

    # -- engine handlers --

    def _on_welcome(self, connection, event):
        _log(f"[{self.name}] connected to {self.config.host}:{self.config.port}")
        if self.config.use_sasl:
            # The engine owns CAP negotiation during SASL registration
            self.port.send("CAP", "REQ", " ".join(REQUESTED_CAPS))

    def _on_cap(self, connection, event):
        if not self._negotiating_caps:
            return
        if {"ACK", "NAK"} & {str(arg).upper() for arg in (event.arguments or [])[:2]}:
            self._negotiating_caps = False
            self.port.send("CAP", "END")

    def _on_registered(self, connection, event):
        # MOTD can be requested again later; only the first one counts
        if self._registered:
            return
        self._registered = True
        inbound = InboundEvent(
            kind=EventKind.CONNECT,
            source=str(event.source or ""),
            current_nick=self.port.current_nick(),
            features=self.port.isupport(),
        )
        self.router.dispatch(inbound, self.port)

    def _on_routed(self, connection, event):
        self.router.dispatch(to_inbound(event), self.port)

    def _on_ctcp(self, connection, event):
        if not event.arguments or str(event.arguments[0]).upper() != "VERSION":
            return
        self.router.dispatch(to_inbound(event, EventKind.CTCP_VERSION), self.port)

    def _on_disconnect(self, connection, event):
        _log(f"[{self.name}] disconnected")
        self._registered = False
        self._negotiating_caps = False
        self._finished = True

    def _on_raw(self, connection, event):
        _log(f"[{self.name}] <- {event.arguments[0] if event.arguments else ''}")

    # -- lifecycle --

    def connect(self):
        """Open the TLS connection. Raises irc.client.ServerConnectionError."""
        cfg = self.config
        kwargs = {}
        if cfg.use_sasl:
            kwargs.update(password=cfg.sasl_password, sasl_login=cfg.sasl_login)
        factory = _tls_factory(cfg.host, cfg.insecure_skip_verify)
        if not cfg.use_sasl:
            factory = CapRequestFactory(factory)
        self._registered = False
        self._negotiating_caps = not cfg.use_sasl
        _log(f"[{self.name}] connecting to {cfg.host}:{cfg.port}")
        self.connection.connect(
            cfg.host,
            cfg.port,
            cfg.nick,
            connect_factory=factory,
            **kwargs,
        )

    def run(self, timeout: float = 0.2):
        """Process engine events until the connection is closed."""
        while not self._finished:
            self.reactor.process_once(timeout)
