"""ProtocolPort implementation over irc.client.ServerConnection."""

from typing import Callable, Dict, Mapping

import irc.client

from wutbot.adapters.irc.tags import format_tags
from wutbot.ports.outbound import SendError

_ENGINE_SEND_ERRORS = (
    irc.client.ServerNotConnectedError,
    irc.client.InvalidCharacters,
    irc.client.MessageTooLong,
)


def format_line(command: str, *params: str) -> str:
    """Build a raw protocol line; the last param becomes trailing when needed."""
    items = [command]
    for i, param in enumerate(params):
        is_last = i == len(params) - 1
        if is_last and (not param or " " in param or param.startswith(":")):
            items.append(":" + param)
        else:
            items.append(param)
    return " ".join(items)


class IRCConnectionPort:
    """Narrow send/introspection surface of one ServerConnection.

    Engine refusals surface as SendError so the router can move on to the
    next action.
    """

    def __init__(self, connection: irc.client.ServerConnection, quit_message: str = ""):
        self._connection = connection
        self._quit_message = quit_message

    def _guard(self, fn: Callable, *args) -> None:
        try:
            fn(*args)
        except _ENGINE_SEND_ERRORS as e:
            raise SendError(f"{type(e).__name__}: {e}") from e

    def send(self, command: str, *params: str) -> None:
        self._guard(self._connection.send_raw, format_line(command, *params))

    def notice(self, target: str, text: str) -> None:
        self._guard(self._connection.notice, target, text)

    def tagged_notice(self, tags: Mapping[str, str], target: str, text: str) -> None:
        line = format_line("NOTICE", target, text)
        prefix = format_tags(tags)
        if prefix:
            line = f"{prefix} {line}"
        self._guard(self._connection.send_raw, line)

    def privmsg(self, target: str, text: str) -> None:
        self._guard(self._connection.privmsg, target, text)

    def join(self, channel: str) -> None:
        self._guard(self._connection.join, channel)

    def quit(self) -> None:
        # Already gone (or going): nothing left to say
        if not self._connection.is_connected():
            return
        self._guard(self._connection.quit, self._quit_message)

    def ctcp_reply(self, target: str, text: str) -> None:
        self._guard(self._connection.ctcp_reply, target, text)

    def current_nick(self) -> str:
        return self._connection.get_nickname() or ""

    def isupport(self) -> Dict[str, str]:
        """ISUPPORT tokens as NAME -> value; valueless tokens map to ''."""
        supported: Dict[str, str] = {}
        for name, value in vars(self._connection.features).items():
            if value is True:
                supported[name.upper()] = ""
            elif isinstance(value, (str, int)) and not isinstance(value, bool):
                supported[name.upper()] = str(value)
        return supported
