"""IRC adapter built on the irc distribution."""

from wutbot.adapters.irc.bot import WutBot, to_inbound
from wutbot.adapters.irc.connection import IRCConnectionPort, format_line
from wutbot.adapters.irc.tags import escape_tag_value, format_tags, tags_from_engine

__all__ = [
    "WutBot",
    "to_inbound",
    "IRCConnectionPort",
    "format_line",
    "escape_tag_value",
    "format_tags",
    "tags_from_engine",
]
