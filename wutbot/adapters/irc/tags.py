"""IRCv3 message-tag helpers for the irc engine."""

from typing import Dict, Iterable, Mapping, Optional

# IRCv3 message-tags value escaping; backslash must go first
_ESCAPES = (
    ("\\", "\\\\"),
    (";", "\\:"),
    (" ", "\\s"),
    ("\r", "\\r"),
    ("\n", "\\n"),
)


def escape_tag_value(value: str) -> str:
    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)
    return value


def format_tags(tags: Mapping[str, str]) -> str:
    """Render tags as the '@k=v;k2=v2' line prefix ('' for no tags)."""
    if not tags:
        return ""
    parts = []
    for key, value in tags.items():
        if value:
            parts.append(f"{key}={escape_tag_value(value)}")
        else:
            parts.append(key)
    return "@" + ";".join(parts)


def tags_from_engine(tags: Optional[Iterable[Mapping[str, Optional[str]]]]) -> Dict[str, Optional[str]]:
    """Flatten irc.client.Event.tags ([{'key': ..., 'value': ...}]) into a dict."""
    if not tags:
        return {}
    return {tag["key"]: tag.get("value") for tag in tags}
