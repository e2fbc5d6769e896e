"""Domain data models: pure Python dataclasses."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class BotIdentity:
    """Nick and owner account, fixed for the life of a connection.

    An empty owner means no owner is configured.
    """

    nick: str
    owner: str = ""


class Verb(str, Enum):
    TAUNT = "taunt"
    DISCONNECT = "disconnect"
    NOOP = "noop"  # recognized verb with missing arguments


@dataclass(frozen=True)
class Command:
    """Parsed owner command."""

    verb: Verb
    args: Tuple[str, ...] = ()

    @property
    def is_action(self) -> bool:
        return self.verb is not Verb.NOOP

