"""Owner command parsing.

Pure Python, no framework dependencies.

Grammar: ``<nick>[:] <verb> [args...]``. Unknown verbs are not commands.
"""

from typing import Optional

from wutbot.domain.models import Command, Verb

TAUNT_VERB = "abuse"
QUIT_VERB = "quit"


def parse_owner_command(body: str, nick: str) -> Optional[Command]:
    """Parse body addressed to nick. Returns None when it is not a command."""
    if not nick or not body.startswith(nick):
        return None
    rest = body[len(nick):]
    if rest.startswith(":"):
        rest = rest[1:]
    tokens = rest.split()
    if not tokens:
        return None

    verb = tokens[0].lower()
    if verb == TAUNT_VERB:
        if len(tokens) > 1:
            return Command(Verb.TAUNT, (tokens[1],))
        return Command(Verb.NOOP)
    if verb == QUIT_VERB:
        return Command(Verb.DISCONNECT)
    return None
