"""Owner check against the server-asserted account tag."""

from wutbot.ports.inbound import ACCOUNT_TAG, InboundEvent


def is_owner(event: InboundEvent, owner: str) -> bool:
    """True iff the event carries an account tag exactly equal to owner.

    Fails closed: an empty owner never matches, and the sender's nick is
    never consulted.
    """
    if not owner:
        return False
    present, account = event.get_tag(ACCOUNT_TAG)
    return present and account == owner
