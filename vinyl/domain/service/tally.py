"""Vote tally."""

from typing import Iterable

from vinyl.domain.model.vote import Vote
from vinyl.domain.value import VoteTally, VoteType


def tally_votes(votes: Iterable[Vote]) -> VoteTally:
    """Count up and down votes.

    Args:
        votes: An album's vote set

    Returns:
        Tally with up count, down count and net score
    """
    up = 0
    down = 0
    for vote in votes:
        if vote.value == VoteType.UP:
            up += 1
        elif vote.value == VoteType.DOWN:
            down += 1
    return VoteTally(up=up, down=down)
