"""Command suggestion engine.

Provides suggest(partial, catalogue=COMMAND_SUGGESTIONS): case-insensitive
substring match over canonical example commands, catalogue order, max 3.
"""
from typing import Iterable, List
from planchat.utilities.constants import COMMAND_SUGGESTIONS, MAX_SUGGESTIONS, SUGGESTION_MIN_LENGTH

__all__ = ['suggest']


def suggest(partial: str, catalogue: Iterable[str] = COMMAND_SUGGESTIONS, *, limit: int = MAX_SUGGESTIONS) -> List[str]:
    """Return up to `limit` catalogue entries containing `partial`.

    `partial` is the raw typed text (not trimmed); fewer than
    SUGGESTION_MIN_LENGTH characters yields no suggestions.
    """
    if not partial or len(partial) < SUGGESTION_MIN_LENGTH:
        return []
    needle = partial.lower()
    matches: List[str] = []
    for cmd in catalogue:
        if needle in cmd.lower():
            matches.append(cmd)
            if len(matches) >= limit:
                break
    return matches
