"""Reaction maps: emoji to the set of users who reacted with it."""

from typing import Dict, FrozenSet, Iterable, Mapping, Tuple

from gallery.domain.value.identifiers import UserId

ReactionMap = Dict[str, FrozenSet[UserId]]


def normalize_reactions(reactions: Mapping[str, Iterable[UserId]]) -> ReactionMap:
    """Freeze reactor sets and drop emojis nobody reacted with.

    An absent emoji and an emoji with an empty set are the same state.
    """
    normalized: ReactionMap = {}
    for emoji, users in reactions.items():
        reactors = frozenset(users)
        if reactors:
            normalized[emoji] = reactors
    return normalized


def toggle_reactor(
    reactions: Mapping[str, FrozenSet[UserId]], emoji: str, user_id: UserId
) -> ReactionMap:
    """Return a new map with ``user_id`` flipped in the set for ``emoji``.

    Applying the same toggle twice yields the original map.
    """
    toggled = dict(reactions)
    reactors = toggled.get(emoji, frozenset())
    if user_id in reactors:
        reactors = reactors - {user_id}
    else:
        reactors = reactors | {user_id}

    if reactors:
        toggled[emoji] = reactors
    else:
        toggled.pop(emoji, None)
    return toggled


def group_reactions(rows: Iterable[Tuple[str, str, UserId]]) -> Dict[str, ReactionMap]:
    """Group ``(comment_id, emoji, user_id)`` rows into per-comment maps."""
    grouped: Dict[str, Dict[str, set]] = {}
    for comment_id, emoji, user_id in rows:
        grouped.setdefault(comment_id, {}).setdefault(emoji, set()).add(user_id)
    return {
        comment_id: normalize_reactions(by_emoji)
        for comment_id, by_emoji in grouped.items()
    }
