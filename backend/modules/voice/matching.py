"""
Spoken-title matching.

A spoken fragment matches a title when either one contains the other after
case folding. There is no similarity scoring: the first match in the
caller's ordering wins. API callers pass lists newest first, so the tie-break
there is "most recently created".
"""

from typing import Iterable, Optional, Protocol, TypeVar


class Titled(Protocol):
    title: str


T = TypeVar("T", bound=Titled)


def title_matches(title: Optional[str], spoken: Optional[str]) -> bool:
    """Bidirectional, case-insensitive substring containment."""
    if not title or not spoken:
        return False
    title = title.casefold().strip()
    spoken = spoken.casefold().strip()
    if not title or not spoken:
        return False
    return spoken in title or title in spoken


def find_title_matches(items: Iterable[T], spoken: Optional[str]) -> list[T]:
    """All items whose title matches, in the given order."""
    return [item for item in items if title_matches(item.title, spoken)]


def find_by_title(items: Iterable[T], spoken: Optional[str]) -> Optional[T]:
    """The first item whose title matches, or None."""
    for item in items:
        if title_matches(item.title, spoken):
            return item
    return None
