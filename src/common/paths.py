from pathlib import Path
from typing import Callable, Optional

Matcher = Callable[[Path], bool]


def name_matcher(*names: str) -> Matcher:
    """Build a predicate that is true for entries named exactly like one of `names`."""
    accepted = frozenset(names)

    def matches(entry: Path) -> bool:
        return entry.name in accepted

    return matches


def contains_match(directory: Path, matches: Matcher) -> bool:
    # OSError from an unreadable directory propagates to the caller
    return any(matches(entry) for entry in directory.iterdir())


def find_dir_containing(start: Path, matches: Matcher) -> Optional[Path]:
    """
    Walk from `start` up to the filesystem root and return the first directory
    with an immediate entry accepted by `matches`, or None.
    """
    for candidate in (start, *start.parents):
        if contains_match(candidate, matches):
            return candidate
    return None
