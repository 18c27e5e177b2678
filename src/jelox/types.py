from typing import Annotated, NewType

from annotated_types import Predicate


def _is_trimmed(value: str) -> bool:
    return value == value.strip()


def _is_nonempty(value: str) -> bool:
    return bool(value)


TRepoURL = Annotated[NewType("TRepoURL", str), Predicate(_is_trimmed)]
"""
A repository reference as handed to `git clone`. Trimmed, otherwise unvalidated;
an empty line from a URL list is still a TRepoURL and simply fails to clone.
"""

TRelPath = Annotated[NewType("TRelPath", str), Predicate(_is_nonempty)]
"""A non-empty path relative to the enumerated root (repository or directory)."""
