"""Atoms and plain collections of them."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Atom(Generic[T]):
    """A single value, compared by that value."""

    value: T


@dataclass
class Set(Generic[T]):
    """An ordered collection of members; adding never removes duplicates."""

    _universe: List[T] = field(default_factory=list)

    def add(self, member: T) -> None:
        """Append member."""
        self._universe.append(member)

    def contains(self, candidate: T) -> bool:
        """Return True if a member equals candidate."""
        return candidate in self._universe

    def cardinality(self) -> int:
        """Return the number of members added."""
        return len(self._universe)

    def __len__(self) -> int:
        return self.cardinality()

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._universe

    def __iter__(self) -> Iterator[T]:
        return iter(self._universe)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a one-member set and report on it."""
    argparse.ArgumentParser(description="Show a small set of atoms.").parse_args(argv)
    s: Set[Atom[int]] = Set()
    datum = 3
    s.add(Atom(datum))
    print(f"cardinality of s: {s.cardinality()}")
    print(f"s.contains(datum): {int(s.contains(Atom(datum)))}")
    return 0