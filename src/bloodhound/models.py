from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Mapping, Tuple


@dataclass(frozen=True)
class Candidate:
    path: str                                   # relative display path, "/"-separated
    key: str                                    # matching form of path (casefolded if case-insensitive)
    positions: Mapping[str, Tuple[int, ...]] = field(compare=False, repr=False)  # char -> ascending offsets in key

    @property
    def display(self) -> str:
        return self.path

    def as_path(self) -> PurePosixPath:
        return PurePosixPath(self.path)


@dataclass
class Fragment:
    """A run of consecutive key positions matched during one scoring pass."""
    start: int
    length: int = 1

    def next_index(self) -> int:
        """Position a matching character must occupy to extend this fragment."""
        return self.start + self.length

    def extend(self) -> None:
        self.length += 1


@dataclass(frozen=True)
class ScoredResult:
    candidate: Candidate
    relevance: float

    @property
    def path(self) -> str:
        return self.candidate.path

    def to_dict(self) -> dict:
        return {"path": self.candidate.path, "score": self.relevance}
