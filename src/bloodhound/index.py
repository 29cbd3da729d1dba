from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .loader import iter_relative_files
from .models import Candidate, ScoredResult
from .normalize import make_candidate, match_key
from .search import find as rank

log = logging.getLogger(__name__)


class CandidateSet:
    """
    The files beneath one root, each wrapped as a Candidate with its position
    index precomputed. Populate once, then query as often as needed; queries
    never modify the set.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)
        self.case_sensitive: bool = False
        self._candidates: List[Candidate] = []

    # ---- Build ----
    def populate(self, exclusions: Optional[Iterable[str]] = None,
                 case_sensitive: bool = False) -> None:
        """Replace the current candidates with every (non-excluded) file under root, in traversal order."""
        patterns = list(exclusions) if exclusions is not None else None
        candidates = [
            make_candidate(rel, case_sensitive)
            for rel in iter_relative_files(self.root, patterns)
        ]
        self._candidates = candidates
        self.case_sensitive = case_sensitive
        log.info("Populated %d candidates from %s", len(candidates), self.root)

    # ---- Query ----
    def results(self, term: str, limit: int) -> List[ScoredResult]:
        # Positions are looked up with the term folded like the keys; the
        # exact-match shortcut compares the raw term with the display path.
        return rank(term, self._candidates, limit,
                    key_query=match_key(term, self.case_sensitive))

    def find(self, term: str, limit: int) -> List[str]:
        return [r.path for r in self.results(term, limit)]

    # ---- Getters ----
    @property
    def paths(self) -> List[str]:
        return [c.path for c in self._candidates]

    @property
    def candidates(self) -> List[Candidate]:
        return list(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates)
