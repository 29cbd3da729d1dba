# bloodhound/engine.py
from __future__ import annotations

import os
import logging
import time
from pathlib import Path
from typing import Iterable, List, Optional

from . import config as CFG
from .index import CandidateSet
from .models import ScoredResult

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer over a CandidateSet:
      - build(root, ...):  traverse -> filter -> precompute candidates
      - find(term, top_k): ranked relative paths
      - search(term, top_k): ranked ScoredResult rows (path + score)
      - shutdown():        drop the candidate set

    Used by the CLI (python -m bloodhound), the Flask UI and the desktop picker.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.candidates: Optional[CandidateSet] = None

    # /* ~~~ Index every file under root ~~~ */
    def build(
        self,
        root: str | Path,
        *,
        exclusions: Optional[Iterable[str]] = None,   # glob patterns, e.g. ["**/.git", "*.pyc"]
        case_sensitive: bool = CFG.CASE_SENSITIVE,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ[CFG.VERBOSE_ENV] = "1"

        if not root:
            raise ValueError("build(): a root folder is required")

        t0 = time.perf_counter()
        log.info("Indexing files under %s", root)
        cset = CandidateSet(root)
        cset.populate(exclusions, case_sensitive=case_sensitive)

        # Commit engine state
        self.candidates = cset
        log.info("Engine build() complete: candidates=%d in %.2fs",
                 len(cset), time.perf_counter() - t0)

    # ------------- query -------------

    # /* ~~~ Rank the indexed paths against a user query ~~~ */
    def search(self, term: str, *, top_k: int = CFG.TOP_K) -> List[ScoredResult]:
        if self.candidates is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self.candidates.results(term, top_k)

    def find(self, term: str, *, top_k: int = CFG.TOP_K) -> List[str]:
        return [r.path for r in self.search(term, top_k=top_k)]

    @property
    def ready(self) -> bool:
        return self.candidates is not None

    def count(self) -> int:
        return len(self.candidates) if self.candidates is not None else 0

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.candidates = None
        log.info("Engine shutdown complete")
