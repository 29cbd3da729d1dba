"""Process-wide API over a single Engine (used by the web UI and embedders)."""
from __future__ import annotations
import time
import logging
from typing import Iterable, Optional

from bloodhound.config import TOP_K, CASE_SENSITIVE
from bloodhound.engine import Engine

log = logging.getLogger(__name__)

_engine: Engine | None = None


def initialize(root: str,
               exclusions: Optional[Iterable[str]] = None,
               case_sensitive: bool = CASE_SENSITIVE,
               verbose: bool = False) -> Engine:
    """Index `root` and make it the target of find(); also wires the Flask app."""
    global _engine
    t0 = time.perf_counter()
    eng = Engine()
    eng.build(root, exclusions=exclusions, case_sensitive=case_sensitive, verbose=verbose)
    _engine = eng

    from . import web
    web._engine = eng
    log.info("[ready] init complete in %.2fs", time.perf_counter() - t0)
    return eng


def find(term: str, top_k: int = TOP_K) -> list[str]:
    """Return the top-K relative paths for `term`."""
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.find(term, top_k=top_k)
