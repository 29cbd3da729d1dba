from __future__ import annotations
import os
from pathlib import PurePath
from types import MappingProxyType
from typing import Dict, List, Tuple, Union

from .models import Candidate


def display_text(path: Union[str, PurePath]) -> str:
    """Relative path as shown to the user: always "/"-separated."""
    text = path.as_posix() if isinstance(path, PurePath) else str(path)
    if os.sep != "/":
        text = text.replace(os.sep, "/")
    return text


def match_key(text: str, case_sensitive: bool) -> str:
    """
    Matching form of a path or query:
      * case-sensitive   -> text unchanged
      * case-insensitive -> casefolded (same rule for candidates and queries)
    """
    return text if case_sensitive else text.casefold()


def index_positions(key: str) -> Dict[str, Tuple[int, ...]]:
    """Map each distinct character of key to the ascending offsets where it occurs."""
    buckets: Dict[str, List[int]] = {}
    for i, ch in enumerate(key):
        buckets.setdefault(ch, []).append(i)
    return {ch: tuple(offsets) for ch, offsets in buckets.items()}


def make_candidate(relative_path: Union[str, PurePath], case_sensitive: bool) -> Candidate:
    path = display_text(relative_path)
    key = match_key(path, case_sensitive)
    return Candidate(
        path=path,
        key=key,
        positions=MappingProxyType(index_positions(key)),
    )
