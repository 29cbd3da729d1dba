from __future__ import annotations
from typing import List, Optional, Sequence

from .models import Candidate, Fragment, ScoredResult


def similarity(query: str, candidate: Candidate, key_query: Optional[str] = None) -> float:
    """
    Score how well `query` matches `candidate`; higher is better.

    Each query character (in order) is looked up in the candidate's position
    index. Occurrences that sit right after an existing fragment extend it;
    the rest start new fragments. Long runs are rewarded quadratically
    (sum of length**2), query characters missing from the candidate scale the
    result down, and the total is divided by the key length so that shorter
    candidates win for the same matches.

    An exact match of the display path scores 1.0. Other scores are a ranking
    signal only and may exceed 1.0.

    `key_query` is the query in the candidate's matching form (e.g. casefolded);
    when given it is used for the position lookups while the exact-match check
    still sees the raw `query`.
    """
    # Exact matches produce a perfect score (also covers "" vs "").
    if query == candidate.path:
        return 1.0

    n = len(candidate.key)
    if n == 0:
        return 0.0

    fragments: List[Fragment] = []
    missing = 0

    for ch in (query if key_query is None else key_query):
        occurrences = candidate.positions.get(ch)
        if occurrences is None:
            missing += 1
            continue

        available = set(occurrences)
        for fragment in fragments:
            target = fragment.next_index()
            if target in available:
                # one occurrence extends at most one fragment per query char
                available.discard(target)
                fragment.extend()

        # keep discovery order: occurrences are ascending
        for pos in occurrences:
            if pos in available:
                fragments.append(Fragment(pos))

    if missing >= n:
        return 0.0
    existence_ratio = (n - missing) / n

    fragment_score = sum(f.length ** 2 for f in fragments)
    return fragment_score * existence_ratio / n


def find(query: str, candidates: Sequence[Candidate], limit: int,
         key_query: Optional[str] = None) -> List[ScoredResult]:
    """
    Score every candidate and return the best `limit` results, highest first.
    Equal scores keep the candidates' original order (stable sort).
    """
    if limit <= 0:
        return []
    results = [ScoredResult(c, similarity(query, c, key_query)) for c in candidates]
    results.sort(key=lambda r: r.relevance, reverse=True)
    return results[:limit]


def edit_distance(first: str, second: str) -> int:
    """
    Levenshtein distance (insert / delete / substitute, each cost 1),
    computed row by row over a (len(second)+1) x (len(first)+1) matrix.
    """
    width = len(first) + 1
    # first row: distance from "" to every prefix of `first`
    prev = list(range(width))
    for row, row_char in enumerate(second, start=1):
        cur = [row] + [0] * (width - 1)
        for col, col_char in enumerate(first, start=1):
            if col_char == row_char:
                cur[col] = prev[col - 1]
            else:
                cur[col] = 1 + min(
                    prev[col],       # remove
                    cur[col - 1],    # add
                    prev[col - 1],   # substitute
                )
        prev = cur
    return prev[-1]


def closest_by_edit_distance(query: str, candidates: Sequence[Candidate]) -> Candidate | None:
    """Candidate whose match key is fewest edits from `query` (first wins on ties)."""
    best: Candidate | None = None
    best_d = 0
    for c in candidates:
        d = edit_distance(query, c.key)
        if best is None or d < best_d:
            best, best_d = c, d
    return best
