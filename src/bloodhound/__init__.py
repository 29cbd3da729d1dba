"""
bloodhound: fuzzy "go to file" matching.

Index the files under a root once, then rank their relative paths against
short, typed queries as often as needed:

    from bloodhound import CandidateSet

    files = CandidateSet("path/to/project")
    files.populate(["**/.git"], case_sensitive=False)
    files.find("mtchrs", 5)      # -> ["src/matching.rs", ...]

The scoring primitives (similarity, find, make_candidate) are exported for
callers that manage their own candidate lists.
"""

from .engine import Engine
from .index import CandidateSet
from .models import Candidate, Fragment, ScoredResult
from .normalize import make_candidate
from .search import similarity, find, edit_distance

__version__ = "0.1.0"
__all__ = [
    "Engine",
    "CandidateSet",
    "Candidate",
    "Fragment",
    "ScoredResult",
    "make_candidate",
    "similarity",
    "find",
    "edit_distance",
]
