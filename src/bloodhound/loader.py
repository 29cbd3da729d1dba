from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

import pathspec

from . import config as CFG

log = logging.getLogger(__name__)


def compile_exclusions(patterns: Optional[Iterable[str]]) -> Optional[pathspec.GitIgnoreSpec]:
    """Compile glob-style exclusion patterns (gitignore syntax, "**" allowed). None/empty -> no filtering."""
    if patterns is None:
        return None
    lines = [p for p in patterns if p and p.strip()]
    if not lines:
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)


def _is_text(rel: str) -> bool:
    # os.fsdecode() smuggles undecodable bytes in as lone surrogates
    try:
        rel.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _sorted_entries(dirpath: str) -> List[os.DirEntry]:
    try:
        with os.scandir(dirpath) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as exc:
        log.debug("skipping unreadable directory %s: %s", dirpath, exc)
        return []


def iter_relative_files(root: str | Path,
                        exclusions: Optional[Iterable[str]] = None) -> Iterator[str]:
    """
    Yield "/"-separated paths, relative to `root`, of every regular file beneath it.

    * a directory's files first (name order), then its subdirectories depth-first
      (same order on every run)
    * directories matching an exclusion are pruned, files matching one are dropped
    * anything that cannot be listed, stat'ed or decoded to text is skipped
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(root)
    if not root.is_dir():
        raise NotADirectoryError(root)

    spec = compile_exclusions(exclusions)
    verbose = CFG.verbose()
    file_count = 0

    # stack of (absolute dir, relative prefix); reversed so that pops come out in name order
    stack: List[tuple[str, str]] = [(str(root), "")]
    while stack:
        cur, prefix = stack.pop()
        subdirs: List[tuple[str, str]] = []
        for entry in _sorted_entries(cur):
            rel = prefix + entry.name
            if not _is_text(rel):
                log.debug("skipping non-UTF-8 path under %s", cur)
                continue
            try:
                if entry.is_dir(follow_symlinks=False):
                    if spec is not None and spec.match_file(rel + "/"):
                        continue
                    subdirs.append((entry.path, rel + "/"))
                    continue
                is_file = entry.is_file()   # follows symlinks, like a metadata() call
            except OSError as exc:
                log.debug("skipping %s: %s", rel, exc)
                continue
            if not is_file:
                continue
            if spec is not None and spec.match_file(rel):
                continue
            file_count += 1
            if verbose and file_count % CFG.PROGRESS_EVERY_FILES == 0:
                log.info("[scanned] files=%s", f"{file_count:,}")
            yield rel
        stack.extend(reversed(subdirs))

    if verbose:
        log.info("[done] files=%s", f"{file_count:,}")
