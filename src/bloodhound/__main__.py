from __future__ import annotations
import argparse, json
from bloodhound import Engine
from bloodhound.config import TOP_K, CASE_SENSITIVE, DEFAULT_EXCLUSIONS
from bloodhound.normalize import match_key
from bloodhound.search import closest_by_edit_distance


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Fuzzy file finder (Engine-backed)")
    p.add_argument("--root", required=True, help="Folder whose files are matched")
    p.add_argument("--exclude", action="append", default=[], metavar="PATTERN",
                   help="Glob pattern to skip (repeatable), e.g. '**/build'")
    p.add_argument("--no-default-excludes", action="store_true",
                   help="Do not skip VCS/IDE/cache folders")
    p.add_argument("--case-sensitive", action="store_true", default=CASE_SENSITIVE)
    p.add_argument("-k", type=int, default=TOP_K, help="Top-K results")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after indexing")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if args.k < 0:
        p.error("-k must be >= 0")

    exclusions = list(args.exclude)
    if not args.no_default_excludes:
        exclusions = DEFAULT_EXCLUSIONS + exclusions

    eng = Engine()
    try:
        try:
            eng.build(args.root, exclusions=exclusions,
                      case_sensitive=args.case_sensitive, verbose=args.verbose)
        except (FileNotFoundError, NotADirectoryError) as exc:
            p.error(f"--root is not a directory: {exc}")

        def run_query(q: str):
            rows = eng.search(q, top_k=args.k)
            if args.json:
                print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
                return
            if not rows:
                print("(no matches)"); return
            print("#  Score    Path")
            for i, r in enumerate(rows, 1):
                print(f"{i:<2} {r.relevance:<8.4f} {r.path}")
            if all(r.relevance == 0 for r in rows):
                hint = closest_by_edit_distance(match_key(q, args.case_sensitive),
                                                eng.candidates.candidates)
                if hint is not None:
                    print(f"(closest by edit distance: {hint.path})")

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a query (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
