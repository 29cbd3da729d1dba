from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from bloodhound.engine import Engine
from bloodhound.config import TOP_K, CASE_SENSITIVE, DEFAULT_EXCLUSIONS

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/find")
def api_find():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    if not q:
        return jsonify([])
    if _engine is None or not _engine.ready:
        return jsonify({"error": "index not built"}), 503
    rows = _engine.search(q, top_k=max(0, k))
    return jsonify([r.to_dict() for r in rows])

@app.get("/api/health")
def api_health():
    ready = _engine is not None and _engine.ready
    return jsonify({"ok": ready, "candidates": _engine.count() if ready else 0})

# ---------- UI ----------
_PAGE = r"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>bloodhound: go to file</title>
<style>
body{font:15px system-ui,sans-serif;max-width:800px;margin:2em auto;padding:0 1em}
form{display:flex;gap:.5em}
#q{flex:1;padding:.5em}
#k{width:4em}
td{padding:.2em .6em}
td.path{font-family:monospace}
#msg{color:#888;margin:.5em 0}
</style>
</head>
<body>
<h1>Go to file</h1>
<form onsubmit="return false">
  <input id="q" type="search" placeholder="Type part of a path" autofocus autocomplete="off">
  <input id="k" type="number" min="1" max="100" value="__TOP_K__" title="results">
</form>
<div id="msg"></div>
<table><tbody id="out"></tbody></table>
<script>
const q = document.getElementById("q"), k = document.getElementById("k");
const out = document.getElementById("out"), msg = document.getElementById("msg");
let timer = null;

function esc(s){
  return s.replace(/[&<>"']/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;","'":"&#39;"}[c]));
}

async function search(){
  out.innerHTML = "";
  msg.textContent = "";
  if(!q.value) return;
  const r = await fetch(`/api/find?q=${encodeURIComponent(q.value)}&k=${encodeURIComponent(k.value)}`);
  const data = await r.json();
  if(!r.ok){ msg.textContent = `Error: ${data.error || r.statusText}`; return; }
  if(!data.length){ msg.textContent = "(no matches)"; return; }
  out.innerHTML = data.map((row, i) =>
    `<tr><td>${i + 1}</td><td>${row.score.toFixed(3)}</td><td class="path">${esc(row.path)}</td></tr>`).join("");
}

function debounced(){ clearTimeout(timer); timer = setTimeout(search, 120); }
q.addEventListener("input", debounced);
k.addEventListener("change", debounced);
</script>
</body>
</html>
"""

@app.get("/")
def home():
    return Response(_PAGE.replace("__TOP_K__", str(TOP_K)), mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--root", required=True)
    ap.add_argument("--exclude", action="append", default=[], metavar="PATTERN")
    ap.add_argument("--no-default-excludes", action="store_true")
    ap.add_argument("--case-sensitive", action="store_true", default=CASE_SENSITIVE)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    exclusions = list(args.exclude)
    if not args.no_default_excludes:
        exclusions = DEFAULT_EXCLUSIONS + exclusions

    global _engine
    _engine = Engine()
    _engine.build(args.root, exclusions=exclusions,
                  case_sensitive=args.case_sensitive, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
