from __future__ import annotations
import argparse
from dataclasses import asdict
from flask import Flask, request, jsonify, Response, abort
from dictcomplete import Engine
from dictcomplete.config import DICT_DIR, MAX_CANDIDATES

app = Flask(__name__)
_engine: Engine | None = None


def _get_engine() -> Engine:
    if _engine is None:
        abort(503, description="engine not initialized")
    return _engine


def _flag(name: str) -> bool | None:
    raw = request.args.get(name)
    if raw is None:
        return None
    return raw.lower() in ("1", "true", "on", "yes")

# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", MAX_CANDIDATES, type=int)
    rows = _get_engine().complete(q, top_k=k, fuzzy=_flag("fuzzy"))
    return jsonify([asdict(r) for r in rows])

@app.get("/api/entry")
def api_entry():
    label = request.args.get("label", "", type=str)
    entry = _get_engine().lookup(label) if label else None
    if entry is None:
        return jsonify({"error": f"unknown label: {label!r}"}), 404
    return jsonify(asdict(entry))

@app.post("/api/refresh")
def api_refresh():
    n = _get_engine().refresh()
    return jsonify({"ok": True, "entries": n})

@app.post("/api/accept")
def api_accept():
    body = request.get_json(silent=True) or {}
    label = body.get("label")
    if not isinstance(label, str) or not label:
        return jsonify({"error": "label is required"}), 400
    position = body.get("position", 0)
    if isinstance(position, bool) or not isinstance(position, int) or position < 0:
        return jsonify({"error": "position must be a non-negative integer"}), 400
    ins = _get_engine().accept(label, position)
    return jsonify(asdict(ins))

@app.get("/api/health")
def api_health():
    eng = _engine
    return jsonify({"ok": eng is not None, "contexts": list(eng.contexts) if eng else []})

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Dictionary completion</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --danger:#ff5d5d;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; flex-wrap:wrap }
.controls input[type=text]{
  flex:1; min-width:240px; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
.btn{ padding:10px 14px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); cursor:pointer }
.row{ display:grid; grid-template-columns:3rem 1fr 12rem; gap:10px; padding:10px 14px; border-top:1px solid var(--border); cursor:pointer }
.row:hover{ background:#0d131a }
.small{ color:var(--muted) }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace }
.doc{ white-space:pre-wrap; margin-top:14px; padding:12px; border:1px solid var(--border); border-radius:12px; color:var(--muted) }
.err{ display:none; margin-top:12px; color:var(--danger) }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Dictionary completion</h1>
      <div class="controls">
        <input id="q" type="text" placeholder="Type a prefix (use * with fuzzy)…" autocomplete="off" autofocus />
        <label class="small"><input id="fuzzy" type="checkbox" /> fuzzy</label>
        <button id="refresh" class="btn">Refresh</button>
      </div>
      <div id="stats" class="small">Ready.</div>
      <div id="err" class="err"></div>
      <div id="out" class="empty">Start typing to see candidates.</div>
      <div id="doc" class="doc">(select a candidate to see its documentation)</div>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
const q = $("#q"), out = $("#out"), err = $("#err"), stats = $("#stats"), doc = $("#doc"), fuzzy = $("#fuzzy");
const esc = (s) => String(s ?? "").replace(/[&<>"]/g, (c) => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c]));
let t;
async function search(){
  err.style.display = "none";
  try{
    const resp = await fetch(`/api/complete?q=${encodeURIComponent(q.value)}&fuzzy=${fuzzy.checked ? 1 : 0}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const data = await resp.json();
    stats.textContent = `Candidates: ${data.length}`;
    if(data.length === 0){ out.className = "empty"; out.innerHTML = "No matches."; return; }
    out.className = "";
    out.innerHTML = data.map((r,i)=>`
      <div class="row" data-meta="${esc(r.meta)}">
        <div class="small">${i+1}</div><div class="mono">${esc(r.label)}</div><div class="small">${esc(r.annotation)}</div>
      </div>`).join("");
  }catch(e){
    err.style.display = "block"; err.textContent = `Error: ${e.message ?? e}`;
  }
}
out.addEventListener("click", (ev)=>{
  const row = ev.target.closest(".row");
  if(row) doc.textContent = row.dataset.meta || "(no documentation)";
});
$("#refresh").addEventListener("click", async ()=>{
  const resp = await fetch("/api/refresh", {method:"POST"});
  const data = await resp.json();
  stats.textContent = `Reloaded ${data.entries} entries.`;
  search();
});
q.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(search, 150); });
fuzzy.addEventListener("change", search);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the Flask UI on top of Engine")
    ap.add_argument("--dicts", default=DICT_DIR, help="Dictionary folder (or dir:///path, memory://)")
    ap.add_argument("--context", nargs="*", default=[], help="Active contexts, e.g. python-mode")
    ap.add_argument("--fuzzy", action="store_true", help="Enable wildcard matching")
    ap.add_argument("-k", type=int, default=None, help="Max candidates")
    ap.add_argument("--snippets", action="store_true", help="Expand accepted labels as snippets")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(
        args.dicts, contexts=args.context, fuzzy=args.fuzzy or None,
        max_candidates=args.k, snippets=args.snippets or None, verbose=args.verbose,
    )
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
