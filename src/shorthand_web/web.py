from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from shorthand import Engine, highlight_parts
from shorthand.config import TOP_K

app = Flask(__name__)
_engine: Engine | None = None


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = Engine()
        _engine.load()
    return _engine

# ---------- API ----------
@app.get("/api/parse")
def api_parse():
    q = request.args.get("q", "", type=str)
    return jsonify({"input": q, "latex": _get_engine().parse(q)})

@app.get("/api/commands")
def api_commands():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    eng = _get_engine()
    rows = []
    for r in eng.complete(q, top_k=k):
        bold, rest = highlight_parts(r.display_alias, q)
        row = r.to_dict()
        row.update(bold=bold, rest=rest, preview=eng.dictionary.displayable(r.command))  # type: ignore[union-attr]
        rows.append(row)
    return jsonify(rows)

@app.get("/health")
def health():
    d = _get_engine().dictionary
    return jsonify({"ok": True, "commands": len(d.commands), "templates": len(d.templates)})  # type: ignore[union-attr]

# ---------- UI ----------
@app.get("/")
def home():
    # Plain page: live LaTeX source + palette, no external JS/CSS deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Shorthand • LaTeX</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
}
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0 }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; }
input:focus{ border-color:var(--accent) }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace }
.out{ margin-top:12px; padding:12px 14px; border:1px solid var(--border); border-radius:12px; min-height:48px }
.row{ display:grid; grid-template-columns:12rem 12rem 1fr; gap:10px; padding:8px 14px;
  border-top:1px solid var(--border); }
.muted{ color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Shorthand → LaTeX</h1>
      <input id="q" type="text" placeholder="if forall x mod 3 then x in ZZ" autocomplete="off" autofocus />
      <div id="latex" class="out mono muted">Start typing.</div>
      <div id="palette"></div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), latex = $("#latex"), palette = $("#palette");
const esc = (s) => String(s).replace(/[&<>"]/g, (c) => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c]));
let t;
async function refresh(){
  const text = q.value;
  const word = text.split(" ").pop();
  const [p, c] = await Promise.all([
    fetch(`/api/parse?q=${encodeURIComponent(text)}`).then(r => r.json()),
    fetch(`/api/commands?q=${encodeURIComponent(word)}`).then(r => r.json()),
  ]);
  latex.textContent = p.latex || "Start typing.";
  palette.innerHTML = c.map(r => `
    <div class="row">
      <div><b>${esc(r.bold)}</b>${esc(r.rest)}</div>
      <div class="mono">${r.preview ? esc(r.symbol) : ""}</div>
      <div class="muted">${esc(r.description)}</div>
    </div>`).join("");
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(refresh, 120); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--dict", dest="dict_path", default=None)  # JSON dictionary, default built-in
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.load(args.dict_path, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
