from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from shakesearch import Engine
from shakesearch import config as CFG

log = logging.getLogger(__name__)

def create_app(engine: Engine) -> Flask:
    """Build the Flask app around one shared, read-only Engine."""
    app = Flask(__name__)

    # ---------- API ----------
    @app.get("/search")
    def search():
        q = request.args.get("q", "", type=str)
        if not q:
            return Response("missing search query in URL params", status=400, mimetype="text/plain")
        size = request.args.get("s", CFG.DEFAULT_WINDOW_SIZE, type=int)
        whole_word = request.args.get("mw", "", type=str) == "on"
        key = request.args.get("k", "", type=str)

        resp = engine.query(q, window_size=size, whole_word=whole_word, api_key=key or None)
        try:
            return jsonify(resp.to_dict())
        except (TypeError, ValueError):
            log.exception("Failed to encode response for %r", q)
            return Response("encoding failure", status=500, mimetype="text/plain")

    # ---------- UI ----------
    @app.get("/")
    def home():
        return Response(_HOME_HTML, mimetype="text/html")

    return app

# A tiny SPA: CSS variables + minimal JS, no external deps.
_HOME_HTML = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>ShakeSearch</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --accent-2:#22d3ee;
  --border:#1c2530;
  --mark-bg:rgba(110,231,255,.2);
}
*{box-sizing:border-box}
html,body{height:100%}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
form{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; flex-wrap:wrap; }
.input{ position:relative; flex:1; min-width:240px; }
.input input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
.input input:focus{ border-color:var(--accent) }
.badge{
  display:inline-flex; align-items:center; gap:8px;
  padding:10px 12px; border:1px solid var(--border); border-radius:12px;
  background:#0b1117; color:var(--muted);
}
.badge input{
  width:72px; background:transparent; border:none; color:var(--ink); font-size:15px;
  outline:none; text-align:center;
}
.btn{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.btn:hover{ border-color:var(--accent-2) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.err{
  display:none; margin-top:12px; padding:10px 12px; border-radius:10px;
  background:rgba(255,93,93,.12); border:1px solid rgba(255,93,93,.35); color:#ffb0b0;
}
.results{ margin-top:16px; overflow:clip; border-radius:12px; border:1px solid var(--border); }
.row{
  display:grid; grid-template-columns:3rem 1fr 16rem; gap:10px; align-items:start;
  padding:12px 14px; border-top:1px solid var(--border);
}
.row:first-child{ border-top:none }
.row:hover{ background:#0d131a }
.head{ background:#0d131a; font-weight:600; color:var(--muted) }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
.mark{ background:var(--mark-bg); border-bottom:1px solid var(--accent-2) }
.spinner{
  display:none; width:22px; height:22px; border:3px solid #0b1117; border-top:3px solid var(--accent);
  border-radius:50%; animation:spin 1s linear infinite;
}
@keyframes spin{ to { transform: rotate(360deg) } }
.empty{ padding:24px; text-align:center; color:var(--muted); }
.pager{ display:none; gap:12px; align-items:center; justify-content:flex-end; margin-top:12px; }
.pager select{ background:transparent; color:var(--ink); border:none; outline:none; }
.btn:disabled{ opacity:.4; cursor:default }
footer{ margin:26px 0 6px 0; color:var(--muted); font-size:12px; text-align:center; }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>ShakeSearch</h1>
      <form id="form">
        <div class="input">
          <input id="q" name="query" type="text" placeholder="Word or sentence…" autocomplete="off"
                 required minlength="3" autofocus />
        </div>
        <div class="badge">Size <input id="s" name="size" type="number" min="50" max="600" value="500" /></div>
        <label class="badge"><input id="mw" name="mw" type="checkbox" /> Whole word</label>
        <div class="badge">API key <input id="k" name="key" type="password" /></div>
        <button class="btn" type="submit">Search</button>
        <div id="spin" class="spinner" aria-label="Loading"></div>
      </form>
      <div id="stats" class="meta">Ready.</div>
      <div id="err" class="err"></div>
      <div class="results">
        <div class="row head"><div>#</div><div>Text</div><div>Work</div></div>
        <div id="out" class="empty">Search the complete works.</div>
      </div>
      <div id="pager" class="pager">
        <button id="prev" class="btn" type="button">&larr; Prev</button>
        <span id="page" class="small">Page 1 of 1</span>
        <button id="next" class="btn" type="button">Next &rarr;</button>
        <label class="badge">Per page
          <select id="per">
            <option selected>5</option><option>10</option><option>25</option><option>50</option>
          </select>
        </label>
      </div>
    </div>
    <footer>Built with Flask • Client-side highlighting • No external JS/CSS deps</footer>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const form = $("#form"), q = $("#q"), s = $("#s"), mw = $("#mw"), k = $("#k");
const out = $("#out"), err = $("#err"), stats = $("#stats"), spin = $("#spin");
const pager = $("#pager"), prev = $("#prev"), next = $("#next"), pageLbl = $("#page"), per = $("#per");
const MIN_QUERY = 3;
const BR = "<br>";

let data = null, page = 0; // last response + current page (0-based)

function escapeRegExp(v){return v.replace(/[.*+?^${}()|[\]\\]/g,'\\$&')}
function highlight(text, query, wholeWord){
  if(!query) return text;
  let re;
  try{
    const body = escapeRegExp(query);
    re = new RegExp(wholeWord ? `\\b${body}\\b` : body, "ig");
  }catch(e){ return text; }
  // highlight between the <br> markers only, never inside them
  return text.split(BR).map((part)=>part.replace(re, (m)=>`<span class="mark">${m}</span>`)).join(BR);
}

function pageCount(){ return data ? Math.max(1, Math.ceil(data.results.length / Number(per.value))) : 1; }

function render(){
  if(!data || !data.results.length){
    out.className = "empty";
    out.innerHTML = data ? "No matches." : "Search the complete works.";
    pager.style.display = "none";
    return;
  }
  const size = Number(per.value), pages = pageCount();
  page = Math.min(Math.max(0, page), pages - 1);
  const first = page * size;
  out.className = "";
  out.innerHTML = data.results.slice(first, first + size).map((r,i)=>`
      <div class="row">
        <div class="small">${first+i+1}</div>
        <div>${highlight(r.text, data.query, data.matchWholeWord)}</div>
        <div class="small">${r.attribution}</div>
      </div>`).join("");
  pager.style.display = "flex";
  pageLbl.textContent = `Page ${page+1} of ${pages}`;
  prev.disabled = page === 0;
  next.disabled = page >= pages - 1;
}

async function search(ev){
  ev.preventDefault();
  const query = q.value;
  if(query.length < MIN_QUERY){
    err.style.display = "block";
    err.textContent = query.length === 0
      ? "You need to provide the word or sentence to search"
      : `The query needs to have at least ${MIN_QUERY} characters`;
    return;
  }
  const params = new URLSearchParams({q: query, s: s.value || "500", k: k.value});
  if(mw.checked) params.set("mw", "on");
  spin.style.display = "inline-block";
  err.style.display = "none";
  try{
    const resp = await fetch(`/search?${params}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}: ${await resp.text()}`);
    data = await resp.json();
    page = 0;
    stats.textContent = data.message;
    render();
  }catch(e){
    err.style.display = "block";
    err.textContent = `Error: ${e.message ?? e}`;
    stats.textContent = "Error.";
  }finally{
    spin.style.display = "none";
  }
}

form.addEventListener("submit", search);
prev.addEventListener("click", ()=>{ page -= 1; render(); });
next.addEventListener("click", ()=>{ page += 1; render(); });
per.addEventListener("change", ()=>{ page = 0; render(); });
render();
</script>
</body>
</html>
"""

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve the complete-works search over HTTP")
    ap.add_argument("--corpus", default=CFG.CORPUS_PATH, help="Corpus text file")
    ap.add_argument("--host", default="0.0.0.0")
    ap.add_argument("--port", type=int, default=CFG.PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        engine = Engine.from_file(args.corpus)
    except OSError as exc:
        log.error("Cannot load corpus %s: %s", args.corpus, exc)
        return 1

    app = create_app(engine)
    print(f"Listening on port {args.port}...")
    app.run(host=args.host, port=args.port, debug=args.verbose, threaded=True)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
