from __future__ import annotations
import argparse, json, logging, os, sys
from shakesearch import Engine, SearchResponse
from shakesearch import config as CFG

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_table(resp: SearchResponse) -> None:
    print(_c(resp.message, "2;37"))
    if not resp.results:
        return
    print(_c("#    Work                                     Text", "1;37"))
    for i, r in enumerate(resp.results, 1):
        work = (r.attribution[:38] + "..") if len(r.attribution) > 40 else r.attribution
        text = r.text.replace(CFG.DISPLAY_BREAK, " / ")
        print(f"{i:<4} {work:<40} {text}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Search the complete works from the command line")
    p.add_argument("--corpus", default=CFG.CORPUS_PATH, help="Corpus text file")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop")
    p.add_argument("-s", "--size", type=int, default=CFG.DEFAULT_WINDOW_SIZE, help="Snippet window size")
    p.add_argument("--whole-word", action="store_true", help="Match whole words only")
    p.add_argument("--key", default=os.environ.get("OPENAI_API_KEY", ""),
                   help="API key for query correction (default: $OPENAI_API_KEY)")
    p.add_argument("--json", action="store_true", help="Emit the JSON response")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    try:
        eng = Engine.from_file(args.corpus)
    except OSError as exc:
        print(f"error: cannot load corpus: {exc}", file=sys.stderr)
        return 1

    def run_query(q: str) -> None:
        resp = eng.query(q, window_size=args.size, whole_word=args.whole_word, api_key=args.key or None)
        if args.json:
            print(json.dumps(resp.to_dict(), ensure_ascii=False, indent=2))
        else:
            _print_table(resp)

    if args.q is not None:
        if not args.q:
            print("error: missing search query", file=sys.stderr)
            return 2
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

if __name__ == "__main__":
    raise SystemExit(main())
