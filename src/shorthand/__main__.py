from __future__ import annotations
import argparse, os, sys, json
from . import Engine, highlight_parts
from .config import TOP_K

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_table(rows, typed: str):
    if not rows:
        print(_c("(no matches)", "2;37")); return
    print(_c("#  Alias                 Symbol               Description", "1;37"))
    for i, r in enumerate(rows, 1):
        bold, rest = highlight_parts(r.display_alias, typed)
        pad = " " * max(0, 21 - len(r.display_alias))
        print(f"{i:<2} {_c(bold, '1')}{rest}{pad} {r.command.symbol:<20} {r.command.description}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Shorthand -> LaTeX converter and palette lookup")
    p.add_argument("--q", default=None, help="Shorthand text to convert once")
    p.add_argument("--suggest", default=None, help="Rank palette entries for a typed prefix")
    p.add_argument("-k", type=int, default=TOP_K, help="Max palette rows")
    p.add_argument("--dict", dest="dict_path", default=None, help="JSON dictionary (default: built-in)")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--repl", action="store_true", help="Interactive loop; '?prefix' ranks the palette")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if args.q is None and args.suggest is None and not args.repl:
        p.error("nothing to do: pass --q, --suggest or --repl")

    eng = Engine()
    try:
        eng.load(args.dict_path, verbose=args.verbose)

        def run_parse(text: str):
            latex = eng.parse(text)
            if args.json:
                print(json.dumps({"input": text, "latex": latex}, ensure_ascii=False))
            else:
                print(latex)

        def run_suggest(prefix: str):
            rows = eng.complete(prefix, top_k=args.k)
            if args.json:
                print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
            else:
                _print_table(rows, prefix)

        if args.q is not None:
            run_parse(args.q)
        if args.suggest is not None:
            run_suggest(args.suggest)

        if args.repl:
            print("Type shorthand to convert, '?prefix' for suggestions (empty line to exit).")
            while True:
                try:
                    line = input("> ")
                except (EOFError, KeyboardInterrupt):
                    break
                if not line.strip():
                    break
                if line.startswith("?"):
                    run_suggest(line[1:])
                else:
                    run_parse(line)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
