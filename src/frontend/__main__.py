from __future__ import annotations
import argparse, os, sys, json
from dataclasses import asdict
from dictcomplete import Engine
from dictcomplete.config import DICT_DIR

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_table(rows) -> None:
    if not rows:
        print(_c("(no matches)", "2;37")); return
    print(_c("#  Label                          Annotation", "1;37"))
    for i, r in enumerate(rows, 1):
        print(f"{i:<2} {r.label:<30} {r.annotation or ''}")

def _handle_command(eng: Engine, cmd: str) -> None:
    name, _, arg = cmd.partition(" ")
    arg = arg.strip()
    if name == ":refresh":
        n = eng.refresh()
        print(_c(f"(reloaded {n} entries)", "2;36"))
    elif name == ":meta":
        entry = eng.lookup(arg)
        if entry is None:
            print(_c(f"(unknown label {arg!r})", "2;31"))
        else:
            print(entry.meta or _c("(no documentation)", "2;37"))
    elif name == ":context":
        eng.set_context(*arg.split())
        print(_c(f"(contexts: {', '.join(eng.contexts) or '-'})", "2;36"))
    elif name == ":fuzzy":
        eng.fuzzy = arg.lower() == "on"
        print(_c(f"(fuzzy {'on' if eng.fuzzy else 'off'})", "2;36"))
    else:
        print(_c(f"(unknown command {name})", "2;31"))

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Dictionary completion CLI (Engine-backed)")
    p.add_argument("--dicts", default=DICT_DIR, help="Dictionary folder (or dir:///path)")
    p.add_argument("--context", nargs="*", default=[], help="Active contexts, e.g. python-mode")
    p.add_argument("-k", type=int, default=None, help="Max candidates")
    p.add_argument("--fuzzy", action="store_true", help="Treat * as a wildcard")
    p.add_argument("--repl", action="store_true", help="Interactive loop")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    try:
        eng = Engine(args.dicts, contexts=args.context, fuzzy=args.fuzzy or None,
                     max_candidates=args.k, verbose=args.verbose)
    except FileNotFoundError as exc:
        print(f"error: dictionary folder not found: {exc}", file=sys.stderr)
        return 2

    try:
        def run_query(q: str):
            rows = eng.complete(q)
            if args.json:
                print(json.dumps([asdict(r) for r in rows], ensure_ascii=False, indent=2))
            else:
                _print_table(rows)

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a prefix and press Enter (empty line to exit).")
            print(_c("Commands: :refresh, :meta LABEL, :context NAMES, :fuzzy on|off", "2;37"))
            while True:
                try:
                    q = input("> ")
                except (EOFError, KeyboardInterrupt):
                    print(); break
                if not q:
                    break
                if q.startswith(":"):
                    _handle_command(eng, q.strip())
                    continue
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
