from __future__ import annotations
import argparse
import logging
import sys

from crisp import config
from crisp.errors import CrispError


logger = logging.getLogger("crisp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crisp",
        description="Run Crisp programs, or start an interactive session when no files are given.",
    )
    parser.add_argument(
        "files", nargs="*", metavar="FILE",
        help="source files to evaluate in order ('-' reads standard input)",
    )
    parser.add_argument(
        "--log-level", default=None, type=str.upper, choices=config.LOG_LEVELS,
        help="logging level (default: $CRISP_LOG_LEVEL or WARNING)",
    )
    return parser


def run(files: list[str]) -> None:
    from crisp.interpreter import Interpreter

    interp = Interpreter()
    if not files:
        from crisp.repl import mainloop
        mainloop(interp)
        return

    # All files share one environment; the first failure aborts the run
    for name in files:
        logger.debug("evaluating %s", name)
        if name == "-":
            interp.eval_stdin()
        else:
            interp.eval_file(name)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = args.log_level or config.get_log_level()
        recursion_limit = config.get_recursion_limit()
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(recursion_limit)

    try:
        run(args.files)
    except CrispError as e:
        print(f"crisp: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("crisp: maximum recursion depth exceeded (see CRISP_RECURSION_LIMIT)",
              file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
