"""Interactive read-eval-print loop.

One line is one form. Errors are reported and the loop carries on; ``exit``
or ``quit`` (or end of input) ends the session.
"""

from __future__ import annotations
import sys
from typing import TextIO

from crisp.errors import CrispError
from crisp.interpreter import Interpreter


PROMPT = "> "
EXIT_KEYWORDS = ("exit", "quit")


def read_line(stdin: TextIO) -> str | None:
    line = stdin.readline()
    if not line:
        return None  # EOF
    return line.rstrip("\r\n")


def mainloop(
    interp: Interpreter | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    interp = interp if interp is not None else Interpreter()
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        stdout.write(PROMPT)
        stdout.flush()

        line = read_line(stdin)
        if line is None:
            stdout.write("\n")
            return
        if line.strip() in EXIT_KEYWORDS:
            print("Goodbye!", file=stdout)
            return
        if not line.strip():
            continue

        try:
            result = interp.eval(line)
        except CrispError as e:
            print(f"error: {e}", file=stdout)
        else:
            print(result, file=stdout)
