from __future__ import annotations
import sys
from pathlib import Path
from typing import Literal, TextIO

from crisp import LispValue
from crisp.builtin.env_builtin import register
from crisp.errors import CrispErrorDuringParsing, CrispFileError, CrispParseError
from crisp.evaluation.evaluator import evaluate
from crisp.modules.loader import load_prelude, read_source, wrap_progn
from crisp.reader.parser import parse
from crisp.types.environment import Environment


class Interpreter:
    """
    Orchestrates reading and evaluating Crisp code.
    Maintains one configured Environment across calls, so definitions and
    top-level variables persist between them.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            load_prelude(self)
        elif prelude:
            self.eval_source(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate a buffer holding exactly one form."""
        try:
            expr = parse(code)
        except CrispParseError as e:
            raise CrispErrorDuringParsing(e) from e
        return evaluate(expr, self.env)

    def eval_source(self, code: str) -> LispValue:
        """Evaluate a buffer of sequential top-level forms; returns the last value."""
        return self.eval(wrap_progn(code))

    def eval_file(self, path: Path | str) -> LispValue:
        return self.eval_source(read_source(path))

    def eval_stdin(self, stream: TextIO | None = None) -> LispValue:
        stream = stream if stream is not None else sys.stdin
        try:
            code = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CrispFileError("<stdin>", e) from e
        return self.eval_source(code)
