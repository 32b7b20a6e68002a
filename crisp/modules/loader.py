from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from crisp.config import get_prelude_path
from crisp.errors import CrispFileError


logger = logging.getLogger(__name__)


class _HasEvalSource(Protocol):
    def eval_source(self, code: str): ...


def wrap_progn(code: str) -> str:
    """Turn a buffer of sequential top-level forms into a single (progn ...) form."""
    # newline so a trailing form is never glued to the closing paren
    return f"(progn {code}\n)"


def read_source(path: Path | str) -> str:
    path = Path(path)
    logger.debug("reading %s", path)
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise CrispFileError(path, e) from e


# Prelude convenience loader (file named by CRISP_PRELUDE, if any)

def load_prelude(itp: _HasEvalSource) -> None:
    path = get_prelude_path()
    if path is None:
        return
    logger.debug("loading prelude %s", path)
    itp.eval_source(read_source(path))
