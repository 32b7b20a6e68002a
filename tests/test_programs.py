import io

import pytest

from crisp.errors import (
    CrispArgsMismatch,
    CrispErrorDuringParsing,
    CrispFileError,
    CrispParseError,
    CrispVariableIsVoid,
)
from crisp.interpreter import Interpreter
from crisp.types.nil import Nil
from crisp.types.symbol import Symbol
from crisp.types.values import List


def test_factorial(interp, programs):
    interp.env.top_level().put_str("input", 5)
    assert interp.eval_file(programs / "factorial.cr") == 120


def test_factorial_needs_input(interp, programs):
    with pytest.raises(CrispVariableIsVoid):
        interp.eval_file(programs / "factorial.cr")


@pytest.mark.parametrize("n,expected", [(0, 0), (1, 1), (5, 5), (10, 55)])
def test_fibonacci(interp, programs, n, expected):
    interp.eval_file(programs / "fibonacci.cr")
    assert interp.eval(f"(fibonacci {n})") == expected


def test_quoted_arguments(interp, programs):
    assert interp.eval_file(programs / "quoted-args.cr") == 120


def test_rest_arguments(interp, programs):
    assert interp.eval_file(programs / "rest-args.cr") is Nil
    assert interp.eval("(rcar 1 2 3)") == 1
    assert interp.eval("(rcdr 1 2 3)") == List((2, 3))
    assert interp.eval("(rcdr 1)") == List()
    assert interp.eval("(rcdr 1 (+ 1 1))") == List((2,))
    assert interp.eval("(rquoted 1 x y)") == List((Symbol("x"), Symbol("y")))
    with pytest.raises(CrispArgsMismatch):
        interp.eval("(rcar)")


def test_definitions_persist_across_files(interp, tmp_path):
    lib = tmp_path / "lib.cr"
    lib.write_text("(defun double [n] (* n 2))\n(set 'base 20)\n")
    main = tmp_path / "main.cr"
    main.write_text("(double (+ base 1))\n")
    interp.eval_file(lib)
    assert interp.eval_file(main) == 42


def test_empty_source_is_nil(interp):
    assert interp.eval_source("") is Nil
    assert interp.eval_source("\n  \n") is Nil


def test_missing_file(interp, tmp_path):
    with pytest.raises(CrispFileError) as info:
        interp.eval_file(tmp_path / "nope.cr")
    assert info.value.path == tmp_path / "nope.cr"


def test_parse_failures_surface_as_evaluation_errors(interp):
    with pytest.raises(CrispErrorDuringParsing) as info:
        interp.eval("(+ 1 2")
    assert isinstance(info.value.cause, CrispParseError)
    with pytest.raises(CrispErrorDuringParsing):
        interp.eval_source("(a) (b")


def test_eval_stdin(interp):
    stream = io.StringIO("(defun sq [x] (* x x))\n(sq 12)\n")
    assert interp.eval_stdin(stream) == 144


def test_prelude_from_environment(monkeypatch, tmp_path):
    prelude = tmp_path / "prelude.cr"
    prelude.write_text("(defun inc [n] (+ n 1))\n")
    monkeypatch.setenv("CRISP_PRELUDE", str(prelude))
    assert Interpreter().eval("(inc 1)") == 2


def test_missing_prelude_is_an_error(monkeypatch, tmp_path):
    monkeypatch.setenv("CRISP_PRELUDE", str(tmp_path / "absent.cr"))
    with pytest.raises(CrispFileError):
        Interpreter()


def test_prelude_given_as_source(monkeypatch):
    monkeypatch.delenv("CRISP_PRELUDE", raising=False)
    itp = Interpreter(prelude="(set 'answer 42)")
    assert itp.eval("answer") == 42


def test_frame_stack_is_restored_after_a_failing_program(interp):
    with pytest.raises(CrispVariableIsVoid):
        interp.eval_source("(defun f [] (g missing)) (defun g [x] x) (f)")
    assert interp.env.depth == 1


def test_eval_stdin_rejects_undecodable_input(interp):
    stream = io.TextIOWrapper(io.BytesIO(b"(debug \xff)\n"), encoding="utf-8")
    with pytest.raises(CrispFileError) as info:
        interp.eval_stdin(stream)
    assert info.value.path == "<stdin>"
    assert isinstance(info.value.cause, UnicodeDecodeError)
