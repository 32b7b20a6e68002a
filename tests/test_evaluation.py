import pytest
from hypothesis import given, strategies as st

from crisp.errors import CrispFunctionDefinitionIsVoid, CrispVariableIsVoid
from crisp.evaluation.evaluator import evaluate
from crisp.reader.parser import parse
from crisp.types.environment import Environment
from crisp.types.function import Native
from crisp.types.nil import Nil, T
from crisp.types.symbol import Quote, Symbol
from crisp.types.values import INTEGER_MAX, INTEGER_MIN, Funcall, List, String

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def bare_env():
    """An environment with no builtins, and a few top-level bindings."""
    env = Environment()
    top = env.top_level()
    top.put_str("x", 42)
    top.put_str("name", Symbol("x", Quote.SINGLE))
    top.put_str("expr", Funcall(Symbol("inc"), (1,)))
    env.add_function("inc", Native("inc", lambda e, args: evaluate(args[0], e) + 1))
    return env

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

atoms = st.one_of(
    st.just(Nil),
    st.just(T),
    st.integers(min_value=INTEGER_MIN, max_value=INTEGER_MAX),
    st.text(max_size=10).map(String),
)


@given(atoms)
def test_self_evaluating_atoms_are_idempotent(atom):
    env = Environment()
    once = evaluate(atom, env)
    assert once == atom
    assert evaluate(once, env) == once


def test_single_quoted_symbol_evaluates_to_itself(bare_env):
    sym = Symbol("x", Quote.SINGLE)
    assert evaluate(sym, bare_env) is sym


def test_unquoted_symbol_evaluates_to_binding(bare_env):
    assert evaluate(Symbol("x"), bare_env) == 42


def test_eval_quoted_symbol_evaluates_binding_again(bare_env):
    # name -> 'x -> 'x (a single-quoted symbol is its own value)
    assert evaluate(Symbol("name", Quote.EVAL), bare_env) == Symbol("x", Quote.SINGLE)
    # expr -> (inc 1) -> 2
    assert evaluate(Symbol("expr"), bare_env) == Funcall(Symbol("inc"), (1,))
    assert evaluate(Symbol("expr", Quote.EVAL), bare_env) == 2


@given(st.integers(min_value=INTEGER_MIN, max_value=INTEGER_MAX - 1))
def test_quoting_algebra(n):
    env = Environment()
    env.add_function("inc", Native("inc", lambda e, args: evaluate(args[0], e) + 1))
    value = Funcall(Symbol("inc"), (n,))
    env.top_level().put_str("v", value)

    assert evaluate(Symbol("v", Quote.SINGLE), env) == Symbol("v", Quote.SINGLE)
    assert evaluate(Symbol("v"), env) == value
    assert evaluate(Symbol("v", Quote.EVAL), env) == evaluate(value, env) == n + 1


def test_unbound_symbol_is_void(bare_env):
    with pytest.raises(CrispVariableIsVoid) as info:
        evaluate(Symbol("nope"), bare_env)
    assert info.value.name == "nope"
    with pytest.raises(CrispVariableIsVoid):
        evaluate(Symbol("nope", Quote.EVAL), bare_env)


def test_list_elements_evaluate_left_to_right(bare_env):
    seen = []

    def record(e, args):
        seen.append(args[0])
        return args[0]

    bare_env.add_function("record", Native("record", record))
    result = evaluate(parse("[(record 1) x 'y (record 2)]"), bare_env)
    assert result == List((1, 42, Symbol("y", Quote.SINGLE), 2))
    assert seen == [1, 2]


def test_list_evaluation_is_fail_fast(bare_env):
    seen = []

    def record(e, args):
        seen.append(args[0])
        return args[0]

    bare_env.add_function("record", Native("record", record))
    with pytest.raises(CrispVariableIsVoid):
        evaluate(parse("[(record 1) missing (record 2)]"), bare_env)
    assert seen == [1]


def test_list_evaluation_does_not_mutate_the_source(bare_env):
    source = parse("[x x]")
    assert evaluate(source, bare_env) == List((42, 42))
    assert source == List((Symbol("x"), Symbol("x")))


def test_unknown_function_is_void(bare_env):
    with pytest.raises(CrispFunctionDefinitionIsVoid) as info:
        evaluate(parse("(frobnicate 1)"), bare_env)
    assert info.value.name == "frobnicate"
    assert bare_env.depth == 1


def test_native_receives_unevaluated_arguments(bare_env):
    received = []
    bare_env.add_function("capture", Native("capture", lambda e, args: received.extend(args) or Nil))
    evaluate(parse("(capture x (inc 1) 'y)"), bare_env)
    assert received == [Symbol("x"), Funcall(Symbol("inc"), (1,)), Symbol("y", Quote.SINGLE)]
