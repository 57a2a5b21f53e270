import pytest

from calcarith.evaluator import evaluate


@pytest.mark.parametrize(
    ("expr", "expected"),
    [
        ("1 + 1", 2),
        ("6-4 / 2 ", 4),
        ("2*(5+5*2)/3+(6/2+8)", 21),
        ("(2+6* 3+5- (3*14/7+2)*5)+3", -12),
    ],
)
def test_evaluate_source_cases(expr, expected):
    assert evaluate(expr) == expected


def test_single_number():
    assert evaluate("42") == 42


def test_left_associative_subtraction():
    assert evaluate("10-4-3") == 3


def test_division_truncates_toward_zero():
    assert evaluate("0-7/2") == -3
    assert evaluate("7/2") == 3


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate("1/0")


@pytest.mark.parametrize("expr", ["", "1+", "(1+2", "1+2)", "-5", "1 2"])
def test_malformed_expressions(expr):
    with pytest.raises(ValueError):
        evaluate(expr)


def test_unexpected_character():
    with pytest.raises(ValueError):
        evaluate("1+a")