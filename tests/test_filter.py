import pytest

from calcarith.filter import replace_math_expressions


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Here's an arithmetic 1+1=2.", "Here's an arithmetic 2=2."),
        (
            "Here's another one: (2+6* 3+5- (3*14/7+2)*5)+3 = -12.",
            "Here's another one: -12 = -12.",
        ),
        ("1 + 1", "2"),
        ("6-4 / 2 ", "4"),
        ("2*(5+5*2)/3+(6/2+8)", "21"),
        ("(2+6* 3+5- (3*14/7+2)*5)+3", "-12"),
    ],
)
def test_replace_source_cases(text, expected):
    assert replace_math_expressions(text).strip(" ") == expected


def test_text_without_expressions_is_unchanged():
    text = "No arithmetic here, only 42 and words."
    assert replace_math_expressions(text) == text


def test_multiple_expressions():
    assert replace_math_expressions("a 1+1 b 2*3 c") == "a 2 b 6 c"


def test_division_by_zero_propagates():
    with pytest.raises(ZeroDivisionError):
        replace_math_expressions("x 1/0 y")