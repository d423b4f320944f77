from concurrent.futures import ThreadPoolExecutor

import pytest

from quadineq import lexer
from quadineq.ast import ComparisonKind
from quadineq.config import Settings
from quadineq.errors import InequalitySyntaxError
from quadineq.lexer import tokenize


def _types(source: str) -> list[str]:
    return [tok.type for tok in tokenize(source)]


def test_token_kinds() -> None:
    assert _types("x^2-3x+2>0") == [
        "VARIABLE",
        "CARET",
        "NUMBER",
        "MINUS",
        "NUMBER",
        "VARIABLE",
        "PLUS",
        "NUMBER",
        "COMPARATOR",
        "NUMBER",
    ]


def test_whitespace_is_skipped() -> None:
    assert _types(" x \t* ( 2 )\n<= 1 ") == [
        "VARIABLE",
        "TIMES",
        "LPAREN",
        "NUMBER",
        "RPAREN",
        "COMPARATOR",
        "NUMBER",
    ]


def test_number_values() -> None:
    values = [tok.value for tok in tokenize("12 1.5 .5 3.")]
    assert values == [12.0, 1.5, 0.5, 3.0]


def test_double_star_is_power() -> None:
    assert _types("x**2") == ["VARIABLE", "CARET", "NUMBER"]


def test_unicode_operators() -> None:
    assert _types("2×x−1÷3") == [
        "NUMBER",
        "TIMES",
        "VARIABLE",
        "MINUS",
        "NUMBER",
        "DIVIDE",
        "NUMBER",
    ]


@pytest.mark.parametrize(
    ("spelling", "kind"),
    [
        ("<", ComparisonKind.LT),
        ("<=", ComparisonKind.LE),
        ("≤", ComparisonKind.LE),
        (">", ComparisonKind.GT),
        (">=", ComparisonKind.GE),
        ("≥", ComparisonKind.GE),
        ("=", ComparisonKind.EQ),
        ("==", ComparisonKind.EQ),
        ("!=", ComparisonKind.NE),
        ("≠", ComparisonKind.NE),
    ],
)
def test_comparator_spellings(spelling: str, kind: ComparisonKind) -> None:
    (tok,) = [t for t in tokenize(f"x {spelling} 1") if t.type == "COMPARATOR"]
    assert tok.value is kind


def test_token_positions() -> None:
    toks = tokenize("x >= 10")
    assert [(t.lexpos, t.end) for t in toks] == [(0, 1), (2, 4), (5, 7)]


def test_unexpected_character() -> None:
    with pytest.raises(InequalitySyntaxError, match="Unexpected character '#'") as info:
        tokenize("x^2 # 1 > 0")
    assert info.value.span.start == 4


def test_malformed_number() -> None:
    with pytest.raises(InequalitySyntaxError, match="Malformed number literal"):
        tokenize("1.2.3 > x")


def test_lone_dot_is_malformed() -> None:
    with pytest.raises(InequalitySyntaxError, match="Malformed number literal"):
        tokenize("x > .")


def test_lone_bang_is_unknown_comparator() -> None:
    with pytest.raises(InequalitySyntaxError, match="Unknown comparison operator"):
        tokenize("x ! 1")


def test_comparators_follow_settings() -> None:
    settings = Settings(comparators={"<": ComparisonKind.LT})
    assert tokenize("x < 1", settings)[1].value is ComparisonKind.LT
    with pytest.raises(InequalitySyntaxError, match="Unknown comparison operator '='"):
        tokenize("x = 1", settings)


def test_first_build_from_many_threads(monkeypatch: pytest.MonkeyPatch) -> None:
    sources = ["x^2-3x+2>0", "2x ≤ 1", "(x)(x) != 4"] * 20
    expected = [_types(s) for s in sources]
    monkeypatch.setattr(lexer, "_LEXER", None)
    with ThreadPoolExecutor(max_workers=8) as pool:
        assert list(pool.map(_types, sources)) == expected
    assert lexer._LEXER is not None
