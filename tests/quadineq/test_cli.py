import pytest

from quadineq.cli import main


def test_prints_interval_notation(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["x^2-3x+2>0"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "(-∞, 1) ∪ (2, ∞)\n"
    assert captured.err == ""


def test_inequality_style(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--style", "inequality", "x^2-3x+2>0"]) == 0
    assert capsys.readouterr().out == "x < 1 or x > 2\n"


def test_error_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["x^3 > 0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Degree error: Polynomial degree 3 exceeds 2\n"


def test_missing_argument_exits() -> None:
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2
