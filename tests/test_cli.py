from __future__ import annotations

import pytest

from tetrisboard.__main__ import main


def test_main_prints_board_and_totals(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--width", "6", "--height", "8", "--pieces", "5", "--seed", "3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("|") and out[0].endswith("|")
    assert out[8] == "-" * 8
    assert out[-1].startswith("pieces=")


def test_main_rejects_narrow_board() -> None:
    with pytest.raises(SystemExit):
        main(["--width", "3"])
