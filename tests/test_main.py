from datetime import timedelta

import main
from live_scoreboard.config import DEMO_START


def test_demo_summary(capsys, restore_logging):
    lines = main.main()

    assert lines == [
        "Uruguay 6 - Italy 6",
        "Spain 10 - Brazil 2",
        "Mexico 0 - Canada 5",
        "Argentina 3 - Australia 1",
        "Germany 2 - France 2",
    ]

    out = capsys.readouterr().out
    assert "1. Uruguay 6 - Italy 6" in out
    assert "5. Germany 2 - France 2" in out


def test_stepping_clock():
    clock = main.stepping_clock(step=timedelta(seconds=10))

    assert clock() == DEMO_START
    assert clock() == DEMO_START + timedelta(seconds=10)
