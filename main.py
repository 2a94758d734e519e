from itertools import count

from live_scoreboard.config import DEMO_FIXTURES, DEMO_START, DEMO_STEP
from live_scoreboard.log import setup_logging
from live_scoreboard.scoreboard import Scoreboard


def stepping_clock(start=DEMO_START, step=DEMO_STEP):
    ticks = count()
    return lambda: start + next(ticks) * step


def main():
    setup_logging()

    scoreboard = Scoreboard(clock=stepping_clock())

    for home, away, home_score, away_score in DEMO_FIXTURES:
        scoreboard.start_match(home, away)
        scoreboard.update_score(home, away, home_score, away_score)

    lines = [str(match) for match in scoreboard.get_summary()]

    print("Summary:")
    for i, line in enumerate(lines, 1):
        print(f"{i}. {line}")

    return lines


if __name__ == "__main__":
    main()
