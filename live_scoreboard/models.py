from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from live_scoreboard import config
from live_scoreboard.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Score:
    home: int = 0
    away: int = 0

    @property
    def total(self) -> int:
        return self.home + self.away


# =========================================================
# VALIDATION
# =========================================================

def validate_team_name(name, role: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError(f"{role} team name cannot be null or empty")
    return name


def validate_score(value, role: str) -> int:
    # bool is an int subclass, but True is not a score
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{role} score must be an integer, got {value!r}")

    if value < 0:
        raise InvalidArgumentError(f"{role} score cannot be negative, got {value}")

    return value


def team_key(home_team: str, away_team: str) -> Tuple[str, str]:
    """
    Case-normalized (home, away) pair.
    Home/away roles are part of the key: ("A", "B") != ("B", "A").
    """
    return home_team.lower(), away_team.lower()


# =========================================================
# MATCH
# =========================================================

class Match:
    """
    A single match in progress.

    Team names and start time are fixed at creation.
    Scores are replaced as one Score value, so a reader never
    observes the home score of one update with the away score of another.
    """

    def __init__(
        self,
        home_team: str,
        away_team: str,
        start_time: Optional[datetime] = None,
    ):
        validate_team_name(home_team, "Home")
        validate_team_name(away_team, "Away")

        if home_team.lower() == away_team.lower():
            raise InvalidArgumentError(
                f"Home and away teams cannot be the same: {home_team!r} vs {away_team!r}"
            )

        self._home_team = home_team
        self._away_team = away_team
        self._score = Score()
        self._start_time = start_time if start_time is not None else config.CLOCK()

    # ---------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------

    @property
    def home_team(self) -> str:
        return self._home_team

    @property
    def away_team(self) -> str:
        return self._away_team

    @property
    def home_score(self) -> int:
        return self._score.home

    @property
    def away_score(self) -> int:
        return self._score.away

    @property
    def total_score(self) -> int:
        return self._score.total

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def key(self) -> Tuple[str, str]:
        return team_key(self._home_team, self._away_team)

    # ---------------------------------------------------------
    # Core API
    # ---------------------------------------------------------

    def update_score(self, new_home_score: int, new_away_score: int) -> None:
        """
        Overwrite both scores with absolute values.
        Nothing changes if either value is rejected.
        """
        validate_score(new_home_score, "Home")
        validate_score(new_away_score, "Away")

        self._score = Score(home=new_home_score, away=new_away_score)

    def is_between(self, home_team: str, away_team: str) -> bool:
        if not isinstance(home_team, str) or not isinstance(away_team, str):
            return False
        return self.key == team_key(home_team, away_team)

    # ---------------------------------------------------------
    # Identity & display
    # ---------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Match):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __str__(self):
        score = self._score
        return f"{self._home_team} {score.home} - {self._away_team} {score.away}"

    def __repr__(self):
        return (
            f"Match(home_team={self._home_team!r}, away_team={self._away_team!r}, "
            f"home_score={self.home_score}, away_score={self.away_score}, "
            f"start_time={self._start_time.isoformat()})"
        )
