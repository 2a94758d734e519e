import threading
from datetime import datetime
from typing import Callable, Optional, Tuple

from live_scoreboard import config
from live_scoreboard.exceptions import DuplicateMatchError, MatchNotFoundError
from live_scoreboard.log import get_logger
from live_scoreboard.models import Match, validate_score

logger = get_logger(__name__)


class Scoreboard:
    """
    In-memory board of matches in progress.

    Responsibilities:
    - Start, update and finish matches
    - Keep at most one match per (home, away) pair, case-insensitive
    - Produce a summary ordered by total score, then most recent start

    Matches are held in an immutable tuple. Writers build a new tuple
    under the lock and publish it with a single assignment; readers
    take whatever tuple is current and never see a half-applied change.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or config.CLOCK
        self._matches: Tuple[Match, ...] = ()
        self._lock = threading.Lock()

    # ---------------------------------------------------------
    # Core API
    # ---------------------------------------------------------

    def start_match(self, home_team: str, away_team: str) -> Match:
        """
        Start a new match at 0 - 0 and add it to the board.
        """
        with self._lock:
            match = Match(home_team, away_team, start_time=self._clock())

            if match in self._matches:
                logger.warning("match_already_in_progress", home_team=home_team, away_team=away_team)
                raise DuplicateMatchError(
                    f"A match between {home_team} and {away_team} is already in progress"
                )

            self._matches = self._matches + (match,)

        logger.info(
            "match_started",
            home_team=match.home_team,
            away_team=match.away_team,
            start_time=match.start_time.isoformat(),
        )
        return match

    def update_score(self, home_team: str, away_team: str, home_score: int, away_score: int) -> None:
        """
        Set absolute scores of a match in progress.
        Scores are validated before the lookup.
        """
        validate_score(home_score, "Home")
        validate_score(away_score, "Away")

        with self._lock:
            match = self._find(home_team, away_team)
            match.update_score(home_score, away_score)

        logger.info(
            "score_updated",
            home_team=match.home_team,
            away_team=match.away_team,
            home_score=home_score,
            away_score=away_score,
        )

    def finish_match(self, home_team: str, away_team: str) -> None:
        """
        Remove a match from the board.
        """
        with self._lock:
            match = self._find(home_team, away_team)
            self._matches = tuple(m for m in self._matches if m is not match)

        logger.info("match_finished", home_team=match.home_team, away_team=match.away_team, final=str(match))

    def get_summary(self) -> Tuple[Match, ...]:
        """
        Matches ordered by total score (descending), ties broken by
        start time (most recent first). Exact ties keep start order.
        """
        matches = self._matches

        return tuple(
            sorted(
                matches,
                key=lambda m: (m.total_score, m.start_time),
                reverse=True,
            )
        )

    def get_matches_count(self) -> int:
        return len(self._matches)

    def get_match(self, home_team: str, away_team: str) -> Match:
        return self._find(home_team, away_team)

    # ---------------------------------------------------------
    # Container protocol
    # ---------------------------------------------------------

    def __len__(self):
        return self.get_matches_count()

    def __contains__(self, teams):
        try:
            home_team, away_team = teams
        except (TypeError, ValueError):
            return False
        return any(m.is_between(home_team, away_team) for m in self._matches)

    # ---------------------------------------------------------
    # Lookup
    # ---------------------------------------------------------

    def _find(self, home_team: str, away_team: str) -> Match:
        for match in self._matches:
            if match.is_between(home_team, away_team):
                return match

        logger.warning("match_not_found", home_team=home_team, away_team=away_team)
        raise MatchNotFoundError(f"Match {home_team} vs {away_team} not found")
