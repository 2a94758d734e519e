from datetime import datetime, timedelta

CLOCK = datetime.now

LOG_LEVEL = "INFO"

# (home_team, away_team, home_score, away_score), in start order
DEMO_FIXTURES = [
    ("Mexico", "Canada", 0, 5),
    ("Spain", "Brazil", 10, 2),
    ("Germany", "France", 2, 2),
    ("Uruguay", "Italy", 6, 6),
    ("Argentina", "Australia", 3, 1),
]

DEMO_START = datetime(2026, 6, 11, 18, 0)
DEMO_STEP = timedelta(minutes=1)
