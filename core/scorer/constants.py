"""Fixed weights of the match scoring rubric."""

SKILL_POINTS = 15  # per skill shared with the opportunity
SKILL_POINTS_CAP = 40

INTEREST_POINTS = 30

REMOTE_POINTS = 15
LOCAL_POINTS = 20

AVAILABILITY_POINTS = 10

RECENCY_POINTS = 5
RECENCY_MIN_DAYS = 7
RECENCY_MAX_DAYS = 30

# Inclusive minimum total for a match to be persisted
QUALIFYING_SCORE = 50
