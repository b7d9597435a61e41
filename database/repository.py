import logging

from sqlalchemy.orm import Session

from database.repositories import (
    ProfileRepository,
    OpportunityRepository,
    CategoryRepository,
    MatchRepository,
)

logger = logging.getLogger(__name__)


class VolunteerRepository(
    ProfileRepository,
    OpportunityRepository,
    CategoryRepository,
    MatchRepository,
):
    """
    Data access façade used by the match engine and the web layer.

    Combines the per-table repositories over a single Session so one
    unit of work can read profiles, opportunities and categories and
    upsert matches in the same transaction.
    """

    def __init__(self, db: Session):
        super().__init__(db)
