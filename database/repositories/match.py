import logging
import uuid
from typing import List, Optional, Any, Dict
from sqlalchemy import select, func
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from database.models import Match
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

MATCH_CONFLICT_KEY = ('profile_id', 'opportunity_id')

_DIALECT_INSERTS = {
    'postgresql': pg_insert,
    'sqlite': sqlite_insert,
}


class MatchRepository(BaseRepository):
    def _insert(self, table):
        dialect = self.db.get_bind().dialect.name
        try:
            return _DIALECT_INSERTS[dialect](table)
        except KeyError:
            raise NotImplementedError(f"Upsert is not supported for dialect '{dialect}'")

    def upsert_matches(self, rows: List[Dict[str, Any]]) -> int:
        """
        Insert match rows, overwriting score and reasons on (profile_id, opportunity_id) conflict.

        viewed and dismissed are only set on insert; an existing row keeps them.

        Args:
            rows: Dicts with profile_id, opportunity_id, match_score, match_reasons

        Returns:
            Number of rows written
        """
        if not rows:
            return 0

        values = [
            {
                'id': uuid.uuid4(),
                'profile_id': row['profile_id'],
                'opportunity_id': row['opportunity_id'],
                'match_score': int(row['match_score']),
                'match_reasons': list(row['match_reasons']),
                'viewed': False,
                'dismissed': False,
            }
            for row in rows
        ]

        stmt = self._insert(Match).values(values)
        stmt = stmt.on_conflict_do_update(
            index_elements=list(MATCH_CONFLICT_KEY),
            set_={
                'match_score': stmt.excluded.match_score,
                'match_reasons': stmt.excluded.match_reasons,
                'updated_at': func.now(),
            }
        )
        self.db.execute(stmt)
        return len(values)

    def get_match(self, match_id: Any) -> Optional[Match]:
        stmt = select(Match).where(Match.id == match_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_existing_match(self, profile_id: Any, opportunity_id: Any) -> Optional[Match]:
        stmt = select(Match).where(
            Match.profile_id == profile_id,
            Match.opportunity_id == opportunity_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_matches_for_profile(
        self,
        profile_id: Any,
        include_dismissed: bool = False,
        min_score: Optional[int] = None
    ) -> List[Match]:
        stmt = select(Match).where(Match.profile_id == profile_id)

        if not include_dismissed:
            stmt = stmt.where(Match.dismissed.is_(False))

        if min_score is not None:
            stmt = stmt.where(Match.match_score >= min_score)

        stmt = stmt.order_by(Match.match_score.desc())
        return list(self.db.execute(stmt).scalars().all())

    def mark_viewed(self, match: Match) -> Match:
        match.viewed = True
        self.flush()
        return match

    def set_dismissed(self, match: Match, dismissed: bool = True) -> Match:
        match.dismissed = dismissed
        self.flush()
        logger.info(f"Match {match.id} dismissed={dismissed}")
        return match
