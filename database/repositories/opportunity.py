import logging
from typing import List, Dict, Any, Iterable
from sqlalchemy import select

from database.models import Opportunity, OpportunitySkill, Category
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class OpportunityRepository(BaseRepository):
    def list_active_opportunities(self) -> List[Opportunity]:
        stmt = select(Opportunity).where(
            Opportunity.active.is_(True)
        ).order_by(Opportunity.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def list_opportunity_skills(self, opportunity_id: Any) -> List[OpportunitySkill]:
        stmt = select(OpportunitySkill).where(OpportunitySkill.opportunity_id == opportunity_id)
        return list(self.db.execute(stmt).scalars().all())

    def list_opportunity_skills_for(
        self,
        opportunity_ids: Iterable[Any]
    ) -> Dict[Any, List[OpportunitySkill]]:
        """Batch fetch skill rows for many opportunities with one WHERE ... IN query.

        Every requested id is present in the result, mapped to an empty list
        when the opportunity asks for no skills.
        """
        ids = list(dict.fromkeys(opportunity_ids))
        result: Dict[Any, List[OpportunitySkill]] = {opp_id: [] for opp_id in ids}
        if not ids:
            return result

        stmt = select(OpportunitySkill).where(OpportunitySkill.opportunity_id.in_(ids))
        for row in self.db.execute(stmt).scalars().all():
            result.setdefault(row.opportunity_id, []).append(row)
        return result


class CategoryRepository(BaseRepository):
    def list_categories(self) -> List[Category]:
        stmt = select(Category).order_by(Category.name)
        return list(self.db.execute(stmt).scalars().all())
