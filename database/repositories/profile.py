import logging
from typing import List, Optional, Any, Iterable
from sqlalchemy import select, delete

from database.models import Profile, VolunteerSkill
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

PROFILE_UPDATABLE_FIELDS = ('location', 'bio', 'interests', 'availability', 'full_name', 'phone')


class ProfileRepository(BaseRepository):
    def get_profile(self, profile_id: Any) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.id == profile_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def update_profile(self, profile: Profile, **fields: Any) -> Profile:
        for key, value in fields.items():
            if key not in PROFILE_UPDATABLE_FIELDS:
                raise ValueError(f"Profile field '{key}' cannot be updated")
            setattr(profile, key, value)
        self.flush()
        return profile

    def list_skill_ids_for_profile(self, profile_id: Any) -> List[Any]:
        stmt = select(VolunteerSkill.skill_id).where(VolunteerSkill.profile_id == profile_id)
        return list(self.db.execute(stmt).scalars().all())

    def replace_volunteer_skills(
        self,
        profile_id: Any,
        skill_ids: Iterable[Any],
        proficiency_level: str = 'intermediate'
    ) -> int:
        """Replace the volunteer's claimed skills with the given set."""
        self.db.execute(
            delete(VolunteerSkill).where(VolunteerSkill.profile_id == profile_id)
        )

        count = 0
        for skill_id in dict.fromkeys(skill_ids):
            self.db.add(VolunteerSkill(
                profile_id=profile_id,
                skill_id=skill_id,
                proficiency_level=proficiency_level
            ))
            count += 1

        self.flush()
        logger.info(f"Saved {count} skills for profile {profile_id}")
        return count
