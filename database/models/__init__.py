from .base import Base
from .catalog import Category, Skill
from .profile import Profile, VolunteerSkill
from .opportunity import Opportunity, OpportunitySkill
from .match import Match

__all__ = [
    'Base',
    'Category',
    'Skill',
    'Profile',
    'VolunteerSkill',
    'Opportunity',
    'OpportunitySkill',
    'Match',
]
