from database.repositories.base import BaseRepository
from database.repositories.profile import ProfileRepository
from database.repositories.opportunity import OpportunityRepository, CategoryRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'ProfileRepository',
    'OpportunityRepository',
    'CategoryRepository',
    'MatchRepository',
]
