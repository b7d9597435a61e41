import uuid

from sqlalchemy import (
    Column, TIMESTAMP, ForeignKey, Boolean, Integer, Uuid, UniqueConstraint, Index, func
)
from sqlalchemy.orm import relationship

from .base import Base, JSONType


class Match(Base):
    """
    Stores the match result between a volunteer profile and an opportunity.

    Tracks:
    - Score and ordered human-readable reasons (overwritten on every run)
    - viewed / dismissed flags (owned by the UI, preserved across runs)

    The (profile_id, opportunity_id) pair is the upsert conflict key.
    """
    __tablename__ = 'matches'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    profile_id = Column(Uuid(as_uuid=True), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    opportunity_id = Column(Uuid(as_uuid=True), ForeignKey('opportunities.id', ondelete='CASCADE'), nullable=False)

    match_score = Column(Integer, nullable=False)
    match_reasons = Column(JSONType, nullable=False, default=list)

    viewed = Column(Boolean, nullable=False, default=False)
    dismissed = Column(Boolean, nullable=False, default=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    profile = relationship("Profile", back_populates="matches")
    opportunity = relationship("Opportunity", back_populates="matches")

    __table_args__ = (
        UniqueConstraint('profile_id', 'opportunity_id', name='uq_match_profile_opportunity'),
        Index('idx_matches_profile', 'profile_id'),
        Index('idx_matches_score', 'match_score'),
        Index('idx_matches_dismissed', 'dismissed'),
    )
