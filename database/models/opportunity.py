import uuid

from sqlalchemy import (
    Column, Text, TIMESTAMP, ForeignKey, Boolean, Integer, Uuid, UniqueConstraint, Index, func
)
from sqlalchemy.orm import relationship

from .base import Base


class Opportunity(Base):
    """
    A volunteering engagement listing.

    Created by organizers outside this service; only rows with
    active=True take part in matching.
    """
    __tablename__ = 'opportunities'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default='')
    organization = Column(Text, nullable=False, default='')
    category_id = Column(Uuid(as_uuid=True), ForeignKey('categories.id', ondelete='SET NULL'), nullable=True)

    location = Column(Text, nullable=False, default='')
    is_remote = Column(Boolean, nullable=False, default=False)

    time_commitment = Column(Text)
    start_date = Column(TIMESTAMP(timezone=True))
    end_date = Column(TIMESTAMP(timezone=True))
    recurring = Column(Boolean, nullable=False, default=False)
    schedule = Column(Text)

    spots_available = Column(Integer, nullable=False, default=0)
    spots_filled = Column(Integer, nullable=False, default=0)
    image_url = Column(Text)
    impact_area = Column(Text)
    requirements = Column(Text)

    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    category = relationship("Category")
    skills = relationship("OpportunitySkill", back_populates="opportunity", cascade="all, delete-orphan")
    matches = relationship("Match", back_populates="opportunity", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_opportunities_active', 'active'),
        Index('idx_opportunities_category', 'category_id'),
    )


class OpportunitySkill(Base):
    """Skills an opportunity asks for. `required` is stored but not weighted in scoring."""
    __tablename__ = 'opportunity_skills'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    opportunity_id = Column(Uuid(as_uuid=True), ForeignKey('opportunities.id', ondelete='CASCADE'), nullable=False)
    skill_id = Column(Uuid(as_uuid=True), ForeignKey('skills.id', ondelete='CASCADE'), nullable=False)
    required = Column(Boolean, nullable=False, default=False)

    opportunity = relationship("Opportunity", back_populates="skills")
    skill = relationship("Skill")

    __table_args__ = (
        UniqueConstraint('opportunity_id', 'skill_id', name='uq_opportunity_skill'),
        Index('idx_opportunity_skills_opportunity', 'opportunity_id'),
    )
