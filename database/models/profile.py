import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Uuid, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType


class Profile(Base):
    """
    Volunteer profile filled in during onboarding.

    Only location, interests and availability feed the match scoring;
    skills live in the volunteer_skills join table.
    """
    __tablename__ = 'profiles'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(Text, nullable=False, unique=True)
    full_name = Column(Text, nullable=False, default='')
    bio = Column(Text, nullable=False, default='')
    phone = Column(Text)
    profile_image_url = Column(Text)

    location = Column(Text, nullable=False, default='')
    interests = Column(JSONType, nullable=False, default=list)  # free-text labels
    availability = Column(JSONType, nullable=False, default=list)  # labeled time slots

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    skills = relationship("VolunteerSkill", back_populates="profile", cascade="all, delete-orphan")
    matches = relationship("Match", back_populates="profile", cascade="all, delete-orphan")


class VolunteerSkill(Base):
    """Skills a volunteer claims."""
    __tablename__ = 'volunteer_skills'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    profile_id = Column(Uuid(as_uuid=True), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    skill_id = Column(Uuid(as_uuid=True), ForeignKey('skills.id', ondelete='CASCADE'), nullable=False)
    proficiency_level = Column(Text, nullable=False, default='intermediate')

    profile = relationship("Profile", back_populates="skills")
    skill = relationship("Skill")

    __table_args__ = (
        UniqueConstraint('profile_id', 'skill_id', name='uq_volunteer_skill'),
        Index('idx_volunteer_skills_profile', 'profile_id'),
    )
