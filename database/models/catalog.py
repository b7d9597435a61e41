import uuid

from sqlalchemy import Column, Text, Uuid

from .base import Base


class Category(Base):
    __tablename__ = 'categories'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False, unique=True)
    description = Column(Text, nullable=False, default='')
    icon = Column(Text)
    color = Column(Text)


class Skill(Base):
    """Global skill catalog."""
    __tablename__ = 'skills'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False, unique=True)
    category = Column(Text)  # free-text grouping, unrelated to Category rows
