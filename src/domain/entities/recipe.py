"""
Recipe Entity
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

from .enums import RecipeVisibility


class Recipe(SQLModel, table=True):
    """Recipe owned by a user, optionally scoped to a family"""

    __tablename__ = "recipes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(
        foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE"
    )
    family_id: Optional[UUID] = Field(
        default=None, foreign_key="families.id", index=True, ondelete="SET NULL"
    )

    title: str = Field(max_length=255)
    description: Optional[str] = None
    visibility: RecipeVisibility = Field(default=RecipeVisibility.private)
    image_path: Optional[str] = Field(default=None, max_length=255)

    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    servings: Optional[int] = None

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
