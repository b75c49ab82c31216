"""Skill repository for PostgreSQL operations."""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from ..database import Database
from ..errors import InvalidFieldError, InvalidInputError, SkillConflictError, SkillNotFoundError
from ..models.skill import Skill, SkillCreate, SkillField, SkillUpdate
from ..models.tables import SkillRecord

logger = logging.getLogger(__name__)

# Each patchable field writes exactly one column.
PATCH_COLUMNS = {
    SkillField.NAME: SkillRecord.name,
    SkillField.DESCRIPTION: SkillRecord.description,
    SkillField.LOGO: SkillRecord.logo,
    SkillField.TAGS: SkillRecord.tags,
}


def _check_value(field: SkillField, value: object) -> None:
    if field is SkillField.TAGS:
        if not isinstance(value, list) or not all(isinstance(t, str) for t in value):
            raise InvalidInputError("tags must be a list of strings")
    elif not isinstance(value, str) or not value:
        raise InvalidInputError(f"{field.value} must be a non-empty string")


class SkillRepository:
    """Repository for rows of the skill table."""

    @staticmethod
    async def create(data: SkillCreate) -> Skill:
        """Insert a new skill. Fails if the key is taken."""
        stmt = (
            insert(SkillRecord)
            .values(
                key=data.key,
                name=data.name,
                description=data.description,
                logo=data.logo,
                tags=list(data.tags),
            )
            .returning(SkillRecord)
        )

        try:
            async with Database.get_session() as session:
                result = await session.execute(stmt)
                skill = Skill.model_validate(result.scalar_one())
        except IntegrityError as exc:
            logger.info(f"Skill {data.key} already exists")
            raise SkillConflictError(data.key) from exc

        return skill

    @staticmethod
    async def get_by_key(key: str) -> Skill:
        """Get a skill by key."""
        stmt = select(SkillRecord).where(SkillRecord.key == key)

        async with Database.get_session() as session:
            result = await session.execute(stmt)
            record = result.scalar_one_or_none()
            if record is None:
                raise SkillNotFoundError(key)
            return Skill.model_validate(record)

    @staticmethod
    async def list_all() -> list[Skill]:
        """List all skills ordered by key."""
        stmt = select(SkillRecord).order_by(SkillRecord.key)

        async with Database.get_session() as session:
            result = await session.execute(stmt)
            return [Skill.model_validate(r) for r in result.scalars().all()]

    @staticmethod
    async def replace(key: str, data: SkillUpdate) -> Skill:
        """Overwrite every mutable field of a skill."""
        stmt = (
            update(SkillRecord)
            .where(SkillRecord.key == key)
            .values(
                name=data.name,
                description=data.description,
                logo=data.logo,
                tags=list(data.tags),
            )
            .returning(SkillRecord)
        )

        async with Database.get_session() as session:
            result = await session.execute(stmt)
            record = result.scalar_one_or_none()
            if record is None:
                raise SkillNotFoundError(key)
            return Skill.model_validate(record)

    @staticmethod
    async def patch_field(key: str, field: SkillField | str, value: str | list[str]) -> Skill:
        """Update a single mutable field, leaving the others untouched."""
        try:
            field = SkillField(field)
        except ValueError:
            raise InvalidFieldError(str(field)) from None
        _check_value(field, value)

        stmt = (
            update(SkillRecord)
            .where(SkillRecord.key == key)
            .values({PATCH_COLUMNS[field]: value})
            .returning(SkillRecord)
        )

        async with Database.get_session() as session:
            result = await session.execute(stmt)
            record = result.scalar_one_or_none()
            if record is None:
                raise SkillNotFoundError(key)
            return Skill.model_validate(record)

    @staticmethod
    async def delete(key: str) -> None:
        """Delete a skill."""
        stmt = delete(SkillRecord).where(SkillRecord.key == key).returning(SkillRecord.key)

        async with Database.get_session() as session:
            result = await session.execute(stmt)
            if result.scalar_one_or_none() is None:
                raise SkillNotFoundError(key)
