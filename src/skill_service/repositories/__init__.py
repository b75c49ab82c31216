"""Repository modules for PostgreSQL operations."""

from .skill_repo import SkillRepository

__all__ = ["SkillRepository"]
