"""Pydantic models and table mappings for skills."""

from .skill import (
    Skill,
    SkillCreate,
    SkillUpdate,
    SkillField,
    SkillNamePatch,
    SkillDescriptionPatch,
    SkillLogoPatch,
    SkillTagsPatch,
)
from .envelope import (
    ErrorDetail,
    ErrorResponse,
    EmptyResponse,
    SkillResponse,
    SkillListResponse,
)
from .tables import SkillRecord

__all__ = [
    "Skill",
    "SkillCreate",
    "SkillUpdate",
    "SkillField",
    "SkillNamePatch",
    "SkillDescriptionPatch",
    "SkillLogoPatch",
    "SkillTagsPatch",
    "ErrorDetail",
    "ErrorResponse",
    "EmptyResponse",
    "SkillResponse",
    "SkillListResponse",
    "SkillRecord",
]
