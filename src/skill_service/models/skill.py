"""Skill resource models."""

from enum import Enum

from pydantic import BaseModel, Field


class SkillField(str, Enum):
    """Mutable skill fields that can be patched individually."""

    NAME = "name"
    DESCRIPTION = "description"
    LOGO = "logo"
    TAGS = "tags"


class SkillBase(BaseModel):
    """Mutable skill attributes, all required and non-empty."""

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    logo: str = Field(..., min_length=1)
    tags: list[str] = Field(..., min_length=1)


class SkillCreate(SkillBase):
    """Schema for creating a skill."""

    key: str = Field(..., min_length=1)


class SkillUpdate(SkillBase):
    """Schema for replacing all mutable fields of a skill."""

    pass


class Skill(BaseModel):
    """Complete skill model as stored."""

    key: str
    name: str
    description: str
    logo: str
    tags: list[str] = Field(default_factory=list)

    class Config:
        from_attributes = True


# Patch-action bodies. Keys other than the patched field are ignored.


class SkillNamePatch(BaseModel):
    name: str = Field(..., min_length=1)


class SkillDescriptionPatch(BaseModel):
    description: str = Field(..., min_length=1)


class SkillLogoPatch(BaseModel):
    logo: str = Field(..., min_length=1)


class SkillTagsPatch(BaseModel):
    tags: list[str] = Field(..., min_length=1)
