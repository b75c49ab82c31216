"""Skill API endpoints."""

import logging

from fastapi import APIRouter

from ..errors import InvalidFieldError
from ..models.envelope import EmptyResponse, SkillListResponse, SkillResponse
from ..models.skill import (
    SkillCreate,
    SkillDescriptionPatch,
    SkillField,
    SkillLogoPatch,
    SkillNamePatch,
    SkillTagsPatch,
    SkillUpdate,
)
from ..repositories.skill_repo import SkillRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/skills", tags=["Skills"])


@router.get("", response_model=SkillListResponse)
async def list_skills() -> SkillListResponse:
    """List all skills."""
    skills = await SkillRepository.list_all()
    logger.info(f"Listed {len(skills)} skills")
    return SkillListResponse(data=skills)


@router.post("", response_model=SkillResponse)
async def create_skill(data: SkillCreate) -> SkillResponse:
    """Create a new skill."""
    skill = await SkillRepository.create(data)
    logger.info(f"Skill created with key {skill.key}")
    return SkillResponse(data=skill)


@router.get("/{key}", response_model=SkillResponse)
async def get_skill(key: str) -> SkillResponse:
    """Get a skill by key."""
    return SkillResponse(data=await SkillRepository.get_by_key(key))


@router.put("/{key}", response_model=SkillResponse)
async def replace_skill(key: str, data: SkillUpdate) -> SkillResponse:
    """Replace all mutable fields of a skill."""
    skill = await SkillRepository.replace(key, data)
    logger.info(f"Skill {key} replaced")
    return SkillResponse(data=skill)


@router.patch("/{key}/actions/name", response_model=SkillResponse)
async def patch_skill_name(key: str, data: SkillNamePatch) -> SkillResponse:
    """Rename a skill."""
    return SkillResponse(
        data=await SkillRepository.patch_field(key, SkillField.NAME, data.name)
    )


@router.patch("/{key}/actions/description", response_model=SkillResponse)
async def patch_skill_description(key: str, data: SkillDescriptionPatch) -> SkillResponse:
    """Change a skill's description."""
    return SkillResponse(
        data=await SkillRepository.patch_field(key, SkillField.DESCRIPTION, data.description)
    )


@router.patch("/{key}/actions/logo", response_model=SkillResponse)
async def patch_skill_logo(key: str, data: SkillLogoPatch) -> SkillResponse:
    """Change a skill's logo."""
    return SkillResponse(
        data=await SkillRepository.patch_field(key, SkillField.LOGO, data.logo)
    )


@router.patch("/{key}/actions/tags", response_model=SkillResponse)
async def patch_skill_tags(key: str, data: SkillTagsPatch) -> SkillResponse:
    """Replace a skill's tags. Order and duplicates are kept as given."""
    return SkillResponse(
        data=await SkillRepository.patch_field(key, SkillField.TAGS, data.tags)
    )


@router.patch("/{key}/actions/{action}", response_model=SkillResponse)
async def patch_skill_unknown(key: str, action: str) -> SkillResponse:
    raise InvalidFieldError(action)


@router.delete("/{key}", response_model=EmptyResponse)
async def delete_skill(key: str) -> EmptyResponse:
    """Delete a skill."""
    await SkillRepository.delete(key)
    logger.info(f"Skill {key} deleted")
    return EmptyResponse()
