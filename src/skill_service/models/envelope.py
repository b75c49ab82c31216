"""Response envelopes wrapping every API payload."""

from typing import Literal

from pydantic import BaseModel

from .skill import Skill


class ErrorDetail(BaseModel):
    """Error descriptor returned to clients."""

    code: str
    message: str


class SkillResponse(BaseModel):
    status: Literal["success"] = "success"
    data: Skill


class SkillListResponse(BaseModel):
    status: Literal["success"] = "success"
    data: list[Skill]


class EmptyResponse(BaseModel):
    status: Literal["success"] = "success"


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    error: ErrorDetail
