"""
Profile Schemas
Request bodies for the profile, experience and education endpoints
"""

from datetime import date
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from app.utils.validators import require

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


class ProfileRequest(BaseModel):
    """
    Create or update the caller's profile.
    Only status and skills are required; every other field is written only when present.
    """

    model_config = ConfigDict(validate_default=True)

    status: Optional[str] = None
    skills: Optional[Union[str, List[str]]] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None

    # Social links
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v):
        return require(v, "Status is required")

    @field_validator("skills", mode="before")
    @classmethod
    def check_skills(cls, v):
        return require(v, "Skills is required")

    def profile_fields(self) -> Dict[str, Any]:
        """Top-level fields that were supplied with a non-empty value."""
        fields = self.model_dump(exclude=set(SOCIAL_NETWORKS) | {"skills"})
        return {key: value for key, value in fields.items() if value}

    def social_fields(self) -> Dict[str, str]:
        return {
            network: getattr(self, network)
            for network in SOCIAL_NETWORKS
            if getattr(self, network)
        }


class _HistoryEntryRequest(BaseModel):
    """Shared shape of experience and education entries."""

    model_config = ConfigDict(validate_default=True, populate_by_name=True)

    # ``from`` is a keyword, so the attribute carries a trailing underscore
    from_: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator("from_", mode="before")
    @classmethod
    def check_from(cls, v):
        return require(v, "From date is required")

    @field_validator("to", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        return None if v == "" else v

    @field_validator("current", mode="before")
    @classmethod
    def none_to_false(cls, v):
        return False if v is None else v


class ExperienceRequest(_HistoryEntryRequest):
    """Add an experience entry."""

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None

    @field_validator("title", "company", mode="before")
    @classmethod
    def check_required(cls, v, info: ValidationInfo):
        return require(v, f"{info.field_name.capitalize()} is required")


class EducationRequest(_HistoryEntryRequest):
    """Add an education entry."""

    school: Optional[str] = None
    degree: Optional[str] = None
    fieldofstudy: Optional[str] = None

    @field_validator("school", "degree", mode="before")
    @classmethod
    def check_required(cls, v, info: ValidationInfo):
        return require(v, f"{info.field_name.capitalize()} is required")

    @field_validator("fieldofstudy", mode="before")
    @classmethod
    def check_field_of_study(cls, v):
        return require(v, "Field of study is required")
