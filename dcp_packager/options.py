"""Pydantic model for caller-supplied package build options.

WHY: Descriptive fields and overrides arrive from the CLI (or any other
caller) as loosely typed values. Validating them once, before a context
exists, keeps the assembly code free of defensive checks and gives
callers a single clear error listing every bad field.

HOW: ``PackageOptions`` declares each option with Field constraints.
``factory.create_context`` applies a validated instance to a fresh
PackageContext; unset fields (None) keep the configured defaults.

RULES:
- issuer/creator ≤ 161 chars, annotation ≤ 128, title ≤ 80, kind ≤ 15
- kind must be one of config.CONTENT_KINDS (case-insensitive)
- duration and entry_point are frame counts > 0 when given
- Capacity limits are ≥ 1
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from dcp_packager import config
from dcp_packager.core.constants import RatingAgency


class PackageOptions(BaseModel):
    """Descriptive fields and overrides for one package build."""

    issuer: Optional[str] = Field(
        default=None,
        max_length=161,
        description="Issuer written into the PKL and CPL. Defaults to the application name.",
    )
    creator: Optional[str] = Field(
        default=None,
        max_length=161,
        description="Creator written into the PKL and CPL. Defaults to the application name.",
    )
    annotation: Optional[str] = Field(
        default=None,
        max_length=128,
        description="Annotation text for the PKL, CPL, and reels.",
    )
    title: Optional[str] = Field(
        default=None,
        max_length=80,
        description="Content title of the CPL.",
    )
    kind: Optional[str] = Field(
        default=None,
        max_length=15,
        description="Content kind of the CPL (feature, trailer, ...).",
    )
    rating: str = Field(
        default="",
        description="Rating label of the CPL.",
    )
    rating_agency: RatingAgency = Field(
        default=RatingAgency.NONE,
        description="Authority that issued the rating.",
    )
    basename: str = Field(
        default="",
        description="Replaces the UUID in generated PKL/CPL filenames when set.",
    )
    aspect_ratio: str = Field(
        default="",
        description="Forced aspect ratio applied to every ingested asset.",
    )
    duration: Optional[int] = Field(
        default=None,
        gt=0,
        description="Duration ceiling in frames applied to every ingested asset.",
    )
    entry_point: Optional[int] = Field(
        default=None,
        gt=0,
        description="Entry point in frames applied to every ingested asset.",
    )
    max_reels: int = Field(default=config.MAX_REELS, ge=1)
    max_cpls: int = Field(default=config.MAX_CPLS, ge=1)
    max_pkls: int = Field(default=config.MAX_PKLS, ge=1)

    @field_validator("kind")
    @classmethod
    def _known_kind(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        normalized = value.strip().lower()
        if normalized not in config.CONTENT_KINDS:
            raise ValueError(
                "kind must be one of: {}".format(", ".join(config.CONTENT_KINDS))
            )
        return normalized
