"""Contracts shared by every projection engine."""

from pydantic import BaseModel, ConfigDict


class FieldError(BaseModel):
    """One violated input rule, tagged with the offending field."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class ProjectionModel(BaseModel):
    """Base for engine inputs, overrides and rows: immutable, no stray keys."""

    model_config = ConfigDict(extra="forbid", frozen=True)
