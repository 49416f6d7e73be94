from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MemberSignature(BaseModel):
    """One item of a docfx ManagedReference metadata file."""

    uid: str
    id: str = ""
    parent: str | None = None
    type: str | None = None
    name: str | None = None

    model_config = ConfigDict(extra="ignore")


class CodeModel(BaseModel):
    """Top level of a docfx ManagedReference YAML document."""

    items: list[MemberSignature] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


__all__ = ["CodeModel", "MemberSignature"]
