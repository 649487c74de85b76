#!/usr/bin/env python3
"""
Purpose:
    Defines the product Version model. Versions are ordered by stability
    (ga < beta < alpha < private) rather than lexically.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resgen.core.constants import VERSION_ORDER


class Version(BaseModel):
    """
    One API version of a product.

    Example
    -------
    >>> Version(name="beta").compare_to(Version(name="ga"))
    1
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Version name (ga, beta, alpha, private).")
    base_url: str | None = Field(default=None, description="API base URL for this version.")
    cai_base_url: str | None = Field(default=None, description="Asset inventory base URL.")

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, v) -> str:
        s = "" if v is None else str(v).strip().lower()
        if s not in VERSION_ORDER:
            allowed = ", ".join(VERSION_ORDER)
            raise ValueError(f"Unknown version {v!r}; valid versions are: {allowed}")
        return s

    @property
    def rank(self) -> int:
        return VERSION_ORDER.index(self.name)

    def compare_to(self, other: Version) -> int:
        """Return -1 if self<other, 0 if equal, 1 if self>other."""
        return (self.rank > other.rank) - (self.rank < other.rank)

    def __str__(self) -> str:
        return self.name
