"""Geodesy Bounded Context - Value Objects.

Immutable geographic coordinates. Validation occurs at construction time via
Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """Geographic coordinate on the reference sphere (Value Object).

    Invariants:
        GP-1: latitude in [-90, 90]
        GP-2: longitude in [-180, 180]

    Pydantic frozen models compare by value, so two GeoPoints with the same
    coordinates are equal and hash alike.
    """

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)
