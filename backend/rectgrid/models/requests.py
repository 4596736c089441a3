"""API request models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from rectgrid.engine.context import Rectangle
from rectgrid.formats.parser import INT64_MAX, INT64_MIN

Coordinate = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class RectangleIn(BaseModel):
    top: Coordinate
    left: Coordinate
    bottom: Coordinate
    right: Coordinate

    @model_validator(mode="after")
    def _check_extent(self) -> "RectangleIn":
        if self.top >= self.bottom:
            raise ValueError(f"top ({self.top}) must be less than bottom ({self.bottom})")
        if self.left >= self.right:
            raise ValueError(f"left ({self.left}) must be less than right ({self.right})")
        return self


class GridRequest(BaseModel):
    rectangles: list[RectangleIn] = Field(
        default_factory=list,
        description="Rectangles in input order; ids are assigned from 0",
    )

    def to_rectangles(self) -> list[Rectangle]:
        return [
            Rectangle(id=i, top=r.top, left=r.left, bottom=r.bottom, right=r.right)
            for i, r in enumerate(self.rectangles)
        ]
