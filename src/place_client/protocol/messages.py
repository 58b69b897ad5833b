from __future__ import annotations

from typing import Annotated, Optional, TypeAlias

from pydantic import BaseModel, Field

# Colors travel as hex strings, e.g. "#ff4500".
Color: TypeAlias = str


class TimeToWait(BaseModel):
    wait_seconds: Annotated[float, Field(ge=0, description="seconds until the user may draw")]


class DrawBody(BaseModel):
    x: Annotated[int, Field(ge=0)]
    y: Annotated[int, Field(ge=0)]
    color: Color


class DrawError(BaseModel):
    # Rate-limit responses carry wait_seconds; other failures may carry nothing.
    wait_seconds: Optional[float] = None
    error: Optional[str] = None
