from __future__ import annotations

from typing import Literal, Optional
from pydantic import BaseModel, Field


class EncodeRequest(BaseModel):
    number: int = Field(ge=0, examples=[1234])
    checksum: bool = False


class EncodeResponse(BaseModel):
    encoded: str = Field(examples=["16JD"])
    checksum: bool = False


class DecodeRequest(BaseModel):
    encoded: str = Field(examples=["16J-D"])
    checksum: bool = False
    mode: Optional[Literal["warn", "strict"]] = None


class DecodeResponse(BaseModel):
    value: int
    normalized: str
    corrected: bool = False


class NormalizeRequest(BaseModel):
    encoded: str
    mode: Optional[Literal["warn", "strict"]] = None


class NormalizeResponse(BaseModel):
    normalized: str
    corrected: bool = False


class ErrorDetail(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    ok: bool = True
