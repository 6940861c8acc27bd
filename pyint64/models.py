# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Pydantic models for pyint64.

Provides validated configuration for the Int64Codec dispatcher.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .protocol import BITS64


class Backend(str, Enum):
    """Implementation used to pack and unpack 64-bit fields."""
    AUTO = "auto"
    NATIVE = "native"
    BIGINT = "bigint"


class CodecConfig(BaseModel):
    """Configuration for Int64Codec."""

    model_config = ConfigDict(validate_assignment=True)

    backend: Backend = Field(
        default=Backend.AUTO,
        description="'native' uses fixed-width packing, 'bigint' the hex emulation, 'auto' picks by platform"
    )
    strict_strings: bool = Field(
        default=False,
        description="Reject decimal strings instead of parsing them"
    )

    @field_validator("backend", mode="before")
    @classmethod
    def normalize_backend(cls, v: Any) -> Any:
        if isinstance(v, str) and not isinstance(v, Backend):
            return v.strip().lower()
        return v

    def resolve_backend(self) -> Backend:
        """Get the concrete backend, resolving AUTO for this platform."""
        if self.backend is Backend.AUTO:
            return Backend.NATIVE if BITS64 else Backend.BIGINT
        return self.backend
