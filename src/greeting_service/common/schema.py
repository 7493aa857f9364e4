"""Pydantic models for greeting request/response types.

Attributes are snake_case; the JSON wire format uses camelCase aliases.
"""
from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class RequestPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ResponseStatus(str, Enum):
    # Only SUCCESS is produced today; the rest are part of the wire contract.
    SUCCESS = "SUCCESS"
    PARTIAL_SUCCESS = "PARTIAL_SUCCESS"
    ERROR = "ERROR"
    TIMEOUT = "TIMEOUT"


class Transformation(str, Enum):
    """Tags recorded in appliedTransformations, in application order."""
    PREFIX_APPLIED = "PREFIX_APPLIED"
    LANGUAGE_TRANSLATED = "LANGUAGE_TRANSLATED"
    USERNAME_ADDED = "USERNAME_ADDED"
    SUFFIX_APPLIED = "SUFFIX_APPLIED"
    UPPERCASE_APPLIED = "UPPERCASE_APPLIED"
    TRUNCATED = "TRUNCATED"
    TIMESTAMP_ADDED = "TIMESTAMP_ADDED"
    SIMPLE_GREETING = "SIMPLE_GREETING"


class UserContext(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id: str | None = Field(default=None, alias="userId")
    username: str | None = None
    email: str | None = None
    roles: list[str] | None = None
    preferences: dict[str, Any] | None = None


class GreetingConfiguration(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    language: str | None = None
    include_timestamp: bool = Field(default=False, alias="includeTimestamp")
    uppercase: bool = False
    prefix: str | None = None
    suffix: str | None = None
    max_length: int = Field(default=0, ge=0, alias="maxLength")

    @field_validator("include_timestamp", "uppercase", "max_length", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # JSON null behaves like an absent field
        if value is None:
            return cls.model_fields[info.field_name].get_default()
        return value


class GreetingRequest(BaseModel):
    """Inbound body of POST /api/greetings/complex."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_context: UserContext | None = Field(default=None, alias="userContext")
    configuration: GreetingConfiguration | None = None
    tags: list[str] | None = None
    metadata: dict[str, str] | None = None
    priority: RequestPriority = RequestPriority.MEDIUM
    timestamp: datetime | None = None

    @field_validator("priority", mode="before")
    @classmethod
    def _null_priority(cls, value: Any) -> Any:
        return RequestPriority.MEDIUM if value is None else value


class ProcessingMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    processing_time_ms: int = Field(ge=0, alias="processingTimeMs")
    server_id: str = Field(alias="serverId")
    version: str
    retry_count: int = Field(default=0, alias="retryCount")
    debug_info: dict[str, str] = Field(default_factory=dict, alias="debugInfo")


class GreetingResponse(BaseModel):
    """Response shared by the complex and simple greeting endpoints."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    message: str
    processing_metadata: ProcessingMetadata = Field(alias="processingMetadata")
    status: ResponseStatus
    applied_transformations: list[str] = Field(alias="appliedTransformations")
    additional_data: dict[str, Any] = Field(default_factory=dict, alias="additionalData")
    response_timestamp: datetime = Field(alias="responseTimestamp")
