"""Base model configuration for API response records."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class ResponseModel(BaseModel):
    """Frozen model that tolerates schema drift in API responses.

    Unknown fields are ignored and ``null`` values fall back to the field
    default, so missing data yields empty values instead of errors.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Replace JSON null with the field default."""
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )
        return value
