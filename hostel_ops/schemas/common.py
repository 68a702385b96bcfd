# hostel_ops/schemas/common.py
"""
Base schema classes with common configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

__all__ = [
    "BaseSchema",
    "BaseCreateSchema",
    "BaseResponseSchema",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    Fields are exposed to clients in camelCase (``complaintType``) while
    snake_case input is still accepted.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=False,
        str_strip_whitespace=True,
    )


class BaseCreateSchema(BaseSchema):
    """Base schema for request bodies that create or mutate records."""
    pass


class BaseResponseSchema(BaseSchema):
    """Base schema for API responses."""
    pass
