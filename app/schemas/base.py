"""Shared schema base: camelCase JSON aliases, snake_case accepted on input."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request/response bodies. Serializes with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class PaginationResponse(CamelModel):
    """Page metadata for list endpoints."""

    page: int
    limit: int
    total: int
    total_pages: int = Field(..., description="ceil(total / limit)")
