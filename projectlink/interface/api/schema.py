"""Shared request body base for API routes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIRequestModel(BaseModel):
    """Request body accepting both camelCase and snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
