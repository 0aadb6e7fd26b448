"""Request body shapes checked at the HTTP boundary.

Handlers call `load` before touching a payload, so the core components
only ever see well-formed, present fields.
"""
from typing import Any, Type, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from .errors import ValidationError

SchemaT = TypeVar('SchemaT', bound=BaseModel)


class Credentials(BaseModel):
    model_config = ConfigDict(extra='ignore')

    email: str = Field(min_length=1, examples=['ash@example.com'])
    password: str = Field(min_length=1)


class CatchRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: str = Field(min_length=1, examples=['pikachu'])


def load(schema: Type[SchemaT], payload: Any, message: str) -> SchemaT:
    """Validate `payload` against `schema`, raising `ValidationError(message)` on any mismatch."""
    if not isinstance(payload, dict):
        raise ValidationError('Invalid JSON body')
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError:
        raise ValidationError(message)
