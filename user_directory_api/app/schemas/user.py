"""
Pydantic models for user data.

``UserPayload`` validates the body of create and update requests and
``UserRead`` is the representation returned by the API.  On the wire
the name travels as ``nombre``; ``name`` is accepted as an alias on
input.

Clients expect a single readable message when validation fails rather
than pydantic's list of errors, so ``validation_message`` renders the
first error in the wording the API has always used, e.g.
``"nombre" length must be at least 3 characters long``.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

NAME_FIELD = "nombre"
NAME_MIN_LENGTH = 3


class UserPayload(BaseModel):
    """Request body for creating or renaming a user."""

    name: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        validation_alias=AliasChoices(NAME_FIELD, "name"),
        examples=["Eva"],
    )


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., examples=[5])
    name: str = Field(..., alias=NAME_FIELD, examples=["Eva"])


def validation_message(exc: ValidationError) -> str:
    """Return a human readable message for the first validation error."""
    errors = exc.errors()
    if not errors:
        return f'"{NAME_FIELD}" is invalid'
    error = errors[0]
    kind = error.get("type")
    if kind == "missing":
        return f'"{NAME_FIELD}" is required'
    if kind == "string_type":
        return f'"{NAME_FIELD}" must be a string'
    if kind == "string_too_short":
        if error.get("input") == "":
            return f'"{NAME_FIELD}" is not allowed to be empty'
        min_length = error.get("ctx", {}).get("min_length", NAME_MIN_LENGTH)
        return f'"{NAME_FIELD}" length must be at least {min_length} characters long'
    return f'"{NAME_FIELD}" {error.get("msg", "is invalid")}'
