"""Validation of external payloads."""

from typing import Annotated, Any, Type, TypeVar

from pydantic import AfterValidator, BaseModel, StringConstraints, ValidationError

from errors import InvalidInputError

ModelT = TypeVar("ModelT", bound=BaseModel)


def describe_validation_error(error: ValidationError) -> str:
    """Flatten pydantic's error list into one user-safe line."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)


def parse(model: Type[ModelT], data: Any) -> ModelT:
    """Validate ``data`` into ``model``.

    Args:
        model: Pydantic model class to build.
        data: Mapping of raw input values.

    Returns:
        The validated model instance.

    Raises:
        InvalidInputError: If validation fails.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidInputError(describe_validation_error(e)) from e


# Strings that must carry content once surrounding whitespace is removed
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Kept exactly as given, but must contain something besides whitespace
NonBlankStr = Annotated[str, StringConstraints(min_length=1), AfterValidator(_not_blank)]
