from abc import ABC, abstractmethod
from typing import Any, Type

from annotated_types import Ge, Le
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.fields import FieldInfo

from imageservice.domain.errors import InvalidParameter


def _describe_bounds(field: FieldInfo) -> str:
    lower = upper = None
    for constraint in field.metadata:
        if isinstance(constraint, Ge):
            lower = constraint.ge
        elif isinstance(constraint, Le):
            upper = constraint.le
    if lower is not None and upper is not None:
        return f"between {lower} and {upper}"
    if lower is not None:
        return f"greater than or equal to {lower}"
    if upper is not None:
        return f"less than or equal to {upper}"
    return "valid"


def _field_error(cls: Type["BaseValue"], error: dict) -> InvalidParameter:
    """Build an InvalidParameter from a single pydantic error entry."""
    field_name = str(error["loc"][0]) if error["loc"] else ""
    field = cls.model_fields.get(field_name)
    if field is None or error["type"].endswith("_type"):
        bounds = error["msg"].removeprefix("Input should be ")
    else:
        bounds = _describe_bounds(field)
    name = f"{cls.__name__}.{field_name}" if field_name else cls.__name__
    return InvalidParameter(name, bounds, error.get("input"))


class BaseValue(BaseModel, ABC):
    """
    Immutable, self-validating filter argument.

    Fields may be given positionally in declaration order. Any violated
    constraint is raised as :class:`InvalidParameter`.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
    )

    def __init__(self, *args: Any, **data: Any):
        cls = type(self)
        fields = tuple(cls.model_fields)
        if len(args) > len(fields):
            raise TypeError(
                f"{cls.__name__} takes at most {len(fields)} positional arguments, {len(args)} given"
            )
        for name, value in zip(fields, args):
            if name in data:
                raise TypeError(f"{cls.__name__} got multiple values for argument '{name}'")
            data[name] = value
        try:
            super().__init__(**data)
        except ValidationError as exc:
            error = exc.errors()[0]
            # validators raise InvalidParameter themselves; pydantic wraps it
            cause = error.get("ctx", {}).get("error")
            if isinstance(cause, InvalidParameter):
                raise cause from None
            if error["type"] == "missing":
                raise TypeError(
                    f"{cls.__name__} missing required argument '{error['loc'][0]}'"
                ) from None
            if error["type"] == "extra_forbidden":
                raise TypeError(
                    f"{cls.__name__} got an unexpected keyword argument '{error['loc'][0]}'"
                ) from None
            raise _field_error(cls, error) from exc

    @abstractmethod
    def to_string(self) -> str:
        """Canonical encoding used as the filter argument."""

    def __str__(self) -> str:
        return self.to_string()
