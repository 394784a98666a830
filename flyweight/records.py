r"""Intrinsic records (flyweights) and extrinsic contexts.

Both sides are frozen pydantic models. An `IntrinsicRecord` holds the
shareable attributes stored once per key in a `FlyweightCache`; an
`ExtrinsicContext` holds per-use data supplied by the caller at the point of
use and is never stored by the cache.

Example::

    car = CarModel.from_attributes(("Model S", "Tesla", "Electric"))
    print(render(car, CarUsage(registration_number="TS1234", owner="Alice")))
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Iterable, List, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from typing_extensions import Self

from .utils import InvalidAttributes, get_type_name

logger = logging.getLogger(__name__)

__all__ = [
    "IntrinsicRecord",
    "ExtrinsicContext",
    "CarModel",
    "CarUsage",
    "render",
]


def _field_title(model: type[BaseModel], name: str) -> str:
    info = model.model_fields[name]
    if info.title:
        return info.title
    return name.replace("_", " ").title()


class IntrinsicRecord(BaseModel):
    """Shared, immutable state of a flyweight.

    Subclasses declare their intrinsic attributes as fields; field order is the
    positional order used by `from_attributes` and `attributes`.
    """

    model_config = ConfigDict(frozen=True)

    display_name: ClassVar[str] = ""

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(cls.model_fields)

    @classmethod
    def label(cls) -> str:
        return cls.display_name or get_type_name(cls)

    @classmethod
    def from_attributes(cls, attributes: Iterable[Any], validate: bool = False) -> Self:
        """Build a record from a positional attribute tuple.

        With ``validate=False`` the values are stored as given, without any
        content checks. With ``validate=True`` they pass through the model's
        validators and a rejection raises `InvalidAttributes`.

        Raises:
            InvalidAttributes: on arity mismatch, or on validation failure when
                `validate` is set.
        """
        values = tuple(attributes)
        names = cls.field_names()
        if len(values) != len(names):
            raise InvalidAttributes(
                f"{cls.label()} takes {len(names)} attributes, got {len(values)}",
                [f"Pass attributes in order: {', '.join(names)}"],
                {
                    "record_type": get_type_name(cls),
                    "expected": len(names),
                    "received": len(values),
                },
            )
        data = dict(zip(names, values))
        if not validate:
            return cls.model_construct(**data)
        try:
            return cls(**data)
        except PydanticValidationError as e:
            raise InvalidAttributes(
                f"Invalid attributes for {cls.label()}: {values!r}",
                [
                    f"{'.'.join(map(str, err['loc']))}: {err['msg']}"
                    for err in e.errors()
                ],
                {"record_type": get_type_name(cls), "errors": e.error_count()},
            ) from e

    def attributes(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.field_names())

    def describe(self) -> List[str]:
        """Return ``"<Title>: <value>"`` lines for the intrinsic fields."""
        return [
            f"{_field_title(type(self), name)}: {getattr(self, name)}"
            for name in self.field_names()
        ]


class ExtrinsicContext(BaseModel):
    """Per-use state combined with a flyweight only at the moment of use."""

    model_config = ConfigDict(frozen=True)

    def describe(self) -> List[str]:
        return [
            f"{_field_title(type(self), name)}: {getattr(self, name)}"
            for name in type(self).model_fields
        ]


def render(handle: IntrinsicRecord, context: ExtrinsicContext) -> str:
    """Combine a shared record with per-use context into a details block.

    Pure: neither argument is modified and no cache is consulted.
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Rendering %r with %r", handle, context)
    lines = [f"{handle.label()} Details:"]
    lines.extend(handle.describe())
    lines.extend(context.describe())
    return "\n".join(lines)


# -----------------------------------------------------------------------------
# Car example
# -----------------------------------------------------------------------------


class CarModel(IntrinsicRecord):
    """Car data shared by every registration of the same model."""

    display_name: ClassVar[str] = "Car"

    model: str = Field(title="Model", min_length=1)
    brand: str = Field(title="Brand", min_length=1)
    engine_type: str = Field(title="Engine Type", min_length=1)


class CarUsage(ExtrinsicContext):
    """Registration-specific data for one car on the road."""

    registration_number: str = Field(title="Registration Number")
    owner: str = Field(title="Owner")
