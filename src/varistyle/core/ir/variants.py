"""
Variant descriptor IR types.

A VariantDescriptor is the static configuration for one presentation
primitive: unconditional base tokens followed by an ordered set of axes,
each mapping value names to the tokens that value contributes.

Tokens are opaque strings (Tailwind utility classes in the built-in
primitives). Token lists may be declared as one whitespace-separated
string or as a list of such strings; both are normalized to a tuple of
single tokens in declared order.

Mapping fields are stored as read-only views over private copies, so a
built descriptor cannot change and is hashable.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

TokenSpec = str | Iterable[str] | None


def split_tokens(value: TokenSpec) -> tuple[str, ...]:
    """Normalize a token declaration into a tuple of single tokens.

    Examples:
        >>> split_tokens("h-8 px-3")
        ('h-8', 'px-3')

        >>> split_tokens(["bg-white text-gray-900", "shadow-sm"])
        ('bg-white', 'text-gray-900', 'shadow-sm')
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    tokens: list[str] = []
    for entry in value:
        tokens.extend(str(entry).split())
    return tuple(tokens)


class Axis(BaseModel):
    """
    A named dimension of visual variation.

    Example:
        Axis(
            name="size",
            values={"sm": "h-8 px-3", "lg": "h-12 px-6"},
            default_value="sm",
        )
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Axis name, unique within a descriptor")
    values: Mapping[str, tuple[str, ...]] = Field(
        description="Value name to ordered tokens, in declaration order"
    )
    default_value: str = Field(description="Value used when the caller selects nothing")

    @field_validator("values", mode="before")
    @classmethod
    def _normalize_values(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {name: split_tokens(tokens) for name, tokens in value.items()}

    @field_validator("values")
    @classmethod
    def _freeze_values(
        cls, value: Mapping[str, tuple[str, ...]]
    ) -> Mapping[str, tuple[str, ...]]:
        return MappingProxyType(dict(value))

    @field_serializer("values")
    def _dump_values(self, value: Mapping[str, tuple[str, ...]]) -> dict[str, tuple[str, ...]]:
        return dict(value)

    @model_validator(mode="after")
    def _check_default(self) -> Axis:
        if not self.values:
            raise ValueError(f"axis '{self.name}' declares no values")
        if self.default_value not in self.values:
            raise ValueError(
                f"default '{self.default_value}' is not a value of axis '{self.name}' "
                f"(expected one of: {', '.join(self.values)})"
            )
        return self

    @property
    def value_names(self) -> tuple[str, ...]:
        """Value names in declaration order."""
        return tuple(self.values)

    def has_value(self, value_name: str) -> bool:
        """Check whether the axis declares a value."""
        return value_name in self.values

    def __hash__(self) -> int:
        return hash((self.name, tuple(self.values.items()), self.default_value))


class VariantDescriptor(BaseModel):
    """
    Static, validated configuration for one presentation primitive.

    Axes are ordered; their order fixes the order of resolved tokens.
    ``defaults`` mirrors each axis's own ``default_value`` and is checked
    against it on construction.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Primitive name (button, badge, ...)")
    base_tokens: tuple[str, ...] = Field(
        default=(), description="Tokens applied unconditionally, first in output"
    )
    axes: tuple[Axis, ...] = Field(description="Axes in declaration order")
    defaults: Mapping[str, str] = Field(description="Axis name to default value name")

    @field_validator("base_tokens", mode="before")
    @classmethod
    def _normalize_base(cls, value: Any) -> Any:
        if value is None or isinstance(value, str | list | tuple):
            return split_tokens(value)
        return value

    @field_validator("defaults")
    @classmethod
    def _freeze_defaults(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("defaults")
    def _dump_defaults(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @model_validator(mode="after")
    def _check_axes(self) -> VariantDescriptor:
        if not self.axes:
            raise ValueError("descriptor declares no axes")

        seen: set[str] = set()
        for axis in self.axes:
            if axis.name in seen:
                raise ValueError(f"duplicate axis name '{axis.name}'")
            seen.add(axis.name)

        missing = [axis.name for axis in self.axes if axis.name not in self.defaults]
        if missing:
            raise ValueError(f"no default for axis: {', '.join(missing)}")

        extra = [name for name in self.defaults if name not in seen]
        if extra:
            raise ValueError(f"default given for undeclared axis: {', '.join(extra)}")

        for axis in self.axes:
            if self.defaults[axis.name] != axis.default_value:
                raise ValueError(
                    f"default '{self.defaults[axis.name]}' for axis '{axis.name}' "
                    f"disagrees with the axis default '{axis.default_value}'"
                )
        return self

    def __hash__(self) -> int:
        return hash((self.name, self.base_tokens, self.axes, tuple(self.defaults.items())))

    @property
    def axis_names(self) -> tuple[str, ...]:
        """Axis names in declaration order."""
        return tuple(axis.name for axis in self.axes)

    def get_axis(self, name: str) -> Axis | None:
        """Get axis by name."""
        for axis in self.axes:
            if axis.name == name:
                return axis
        return None

    def default_tokens(self) -> list[str]:
        """Tokens produced when nothing is selected and nothing is appended."""
        tokens = list(self.base_tokens)
        for axis in self.axes:
            tokens.extend(axis.values[axis.default_value])
        return tokens

    def __call__(
        self,
        class_name: str | Iterable[str] | None = None,
        **selection: str | None,
    ) -> str:
        """Resolve to a class string, e.g. ``BUTTON(variant="ghost", class_name="w-full")``."""
        from varistyle.core.resolver import resolve_class_name

        return resolve_class_name(self, selection, class_name)
