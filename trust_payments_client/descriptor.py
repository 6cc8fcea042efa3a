"""Per-model field metadata driving generic (de)serialization.

Model classes are attrs classes whose fields carry their JSON wire name and an
optional format hint in ``attrs`` field metadata. :func:`describe` turns that into
a read-only :class:`TypeDescriptor`, built once per class and cached for the life
of the process.
"""

from functools import lru_cache
from typing import Any, Optional

import attrs
from attrs import define

WIRE_NAME = "wire_name"
FORMAT = "format"


@define(frozen=True)
class FieldDescriptor:
    name: str
    wire_name: str
    declared_type: Any
    format: Optional[str] = None


@define(frozen=True)
class TypeDescriptor:
    model_type: type
    fields: tuple[FieldDescriptor, ...]
    discriminator: Optional[str] = None

    def field(self, key: str) -> Optional[FieldDescriptor]:
        """Find a field by attribute name or wire name."""
        for field_descriptor in self.fields:
            if key in (field_descriptor.name, field_descriptor.wire_name):
                return field_descriptor
        return None

    @property
    def wire_names(self) -> list[str]:
        return [f.wire_name for f in self.fields]


def is_model_type(candidate: Any) -> bool:
    return isinstance(candidate, type) and attrs.has(candidate) and hasattr(candidate, "subtype")


def _default_wire_name(name: str) -> str:
    # ``type_`` and friends avoid shadowing builtins
    return name[:-1] if name.endswith("_") else name


@lru_cache(maxsize=None)
def describe(model_type: type) -> TypeDescriptor:
    """Build the descriptor for ``model_type``.

    Raises:
        TypeError: If ``model_type`` is not an attrs class.
    """
    if not attrs.has(model_type):
        raise TypeError(f"{model_type!r} is not a model class")

    attrs.resolve_types(model_type)
    fields = tuple(
        FieldDescriptor(
            name=attribute.name,
            wire_name=attribute.metadata.get(WIRE_NAME) or _default_wire_name(attribute.name),
            declared_type=attribute.type,
            format=attribute.metadata.get(FORMAT),
        )
        for attribute in attrs.fields(model_type)
        if attribute.init
    )
    return TypeDescriptor(
        model_type=model_type,
        fields=fields,
        discriminator=getattr(model_type, "discriminator", None),
    )


__all__ = ["FORMAT", "WIRE_NAME", "FieldDescriptor", "TypeDescriptor", "describe", "is_model_type"]
