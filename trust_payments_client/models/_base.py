import json
from collections.abc import Mapping
from typing import Any, ClassVar, Optional, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..descriptor import FORMAT, WIRE_NAME, TypeDescriptor, describe
from ..serializer import ObjectSerializer
from ..types import UNSET, Unset

T = TypeVar("T", bound="Model")


def model_field(wire_name: Optional[str] = None, *, format: Optional[str] = None) -> Any:
    """Declare an optional model attribute with its JSON wire name and format hint."""
    return _attrs_field(default=UNSET, kw_only=True, metadata={WIRE_NAME: wire_name, FORMAT: format})


@_attrs_define
class Model:
    """Base class of every API model.

    Subclasses declare their attributes with :func:`model_field`. Item access accepts either
    the attribute name or the wire name and only reaches declared fields.
    """

    discriminator: ClassVar[Optional[str]] = None
    _subtypes: ClassVar[dict[type, dict[str, type]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # attrs rebuilds slotted classes, the rebuilt class registers last
        for base in cls.__mro__[1:]:
            if "discriminator" in vars(base) and base.discriminator is not None:
                Model._subtypes.setdefault(base, {})[cls.__name__] = cls

    @classmethod
    def subtype(cls, name: str) -> type:
        """Return the subclass called ``name`` below the discriminated base of ``cls``, or ``cls``."""
        for base in cls.__mro__:
            candidate = Model._subtypes.get(base, {}).get(name)
            if candidate is not None and issubclass(candidate, cls):
                return candidate
        return cls

    @classmethod
    def descriptor(cls) -> TypeDescriptor:
        return describe(cls)

    def to_dict(self) -> dict[str, Any]:
        return ObjectSerializer().sanitize_for_serialization(self)

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        return ObjectSerializer().deserialize(src_dict, cls)

    @property
    def model_name(self) -> str:
        return type(self).__name__

    def _field_name(self, key: str) -> str:
        field = self.descriptor().field(key)
        if field is None:
            raise KeyError(key)
        return field.name

    def __getitem__(self, key: str) -> Any:
        return getattr(self, self._field_name(key))

    def __setitem__(self, key: str, value: Any) -> None:
        setattr(self, self._field_name(key), value)

    def __delitem__(self, key: str) -> None:
        setattr(self, self._field_name(key), UNSET)

    def __contains__(self, key: str) -> bool:
        field = self.descriptor().field(key)
        return field is not None and not isinstance(getattr(self, field.name), Unset)

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=4)
