from __future__ import annotations

from typing import Any, Union

from attrs import define as _attrs_define

from ..models.criteria_operator import CriteriaOperator
from ..models.entity_query_filter_type import EntityQueryFilterType
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class EntityQueryFilter(Model):
    """A filter tree: ``LEAF`` filters compare ``field_name`` against ``value``, ``AND``/``OR`` filters combine
    their ``children``.

    Attributes:
        children (Union[Unset, list[EntityQueryFilter]]):
        field_name (Union[Unset, str]):
        operator (Union[Unset, CriteriaOperator]):
        type_ (Union[Unset, EntityQueryFilterType]):
        value (Union[Unset, Any]):
    """

    children: Union[Unset, list[EntityQueryFilter]] = model_field()
    field_name: Union[Unset, str] = model_field("fieldName")
    operator: Union[Unset, CriteriaOperator] = model_field()
    type_: Union[Unset, EntityQueryFilterType] = model_field()
    value: Union[Unset, Any] = model_field()
