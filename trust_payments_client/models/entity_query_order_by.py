from typing import Union

from attrs import define as _attrs_define

from ..models.entity_query_order_by_type import EntityQueryOrderByType
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class EntityQueryOrderBy(Model):
    """
    Attributes:
        field_name (Union[Unset, str]):
        sorting (Union[Unset, EntityQueryOrderByType]):
    """

    field_name: Union[Unset, str] = model_field("fieldName")
    sorting: Union[Unset, EntityQueryOrderByType] = model_field()
