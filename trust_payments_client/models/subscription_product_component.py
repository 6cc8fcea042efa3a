from typing import Union

from attrs import define as _attrs_define

from ..models.database_translated_string import DatabaseTranslatedString
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class SubscriptionProductComponent(Model):
    """
    Attributes:
        component_change_weight (Union[Unset, int]):
        default_component (Union[Unset, bool]):
        description (Union[Unset, DatabaseTranslatedString]):
        id (Union[Unset, int]):
        linked_space_id (Union[Unset, int]):
        maximal_quantity (Union[Unset, float]):
        minimal_quantity (Union[Unset, float]):
        name (Union[Unset, DatabaseTranslatedString]):
        quantity_step (Union[Unset, float]):
        sort_order (Union[Unset, int]):
        version (Union[Unset, int]):
    """

    component_change_weight: Union[Unset, int] = model_field("componentChangeWeight", format="int32")
    default_component: Union[Unset, bool] = model_field("defaultComponent")
    description: Union[Unset, DatabaseTranslatedString] = model_field()
    id: Union[Unset, int] = model_field(format="int64")
    linked_space_id: Union[Unset, int] = model_field("linkedSpaceId", format="int64")
    maximal_quantity: Union[Unset, float] = model_field("maximalQuantity")
    minimal_quantity: Union[Unset, float] = model_field("minimalQuantity")
    name: Union[Unset, DatabaseTranslatedString] = model_field()
    quantity_step: Union[Unset, float] = model_field("quantityStep")
    sort_order: Union[Unset, int] = model_field("sortOrder", format="int32")
    version: Union[Unset, int] = model_field(format="int32")
