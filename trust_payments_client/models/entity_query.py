from typing import Union

from attrs import define as _attrs_define

from ..models.entity_query_filter import EntityQueryFilter
from ..models.entity_query_order_by import EntityQueryOrderBy
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class EntityQuery(Model):
    """
    Attributes:
        filter_ (Union[Unset, EntityQueryFilter]):
        language (Union[Unset, str]):
        number_of_entities (Union[Unset, int]): At most 100 entities are returned per call.
        order_bys (Union[Unset, list[EntityQueryOrderBy]]):
        starting_entity (Union[Unset, int]):
    """

    filter_: Union[Unset, EntityQueryFilter] = model_field()
    language: Union[Unset, str] = model_field()
    number_of_entities: Union[Unset, int] = model_field("numberOfEntities", format="int32")
    order_bys: Union[Unset, list[EntityQueryOrderBy]] = model_field("orderBys")
    starting_entity: Union[Unset, int] = model_field("startingEntity", format="int32")
