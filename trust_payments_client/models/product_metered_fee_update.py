from typing import Union

from attrs import define as _attrs_define

from ..models.product_metered_tier_pricing import ProductMeteredTierPricing
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class ProductMeteredFeeUpdate(Model):
    """Used to create a metered fee (leave ``id`` and ``version`` unset) or to update one.

    Attributes:
        id (Union[Unset, int]): The ID is the primary key of the entity.
        version (Union[Unset, int]): The version number indicates the version of the entity. The version is
            incremented whenever the entity is changed.
        component (Union[Unset, int]): ID of the product component.
        description (Union[Unset, dict[str, str]]): Translations keyed by language.
        metric (Union[Unset, int]): ID of the subscription metric.
        name (Union[Unset, dict[str, str]]): Translations keyed by language.
        tier_pricing (Union[Unset, ProductMeteredTierPricing]):
    """

    id: Union[Unset, int] = model_field(format="int64")
    version: Union[Unset, int] = model_field(format="int64")
    component: Union[Unset, int] = model_field(format="int64")
    description: Union[Unset, dict[str, str]] = model_field()
    metric: Union[Unset, int] = model_field(format="int64")
    name: Union[Unset, dict[str, str]] = model_field()
    tier_pricing: Union[Unset, ProductMeteredTierPricing] = model_field("tierPricing")
