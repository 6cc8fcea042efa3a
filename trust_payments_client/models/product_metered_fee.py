from typing import Union

from attrs import define as _attrs_define

from ..models.database_translated_string import DatabaseTranslatedString
from ..models.product_fee_type import ProductFeeType
from ..models.product_metered_tier_pricing import ProductMeteredTierPricing
from ..models.subscription_metric import SubscriptionMetric
from ..models.subscription_product_component import SubscriptionProductComponent
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class ProductMeteredFee(Model):
    """
    Attributes:
        component (Union[Unset, SubscriptionProductComponent]):
        description (Union[Unset, DatabaseTranslatedString]): The description of a component fee describes the fee
            to the subscriber. The description may be shown in documents or on certain user interfaces.
        id (Union[Unset, int]): A unique identifier for the object.
        linked_space_id (Union[Unset, int]): The ID of the space this object belongs to.
        metric (Union[Unset, SubscriptionMetric]):
        name (Union[Unset, DatabaseTranslatedString]): The name of the fee should describe for the subscriber in few
            words for what the fee is for.
        tier_pricing (Union[Unset, ProductMeteredTierPricing]): The tier pricing determines the calculation method
            of the tiers. The prices of the different tiers can be applied in different ways.
        type_ (Union[Unset, ProductFeeType]):
        version (Union[Unset, int]): The version is used for optimistic locking and incremented whenever the object
            is updated.
    """

    component: Union[Unset, SubscriptionProductComponent] = model_field()
    description: Union[Unset, DatabaseTranslatedString] = model_field()
    id: Union[Unset, int] = model_field(format="int64")
    linked_space_id: Union[Unset, int] = model_field("linkedSpaceId", format="int64")
    metric: Union[Unset, SubscriptionMetric] = model_field()
    name: Union[Unset, DatabaseTranslatedString] = model_field()
    tier_pricing: Union[Unset, ProductMeteredTierPricing] = model_field("tierPricing")
    type_: Union[Unset, ProductFeeType] = model_field()
    version: Union[Unset, int] = model_field(format="int32")
