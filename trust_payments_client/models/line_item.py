from typing import Union

from attrs import define as _attrs_define

from ..models.line_item_type import LineItemType
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class LineItem(Model):
    """
    Attributes:
        amount_including_tax (Union[Unset, float]):
        name (Union[Unset, str]):
        quantity (Union[Unset, float]):
        shipping_required (Union[Unset, bool]):
        sku (Union[Unset, str]):
        type_ (Union[Unset, LineItemType]):
        unique_id (Union[Unset, str]): Identifies the line item within the transaction.
    """

    amount_including_tax: Union[Unset, float] = model_field("amountIncludingTax")
    name: Union[Unset, str] = model_field()
    quantity: Union[Unset, float] = model_field()
    shipping_required: Union[Unset, bool] = model_field("shippingRequired")
    sku: Union[Unset, str] = model_field()
    type_: Union[Unset, LineItemType] = model_field()
    unique_id: Union[Unset, str] = model_field("uniqueId")
