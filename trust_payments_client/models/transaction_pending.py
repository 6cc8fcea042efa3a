from typing import Union

from attrs import define as _attrs_define

from ..models.line_item import LineItem
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class TransactionPending(Model):
    """Changes to a transaction that has not been confirmed yet. ``id`` and ``version`` are required by the API.

    Attributes:
        id (Union[Unset, int]):
        version (Union[Unset, int]): Must match the current version, otherwise the update is rejected with 409.
        currency (Union[Unset, str]):
        customer_email_address (Union[Unset, str]):
        language (Union[Unset, str]):
        line_items (Union[Unset, list[LineItem]]):
        merchant_reference (Union[Unset, str]):
    """

    id: Union[Unset, int] = model_field(format="int64")
    version: Union[Unset, int] = model_field(format="int64")
    currency: Union[Unset, str] = model_field()
    customer_email_address: Union[Unset, str] = model_field("customerEmailAddress")
    language: Union[Unset, str] = model_field()
    line_items: Union[Unset, list[LineItem]] = model_field("lineItems")
    merchant_reference: Union[Unset, str] = model_field("merchantReference")
