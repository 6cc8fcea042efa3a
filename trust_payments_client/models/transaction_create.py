from typing import Union

from attrs import define as _attrs_define

from ..models.line_item import LineItem
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class TransactionCreate(Model):
    """
    Attributes:
        auto_confirmation_enabled (Union[Unset, bool]):
        currency (Union[Unset, str]):
        customer_email_address (Union[Unset, str]):
        failed_url (Union[Unset, str]): The customer is redirected here when the transaction fails.
        language (Union[Unset, str]):
        line_items (Union[Unset, list[LineItem]]):
        merchant_reference (Union[Unset, str]):
        success_url (Union[Unset, str]): The customer is redirected here when the transaction succeeds.
    """

    auto_confirmation_enabled: Union[Unset, bool] = model_field("autoConfirmationEnabled")
    currency: Union[Unset, str] = model_field()
    customer_email_address: Union[Unset, str] = model_field("customerEmailAddress")
    failed_url: Union[Unset, str] = model_field("failedUrl")
    language: Union[Unset, str] = model_field()
    line_items: Union[Unset, list[LineItem]] = model_field("lineItems")
    merchant_reference: Union[Unset, str] = model_field("merchantReference")
    success_url: Union[Unset, str] = model_field("successUrl")
