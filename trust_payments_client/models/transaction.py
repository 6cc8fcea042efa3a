import datetime
from typing import Union

from attrs import define as _attrs_define

from ..models.line_item import LineItem
from ..models.transaction_state import TransactionState
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class Transaction(Model):
    """
    Attributes:
        authorization_amount (Union[Unset, float]):
        completed_on (Union[Unset, datetime.datetime]):
        created_on (Union[Unset, datetime.datetime]): The date and time when the object was created.
        currency (Union[Unset, str]):
        customer_email_address (Union[Unset, str]):
        id (Union[Unset, int]): A unique identifier for the object.
        language (Union[Unset, str]):
        line_items (Union[Unset, list[LineItem]]):
        linked_space_id (Union[Unset, int]): The ID of the space this object belongs to.
        merchant_reference (Union[Unset, str]):
        state (Union[Unset, TransactionState]):
        version (Union[Unset, int]): The version is used for optimistic locking and incremented whenever the object
            is updated.
    """

    authorization_amount: Union[Unset, float] = model_field("authorizationAmount")
    completed_on: Union[Unset, datetime.datetime] = model_field("completedOn", format="date-time")
    created_on: Union[Unset, datetime.datetime] = model_field("createdOn", format="date-time")
    currency: Union[Unset, str] = model_field()
    customer_email_address: Union[Unset, str] = model_field("customerEmailAddress")
    id: Union[Unset, int] = model_field(format="int64")
    language: Union[Unset, str] = model_field()
    line_items: Union[Unset, list[LineItem]] = model_field("lineItems")
    linked_space_id: Union[Unset, int] = model_field("linkedSpaceId", format="int64")
    merchant_reference: Union[Unset, str] = model_field("merchantReference")
    state: Union[Unset, TransactionState] = model_field()
    version: Union[Unset, int] = model_field(format="int32")
