import datetime
from typing import Union

from attrs import define as _attrs_define

from ..models.refund_state import RefundState
from ..models.refund_type import RefundType
from ..models.transaction import Transaction
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class Refund(Model):
    """
    Attributes:
        amount (Union[Unset, float]):
        created_on (Union[Unset, datetime.datetime]):
        external_id (Union[Unset, str]): Unique per space; protects against refunding twice.
        id (Union[Unset, int]):
        linked_space_id (Union[Unset, int]):
        merchant_reference (Union[Unset, str]):
        state (Union[Unset, RefundState]):
        transaction (Union[Unset, Transaction]):
        type_ (Union[Unset, RefundType]):
        version (Union[Unset, int]):
    """

    amount: Union[Unset, float] = model_field()
    created_on: Union[Unset, datetime.datetime] = model_field("createdOn", format="date-time")
    external_id: Union[Unset, str] = model_field("externalId")
    id: Union[Unset, int] = model_field(format="int64")
    linked_space_id: Union[Unset, int] = model_field("linkedSpaceId", format="int64")
    merchant_reference: Union[Unset, str] = model_field("merchantReference")
    state: Union[Unset, RefundState] = model_field()
    transaction: Union[Unset, Transaction] = model_field()
    type_: Union[Unset, RefundType] = model_field()
    version: Union[Unset, int] = model_field(format="int32")
