from typing import Union

from attrs import define as _attrs_define

from ..models.refund_type import RefundType
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class RefundCreate(Model):
    """
    Attributes:
        amount (Union[Unset, float]):
        external_id (Union[Unset, str]):
        merchant_reference (Union[Unset, str]):
        transaction (Union[Unset, int]): ID of the transaction to refund.
        type_ (Union[Unset, RefundType]):
    """

    amount: Union[Unset, float] = model_field()
    external_id: Union[Unset, str] = model_field("externalId")
    merchant_reference: Union[Unset, str] = model_field("merchantReference")
    transaction: Union[Unset, int] = model_field(format="int64")
    type_: Union[Unset, RefundType] = model_field()
