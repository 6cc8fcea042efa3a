import datetime
from typing import Union

from attrs import define as _attrs_define

from ..models.creation_entity_state import CreationEntityState
from ..models.database_translated_string import DatabaseTranslatedString
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class SubscriptionMetric(Model):
    """A metric measures the usage a metered fee is charged for.

    Attributes:
        description (Union[Unset, DatabaseTranslatedString]):
        id (Union[Unset, int]): A unique identifier for the object.
        linked_space_id (Union[Unset, int]): The ID of the space this object belongs to.
        name (Union[Unset, DatabaseTranslatedString]):
        planned_purge_date (Union[Unset, datetime.datetime]): The date and time when the object is planned to be
            permanently removed.
        state (Union[Unset, CreationEntityState]):
        version (Union[Unset, int]): The version is used for optimistic locking and incremented whenever the object
            is updated.
    """

    description: Union[Unset, DatabaseTranslatedString] = model_field()
    id: Union[Unset, int] = model_field(format="int64")
    linked_space_id: Union[Unset, int] = model_field("linkedSpaceId", format="int64")
    name: Union[Unset, DatabaseTranslatedString] = model_field()
    planned_purge_date: Union[Unset, datetime.datetime] = model_field("plannedPurgeDate", format="date-time")
    state: Union[Unset, CreationEntityState] = model_field()
    version: Union[Unset, int] = model_field(format="int32")
