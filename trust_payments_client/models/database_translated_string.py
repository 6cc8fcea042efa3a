from typing import Union

from attrs import define as _attrs_define

from ..models.database_translated_string_item import DatabaseTranslatedStringItem
from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class DatabaseTranslatedString(Model):
    """
    Attributes:
        available_languages (Union[Unset, list[str]]):
        display_name (Union[Unset, str]):
        items (Union[Unset, list[DatabaseTranslatedStringItem]]):
    """

    available_languages: Union[Unset, list[str]] = model_field("availableLanguages")
    display_name: Union[Unset, str] = model_field("displayName")
    items: Union[Unset, list[DatabaseTranslatedStringItem]] = model_field()
