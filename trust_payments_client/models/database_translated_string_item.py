from typing import Union

from attrs import define as _attrs_define

from ..types import Unset
from ._base import Model, model_field


@_attrs_define
class DatabaseTranslatedStringItem(Model):
    """
    Attributes:
        language (Union[Unset, str]): IETF language tag, e.g. ``en-US``.
        language_code (Union[Unset, str]): Two letter language code.
        translation (Union[Unset, str]):
    """

    language: Union[Unset, str] = model_field()
    language_code: Union[Unset, str] = model_field("languageCode")
    translation: Union[Unset, str] = model_field()
