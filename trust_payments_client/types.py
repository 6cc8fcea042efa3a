"""Contains some shared types for properties"""

from collections.abc import Mapping
from typing import BinaryIO, Generic, Literal, Optional, TypeVar, Union

from attrs import define


class Unset:
    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Unset = Unset()

FileJsonType = tuple[Optional[str], BinaryIO, Optional[str]]


@define
class File:
    """Contains information for file uploads and downloaded file responses

    Downloaded files live on disk at ``path``; the caller is responsible for closing
    ``payload`` and removing the file.
    """

    payload: BinaryIO
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    path: Optional[str] = None

    def to_tuple(self) -> FileJsonType:
        """Return a tuple representation that httpx will accept for multipart/form-data"""
        return self.file_name, self.payload, self.mime_type


T = TypeVar("T")


@define(frozen=True)
class ApiResponse(Generic[T]):
    """A response from an endpoint"""

    status_code: int
    headers: Mapping[str, str]
    data: Union[T, bytes, str, None]


__all__ = ["UNSET", "ApiResponse", "File", "FileJsonType", "Unset"]
