"""Conversion between typed values and JSON-compatible structures.

Models are walked through their :class:`~trust_payments_client.descriptor.TypeDescriptor`,
so no model carries hand-written conversion code. Format hints (``int32``, ``int64``,
``date``, ``date-time``, ``byte``) come from field metadata only.
"""

import base64
import binascii
import datetime
import enum
import logging
import os
import re
import tempfile
import types
from collections.abc import Mapping
from typing import Any, Optional, Union, get_args, get_origin

from attrs import define
from dateutil.parser import isoparse

from .descriptor import describe, is_model_type
from .errors import SerializationError
from .types import File, Unset

logger = logging.getLogger(__name__)

_UNION_TYPES: tuple[Any, ...] = (Union, getattr(types, "UnionType", Union))

_INT_RANGES = {
    "int32": (-(2**31), 2**31 - 1),
    "int64": (-(2**63), 2**63 - 1),
}

_COLLECTION_SEPARATORS = {
    "csv": ",",
    "ssv": " ",
    "tsv": "\t",
    "pipes": "|",
}

_FILENAME_PATTERN = re.compile(r"filename=['\"]?([^'\";]+)['\"]?", re.IGNORECASE)


def format_datetime(value: datetime.datetime) -> str:
    """Render ``value`` as ``YYYY-MM-DDTHH:MM:SS.mmm+HH:MM``; naive values are taken as UTC."""
    if value.utcoffset() is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return value.isoformat(timespec="milliseconds")


def _header_value(headers: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    if not headers:
        return None
    for key, value in headers.items():
        if key.lower() == name.lower():
            return value
    return None


@define
class ObjectSerializer:
    """Serializes models to JSON-ready data and back.

    Attributes:
        temp_folder_path (Optional[str]): Directory in which downloaded files are materialized.
            Defaults to the system temporary directory.
        debugging (bool): Emit debug log records while deserializing.
    """

    temp_folder_path: Optional[str] = None
    debugging: bool = False

    def get_temp_folder_path(self) -> str:
        return self.temp_folder_path or tempfile.gettempdir()

    # Serialization

    def sanitize_for_serialization(self, value: Any, format: Optional[str] = None) -> Any:
        """Convert ``value`` into data ``json.dumps`` accepts.

        ``UNSET`` model fields are dropped, ``None`` is kept as ``null``.

        Raises:
            SerializationError: If the value (or a nested value) has no JSON representation.
        """
        if value is None or isinstance(value, Unset):
            return value
        if isinstance(value, enum.Enum):
            return value.value
        if isinstance(value, (bool, str, float)):
            return value
        if isinstance(value, int):
            self._check_int_format(value, format)
            return value
        if isinstance(value, datetime.datetime):
            if format == "date":
                return value.date().isoformat()
            return format_datetime(value)
        if isinstance(value, datetime.date):
            return value.isoformat()
        if isinstance(value, (bytes, bytearray)):
            return base64.b64encode(bytes(value)).decode("ascii")
        if is_model_type(type(value)):
            return self._sanitize_model(value)
        if isinstance(value, Mapping):
            return {
                str(key): self.sanitize_for_serialization(item, format)
                for key, item in value.items()
                if not isinstance(item, Unset)
            }
        if isinstance(value, (list, tuple)):
            return [self.sanitize_for_serialization(item, format) for item in value]

        raise SerializationError(f"Cannot serialize a value of type {type(value).__name__}")

    def _sanitize_model(self, model: Any) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for field in describe(type(model)).fields:
            field_value = getattr(model, field.name)
            if isinstance(field_value, Unset):
                continue
            try:
                result[field.wire_name] = self.sanitize_for_serialization(field_value, field.format)
            except SerializationError as exc:
                raise SerializationError(f"{type(model).__name__}.{field.name}: {exc}") from exc
        return result

    @staticmethod
    def _check_int_format(value: int, format: Optional[str]) -> None:
        bounds = _INT_RANGES.get(format or "")
        if bounds is not None and not bounds[0] <= value <= bounds[1]:
            raise SerializationError(f"{value} is out of range for format {format}")

    # Deserialization

    def deserialize(
        self,
        data: Any,
        target_type: Any,
        headers: Optional[Mapping[str, str]] = None,
        format: Optional[str] = None,
    ) -> Any:
        """Convert decoded JSON ``data`` into an instance of ``target_type``.

        ``target_type`` may be a model class, an enum, a primitive, ``datetime.datetime``,
        ``datetime.date``, ``bytes``, ``File``, ``list[T]``, ``dict[str, T]`` or a ``Union``.

        Raises:
            SerializationError: If the shape of ``data`` does not match ``target_type``.
        """
        if target_type is File:
            return self.deserialize_file(data, headers)
        if data is None or isinstance(data, Unset):
            return data
        if target_type is None or target_type is Any or target_type is object:
            return data

        origin = get_origin(target_type)
        if origin in _UNION_TYPES:
            return self._deserialize_union(data, target_type, format)
        if origin is list:
            if not isinstance(data, list):
                raise SerializationError(f"Expected a JSON array, got {type(data).__name__}")
            (item_type,) = get_args(target_type) or (Any,)
            return [self.deserialize(item, item_type, format=format) for item in data]
        if origin in (dict, Mapping):
            if not isinstance(data, Mapping):
                raise SerializationError(f"Expected a JSON object, got {type(data).__name__}")
            args = get_args(target_type)
            value_type = args[1] if len(args) == 2 else Any
            return {key: self.deserialize(item, value_type, format=format) for key, item in data.items()}

        if not isinstance(target_type, type):
            raise SerializationError(f"Unsupported target type {target_type!r}")
        if is_model_type(target_type):
            return self._deserialize_model(data, target_type)
        if issubclass(target_type, enum.Enum):
            try:
                return target_type(data)
            except ValueError as exc:
                raise SerializationError(f"{data!r} is not a valid {target_type.__name__}") from exc
        if target_type is datetime.datetime or target_type is datetime.date:
            return self._deserialize_date(data, target_type)
        if target_type is bytes:
            return self._deserialize_bytes(data)
        if target_type is bool:
            if not isinstance(data, bool):
                raise SerializationError(f"Expected a boolean, got {type(data).__name__}")
            return data
        if target_type is int:
            if isinstance(data, bool) or not isinstance(data, int):
                raise SerializationError(f"Expected an integer, got {type(data).__name__}")
            self._check_int_format(data, format)
            return data
        if target_type is float:
            if isinstance(data, bool) or not isinstance(data, (int, float)):
                raise SerializationError(f"Expected a number, got {type(data).__name__}")
            return float(data)
        if target_type is str:
            if not isinstance(data, str):
                raise SerializationError(f"Expected a string, got {type(data).__name__}")
            return data

        raise SerializationError(f"Unsupported target type {target_type!r}")

    def _deserialize_union(self, data: Any, target_type: Any, format: Optional[str]) -> Any:
        candidates = [arg for arg in get_args(target_type) if arg not in (type(None), Unset)]
        if len(candidates) == 1:
            return self.deserialize(data, candidates[0], format=format)

        failures = []
        for candidate in candidates:
            try:
                return self.deserialize(data, candidate, format=format)
            except SerializationError as exc:
                failures.append(str(exc))
        raise SerializationError(f"{data!r} matches none of {candidates!r}: {'; '.join(failures)}")

    def _deserialize_model(self, data: Any, model_type: type) -> Any:
        if not isinstance(data, Mapping):
            raise SerializationError(f"Expected a JSON object for {model_type.__name__}, got {type(data).__name__}")

        descriptor = describe(model_type)
        if descriptor.discriminator is not None:
            discriminator_value = data.get(descriptor.discriminator)
            if isinstance(discriminator_value, str):
                model_type = model_type.subtype(discriminator_value)
                descriptor = describe(model_type)

        kwargs: dict[str, Any] = {}
        for field in descriptor.fields:
            if field.wire_name not in data:
                continue
            try:
                kwargs[field.name] = self.deserialize(data[field.wire_name], field.declared_type, format=field.format)
            except SerializationError as exc:
                raise SerializationError(f"{model_type.__name__}.{field.name}: {exc}") from exc

        if self.debugging:
            logger.debug("Deserialized %s (fields: %s)", model_type.__name__, ", ".join(kwargs))
        return model_type(**kwargs)

    @staticmethod
    def _deserialize_date(data: Any, target_type: type) -> Any:
        if not isinstance(data, str):
            raise SerializationError(f"Expected an ISO-8601 string, got {type(data).__name__}")
        try:
            parsed = isoparse(data)
        except ValueError as exc:
            raise SerializationError(f"{data!r} is not an ISO-8601 date") from exc
        if target_type is datetime.date:
            return parsed.date()
        return parsed

    @staticmethod
    def _deserialize_bytes(data: Any) -> bytes:
        if isinstance(data, bytes):
            return data
        if not isinstance(data, str):
            raise SerializationError(f"Expected a base64 string, got {type(data).__name__}")
        try:
            return base64.b64decode(data, validate=True)
        except binascii.Error as exc:
            raise SerializationError("Value is not valid base64") from exc

    def deserialize_file(self, data: Any, headers: Optional[Mapping[str, str]] = None) -> File:
        """Write a response body to a uniquely named file in the temp folder.

        The caller owns the returned handle and the file on disk.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        if not isinstance(data, (bytes, bytearray)):
            raise SerializationError(f"Expected file content, got {type(data).__name__}")

        file_name = None
        disposition = _header_value(headers, "Content-Disposition")
        if disposition:
            match = _FILENAME_PATTERN.search(disposition)
            if match:
                file_name = self.sanitize_filename(match.group(1))

        fd, path = tempfile.mkstemp(dir=self.get_temp_folder_path(), suffix=f"-{file_name}" if file_name else "")
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)

        if self.debugging:
            logger.debug("Wrote %d bytes of file content to %s", len(data), path)
        return File(
            payload=open(path, "rb"),
            file_name=file_name or os.path.basename(path),
            mime_type=_header_value(headers, "Content-Type"),
            path=path,
        )

    # Parameter formatting

    @staticmethod
    def sanitize_filename(filename: str) -> str:
        """Strip any directory part, whatever the separator."""
        return re.split(r"[/\\]", filename)[-1]

    def to_query_value(self, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return self.serialize_collection(value, "csv")
        return self.to_string(value)

    def to_header_value(self, value: Any) -> str:
        return self.to_string(value)

    def to_string(self, value: Any) -> str:
        if isinstance(value, datetime.datetime):
            return format_datetime(value)
        if isinstance(value, datetime.date):
            return value.isoformat()
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, enum.Enum):
            return str(value.value)
        return str(value)

    def serialize_collection(self, collection: Any, collection_format: str = "csv") -> Any:
        """Join a collection for use as a single parameter value.

        ``multi`` returns the formatted items as a list so the query string repeats the key.
        """
        items = [self.to_string(item) for item in collection]
        if collection_format == "multi":
            return items
        return _COLLECTION_SEPARATORS.get(collection_format, ",").join(items)


__all__ = ["ObjectSerializer"]
