"""DTO contract - typed records mirroring Spira's JSON payloads."""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field, fields as dataclass_fields
from typing import Any, TypeVar

#key under which each dataclass field stores its Spira JSON name
API_NAME = "api_name"

T = TypeVar("T", bound="SpiraDto")


class DtoError(ValueError):
    """Raised when a JSON payload cannot be turned into a DTO."""


def api_field(name: str, *, required: bool = False) -> Any:
    """Declare a DTO field bound to the Spira JSON key ``name``.

    Optional fields default to None. Required fields have no default and must
    be present when decoding a payload.
    """
    if required:
        return field(metadata={API_NAME: name})
    return field(default=None, metadata={API_NAME: name})


@dataclass(kw_only=True)
class SpiraDto:
    """Base class for all Spira data-transfer objects.

    Subclasses are keyword-only dataclasses whose fields are declared with
    ``api_field``. Attribute names are snake_case; the wire names are Spira's
    PascalCase keys.
    """

    def to_json(self) -> dict[str, Any]:
        """Return the JSON body for this DTO, leaving out fields that are None."""
        body: dict[str, Any] = {}
        for f in dataclass_fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            body[f.metadata.get(API_NAME, f.name)] = value
        return body

    @classmethod
    def from_json(cls: type[T], data: Any) -> T:
        """Build a DTO from a decoded JSON object.

        Unknown keys are ignored so newer server versions do not break decoding.

        Raises:
            DtoError: If ``data`` is not an object or a required key is absent or null.
        """
        if not isinstance(data, dict):
            raise DtoError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")

        kwargs: dict[str, Any] = {}
        missing: list[str] = []
        for f in dataclass_fields(cls):
            key = f.metadata.get(API_NAME, f.name)
            required = f.default is MISSING and f.default_factory is MISSING
            #null counts as absent for required fields
            if required and data.get(key) is None:
                missing.append(key)
            elif key in data:
                kwargs[f.name] = data[key]
        if missing:
            raise DtoError(f"{cls.__name__} is missing required field(s): {', '.join(missing)}")
        return cls(**kwargs)

    @classmethod
    def from_json_list(cls: type[T], data: Any) -> list[T]:
        """Build a list of DTOs from a decoded JSON array."""
        if not isinstance(data, list):
            raise DtoError(f"{cls.__name__} list expects a JSON array, got {type(data).__name__}")
        return [cls.from_json(item) for item in data]

    def set_fields(self) -> dict[str, Any]:
        """Return a dict containing only the attributes set to non-None values."""
        return {f.name: getattr(self, f.name) for f in dataclass_fields(self) if getattr(self, f.name) is not None}
