"""
Shared types, field presence policy and JSON (de)serialization helpers.

Field Presence Convention
=========================
Request bodies and query strings are built from dataclasses. Each field
carries a presence policy in its metadata that decides whether it is sent:

  - ALWAYS     = always emitted (required body fields such as a project name)
  - OMIT_EMPTY = omitted when UNSET, None, "", 0, False or an empty container
                 (filters and plain optional values)
  - OMIT_UNSET = omitted only when UNSET; None is sent as JSON null, which
                 the API reads as "clear this value"

UNSET is a falsy sentinel, distinct from None, so an options bundle can say
"leave parent_id alone" (UNSET) as well as "move to root" (None).

Examples:
  - ProjectOptions(parent_id=UNSET)  -> {"name": ...}
  - ProjectOptions(parent_id=None)   -> {"name": ..., "parent_id": null}
  - PaginationFilters(limit=10)      -> {"limit": 10}
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import MISSING, field, fields, is_dataclass
from typing import Any, Optional, TypeVar, Union

from .errors import DecodeError

T = TypeVar("T")

ALWAYS = "always"
OMIT_EMPTY = "omit_empty"
OMIT_UNSET = "omit_unset"


class Unset:
    """Marker type for "not provided". Use the UNSET instance."""

    _instance: Optional["Unset"] = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset()

# A value that may be absent (UNSET), explicitly cleared (None) or set.
Maybe = Union[T, None, Unset]


def body_field(
    default: Any = UNSET,
    *,
    policy: str = OMIT_UNSET,
    key: Optional[str] = None,
) -> Any:
    """
    Declare a request field with an explicit presence policy.

    Args:
        default: Default value (UNSET unless the field is required)
        policy: One of ALWAYS, OMIT_EMPTY, OMIT_UNSET
        key: JSON key when it differs from the attribute name
    """
    metadata: dict[str, Any] = {"policy": policy}
    if key is not None:
        metadata["key"] = key
    return field(default=default, metadata=metadata)


def nested(model: type, *, many: bool = False, key: Optional[str] = None) -> Any:
    """Declare a response field decoded into `model` (or a list of them)."""
    metadata: dict[str, Any] = {"model": model, "many": many}
    if key is not None:
        metadata["key"] = key
    return field(default=None, metadata=metadata)


def is_empty(value: Any) -> bool:
    """Zero-value check used by the OMIT_EMPTY policy."""
    if value is UNSET or value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def to_payload(obj: Any) -> dict[str, Any]:
    """
    Convert an options/filters object into a JSON-ready dict.

    Accepts a dataclass (honouring each field's policy), a plain mapping
    (UNSET values dropped, everything else kept) or None.
    """
    if obj is None:
        return {}
    if isinstance(obj, Mapping):
        return {str(k): v for k, v in obj.items() if v is not UNSET}
    if not is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"cannot serialize {type(obj).__name__} as a request payload")

    payload: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        policy = f.metadata.get("policy", OMIT_EMPTY)
        if value is UNSET:
            continue
        if policy == OMIT_EMPTY and is_empty(value):
            continue
        if is_dataclass(value) and not isinstance(value, type):
            value = to_payload(value)
        payload[f.metadata.get("key", f.name)] = value
    return payload


def from_payload(cls: type[T], data: Any) -> T:
    """
    Build an entity dataclass from a decoded JSON object.

    Unknown keys are ignored since the provider adds fields over time.
    Missing keys fall back to the field default; a missing key without a
    default is a DecodeError.
    """
    if not isinstance(data, Mapping):
        raise DecodeError(
            f"expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    kwargs: dict[str, Any] = {}
    for f in fields(cls):  # type: ignore[arg-type]
        key = f.metadata.get("key", f.name)
        if key not in data:
            if f.default is MISSING and f.default_factory is MISSING:
                raise DecodeError(f"{cls.__name__}: missing required key '{key}'")
            continue
        value = data[key]
        model = f.metadata.get("model")
        if model is not None and value is not None:
            if f.metadata.get("many"):
                if not isinstance(value, list):
                    raise DecodeError(
                        f"{cls.__name__}.{key}: expected a JSON array, got {type(value).__name__}"
                    )
                value = [from_payload(model, item) for item in value]
            else:
                value = from_payload(model, value)
        kwargs[f.name] = value
    return cls(**kwargs)

