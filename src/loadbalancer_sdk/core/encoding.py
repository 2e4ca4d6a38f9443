# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Query string and request body encoders for options values.

Options values are frozen dataclasses whose fields carry their wire names in
``dataclasses.field`` metadata:

- ``"q"``: query-string key used by :func:`build_query_string`.
- ``"json"``: request body key used by :func:`build_request_body`.
- ``"required"``: always send the field when querying; reject a zero value
  when building a body.

.. note::
    The query encoder omits every field that holds its type's zero value
    (``""``, ``0``, ``False``, ``None``, empty sequences). A filter such as
    ``enabled=False`` is therefore indistinguishable from not filtering on
    ``enabled`` at all. This is a platform constraint of the options contract;
    mark the field ``required`` on a custom options type when an explicit
    falsy filter must be sent.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Dict, List, Protocol, Tuple, runtime_checkable
from urllib.parse import urlencode

from ._error_codes import ENCODING_MISSING_INPUT, ENCODING_NOT_OPTIONS, ENCODING_UNSUPPORTED_TYPE
from .errors import EncodingError


class SortDirection(str, Enum):
    """Sort direction accepted by ``sort_dir`` query fields."""

    ASC = "asc"
    DESC = "desc"


@runtime_checkable
class ListOptsBuilder(Protocol):
    """Anything that can render itself as a list query string (leading ``?`` included)."""

    def to_query_string(self) -> str:
        ...


@runtime_checkable
class CreateOptsBuilder(Protocol):
    """Anything that can render itself as a create request body."""

    def to_request_body(self) -> Dict[str, Any]:
        ...


@runtime_checkable
class UpdateOptsBuilder(Protocol):
    """Anything that can render itself as an update request body."""

    def to_request_body(self) -> Dict[str, Any]:
        ...


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Enum):
        return _is_zero(value.value)
    if isinstance(value, (str, bool, int, list, tuple)):
        return not value
    return False


def _options_fields(opts: Any) -> Tuple[dataclasses.Field, ...]:
    if not dataclasses.is_dataclass(opts) or isinstance(opts, type):
        raise EncodingError(
            f"Options must be a dataclass instance, got {type(opts).__name__}",
            subcode=ENCODING_NOT_OPTIONS,
        )
    return dataclasses.fields(opts)


def _query_scalar(key: str, value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int)):
        return str(value)
    raise EncodingError(
        f"Query field '{key}' has unsupported type {type(value).__name__}",
        subcode=ENCODING_UNSUPPORTED_TYPE,
        details={"field": key, "type": type(value).__name__},
    )


def build_query_string(opts: Any) -> str:
    """
    Render an options value as a URL query string.

    :param opts: Dataclass instance whose fields are tagged with ``"q"`` metadata.
    :return: ``"?key=value&..."`` sorted by key, or ``""`` when nothing is set.
    :rtype: :class:`str`
    :raises EncodingError: If ``opts`` is not a dataclass instance or a field
        holds a value that cannot be expressed in a query string.
    """
    params: List[Tuple[str, str]] = []
    for f in _options_fields(opts):
        key = f.metadata.get("q", f.name)
        value = getattr(opts, f.name)
        if _is_zero(value) and not f.metadata.get("required", False):
            continue
        if isinstance(value, (list, tuple)):
            params.extend((key, _query_scalar(key, v)) for v in value)
        elif value is None:
            params.append((key, ""))
        else:
            params.append((key, _query_scalar(key, value)))
    if not params:
        return ""
    # stable sort keeps repeated keys in caller order
    params.sort(key=lambda kv: kv[0])
    return "?" + urlencode(params)


def _body_value(key: str, value: Any) -> Any:
    if isinstance(value, Enum):
        return _body_value(key, value.value)
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (list, tuple)):
        return [_body_value(key, v) for v in value]
    if isinstance(value, dict):
        out: Dict[str, Any] = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise EncodingError(
                    f"Body field '{key}' contains a non-string mapping key {k!r}",
                    subcode=ENCODING_UNSUPPORTED_TYPE,
                    details={"field": key},
                )
            out[k] = _body_value(key, v)
        return out
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _body_fields(value)
    raise EncodingError(
        f"Body field '{key}' has unsupported type {type(value).__name__}",
        subcode=ENCODING_UNSUPPORTED_TYPE,
        details={"field": key, "type": type(value).__name__},
    )


def _body_fields(opts: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {}
    for f in _options_fields(opts):
        key = f.metadata.get("json", f.name)
        value = getattr(opts, f.name)
        if f.metadata.get("required", False) and _is_zero(value):
            raise EncodingError(
                f"Missing input for required field '{key}'",
                subcode=ENCODING_MISSING_INPUT,
                details={"field": key},
            )
        body[key] = _body_value(key, value)
    return body


def build_request_body(opts: Any, envelope_key: str) -> Dict[str, Any]:
    """
    Render an options value as a JSON request body.

    Every declared field is sent, including falsy ones, so create and update
    requests always carry the caller's full field state.

    :param opts: Dataclass instance whose fields are tagged with ``"json"`` metadata.
    :param envelope_key: Key the field map is nested under; ``""`` returns it unwrapped.
    :return: ``{envelope_key: {...}}``.
    :rtype: :class:`dict`
    :raises EncodingError: If a value cannot be represented as JSON or a
        required field is empty.

    Example::

        build_request_body(FlavorCreateOpts(name="gold"), "flavor")
        # {"flavor": {"name": "gold", "description": "", "flavor_profile_id": "", "enabled": False}}
    """
    body = _body_fields(opts)
    if not envelope_key:
        return body
    return {envelope_key: body}


__all__ = [
    "SortDirection",
    "ListOptsBuilder",
    "CreateOptsBuilder",
    "UpdateOptsBuilder",
    "build_query_string",
    "build_request_body",
]
