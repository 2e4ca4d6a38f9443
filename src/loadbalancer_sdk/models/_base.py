# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""Shared decoding for typed resource records."""

from __future__ import annotations

import dataclasses
import typing
from typing import Any, Dict, Type, TypeVar

from ..core._error_codes import DECODE_SHAPE_MISMATCH
from ..core.errors import DecodeError

M = TypeVar("M", bound="Model")

_SCALARS = (str, int, float, bool)


def _matches(expected: Any, value: Any) -> bool:
    if expected is bool:
        return isinstance(value, bool)
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if expected is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if expected is str:
        return isinstance(value, str)
    return True


class Model:
    """
    Mixin for frozen dataclass records decoded from JSON objects.

    Field wire names come from ``metadata={"json": ...}`` (default: the field
    name). Unknown keys are ignored; missing or ``null`` keys keep the field
    default; a value of the wrong JSON type is a :class:`DecodeError`.
    """

    @classmethod
    def from_dict(cls: Type[M], data: Any) -> M:
        if not isinstance(data, dict):
            raise DecodeError(
                f"{cls.__name__} must be decoded from a JSON object, got {type(data).__name__}",
                subcode=DECODE_SHAPE_MISMATCH,
            )
        hints = typing.get_type_hints(cls)
        kwargs: Dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            key = f.metadata.get("json", f.name)
            value = data.get(key)
            if value is None:
                continue
            expected = hints.get(f.name)
            if expected in _SCALARS and not _matches(expected, value):
                raise DecodeError(
                    f"{cls.__name__}.{f.name} expects {expected.__name__}, got {type(value).__name__}",
                    subcode=DECODE_SHAPE_MISMATCH,
                    details={"field": key, "value": value},
                )
            kwargs[f.name] = value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {f.metadata.get("json", f.name): getattr(self, f.name) for f in dataclasses.fields(self)}
