"""
Per-field partial update instructions.

A PATCH body distinguishes three cases for every optional field:

    field omitted        -> Unchanged
    field sent as null   -> Clear
    field sent as value  -> Set(value)

`instructions_from()` turns a pydantic model into one instruction per field
using `model_fields_set`, so services never have to inspect raw dicts.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


@dataclass(frozen=True)
class Unchanged:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Set(Generic[T]):
    value: T


FieldUpdate = Union[Unchanged, Clear, Set[T]]

UNCHANGED = Unchanged()
CLEAR = Clear()


def instruction_for(payload: BaseModel, field: str) -> FieldUpdate:
    if field not in payload.model_fields_set:
        return UNCHANGED
    value = getattr(payload, field)
    if value is None:
        return CLEAR
    return Set(value)


def instructions_from(payload: BaseModel) -> Dict[str, FieldUpdate]:
    return {field: instruction_for(payload, field) for field in type(payload).model_fields}


def apply_update(target: Any, attr: str, update: FieldUpdate) -> bool:
    """Apply one instruction to an ORM object. Returns True if it wrote anything."""
    if isinstance(update, Set):
        setattr(target, attr, update.value)
        return True
    if isinstance(update, Clear):
        setattr(target, attr, None)
        return True
    return False
