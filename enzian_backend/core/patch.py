"""Explicit partial-update records.

A patch is a frozen dataclass whose fields default to ``UNSET``. A field
that was present in the request carries its value, even when that value is
falsy (``None``, ``""``); only ``UNSET`` fields are left untouched.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Mapping


class _Unset:
    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class Patch:
    """Mixin for dataclass patches."""

    @classmethod
    def from_data(cls, data: Mapping[str, Any]):
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not UNSET

    def changes(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def apply_to(self, instance) -> list[str]:
        """Set every present field on ``instance``; return the names whose value differed."""
        changed = []
        for attr, value in self.changes().items():
            if getattr(instance, attr) != value:
                setattr(instance, attr, value)
                changed.append(attr)
        return changed
