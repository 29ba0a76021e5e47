"""Variant literal entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Variant:
    """Boxed value carrying its own type signature, used for ``v`` defaults."""

    signature: str
    value: object
