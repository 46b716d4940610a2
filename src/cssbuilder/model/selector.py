"""Protocol shared by everything that renders to selector text."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Selector(Protocol):
    """Anything that can be serialized to a CSS selector string."""

    def serialize(self) -> str: ...
