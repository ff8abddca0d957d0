"""Text generator protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextGenerator(Protocol):
    """Interface for services that turn a prompt into prose."""

    async def generate(self, prompt: str) -> str:
        """Return generated text for *prompt*. Raise on failure."""
        ...
