"""Canned text generator (offline use and tests)."""

from __future__ import annotations


class StaticGenerator:
    """Returns the same text for every prompt and remembers what it was asked."""

    def __init__(self, text: str = ""):
        self.text = text
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text
