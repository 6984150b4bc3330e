"""Interface the planner expects from an LLM-backed oracle."""

from typing import Protocol


class TextOracle(Protocol):
    """Answers one prompt with raw text. Failures propagate as exceptions."""

    async def ask(self, prompt: str) -> str:
        ...
