"""
Scripted oracles and transports for testing the planner without an LLM
"""

import asyncio
import json
from typing import Dict, List, Optional

BREAKDOWN_MARKER = "Here is the step for you to break down:\n"
ACTION_MARKER = "This is the step: "


def step_from_breakdown_prompt(prompt: str) -> str:
    return prompt.rsplit(BREAKDOWN_MARKER, 1)[1].strip().strip('"')


class MockBreakdownOracle:
    """Decomposition oracle answering from a step -> sub-steps script"""

    def __init__(self, script: Dict[str, List[str]], default: Optional[List[str]] = None):
        self.script = script
        self.default = default if default is not None else []
        self.prompts: List[str] = []
        self.steps_asked: List[str] = []

    async def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        step = step_from_breakdown_prompt(prompt)
        self.steps_asked.append(step)
        return json.dumps({"steps": self.script.get(step, self.default)})


class MockActionOracle:
    """Action-recognition oracle answering from a step -> action call script"""

    def __init__(self, actions: Dict[str, str]):
        self.actions = actions
        self.steps_asked: List[str] = []

    async def ask(self, prompt: str) -> str:
        step = prompt.split(ACTION_MARKER, 1)[1]
        self.steps_asked.append(step)
        return self.actions.get(step, "null")


class RawOracle:
    """Oracle that returns the same raw text for every prompt"""

    def __init__(self, answer: str):
        self.answer = answer
        self.prompts: List[str] = []

    async def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answer


class FailingOracle:
    """Oracle whose calls always raise"""

    def __init__(self, error: Exception):
        self.error = error
        self.calls = 0

    async def ask(self, prompt: str) -> str:
        self.calls += 1
        raise self.error


class HangingOracle:
    """Oracle that never answers"""

    def __init__(self):
        self.started = asyncio.Event()
        self.cancelled = False

    async def ask(self, prompt: str) -> str:
        self.started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return ""


class MockWebSocket:
    """WebSocket stand-in that records sent messages"""

    def __init__(self, incoming: Optional[List[str]] = None, hold_open: bool = False):
        self.remote_address = ("127.0.0.1", 50000)
        self.sent: List[dict] = []
        self._incoming = list(incoming or [])
        self._hold_open = hold_open
        self._closed = asyncio.Event()

    def close(self):
        self._closed.set()

    async def send(self, message: str):
        self.sent.append(json.loads(message))

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._incoming:
            if self._hold_open:
                await self._closed.wait()
            raise StopAsyncIteration
        return self._incoming.pop(0)

    def sent_types(self) -> List[str]:
        return [message["type"] for message in self.sent]
