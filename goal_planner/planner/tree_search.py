"""
Goal tree search - incremental breadth-first / depth-first expansion of a goal
into executable steps, emitting the growing tree after every expansion
"""

import asyncio
import inspect
import itertools
from collections import deque
from dataclasses import dataclass
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Deque,
    List,
    Literal,
    Optional,
    Union,
)

import structlog

from ..schemas import StepNode
from .cancellation import CancelToken
from .context import ContextProvider, summarize_context
from .decomposition import Decomposer
from .inventory import apply_action
from .terminal_check import ActionCheck, ActionRecognizer

logger = structlog.get_logger(__name__)

SearchMode = Literal["bfs", "dfs"]
SEARCH_MODES = ("bfs", "dfs")

ProgressCallback = Callable[[List[StepNode]], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class PlanSnapshot:
    """Flat copy of the tree at one point of the search"""

    nodes: List[StepNode]
    final: bool = False


class GoalTreeSearch:
    """Owns the node list, the frontier and the step counter of one search.

    Each instance plans exactly one goal. Oracle calls happen one at a time;
    step numbers and the sibling context seen by each decomposition depend
    on that strict ordering.

    Example:
        search = GoalTreeSearch(decomposer, recognizer, mode="dfs")
        nodes = await search.run("get an iron sword")
    """

    def __init__(
        self,
        decomposer: Decomposer,
        recognizer: ActionRecognizer,
        mode: SearchMode = "bfs",
        context_provider: Optional[ContextProvider] = None,
        cancel_token: Optional[CancelToken] = None,
        oracle_timeout_s: Optional[float] = None,
    ):
        if mode not in SEARCH_MODES:
            raise ValueError(f"Unknown search mode {mode!r}, expected one of {SEARCH_MODES}")

        self.decomposer = decomposer
        self.recognizer = recognizer
        self.mode = mode
        self.context_provider = context_provider
        self.cancel_token = cancel_token or CancelToken()
        self.oracle_timeout_s = oracle_timeout_s

        self.nodes: List[StepNode] = []
        self._frontier: Deque[StepNode] = deque()
        self._step_numbers = itertools.count()
        self._started = False

    # ------------------------------------------------------------------
    # Frontier and node bookkeeping
    # ------------------------------------------------------------------

    def _next_step_number(self) -> int:
        return next(self._step_numbers)

    def _pop(self) -> StepNode:
        if self.mode == "bfs":
            return self._frontier.popleft()
        return self._frontier.pop()

    def _push(self, children: List[StepNode]) -> None:
        if self.mode == "bfs":
            self._frontier.extend(children)
        else:
            # Reversed so the first-listed sub-step is popped first
            self._frontier.extend(reversed(children))

    def _create_child(self, parent: StepNode, sub_step: str, check: ActionCheck, prompt: str) -> StepNode:
        if check.recognized_call is not None:
            inventory = apply_action(check.recognized_call, parent.projected_inventory)
        else:
            inventory = dict(parent.projected_inventory)

        child = StepNode(
            parent_id=parent.id,
            step=sub_step,
            func_call=check.recognized_call,
            level=parent.level + 1,
            step_number=self._next_step_number(),
            projected_inventory=inventory,
            debug_prompt=prompt,
        )
        self.nodes.append(child)
        return child

    # ------------------------------------------------------------------
    # Oracle calls and progress
    # ------------------------------------------------------------------

    async def _call(self, awaitable: Awaitable[Any]) -> Any:
        return await self.cancel_token.guard(awaitable, self.oracle_timeout_s)

    async def _emit(self, progress_callback: Optional[ProgressCallback]) -> None:
        if progress_callback is None:
            return
        try:
            result = progress_callback(list(self.nodes))
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error("Progress callback failed", error=str(e), exc_info=True)

    async def _expand(self, current: StepNode) -> List[StepNode]:
        """Decompose one frontier node and materialize its children.

        Each sub-step is action-checked before its node is created, so a
        recognized sub-step becomes the action leaf itself rather than
        gaining a separate action child later.
        """
        agent_context = self.context_provider.snapshot() if self.context_provider else None
        structured_context = summarize_context(current, self.nodes)

        decomposition = await self._call(
            self.decomposer.decompose(
                current.step,
                structured_context,
                current.projected_inventory,
                agent_context,
            )
        )

        children = []
        for sub_step in decomposition.sub_steps:
            check = await self._call(self.recognizer.check(sub_step))
            children.append(self._create_child(current, sub_step, check, decomposition.prompt_used))

        logger.debug(
            "Node expanded",
            step_number=current.step_number,
            level=current.level,
            children=len(children),
            actions=sum(1 for child in children if child.is_terminal),
        )
        return children

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def cancel(self, reason: str = "cancelled") -> None:
        self.cancel_token.cancel(reason)

    async def run(self, goal: str, progress_callback: Optional[ProgressCallback] = None) -> List[StepNode]:
        """Expand `goal` until the frontier is empty.

        Args:
            goal: Natural-language goal for the root node
            progress_callback: Called (or awaited) with the flat node list after
                every frontier item; its exceptions are logged and ignored

        Returns:
            Every node of the finished tree, in creation order

        Raises:
            PlannerError: any oracle failure, timeout or cancellation
        """
        if self._started:
            raise RuntimeError("GoalTreeSearch instances plan a single goal")
        self._started = True

        root = StepNode(step=goal, level=0, step_number=self._next_step_number())
        self.nodes.append(root)
        self._frontier.append(root)

        log = logger.bind(goal=goal, mode=self.mode)
        log.info("Goal planning started")

        while self._frontier:
            self.cancel_token.raise_if_cancelled()
            current = self._pop()

            children = await self._expand(current)
            self._push([child for child in children if not child.is_terminal])

            await self._emit(progress_callback)

        log.info(
            "Goal planning finished",
            nodes=len(self.nodes),
            actions=sum(1 for node in self.nodes if node.is_terminal),
            max_level=max(node.level for node in self.nodes),
        )
        return list(self.nodes)

    async def stream(self, goal: str, queue_size: int = 16) -> AsyncIterator[PlanSnapshot]:
        """Yield in-progress snapshots, then one final snapshot.

        Snapshots pass through a bounded queue: when the consumer falls
        behind, the search pauses at its next progress emission. Closing the
        iterator early cancels the search.
        """
        queue: asyncio.Queue = asyncio.Queue(maxsize=queue_size)

        async def on_progress(nodes: List[StepNode]) -> None:
            await queue.put(PlanSnapshot(nodes=nodes))

        async def produce() -> None:
            try:
                nodes = await self.run(goal, progress_callback=on_progress)
            except Exception as e:
                await queue.put(e)
            else:
                await queue.put(PlanSnapshot(nodes=nodes, final=True))

        producer = asyncio.create_task(produce())
        try:
            while True:
                item = await queue.get()
                if isinstance(item, Exception):
                    raise item
                yield item
                if item.final:
                    break
        finally:
            if not producer.done():
                producer.cancel()
                try:
                    await producer
                except asyncio.CancelledError:
                    pass


async def build_goal_tree(
    goal: str,
    mode: SearchMode = "bfs",
    progress_callback: Optional[ProgressCallback] = None,
    context_provider: Optional[ContextProvider] = None,
    *,
    decomposer: Decomposer,
    recognizer: ActionRecognizer,
    cancel_token: Optional[CancelToken] = None,
    oracle_timeout_s: Optional[float] = None,
) -> List[StepNode]:
    """Plan `goal` and return the complete flat node list."""
    search = GoalTreeSearch(
        decomposer,
        recognizer,
        mode=mode,
        context_provider=context_provider,
        cancel_token=cancel_token,
        oracle_timeout_s=oracle_timeout_s,
    )
    return await search.run(goal, progress_callback)


def stream_goal_tree(
    goal: str,
    mode: SearchMode = "bfs",
    context_provider: Optional[ContextProvider] = None,
    *,
    decomposer: Decomposer,
    recognizer: ActionRecognizer,
    cancel_token: Optional[CancelToken] = None,
    oracle_timeout_s: Optional[float] = None,
    queue_size: int = 16,
) -> AsyncIterator[PlanSnapshot]:
    """Plan `goal`, yielding PlanSnapshot items as the tree grows."""
    search = GoalTreeSearch(
        decomposer,
        recognizer,
        mode=mode,
        context_provider=context_provider,
        cancel_token=cancel_token,
        oracle_timeout_s=oracle_timeout_s,
    )
    return search.stream(goal, queue_size=queue_size)
