"""
Plan Stream Server - relays goal planning progress to remote observers over WebSocket
"""
import asyncio
import json
from typing import Callable, Dict, Set

import structlog
import websockets
from pydantic import BaseModel, ValidationError

from ..planner import GoalTreeSearch, PlannerError
from ..planner.tree_search import SearchMode
from ..schemas import (
    GoalPlanCompleteEvent,
    GoalPlanErrorEvent,
    GoalPlanProgressEvent,
    HeartbeatAckEvent,
    HeartbeatRequest,
    ObserverRequest,
    StartGoalPlanRequest,
)

logger = structlog.get_logger(__name__)

PlannerFactory = Callable[[SearchMode], GoalTreeSearch]


class PlanStreamServer:
    """Serves goal plans to WebSocket observers.

    An observer sends {"type": "startGoalPlan", "goal": ..., "mode": "bfs"}
    and receives goalPlanProgress events while the tree grows, then either
    goalPlanComplete or goalPlanError.
    """

    def __init__(
        self,
        planner_factory: PlannerFactory,
        host: str = "localhost",
        port: int = 8766,
        queue_size: int = 16,
    ):
        self.planner_factory = planner_factory
        self.host = host
        self.port = port
        self.queue_size = queue_size
        self.websocket_server = None
        self.connected_clients = set()
        self._plans: Dict[object, Set[asyncio.Task]] = {}

    async def start(self):
        """Start the WebSocket server"""
        logger.info(f"Starting plan stream server on {self.host}:{self.port}")
        self.websocket_server = await websockets.serve(self._handle_client, self.host, self.port)
        logger.info("Plan stream server started")

    async def stop(self):
        """Cancel running plans and close the server"""
        for tasks in list(self._plans.values()):
            for task in tasks:
                task.cancel()

        if self.websocket_server is not None:
            self.websocket_server.close()
            await self.websocket_server.wait_closed()
            self.websocket_server = None

        logger.info("Plan stream server stopped")

    async def serve_forever(self):
        await self.start()
        try:
            await asyncio.Future()
        finally:
            await self.stop()

    async def _handle_client(self, websocket):
        """Handle a WebSocket observer connection"""
        client_id = f"{websocket.remote_address[0]}:{websocket.remote_address[1]}"
        logger.info(f"Observer connected: {client_id}")

        self.connected_clients.add(websocket)
        self._plans[websocket] = set()

        try:
            async for message in websocket:
                await self._process_message(message, websocket)
        except websockets.exceptions.ConnectionClosed:
            logger.info(f"Observer disconnected: {client_id}")
        finally:
            for task in self._plans.pop(websocket, set()):
                task.cancel()
            self.connected_clients.discard(websocket)

    async def _send(self, websocket, event: BaseModel):
        await websocket.send(event.model_dump_json())

    async def _process_message(self, message: str, websocket):
        """Process one incoming observer message"""
        try:
            request = ObserverRequest.validate_python(json.loads(message))
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON received: {e}")
            await self._send(websocket, GoalPlanErrorEvent(message=f"Invalid JSON: {e}"))
            return
        except ValidationError as e:
            logger.warning("Unsupported observer message", errors=e.errors(include_url=False))
            await self._send(websocket, GoalPlanErrorEvent(message="Unsupported message"))
            return

        if isinstance(request, HeartbeatRequest):
            await self._send(websocket, HeartbeatAckEvent())
            return

        task = asyncio.create_task(self.run_plan(request, websocket))
        tasks = self._plans.setdefault(websocket, set())
        tasks.add(task)
        task.add_done_callback(tasks.discard)

    async def run_plan(self, request: StartGoalPlanRequest, websocket):
        """Plan one goal and stream its events to `websocket`"""
        log = logger.bind(goal=request.goal, mode=request.mode)
        log.info("Starting goal plan for observer")

        try:
            search = self.planner_factory(request.mode)
            async for snapshot in search.stream(request.goal, queue_size=self.queue_size):
                if snapshot.final:
                    await self._send(websocket, GoalPlanCompleteEvent.from_nodes(snapshot.nodes))
                else:
                    await self._send(websocket, GoalPlanProgressEvent.from_nodes(snapshot.nodes))
        except websockets.exceptions.ConnectionClosed:
            log.info("Observer left before the plan finished")
        except PlannerError as e:
            log.error("Goal planning failed", error=str(e))
            await self._send(websocket, GoalPlanErrorEvent(message=str(e)))
        except Exception as e:
            log.error("Unexpected goal planning error", error=str(e), exc_info=True)
            await self._send(websocket, GoalPlanErrorEvent(message=str(e) or "Unknown error during goal planning"))
