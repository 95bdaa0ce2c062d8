"""WebSocket connection management and message serialization."""

import asyncio
import json
import logging
from typing import Optional

from fastapi import WebSocket

from .colors import build_theme
from .controller import GameController, GameSink
from .game import GameState
from .models import Phase, Settings
from .render import draw_state

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self):
        self.connections: set[WebSocket] = set()
        self.outbox: Optional[asyncio.Queue] = None

    async def connect(self, ws: WebSocket):
        await ws.accept()
        self.connections.add(ws)

    def greet(self, ws: WebSocket, messages):
        """Queue ``messages`` for ``ws`` alone, ahead of later broadcasts."""
        for message in messages:
            self.outbox.put_nowait((message, ws))

    async def send_personal(self, ws: WebSocket, message: str):
        await ws.send_text(message)

    def disconnect(self, ws: WebSocket):
        self.connections.discard(ws)

    def publish(self, message: str):
        self.outbox.put_nowait((message, None))

    async def broadcast(self, message: str):
        disconnected = []
        for ws in list(self.connections):
            try:
                await ws.send_text(message)
            except Exception:
                logger.debug("dropping a socket that failed to receive", exc_info=True)
                disconnected.append(ws)
        for ws in disconnected:
            self.connections.discard(ws)

    def reset(self):
        self.connections.clear()
        self.outbox = asyncio.Queue()

    async def pump(self):
        while True:
            message, target = await self.outbox.get()
            if target is None:
                await self.broadcast(message)
            elif target in self.connections:
                try:
                    await self.send_personal(target, message)
                except Exception:
                    logger.debug("dropping a socket that failed to receive", exc_info=True)
                    self.connections.discard(target)


def build_frame_msg(state: GameState, settings: Settings) -> str:
    return json.dumps({
        "type": "frame",
        "side": state.grid.side,
        "tile": state.grid.tile,
        "ops": draw_state(state, settings),
    })


def build_score_msg(score: int) -> str:
    return json.dumps({"type": "score", "score": score, "text": f"SCORE: {score}"})


def build_game_over_msg(score: int) -> str:
    return json.dumps({"type": "game_over", "score": score, "text": f"Score: {score}"})


def build_theme_msg(settings: Settings) -> str:
    return json.dumps({"type": "theme", **build_theme(settings)})


class BroadcastSink(GameSink):
    """Serializes game output and queues it for every connected client."""

    def __init__(self, manager: ConnectionManager):
        self.manager = manager

    def show_theme(self, settings: Settings):
        self.manager.publish(build_theme_msg(settings))

    def show_score(self, score: int):
        self.manager.publish(build_score_msg(score))

    def render(self, state: GameState, settings: Settings):
        self.manager.publish(build_frame_msg(state, settings))

    def game_over(self, score: int):
        self.manager.publish(build_game_over_msg(score))


def build_snapshot_msgs(game: GameController) -> list[str]:
    """Messages that bring a late joiner up to date with the running game."""
    if not game.started:
        return []
    state = game.state
    messages = [
        build_theme_msg(game.settings),
        build_score_msg(state.score),
        build_frame_msg(state, game.settings),
    ]
    if state.phase is Phase.GAME_OVER:
        messages.append(build_game_over_msg(state.score))
    return messages
