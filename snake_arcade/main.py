"""FastAPI application: index page, WebSocket endpoint and client message handling."""

import asyncio
import json
import logging
import math
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse

from .connection_manager import BroadcastSink, ConnectionManager, build_snapshot_msgs
from .constants import HOST, PORT
from .controller import GameController
from .models import Phase

logger = logging.getLogger(__name__)

HTML_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "index.html")

manager = ConnectionManager()
controller: Optional[GameController] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global controller
    manager.reset()
    controller = GameController(asyncio.get_running_loop(), sink=BroadcastSink(manager))
    pump = asyncio.create_task(manager.pump())
    yield
    controller.stop()
    pump.cancel()


app = FastAPI(lifespan=lifespan)


@app.get("/")
async def serve_index():
    return FileResponse(HTML_PATH, media_type="text/html")


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await manager.connect(ws)
    # Late joiners get the current picture, and nobody else is disturbed
    manager.greet(ws, build_snapshot_msgs(controller))
    try:
        while True:
            raw = await ws.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning("ignoring malformed message: %.80s", raw)
                continue
            if not isinstance(msg, dict):
                logger.warning("ignoring non-object message: %.80s", raw)
                continue
            handle_message(controller, msg, ws)
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(ws)
        controller.release_settings(ws)
        if not manager.connections and controller.started:
            controller.stop()


def handle_message(game: GameController, msg: dict, client=None):
    kind = msg.get("type")
    if kind == "resize":
        width, height = msg.get("width"), msg.get("height")
        if not (is_dimension(width) and is_dimension(height)):
            logger.warning("ignoring bad viewport %r x %r", width, height)
        elif game.started:
            game.resize(width, height)
        else:
            game.start(width, height)
    elif kind == "key":
        key = msg.get("key")
        if isinstance(key, str):
            game.handle_key(key)
    elif kind == "settings":
        game.apply_settings(game.settings.merge(msg))
    elif kind == "settings_menu":
        game.set_settings_open(bool(msg.get("open")), owner=client)
    elif kind == "restart":
        # The end screen sends its menu values along, like applying them
        if game.started and game.state.phase is Phase.GAME_OVER:
            game.apply_settings(game.settings.merge(msg))
    else:
        logger.warning("ignoring unknown message type %r", kind)


def is_dimension(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value) and value > 0


def run():
    import uvicorn
    host = os.environ.get("SNAKE_HOST", HOST)
    port = int(os.environ.get("SNAKE_PORT", PORT))
    print(f"Snake server starting on http://localhost:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
