"""
Tic-tac-toe API и WebSocket.
"""
import logging

from fastapi import FastAPI, WebSocket
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import get_config
from .protocol import MessageProtocol
from .registry import GameRegistry
from .ws_handlers import ws_game_loop
from .ws_manager import WSManager

logger = logging.getLogger(__name__)


def create_app(config=None) -> FastAPI:
    config = config or get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    app = FastAPI(title="Tic-tac-toe API", debug=config.debug)
    app.state.registry = GameRegistry()
    app.state.manager = WSManager()
    app.state.protocol = MessageProtocol.from_config(app.state.registry, config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "games": len(app.state.registry),
            "connections": len(app.state.manager),
        }

    @app.websocket(config.websocket_path)
    async def websocket_endpoint(ws: WebSocket):
        logger.info("WS: connection attempt from %s", ws.client)
        await ws_game_loop(ws, app.state.protocol, app.state.manager)

    # Статика фронтенда
    if config.frontend_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(config.frontend_dir), html=True), name="frontend")

    return app


app = create_app()


def run() -> None:
    import uvicorn

    config = get_config()
    uvicorn.run("tictactoe.main:app", host=config.host, port=config.port, log_level=config.log_level.lower())
