"""
Цикл WebSocket: подключение к партии, приём ходов, отключение.
Неожиданная ошибка закрывает только это соединение.
"""
import logging

from fastapi import WebSocket
from starlette.websockets import WebSocketDisconnect

from .protocol import MessageProtocol
from .ws_manager import WSManager

logger = logging.getLogger(__name__)


async def ws_game_loop(ws: WebSocket, protocol: MessageProtocol, manager: WSManager) -> None:
    await ws.accept()
    conn = manager.connect(ws)
    logger.info("WS: accepted %r", conn)
    try:
        await manager.send_all(protocol.on_connect(conn))
        while True:
            message = await ws.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000), message.get("reason"))
            text = message.get("text")
            if text is None:
                raise TypeError("binary frames are not supported")
            logger.debug("WS: %r received %s", conn, text)
            await manager.send_all(protocol.on_message(conn, text))
    except WebSocketDisconnect as e:
        logger.info("WS: client disconnected code=%s reason=%s %r", e.code, e.reason or "", conn)
    except Exception as e:
        logger.exception("WS: error %r: %s", conn, e)
        try:
            await ws.close(code=1011)
        except Exception:
            logger.debug("WS: close failed for %r", conn)
    finally:
        protocol.on_disconnect(conn)
        manager.disconnect(conn)
        logger.info("WS: disconnected %r", conn)
