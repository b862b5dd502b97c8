"""
Менеджер WebSocket: живые подключения и отправка сообщений.
Connection — дескриптор канала, который получает игрок.
"""
import itertools
import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)

_conn_ids = itertools.count(1)


class Connection:
    def __init__(self, ws: WebSocket):
        self.ws = ws
        self.id = next(_conn_ids)

    async def send(self, payload: dict[str, Any]) -> bool:
        """Отправить JSON текстовым кадром; ошибки отправки не пробрасываются."""
        try:
            await self.ws.send_json(payload)
            return True
        except Exception as e:
            logger.warning("send to connection %s: %s", self.id, e)
            return False

    def __repr__(self) -> str:
        return f"Connection(id={self.id}, client={self.ws.client})"


class WSManager:
    def __init__(self):
        self._all: dict[int, Connection] = {}

    def connect(self, ws: WebSocket) -> Connection:
        conn = Connection(ws)
        self._all[conn.id] = conn
        return conn

    def disconnect(self, conn: Connection) -> None:
        self._all.pop(conn.id, None)

    async def send_all(self, outbound) -> None:
        """Отправить исходящие сообщения протокола по порядку."""
        for item in outbound:
            await item.channel.send(item.payload)

    def __len__(self) -> int:
        return len(self._all)
