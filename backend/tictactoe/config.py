"""Конфигурация приложения."""
import os
from functools import lru_cache
from pathlib import Path

DEFAULT_FRONTEND_DIR = Path(__file__).resolve().parent.parent.parent / "frontend"


def _flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


@lru_cache
def get_config():
    return type("Config", (), {
        "debug": _flag("DEBUG", "0"),
        "allowed_origins": os.environ.get("ALLOWED_ORIGINS", "*").split(","),
        "log_level": os.environ.get("LOG_LEVEL", "INFO").upper(),
        "websocket_path": os.environ.get("WEBSOCKET_PATH", "/websocket"),
        "frontend_dir": Path(os.environ.get("FRONTEND_DIR", str(DEFAULT_FRONTEND_DIR))),
        # Исходный протокол верил метке из сообщения клиента; здесь по умолчанию
        # метка сверяется с соединением (включить старое поведение: TRUST_CLIENT_MARKER=1)
        "trust_client_marker": _flag("TRUST_CLIENT_MARKER", "0"),
        "evict_abandoned": _flag("EVICT_ABANDONED", "1"),
        "notify_errors": _flag("NOTIFY_ERRORS", "0"),
        "host": os.environ.get("HOST", "0.0.0.0"),
        "port": int(os.environ.get("PORT", "8080")),
    })()
