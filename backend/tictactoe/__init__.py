"""Сервер крестиков-ноликов на WebSocket."""
