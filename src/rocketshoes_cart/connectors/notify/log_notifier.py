
"""Notifier que registra o aviso ao usuário como evento structlog."""
from __future__ import annotations
from ...core.logging import get_logger

class LogNotifier:
    """Canal unidirecional: só emite, nunca bloqueia nem propaga erro."""
    def __init__(self, logger=None):
        self.log = logger or get_logger()

    def report(self, message: str) -> None:
        self.log.warning("user_notice", message=message)
