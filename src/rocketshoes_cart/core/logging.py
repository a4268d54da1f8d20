
"""Logging JSON com structlog; cada operação do carrinho ganha seu próprio contexto."""
from __future__ import annotations
import sys
from uuid import uuid4
import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

def bind_cart_operation(operation: str, product_id: int, trace_id: str | None = None) -> str:
    """Abre o contexto de log de uma mutação (operation, product_id, trace_id).

    Todos os eventos emitidos até a próxima mutação carregam esses campos.
    """
    tid = trace_id or uuid4().hex
    clear_contextvars()
    bind_contextvars(trace_id=tid, operation=operation, product_id=product_id)
    return tid

def get_logger(level: int = 20) -> structlog.stdlib.BoundLogger:
    """Cria logger JSON que mescla o contexto da operação corrente."""
    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )
    return structlog.get_logger()
