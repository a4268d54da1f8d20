
"""Armazenamento chave/valor do blob do carrinho (SQLAlchemy ou memória)."""
from __future__ import annotations
from typing import Dict
from sqlalchemy.exc import SQLAlchemyError
from ..repo.models import CartState
from ..domain.errors import PersistenceError
from ..core.logging import get_logger

log = get_logger()

class SqlPersistentState:
    """Tabela cart_state: uma linha por namespace_key com o carrinho inteiro."""
    def __init__(self, session_factory):
        self.Session = session_factory

    def load(self, key: str) -> str | None:
        """Retorna o blob salvo ou None se a chave não existir (ou o banco falhar)."""
        try:
            with self.Session() as s:
                st = s.get(CartState, key)
                return st.payload if st else None
        except SQLAlchemyError as exc:
            log.warning("cart_state_load_failed", namespace_key=key, error=str(exc))
            return None

    def save(self, key: str, blob: str) -> None:
        """Upsert do snapshot completo."""
        try:
            with self.Session() as s, s.begin():
                st = s.get(CartState, key)
                if st:
                    st.payload = blob
                else:
                    s.add(CartState(namespace_key=key, payload=blob))
        except SQLAlchemyError as exc:
            raise PersistenceError(str(exc)) from exc

class InMemoryPersistentState:
    """Versão em memória, para embutir sem banco."""
    def __init__(self, initial: Dict[str, str] | None = None):
        self._data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self._data.get(key)

    def save(self, key: str, blob: str) -> None:
        self._data[key] = blob
