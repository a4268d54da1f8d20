
"""Modelo SQLAlchemy do blob persistido do carrinho."""
from __future__ import annotations
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import String, Text

class Base(DeclarativeBase):
    """Base declarativa."""
    pass

class CartState(Base):
    __tablename__ = "cart_state"
    namespace_key: Mapped[str] = mapped_column(String(128), primary_key=True)
    payload: Mapped[str] = mapped_column(Text)  # JSON serializado do carrinho inteiro
