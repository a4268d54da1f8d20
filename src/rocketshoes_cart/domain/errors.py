
"""Exceções do domínio do carrinho.

Nunca atravessam a fronteira do CartStore: cada operação converte a falha em
uma mensagem ao usuário (Notifier) e em ausência de mudança de estado.
"""
from __future__ import annotations

class CartError(Exception):
    """Base das falhas do carrinho."""

class StockExceeded(CartError):
    """Quantidade pedida maior que o estoque disponível."""
    def __init__(self, product_id: int, requested: int, available: int):
        super().__init__(f"product {product_id}: requested {requested}, available {available}")
        self.product_id = product_id
        self.requested = requested
        self.available = available

class CartItemNotFound(CartError):
    """Produto ausente do carrinho onde a presença era exigida."""
    def __init__(self, product_id: int):
        super().__init__(f"product {product_id} not in cart")
        self.product_id = product_id

class InventoryError(CartError):
    """Falha de consulta/transporte na API de estoque ou produtos."""
    def __init__(self, product_id: int, detail: str):
        super().__init__(f"inventory lookup failed for product {product_id}: {detail}")
        self.product_id = product_id
        self.detail = detail

class PersistenceError(CartError):
    """Falha ao gravar o blob do carrinho."""
