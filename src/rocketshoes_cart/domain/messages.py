
"""Mensagens exibidas ao usuário (as únicas quatro categorias possíveis)."""
from enum import Enum

class CartMessage(str, Enum):
    STOCK_EXCEEDED = "Quantidade solicitada fora de estoque"
    ADD_FAILED = "Erro na adição do produto"
    REMOVE_FAILED = "Erro na remoção do produto"
    UPDATE_FAILED = "Erro na alteração de quantidade do produto"
