
"""Portas hexagonais (interfaces) e DTOs do inventário."""
from typing import Protocol
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

class Stock(BaseModel):
    """Estoque disponível de um produto (a API expõe como `amount`)."""
    id: int | None = None
    available: int = Field(validation_alias=AliasChoices("available", "amount"))

class Product(BaseModel):
    """Metadados opacos do produto; só `id` é obrigatório."""
    model_config = ConfigDict(extra="allow")
    id: int

class InventoryClient(Protocol):
    async def get_stock(self, product_id: int) -> Stock: ...
    async def get_product(self, product_id: int) -> Product: ...

class PersistentState(Protocol):
    def load(self, key: str) -> str | None: ...
    def save(self, key: str, blob: str) -> None: ...

class Notifier(Protocol):
    def report(self, message: str) -> None: ...
