
"""Item de carrinho (LineItem), tupla Cart e codec do blob persistido."""
from __future__ import annotations
from decimal import Decimal
from typing import Any, Tuple
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, TypeAdapter, ValidationError
from ..core.logging import get_logger

log = get_logger()

class LineItem(BaseModel):
    """Produto + quantidade no carrinho.

    Campos extras (title, price, image, ...) são os metadados do produto,
    buscados uma única vez no inventário e mantidos junto ao item.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    product_id: int = Field(alias="id")
    amount: PositiveInt

    @property
    def product_fields(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    def with_amount(self, amount: int) -> "LineItem":
        """Cópia do item com nova quantidade."""
        return self.model_copy(update={"amount": amount})

Cart = Tuple[LineItem, ...]

EMPTY_CART: Cart = ()

_CART_ADAPTER = TypeAdapter(list[LineItem])

def find_item(cart: Cart, product_id: int) -> LineItem | None:
    return next((i for i in cart if i.product_id == product_id), None)

def replace_item(cart: Cart, item: LineItem) -> Cart:
    """Nova tupla com o item de mesmo product_id substituído (posição preservada)."""
    return tuple(item if i.product_id == item.product_id else i for i in cart)

def without_item(cart: Cart, product_id: int) -> Cart:
    return tuple(i for i in cart if i.product_id != product_id)

def encode_cart(cart: Cart) -> str:
    """Serializa o carrinho inteiro: lista JSON de {**produto, id, amount}."""
    return _CART_ADAPTER.dump_json(list(cart), by_alias=True).decode()

def decode_cart(blob: str | None) -> Cart:
    """Desserializa o blob. Ausente ou malformado vira carrinho vazio."""
    if not blob:
        return EMPTY_CART
    try:
        items = _CART_ADAPTER.validate_json(blob)
    except ValidationError as exc:
        log.warning("cart_state_malformed", errors=exc.error_count())
        return EMPTY_CART
    ids = [i.product_id for i in items]
    if len(ids) != len(set(ids)):
        log.warning("cart_state_malformed", reason="duplicate_product_id")
        return EMPTY_CART
    return tuple(items)

def cart_size(cart: Cart) -> int:
    """Quantidade de produtos distintos no carrinho."""
    return len(cart)

def cart_subtotal(cart: Cart) -> Decimal:
    """Soma price * amount dos itens que trazem preço numérico."""
    total = Decimal("0")
    for item in cart:
        price = item.product_fields.get("price")
        if isinstance(price, (int, float)) and not isinstance(price, bool):
            total += Decimal(str(price)) * item.amount
    return total
