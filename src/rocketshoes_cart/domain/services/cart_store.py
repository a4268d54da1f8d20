
"""Serviço de carrinho: agregado em memória validado contra o estoque remoto.

Regras:
- `product_id` é único no carrinho; ordem = ordem da primeira adição.
- `1 <= amount <= estoque` no momento de cada mutação bem-sucedida.
- Cada mutação é tudo-ou-nada: monta uma cópia nova, faz commit e persiste o
  snapshot inteiro; em falha o estado fica intacto e o usuário é avisado.
- Nenhuma exceção escapa para quem chama; o retorno indica se houve commit.
"""
from __future__ import annotations
import asyncio
from decimal import Decimal
from ...core.logging import get_logger, bind_cart_operation
from ...ports.interfaces import InventoryClient, PersistentState, Notifier
from ..errors import StockExceeded, CartItemNotFound, InventoryError, PersistenceError
from ..messages import CartMessage
from ..models import (
    Cart, LineItem, find_item, replace_item, without_item,
    encode_cart, decode_cart, cart_size, cart_subtotal,
)

log = get_logger()

DEFAULT_NAMESPACE_KEY = "@RocketShoes:cart"

class CartStore:
    """Carrinho de um único usuário, com escritor único.

    As mutações assíncronas são serializadas por um asyncio.Lock; a remoção é
    síncrona e não consulta o inventário.
    """
    def __init__(self, inventory: InventoryClient, state: PersistentState, notifier: Notifier,
                 namespace_key: str = DEFAULT_NAMESPACE_KEY):
        self.inventory = inventory
        self.state = state
        self.notifier = notifier
        self.namespace_key = namespace_key
        self._lock = asyncio.Lock()
        self._cart: Cart = decode_cart(state.load(namespace_key))
        self._persisted: Cart = self._cart
        log.info("cart_loaded", namespace_key=namespace_key, items=len(self._cart))

    # --- Leitura ---
    def current_cart(self) -> Cart:
        """Carrinho atual (tupla imutável), sem efeitos colaterais."""
        return self._cart

    def size(self) -> int:
        return cart_size(self._cart)

    def subtotal(self) -> Decimal:
        return cart_subtotal(self._cart)

    # --- Mutações ---
    async def add_one(self, product_id: int) -> bool:
        """Adiciona uma unidade do produto (cria o item com amount=1 se novo)."""
        bind_cart_operation("add_one", product_id)
        async with self._lock:
            try:
                stock = await self.inventory.get_stock(product_id)
                item = find_item(self._cart, product_id)
                requested = (item.amount if item else 0) + 1
                if requested > stock.available:
                    raise StockExceeded(product_id, requested, stock.available)
                if item:
                    new_cart = replace_item(self._cart, item.with_amount(requested))
                else:
                    product = await self.inventory.get_product(product_id)
                    new_item = LineItem.model_validate({**product.model_dump(), "id": product_id, "amount": 1})
                    new_cart = self._cart + (new_item,)
            except StockExceeded as exc:
                self._reject(CartMessage.STOCK_EXCEEDED, "cart_stock_exceeded", exc)
                return False
            except InventoryError as exc:
                self._reject(CartMessage.ADD_FAILED, "cart_add_failed", exc, reason="inventory_error")
                return False
            except Exception as exc:
                self._reject(CartMessage.ADD_FAILED, "cart_add_failed", exc, reason="unexpected")
                return False
            snapshot = self._apply(new_cart)
            if snapshot is not None:
                await asyncio.to_thread(self._save, snapshot)
            log.info("cart_item_added", amount=requested)
            return True

    def remove_product(self, product_id: int) -> bool:
        """Remove o item do carrinho; ausente conta como falha."""
        bind_cart_operation("remove_product", product_id)
        if find_item(self._cart, product_id) is None:
            self._reject(CartMessage.REMOVE_FAILED, "cart_remove_failed", CartItemNotFound(product_id), reason="not_found")
            return False
        snapshot = self._apply(without_item(self._cart, product_id))
        if snapshot is not None:
            self._save(snapshot)
        log.info("cart_item_removed")
        return True

    async def set_amount(self, product_id: int, amount: int) -> bool:
        """Define a quantidade do item. `amount <= 0` é ignorado em silêncio."""
        if amount <= 0:
            return False
        bind_cart_operation("set_amount", product_id)
        async with self._lock:
            try:
                stock = await self.inventory.get_stock(product_id)
                if amount > stock.available:
                    raise StockExceeded(product_id, amount, stock.available)
                item = find_item(self._cart, product_id)
                if item is None:
                    raise CartItemNotFound(product_id)
                new_cart = replace_item(self._cart, item.with_amount(amount))
            except StockExceeded as exc:
                self._reject(CartMessage.STOCK_EXCEEDED, "cart_stock_exceeded", exc)
                return False
            except CartItemNotFound as exc:
                self._reject(CartMessage.UPDATE_FAILED, "cart_update_failed", exc, reason="not_found")
                return False
            except InventoryError as exc:
                self._reject(CartMessage.UPDATE_FAILED, "cart_update_failed", exc, reason="inventory_error")
                return False
            except Exception as exc:
                self._reject(CartMessage.UPDATE_FAILED, "cart_update_failed", exc, reason="unexpected")
                return False
            snapshot = self._apply(new_cart)
            if snapshot is not None:
                await asyncio.to_thread(self._save, snapshot)
            log.info("cart_amount_set", amount=amount)
            return True

    # --- Internos ---
    def _commit(self, new_cart: Cart) -> bool:
        """Troca o carrinho; retorna se o conteúdo mudou."""
        changed = new_cart != self._cart
        self._cart = new_cart
        return changed

    def _apply(self, new_cart: Cart) -> Cart | None:
        """Faz o commit e retorna o snapshot a gravar (None se já está gravado)."""
        if self._commit(new_cart) or self._cart != self._persisted:
            return self._cart
        return None

    def _save(self, snapshot: Cart) -> None:
        """Grava o snapshot inteiro; sem confirmação nem nova tentativa.

        Nos caminhos assíncronos roda em thread (asyncio.to_thread) para a
        escrita síncrona do SQLAlchemy não bloquear o event loop.
        """
        try:
            self.state.save(self.namespace_key, encode_cart(snapshot))
        except PersistenceError as exc:
            log.error("cart_persist_failed", namespace_key=self.namespace_key, error=str(exc))
            return
        self._persisted = snapshot
        log.info("cart_persisted", namespace_key=self.namespace_key, items=len(snapshot))

    def _reject(self, message: CartMessage, event: str, exc: Exception, **kw) -> None:
        log.info(event, error=str(exc), error_type=type(exc).__name__, **kw)
        self.notifier.report(message.value)
