"""Fixtures e dublês compartilhados pelos testes do carrinho."""
import asyncio
import pytest
from rocketshoes_cart.domain.errors import InventoryError
from rocketshoes_cart.domain.services.cart_store import CartStore
from rocketshoes_cart.ports.interfaces import Stock, Product
from rocketshoes_cart.repo.state_store import InMemoryPersistentState


class FakeInventory:
    """Inventário em memória.

    Ids em `broken` falham com InventoryError; `crash`, se definido, é lançado
    como está em qualquer consulta (falha fora do contrato do cliente).
    """

    def __init__(self, stock=None, products=None):
        self.stock = dict(stock or {})
        self.products = dict(products or {})
        self.broken = set()
        self.crash = None
        self.stock_calls = []
        self.product_calls = []
        self.product_gate = None

    async def get_stock(self, product_id):
        self.stock_calls.append(product_id)
        await asyncio.sleep(0)
        if self.crash is not None:
            raise self.crash
        if product_id in self.broken or product_id not in self.stock:
            raise InventoryError(product_id, "status 404")
        return Stock(id=product_id, amount=self.stock[product_id])

    async def get_product(self, product_id):
        self.product_calls.append(product_id)
        if self.product_gate is not None:
            await self.product_gate.wait()
        await asyncio.sleep(0)
        if self.crash is not None:
            raise self.crash
        if product_id in self.broken or product_id not in self.products:
            raise InventoryError(product_id, "status 404")
        return Product(id=product_id, **self.products[product_id])


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    def report(self, message):
        self.messages.append(message)


@pytest.fixture
def inventory():
    return FakeInventory(
        stock={1: 5, 2: 1, 3: 10},
        products={
            1: {"title": "Tênis de Caminhada Leve Confortável", "price": 179.9, "image": "https://img/1.jpg"},
            2: {"title": "Tênis VR Caminhada Confortável", "price": 139.9, "image": "https://img/2.jpg"},
            3: {"title": "Tênis Adidas Duramo Lite 2.0", "price": 219.9, "image": "https://img/3.jpg"},
        },
    )


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def state():
    return InMemoryPersistentState()


@pytest.fixture
def store(inventory, state, notifier):
    return CartStore(inventory=inventory, state=state, notifier=notifier)
