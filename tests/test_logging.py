"""Testes do contexto de log por operação do carrinho."""
import pytest
from structlog.contextvars import get_contextvars
from rocketshoes_cart.core.logging import bind_cart_operation


def test_bind_cart_operation_replaces_previous_context():
    bind_cart_operation("add_one", 1, trace_id="abc")
    bind_cart_operation("remove_product", 2)

    ctx = get_contextvars()
    assert ctx["operation"] == "remove_product"
    assert ctx["product_id"] == 2
    assert ctx["trace_id"] != "abc"


@pytest.mark.asyncio
async def test_mutation_binds_its_operation(store):
    await store.add_one(1)

    ctx = get_contextvars()
    assert ctx["operation"] == "add_one"
    assert ctx["product_id"] == 1
