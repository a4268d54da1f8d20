"""Testes do LineItem e do codec do blob persistido."""
from decimal import Decimal
import pytest
from pydantic import ValidationError
from rocketshoes_cart.domain.models import (
    LineItem, decode_cart, encode_cart, find_item, replace_item, without_item, cart_subtotal, cart_size,
)


def make_cart():
    return (
        LineItem.model_validate({"id": 1, "amount": 2, "title": "Tênis A", "price": 100}),
        LineItem.model_validate({"id": 2, "amount": 1, "title": "Tênis B", "price": 59.9}),
    )


class TestLineItem:
    def test_extra_keys_become_product_fields(self):
        item = LineItem.model_validate({"id": 7, "amount": 3, "title": "X", "image": "u"})

        assert item.product_id == 7
        assert item.product_fields == {"title": "X", "image": "u"}

    def test_amount_must_be_positive(self):
        with pytest.raises(ValidationError):
            LineItem.model_validate({"id": 1, "amount": 0})

    def test_with_amount_returns_copy(self):
        item = LineItem.model_validate({"id": 1, "amount": 1, "title": "X"})

        bigger = item.with_amount(4)

        assert bigger.amount == 4
        assert item.amount == 1
        assert bigger.product_fields == {"title": "X"}


class TestCartHelpers:
    def test_replace_keeps_position(self):
        cart = make_cart()

        updated = replace_item(cart, cart[0].with_amount(9))

        assert [(i.product_id, i.amount) for i in updated] == [(1, 9), (2, 1)]
        assert cart[0].amount == 2

    def test_without_item(self):
        assert [i.product_id for i in without_item(make_cart(), 1)] == [2]

    def test_find_item_missing(self):
        assert find_item(make_cart(), 99) is None

    def test_totals(self):
        cart = make_cart()

        assert cart_size(cart) == 2
        assert cart_subtotal(cart) == Decimal("259.9")

    def test_subtotal_ignores_items_without_numeric_price(self):
        cart = (LineItem.model_validate({"id": 1, "amount": 2, "price": "caro"}),)

        assert cart_subtotal(cart) == Decimal("0")


class TestCodec:
    def test_encode_then_decode_preserves_pairs_and_fields(self):
        cart = make_cart()

        decoded = decode_cart(encode_cart(cart))

        assert decoded == cart

    @pytest.mark.parametrize("blob", [None, ""])
    def test_absent_value_is_empty_cart(self, blob):
        assert decode_cart(blob) == ()

    @pytest.mark.parametrize("blob", [
        "{not json",
        '{"id": 1, "amount": 1}',
        '[{"amount": 1}]',
        '[{"id": 1, "amount": 0}]',
        '[{"id": "abc", "amount": 1}]',
        '[{"id": 1, "amount": 1}, {"id": 1, "amount": 2}]',
    ])
    def test_malformed_value_is_empty_cart(self, blob):
        assert decode_cart(blob) == ()


def test_product_field_named_like_the_item_field_survives_codec():
    item = LineItem.model_validate({"id": 9, "amount": 1, "product_id": "SKU-9", "title": "Tênis"})

    decoded = decode_cart(encode_cart((item,)))

    assert decoded[0].product_id == 9
    assert decoded[0].product_fields == {"product_id": "SKU-9", "title": "Tênis"}
