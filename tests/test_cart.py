import json

from shopfront.client.cart import Cart
from shopfront.constants import CART_STORAGE_KEY


def test_add_same_line_accumulates(storage, tee):
    cart = Cart(storage)
    cart.add_item(tee, "M", 2)
    assert len(cart.items) == 1
    assert cart.items[0].quantity == 2
    assert cart.get_total() == 10000

    cart.add_item(tee, "M", 1)
    assert len(cart.items) == 1
    assert cart.items[0].quantity == 3
    assert cart.get_total() == 15000

    cart.update_quantity(1, "M", 0)
    assert cart.items == []
    assert cart.get_total() == 0


def test_add_defaults_to_one_and_snapshots_product(storage, tee):
    cart = Cart(storage)
    cart.add_item(tee, "S")
    line = cart.items[0]
    assert (line.id, line.name, line.price, line.image, line.size, line.quantity) == (
        1, "Faith Over Fear Tee", 5000, "/images/tee.jpg", "S", 1,
    )


def test_different_sizes_are_separate_lines(storage, tee, hoodie):
    cart = Cart(storage)
    cart.add_item(tee, "S")
    cart.add_item(tee, "L", 2)
    cart.add_item(hoodie, "L")
    assert [(it.id, it.size) for it in cart.items] == [(1, "S"), (1, "L"), (2, "L")]
    assert cart.get_count() == 4
    assert cart.get_total() == 5000 + 2 * 5000 + 15000


def test_non_positive_add_is_ignored(storage, tee):
    cart = Cart(storage)
    cart.add_item(tee, "M", 0)
    cart.add_item(tee, "M", -3)
    assert cart.items == []


def test_update_sets_exact_quantity(storage, tee):
    cart = Cart(storage)
    cart.add_item(tee, "M", 2)
    cart.update_quantity(1, "M", 7)
    assert cart.items[0].quantity == 7
    assert cart.get_count() == 7


def test_update_to_negative_equals_remove(storage, tee, hoodie):
    a = Cart(storage)
    a.add_item(tee, "M", 2)
    a.add_item(hoodie, "L", 1)
    a.update_quantity(1, "M", -1)

    b = Cart(storage)
    b.clear()
    b.add_item(tee, "M", 2)
    b.add_item(hoodie, "L", 1)
    b.remove_item(1, "M")

    assert [it.to_dict() for it in a.items] == [it.to_dict() for it in b.items]


def test_missing_lines_are_no_ops(storage, tee):
    cart = Cart(storage)
    cart.add_item(tee, "M")
    cart.update_quantity(1, "XL", 5)
    cart.update_quantity(99, "M", 5)
    cart.remove_item(99, "M")
    assert len(cart.items) == 1
    assert cart.items[0].quantity == 1


def test_clear_empties_everything(storage, tee, hoodie):
    cart = Cart(storage)
    cart.add_item(tee, "M", 2)
    cart.add_item(hoodie, "L", 1)
    cart.clear()
    assert cart.items == []
    assert cart.get_total() == 0
    assert cart.get_count() == 0
    assert json.loads(storage.get_item(CART_STORAGE_KEY)) == []


def test_reload_restores_same_ordered_lines(storage, tee, hoodie):
    cart = Cart(storage)
    cart.add_item(hoodie, "L", 1)
    cart.add_item(tee, "S", 3)
    cart.add_item(tee, "M", 1)

    again = Cart(storage)
    assert [it.to_dict() for it in again.items] == [it.to_dict() for it in cart.items]


def test_every_mutation_persists_and_notifies(storage, tee):
    cart = Cart(storage)
    counts = []
    cart.on_change(counts.append)

    cart.add_item(tee, "M", 2)
    assert json.loads(storage.get_item(CART_STORAGE_KEY))[0]["quantity"] == 2
    cart.update_quantity(1, "M", 5)
    assert json.loads(storage.get_item(CART_STORAGE_KEY))[0]["quantity"] == 5
    cart.remove_item(1, "M")
    assert json.loads(storage.get_item(CART_STORAGE_KEY)) == []

    assert counts == [2, 5, 0]


def test_persisted_format_is_plain_line_array(storage, tee):
    Cart(storage).add_item(tee, "M", 2)
    assert json.loads(storage.get_item(CART_STORAGE_KEY)) == [
        {"id": 1, "name": "Faith Over Fear Tee", "price": 5000, "size": "M", "quantity": 2, "image": "/images/tee.jpg"}
    ]


def test_corrupt_storage_loads_empty(storage):
    storage.set_item(CART_STORAGE_KEY, "{not json")
    assert Cart(storage).items == []

    storage.set_item(CART_STORAGE_KEY, json.dumps({"id": 1}))
    assert Cart(storage).items == []

    storage.set_item(CART_STORAGE_KEY, json.dumps([{"id": 1, "name": "x", "price": "free", "size": "M", "quantity": 1, "image": ""}]))
    assert Cart(storage).items == []

    storage.set_item(CART_STORAGE_KEY, json.dumps([{"id": 1, "name": "x", "price": 10, "size": "M", "quantity": 0, "image": ""}]))
    assert Cart(storage).items == []


def test_totals_do_not_drift(storage, tee, hoodie):
    cart = Cart(storage)
    ops = [
        ("add", tee, "M", 2),
        ("add", hoodie, "L", 1),
        ("update", 2, "L", 4),
        ("add", tee, "S", 1),
        ("remove", 1, "M", None),
        ("add", tee, "M", 5),
        ("update", 1, "S", 0),
    ]
    for op, a, size, q in ops:
        if op == "add":
            cart.add_item(a, size, q)
        elif op == "update":
            cart.update_quantity(a, size, q)
        else:
            cart.remove_item(a, size)
        assert cart.get_total() == sum(it.price * it.quantity for it in cart.items)
        assert cart.get_count() == sum(it.quantity for it in cart.items)
        assert len({(it.id, it.size) for it in cart.items}) == len(cart.items)

    assert cart.get_total() == 4 * 15000 + 5 * 5000
