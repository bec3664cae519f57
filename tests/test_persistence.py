import json

import pytest

from tableside.constant import CUSTOM_ITEMS_KEY, ORDERS_KEY
from tableside.models import MenuItem, Order, OrderLine
from tableside.persistence import read_value, write_value


def test_load_all_on_missing_store_is_empty(order_store, custom_store):
    assert order_store.load_all() == []
    assert custom_store.load_all() == []


def test_save_all_overwrites_whole_collection(order_store, make_order):
    order_store.save_all([make_order("R1", Burger=1), make_order("R2", Soda=2)])
    order_store.save_all([make_order("R3", Nacho=1)])
    assert [order.id for order in order_store.load_all()] == ["R3"]


def test_save_load_round_trip_is_stable(order_store, db_path, make_order):
    order_store.save_all([make_order("R1", Burger=2, Soda=1), make_order("R1", Nacho=3)])
    before = read_value(ORDERS_KEY, db_path)
    order_store.save_all(order_store.load_all())
    assert read_value(ORDERS_KEY, db_path) == before


def test_stored_shape_uses_browser_keys(order_store, db_path):
    order = Order(id="R7", items={"Burger": OrderLine("dishes", 2)}, created_at="2024-01-01T00:00:00+00:00")
    order_store.save_all([order])
    assert json.loads(read_value(ORDERS_KEY, db_path)) == [
        {
            "id": "R7",
            "items": {"Burger": {"category": "dishes", "quantity": 2}},
            "createdAt": "2024-01-01T00:00:00+00:00",
        }
    ]


@pytest.mark.parametrize("raw", ["{not json", '{"id": "R1"}', "42", ""])
def test_corrupt_orders_degrade_to_empty(order_store, db_path, raw):
    write_value(ORDERS_KEY, raw, db_path)
    assert order_store.load_all() == []


def test_load_normalizes_malformed_entries(order_store, db_path):
    write_value(
        ORDERS_KEY,
        json.dumps(
            [
                "garbage",
                {"items": {}},
                {"id": "  "},
                {
                    "id": 12,
                    "items": {
                        "Burger": {"category": "dishes", "quantity": 2},
                        "Ghost": {"category": "dishes", "quantity": 0},
                        "Soda": {"quantity": 1},
                        "Nacho": {"category": "dishes", "quantity": "3"},
                        "Wrap": "oops",
                    },
                    "createdAt": "2024-01-01T00:00:00+00:00",
                },
            ]
        ),
        db_path,
    )
    orders = order_store.load_all()
    assert len(orders) == 1
    assert orders[0].id == "12"
    assert orders[0].items == {
        "Burger": OrderLine("dishes", 2),
        "Soda": OrderLine("uncategorized", 1),
    }


def test_custom_items_append_and_reload(custom_store):
    custom_store.append(MenuItem("desserts", "Baklava"))
    custom_store.append(MenuItem("desserts", "Baklava"))
    assert custom_store.load_all() == [MenuItem("desserts", "Baklava"), MenuItem("desserts", "Baklava")]


def test_corrupt_custom_items_degrade_to_empty(custom_store, db_path):
    write_value(CUSTOM_ITEMS_KEY, "[{broken", db_path)
    assert custom_store.load_all() == []


def test_custom_items_without_name_are_dropped(custom_store, db_path):
    write_value(CUSTOM_ITEMS_KEY, json.dumps([{"category": "x"}, {"name": "Tea"}]), db_path)
    assert custom_store.load_all() == [MenuItem("uncategorized", "Tea")]


def test_stores_share_one_database(order_store, custom_store, make_order):
    order_store.save_all([make_order("R1", Burger=1)])
    custom_store.append(MenuItem("desserts", "Baklava"))
    assert len(order_store.load_all()) == 1
    assert len(custom_store.load_all()) == 1
