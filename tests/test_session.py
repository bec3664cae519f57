import pytest

from tableside.models import MenuItem, OrderLine
from tableside.session import EmptyOrderError, OrderSession


@pytest.fixture
def session(order_store, custom_store):
    return OrderSession(order_store, custom_store, [MenuItem("dishes", "Burger")])


def test_start_ignores_blank_reservation(session):
    assert session.start("   ") is False
    assert not session.active


def test_start_trims_and_replaces_previous_order(session):
    assert session.start(" R1 ")
    session.add_item("Burger", "dishes")
    assert session.start("R2")
    assert session.order.id == "R2"
    assert session.order.items == {}


def test_add_item_without_order_is_noop(session):
    session.add_item("Burger", "dishes")
    assert session.order is None


def test_add_item_increments_and_keeps_first_category(session):
    session.start("R1")
    session.add_item("Burger", "dishes")
    session.add_item("Burger", "specials")
    assert session.order.items == {"Burger": OrderLine("dishes", 2)}


def test_adjust_quantity_removes_line_at_zero(session):
    session.start("R1")
    session.add_item("Burger", "dishes")
    session.adjust_quantity("Burger", 2)
    assert session.order.items["Burger"].quantity == 3
    session.adjust_quantity("Burger", -5)
    assert "Burger" not in session.order.items


def test_adjust_quantity_on_missing_line_is_noop(session):
    session.start("R1")
    session.adjust_quantity("Soda", 1)
    assert session.order.items == {}


def test_quantities_stay_positive_after_mixed_edits(session):
    session.start("R1")
    for name, delta in [("A", 1), ("B", -1), ("A", -1), ("A", -1), ("B", 3), ("C", 0)]:
        session.add_item(name, "dishes")
        session.adjust_quantity(name, delta)
    assert all(line.quantity > 0 for line in session.order.items.values())


def test_remove_item(session):
    session.start("R1")
    session.add_item("Burger", "dishes")
    session.remove_item("Burger")
    session.remove_item("Burger")
    assert session.order.items == {}


def test_clear_keeps_reservation(session):
    session.start("R1")
    created_at = session.order.created_at
    session.add_item("Burger", "dishes")
    session.clear()
    assert session.order.id == "R1"
    assert session.order.created_at == created_at
    assert session.order.items == {}


def test_submit_persists_and_ends_session(session, order_store):
    session.start("R1")
    session.add_item("Burger", "dishes")
    session.add_item("Burger", "dishes")
    submitted = session.submit()

    assert submitted.id == "R1"
    assert not session.active
    stored = order_store.load_all()
    assert len(stored) == 1
    assert stored[0].id == "R1"
    assert stored[0].items == {"Burger": OrderLine("dishes", 2)}


def test_submit_without_items_is_rejected(session, order_store):
    with pytest.raises(EmptyOrderError, match="at least one item"):
        session.submit()
    session.start("R1")
    with pytest.raises(EmptyOrderError):
        session.submit()
    assert session.active
    assert order_store.load_all() == []


def test_submit_rereads_store_before_appending(session, order_store, make_order):
    order_store.save_all([make_order("R0", Soda=1)])
    session.start("R1")
    session.add_item("Burger", "dishes")
    # Another view completes R0 after this session started.
    order_store.save_all([])
    session.submit()
    assert [order.id for order in order_store.load_all()] == ["R1"]


def test_duplicate_reservation_ids_are_kept(session, order_store):
    for _ in range(2):
        session.start("R1")
        session.add_item("Burger", "dishes")
        session.submit()
    assert [order.id for order in order_store.load_all()] == ["R1", "R1"]


def test_add_custom_menu_item(session, custom_store):
    item = session.add_custom_menu_item(" desserts ", " Baklava ")
    assert item == MenuItem("desserts", "Baklava")
    assert session.items[-1] == item
    assert custom_store.load_all() == [item]


@pytest.mark.parametrize("category, name", [("", "Tea"), ("drinks", "  ")])
def test_add_custom_menu_item_rejects_blank_fields(session, custom_store, category, name):
    assert session.add_custom_menu_item(category, name) is None
    assert len(session.items) == 1
    assert custom_store.load_all() == []
