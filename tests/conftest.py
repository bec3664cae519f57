# conftest.py
import pytest

from tableside import config
from tableside.models import Order, OrderLine
from tableside.persistence import CustomItemStore, OrderStore


@pytest.fixture(autouse=True)
def debug_log_path(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setattr(config, "DEBUG_LOG_PATH", str(path))
    return path


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data" / "tableside.db")


@pytest.fixture
def order_store(db_path):
    return OrderStore(db_path)


@pytest.fixture
def custom_store(db_path):
    return CustomItemStore(db_path)


@pytest.fixture
def menu_file(tmp_path):
    path = tmp_path / "listofitems.txt"
    path.write_text(
        "# house menu\n"
        "dishes|Burger\n"
        "dishes, Nacho\n"
        "drinks;Soda\r\n"
        "\n"
        "Water\n",
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture
def make_order():
    def _make(order_id, **quantities):
        return Order(
            id=order_id,
            items={name: OrderLine(category="dishes", quantity=qty) for name, qty in quantities.items()},
        )

    return _make
