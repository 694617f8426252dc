"""Smoke test of the demo run."""
from models.product import Product
from main import run_demo


def test_run_demo(tracker):
    run_demo(tracker)
    assert tracker.get_stock(Product.APPLES) == 20
    assert tracker.get_entry(Product.ORANGES) is None
    lines = tracker.report()
    assert [line.product for line in lines] == [Product.APPLES]
