import io

from quanlyvattu.exercises.order_matching import (
    MAX_PRICE,
    MIN_PRICE,
    Order,
    best_match_price,
    main,
    sort_buy_orders,
    sort_sell_orders,
)


def test_buy_orders_highest_price_then_earliest():
    late_high = Order("LO", 10, 9500, 5)
    early_high = Order("LO", 10, 9500, 1)
    low = Order("LO", 10, 8200, 0)
    assert sort_buy_orders([low, late_high, early_high]) == [early_high, late_high, low]


def test_sell_orders_lowest_price_then_earliest():
    late_low = Order("LO", 10, 8100, 7)
    early_low = Order("LO", 10, 8100, 2)
    high = Order("LO", 10, 9900, 0)
    assert sort_sell_orders([high, late_low, early_low]) == [early_low, late_low, high]


def test_single_pair_matches_at_sell_price():
    buys = [Order("LO", 100, 9000, 1)]
    sells = [Order("LO", 100, 8500, 2)]
    assert best_match_price(buys, sells) == 8500


def test_no_overlap_gives_zero():
    buys = [Order("LO", 100, 8000, 1)]
    sells = [Order("LO", 100, 9000, 2)]
    assert best_match_price(buys, sells) == 0


def test_prices_outside_range_give_zero():
    buys = [Order("LO", 50, MAX_PRICE + 2000, 1)]
    sells = [Order("LO", 50, MAX_PRICE + 1000, 1)]
    assert best_match_price(buys, sells) == 0


def test_result_lies_in_range_when_matched():
    buys = [Order("LO", 30, 9200, 1), Order("ATO", 20, 9800, 2)]
    sells = [Order("LO", 40, 8700, 1), Order("LO", 10, 9100, 3)]
    price = best_match_price(buys, sells)
    assert MIN_PRICE <= price <= MAX_PRICE
    assert any(order.price <= price for order in sells)
    assert any(order.price >= price for order in buys)


def test_inputs_are_not_reordered():
    buys = [Order("LO", 10, 8500, 2), Order("LO", 10, 9500, 1)]
    original = list(buys)
    best_match_price(buys, [Order("LO", 10, 8400, 1)])
    assert buys == original


def test_main_prints_price(monkeypatch, capsys):
    data = "1\nLO 100 9000 1\n1\nLO 100 8500 2\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.strip().endswith("Gia khop lenh tot nhat: 8500")