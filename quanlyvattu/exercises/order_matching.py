"""Find the auction price that matches the largest volume of orders."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass

MIN_PRICE = 8000
MAX_PRICE = 10000


@dataclass(frozen=True)
class Order:
    """A buy or sell order: type (ATO or LO), quantity, limit price and time."""

    kind: str
    quantity: int
    price: int
    time: int


def sort_buy_orders(orders: Iterable[Order]) -> list[Order]:
    """Buy orders by highest price first, then earliest time."""
    return sorted(orders, key=lambda order: (-order.price, order.time))


def sort_sell_orders(orders: Iterable[Order]) -> list[Order]:
    """Sell orders by lowest price first, then earliest time."""
    return sorted(orders, key=lambda order: (order.price, order.time))


def best_match_price(buys: Iterable[Order], sells: Iterable[Order]) -> int:
    """Lowest price in the trading range matching the most volume; 0 if nothing matches."""
    buys = sort_buy_orders(buys)
    sells = sort_sell_orders(sells)
    best_price, best_volume = 0, 0
    for price in range(MIN_PRICE, MAX_PRICE + 1):
        demand = sum(order.quantity for order in buys if order.price >= price)
        supply = sum(order.quantity for order in sells if order.price <= price)
        volume = min(demand, supply)
        if volume > best_volume:
            best_price, best_volume = price, volume
    return best_price


def _read_orders(tokens, count: int) -> list[Order]:
    orders = []
    for number in range(1, count + 1):
        print(f"Lenh {number} (loai, soLuong, giaDat, thoiGian): ", end="")
        kind = next(tokens)
        quantity, price, time = int(next(tokens)), int(next(tokens)), int(next(tokens))
        orders.append(Order(kind, quantity, price, time))
    return orders


def main(argv: list[str] | None = None) -> int:
    """Read buy and sell orders from standard input and print the matching price."""
    tokens = iter(sys.stdin.read().split())
    print("Nhap so luong lenh mua: ", end="")
    buy_count = int(next(tokens))
    print("Nhap thong tin lenh mua:")
    buys = _read_orders(tokens, buy_count)
    print("Nhap so luong lenh ban: ", end="")
    sell_count = int(next(tokens))
    print("Nhap thong tin lenh ban:")
    sells = _read_orders(tokens, sell_count)
    print(f"Gia khop lenh tot nhat: {best_match_price(buys, sells)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())