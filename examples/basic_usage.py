#!/usr/bin/env python3
"""
Basic Usage Example - funseq

This script demonstrates the funseq operations on small in-memory data.
It shows how to:
- Flatten nested sequences and group elements
- Fold, sum and or sequences
- Aggregate optional values
- Build a toolkit with 32-bit integer wrapping

Run: python examples/basic_usage.py
"""

from typing import Dict, Any, List

from funseq import (
    Option, elements_equal, flat_transform, fold, group, or_, somes,
    sum_alternative, sum_ints, sum_optional,
)
from funseq.logging import configure_logging
from funseq.toolkit import FunctionToolkit


def create_sample_orders() -> List[Dict[str, Any]]:
    """Create sample orders with line items."""
    return [
        {"customer": "ada", "items": [3, 5], "discount": Option.of(2)},
        {"customer": "bob", "items": [7], "discount": Option.absent()},
        {"customer": "ada", "items": [], "discount": Option.of(1)},
        {"customer": "cy", "items": [4, 4, 4], "discount": Option.absent()},
    ]


def main() -> None:
    configure_logging(level="INFO")
    orders = create_sample_orders()

    all_items = list(flat_transform(orders, lambda order: order["items"]))
    print(f"All items: {all_items}")
    print(f"Total (loop): {sum_ints(all_items)}, total (fold): {sum_alternative(all_items)}")

    by_customer = group(orders, lambda order: order["customer"])
    print(f"Orders per customer: {[len(g) for g in by_customer]}")

    largest = fold(all_items, 0, max)
    print(f"Largest item: {largest}")

    print(f"Any empty order: {or_([not order['items'] for order in orders])}")
    print(f"All orders for one customer: {elements_equal(orders, lambda order: order['customer'])}")

    discounts = [order["discount"] for order in orders]
    print(f"Discounts given: {list(somes(discounts))}, total: {sum_optional(discounts)}")

    toolkit = FunctionToolkit.from_config({"arithmetic": {"int_bits": 32}})
    print(f"Wrapped sum: {toolkit.sum_ints([2**31 - 1, 1])}")


if __name__ == "__main__":
    main()
