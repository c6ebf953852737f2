# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from lotwise.reconciliation import find_duplicate_lot_numbers, order_lots


def test_orders_by_lot_number(lot_factory):
    lots = [lot_factory(3), lot_factory(1), lot_factory(2)]
    assert [lot.lot_no for lot in order_lots(lots)] == [1, 2, 3]


def test_ties_keep_input_order(lot_factory):
    a = lot_factory(2, lot_id="a")
    b = lot_factory(1, lot_id="b")
    c = lot_factory(2, lot_id="c")
    assert [lot.id for lot in order_lots([a, b, c])] == ["b", "a", "c"]
    assert [lot.id for lot in order_lots([c, b, a])] == ["b", "c", "a"]


def test_does_not_mutate_input(lot_factory):
    lots = [lot_factory(2), lot_factory(1)]
    order_lots(lots)
    assert [lot.lot_no for lot in lots] == [2, 1]


def test_empty_input():
    assert order_lots([]) == []


def test_find_duplicate_lot_numbers_per_scope(lot_factory):
    lots = [
        lot_factory(1, lot_id="a"),
        lot_factory(1, lot_id="b"),
        lot_factory(2),
        # Same number in another block is not a duplicate
        lot_factory(2, block_id="block-2"),
    ]
    assert find_duplicate_lot_numbers(lots) == {("phase-1", "block-1"): [1]}


def test_no_duplicates(lot_factory):
    assert find_duplicate_lot_numbers([lot_factory(1), lot_factory(2)]) == {}
