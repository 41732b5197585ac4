from __future__ import annotations

import unittest
from datetime import date, time
from decimal import Decimal

from projects_dao import (
    BoundParameter,
    StatementParameters,
    StorageType,
    UnsupportedTypeError,
    bind,
    bind_all,
    storage_type_for,
)


class StorageTypeTests(unittest.TestCase):
    def test_closed_mapping_table(self) -> None:
        self.assertIs(storage_type_for(int), StorageType.INTEGER)
        self.assertIs(storage_type_for(Decimal), StorageType.DECIMAL)
        self.assertIs(storage_type_for(float), StorageType.DOUBLE)
        self.assertIs(storage_type_for(str), StorageType.VARCHAR)
        self.assertIs(storage_type_for(time), StorageType.OTHER)

    def test_unmapped_types_raise(self) -> None:
        for declared in (bool, date, bytes, list, type(None), "int"):
            with self.subTest(declared=declared):
                with self.assertRaises(UnsupportedTypeError):
                    storage_type_for(declared)  # type: ignore[arg-type]


class BindTests(unittest.TestCase):
    def test_null_decimal_binds_typed_null(self) -> None:
        params = StatementParameters()
        bind(params, 1, None, Decimal)

        self.assertEqual(
            params.bound, [BoundParameter(1, None, StorageType.DECIMAL)]
        )
        self.assertTrue(params.bound[0].is_null)
        self.assertEqual(params.values(), [None])

    def test_null_with_unmapped_type_raises(self) -> None:
        params = StatementParameters()
        with self.assertRaises(UnsupportedTypeError):
            bind(params, 1, None, bool)
        self.assertEqual(len(params), 0)

    def test_values_dispatch_on_declared_type(self) -> None:
        at = time(8, 30)
        params = bind_all(
            (7, int),
            (2.5, Decimal),
            (3, float),
            ("12", str),
            (at, time),
        )

        values = params.values()
        self.assertEqual(values, [7, Decimal("2.5"), 3.0, "12", at])
        self.assertIsInstance(values[1], Decimal)
        self.assertIsInstance(values[2], float)
        self.assertEqual(
            [p.storage_type for p in params],
            [
                StorageType.INTEGER,
                StorageType.DECIMAL,
                StorageType.DOUBLE,
                StorageType.VARCHAR,
                StorageType.OTHER,
            ],
        )

    def test_decimal_is_kept_as_is(self) -> None:
        amount = Decimal("10.00")
        params = bind_all((amount, Decimal))
        self.assertIs(params.values()[0], amount)

    def test_exact_numbers_widen_to_decimal(self) -> None:
        self.assertEqual(bind_all((12, Decimal)).values(), [Decimal("12")])
        self.assertEqual(bind_all((0.25, Decimal)).values(), [Decimal("0.25")])

    def test_mismatched_values_are_rejected_not_coerced(self) -> None:
        cases = [
            (3.7, int),
            (Decimal("2.9"), int),
            (True, int),
            ("7", int),
            (12, str),
            (Decimal("1.5"), float),
            ("1.5", Decimal),
            (True, Decimal),
            ("08:30", time),
        ]
        for value, declared in cases:
            with self.subTest(value=value, declared=declared):
                params = StatementParameters()
                with self.assertRaises(TypeError):
                    params.bind(1, value, declared)
                self.assertEqual(len(params), 0)

    def test_inexact_numbers_are_rejected(self) -> None:
        for value, declared in ((0.1, Decimal), (float("nan"), Decimal), (2**60 + 1, float)):
            with self.subTest(value=value, declared=declared):
                with self.assertRaises(ValueError):
                    bind_all((value, declared))

    def test_positions_must_be_contiguous(self) -> None:
        params = StatementParameters()
        params.bind(1, "a", str)
        params.bind(3, "c", str)
        with self.assertRaises(ValueError):
            params.values()

        params.bind(2, "b", str)
        self.assertEqual(params.values(), ["a", "b", "c"])

    def test_rebinding_a_position_replaces_value(self) -> None:
        params = StatementParameters()
        params.bind(1, 1, int)
        params.bind(1, None, int)
        self.assertEqual(params.values(), [None])

    def test_position_must_be_one_based(self) -> None:
        with self.assertRaises(ValueError):
            StatementParameters().bind(0, 1, int)

    def test_repr_lists_typed_slots(self) -> None:
        params = bind_all((1, int), (None, str))
        self.assertEqual(
            repr(params), "StatementParameters(1:INTEGER=1, 2:VARCHAR=None)"
        )
