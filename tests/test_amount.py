from __future__ import annotations

import unittest

try:
    from rmb import amount
except ModuleNotFoundError as exc:  # pragma: no cover - env-dependent
    amount = None  # type: ignore[assignment]
    _IMPORT_ERROR = exc
else:
    _IMPORT_ERROR = None


@unittest.skipIf(amount is None, f"Missing dependency: {_IMPORT_ERROR}")
class AmountValidationTests(unittest.TestCase):
    def test_accepts_integers_and_two_decimals(self) -> None:
        for text in ("0", "1", "007", "1234", "0.5", "0.05", "1234.56", "99999999999999999999"):
            with self.subTest(text=text):
                self.assertTrue(amount.is_valid_amount(text))

    def test_rejects_malformed_text(self) -> None:
        for text in (
            "",
            ".",
            ".5",
            "5.",
            "1.234",
            "1.2.3",
            "-1",
            "+1",
            "1,234.50",
            " 12",
            "12 ",
            "12\n",
            "1e3",
            "abc",
            "１２",  # full-width digits
        ):
            with self.subTest(text=text):
                self.assertFalse(amount.is_valid_amount(text))

    def test_rejects_non_string(self) -> None:
        self.assertFalse(amount.is_valid_amount(None))
        self.assertFalse(amount.is_valid_amount(12))

    def test_parse_amount_splits_parts(self) -> None:
        self.assertEqual(amount.parse_amount("123"), amount.Amount("123", ""))
        self.assertEqual(amount.parse_amount("123.4"), amount.Amount("123", "4"))
        self.assertEqual(amount.parse_amount("0.05"), amount.Amount("0", "05"))

    def test_parse_amount_empty(self) -> None:
        with self.assertRaises(amount.EmptyInput):
            amount.parse_amount("")

    def test_parse_amount_malformed(self) -> None:
        with self.assertRaises(amount.MalformedAmount) as ctx:
            amount.parse_amount("1.234")
        self.assertEqual(ctx.exception.text, "1.234")

    def test_error_hierarchy(self) -> None:
        self.assertTrue(issubclass(amount.EmptyInput, amount.InvalidInput))
        self.assertTrue(issubclass(amount.MalformedAmount, amount.InvalidInput))
        self.assertTrue(issubclass(amount.InvalidInput, amount.AmountError))
        self.assertTrue(issubclass(amount.AmountTooLarge, amount.AmountError))
        self.assertTrue(issubclass(amount.AmountError, ValueError))


@unittest.skipIf(amount is None, f"Missing dependency: {_IMPORT_ERROR}")
class SanitizeAmountTests(unittest.TestCase):
    def test_drops_non_digit_characters(self) -> None:
        self.assertEqual(amount.sanitize_amount("¥1,234.50"), "1234.50")
        self.assertEqual(amount.sanitize_amount("12a3"), "123")

    def test_keeps_first_decimal_point(self) -> None:
        self.assertEqual(amount.sanitize_amount("1.2.3"), "1.23")
        self.assertEqual(amount.sanitize_amount("5.."), "5.")

    def test_truncates_to_two_decimals(self) -> None:
        self.assertEqual(amount.sanitize_amount("1.23456"), "1.23")

    def test_result_may_still_be_invalid(self) -> None:
        self.assertEqual(amount.sanitize_amount("abc"), "")
        self.assertFalse(amount.is_valid_amount(amount.sanitize_amount("5.")))


if __name__ == "__main__":
    unittest.main()
