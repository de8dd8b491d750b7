from decimal import Decimal

from django.test import SimpleTestCase, override_settings

from compare import formatting as fmt
from compare.schema import Field


class MoneyTests(SimpleTestCase):
    def test_whole_amounts(self):
        self.assertEqual(fmt.money(35500), "AED 35,500")
        self.assertEqual(fmt.money(Decimal("249900.00")), "AED 249,900")

    def test_fractional_amounts_keep_cents(self):
        self.assertEqual(fmt.money("35500.5"), "AED 35,500.50")

    def test_bad_values_render_as_missing(self):
        for value in (None, "", "abc", True):
            self.assertEqual(fmt.money(value), fmt.MISSING)

    @override_settings(COMPARE_CURRENCY="USD")
    def test_currency_from_settings(self):
        self.assertEqual(fmt.money(100), "USD 100")
        self.assertEqual(fmt.money(100, "EUR"), "EUR 100")

    def test_currency_suffix(self):
        self.assertEqual(fmt.currency("/mo")(710), "AED 710/mo")
        self.assertEqual(fmt.currency("/mo")(None), fmt.MISSING)


class ValueFormatTests(SimpleTestCase):
    def test_number_units(self):
        self.assertEqual(fmt.number(" HP")(218), "218 HP")
        self.assertEqual(fmt.number(" km/L")(22.2), "22.2 km/L")
        self.assertEqual(fmt.number('"')(8.0), '8"')
        self.assertEqual(fmt.number(" seats")(None), fmt.MISSING)

    def test_yes_no(self):
        self.assertEqual(fmt.yes_no(True), "Standard")
        self.assertEqual(fmt.yes_no(False), "Not Available")
        self.assertEqual(fmt.yes_no(None), fmt.MISSING)

    def test_text(self):
        self.assertEqual(fmt.text(""), fmt.MISSING)
        self.assertEqual(fmt.text(True), "Standard")
        self.assertEqual(fmt.text(7), "7")

    def test_format_value_uses_field_formatter(self):
        plain = Field("Seats", lambda e: None)
        hp = Field("Power", lambda e: None, format=fmt.number(" HP"))
        self.assertEqual(fmt.format_value(plain, 5), "5")
        self.assertEqual(fmt.format_value(hp, 218), "218 HP")
        self.assertEqual(fmt.format_value(hp, None), fmt.MISSING)
