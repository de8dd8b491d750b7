from decimal import Decimal

from django.test import SimpleTestCase

from compare.entities import ComparableEntity
from compare.schema import SchemaRegistry

from .providers import InMemoryCatalog, catalog_for, grade_catalog, grade_models, vehicle_catalog
from .schemas import GRADE, VEHICLE, build_vehicle_schema, monthly_estimate, register_defaults


def _entity(pid, price=0):
    return ComparableEntity(id=pid, name=pid.upper(), price=price)


class InMemoryCatalogTests(SimpleTestCase):
    def test_lookup_keeps_requested_order_and_skips_unknown(self):
        cat = InMemoryCatalog([_entity("a"), _entity("b"), _entity("c")])
        self.assertEqual([e.id for e in cat.by_ids(["c", "x", "a"])], ["c", "a"])
        self.assertEqual(cat.ids(), ["a", "b", "c"])
        self.assertIsNone(cat.get("x"))
        self.assertIn("b", cat)
        self.assertEqual(len(cat), 3)

    def test_duplicate_ids_rejected(self):
        with self.assertRaises(ValueError):
            InMemoryCatalog([_entity("a"), _entity("a")])

    def test_entities_are_read_only(self):
        e = vehicle_catalog().get("camry")
        with self.assertRaises(TypeError):
            e.attributes["seats"] = 9

    def test_entities_are_hashable_by_id(self):
        e = vehicle_catalog().get("camry")
        self.assertEqual(hash(e), hash("camry"))
        self.assertEqual(len({e, vehicle_catalog().get("camry")}), 1)


class CatalogForTests(SimpleTestCase):
    def test_surfaces(self):
        self.assertIs(catalog_for(VEHICLE), vehicle_catalog())
        self.assertEqual(catalog_for(GRADE, "camry").ids(), ["camry-le", "camry-xle", "camry-limited"])
        self.assertIsNone(catalog_for(GRADE))
        self.assertIsNone(catalog_for(GRADE, "supra"))
        self.assertIsNone(catalog_for("boats"))
        self.assertIsNone(catalog_for(VEHICLE, "anything"))

    def test_every_grade_model_has_a_catalog(self):
        for model in grade_models():
            self.assertGreater(len(grade_catalog(model)), 1)


class SchemaTests(SimpleTestCase):
    def test_monthly_estimate(self):
        self.assertEqual(monthly_estimate(35500), 710)
        self.assertEqual(monthly_estimate(Decimal("84900")), 1698)
        self.assertEqual(monthly_estimate(None), 0)

    def test_engine_type_derived_from_category(self):
        field = next(f for f in build_vehicle_schema().fields() if f.label == "Engine Type")
        cat = vehicle_catalog()
        self.assertEqual(field.extract(cat.get("rav4-hybrid")), "Hybrid")
        self.assertEqual(field.extract(cat.get("prado")), "Petrol")

    def test_register_defaults(self):
        reg = register_defaults(SchemaRegistry())
        self.assertEqual(reg.names(), [GRADE, VEHICLE])
        self.assertEqual(
            reg.get(GRADE).section_titles(),
            ["Pricing", "Engine Specifications", "Performance", "Features"],
        )
