# catalog/schemas.py
from decimal import Decimal, ROUND_HALF_UP

from compare import formatting as fmt
from compare.schema import AttributeSchema, Field, Section, registry

GRADE = "grade"
VEHICLE = "vehicle"

# EMI shown on the comparison table: a flat 2% of the price per month
MONTHLY_RATE = Decimal("0.02")


def monthly_estimate(price) -> int:
    amount = Decimal(str(price or 0)) * MONTHLY_RATE
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _attr(key):
    return lambda e: e.attr(key)


def _engine_type(e):
    category = e.attr("category")
    if category in ("Hybrid", "Electric"):
        return category
    return "Petrol"


def build_grade_schema() -> AttributeSchema:
    return AttributeSchema(GRADE, (
        Section("Pricing", (
            Field("Base Price", lambda e: e.price, highlight=True, format=fmt.currency()),
            Field("Monthly EMI", lambda e: monthly_estimate(e.price), highlight=True,
                  format=fmt.currency("/mo")),
        )),
        Section("Engine Specifications", (
            Field("Engine", _attr("engine")),
            Field("Power", _attr("power")),
            Field("Torque", _attr("torque")),
            Field("Transmission", _attr("transmission")),
        )),
        Section("Performance", (
            Field("Acceleration (0-100 km/h)", _attr("acceleration"), highlight=True),
            Field("Fuel Economy", _attr("fuel_economy"), highlight=True),
            Field("CO2 Emissions", _attr("co2"), highlight=True),
        )),
        Section("Features", (
            Field("Key Features", lambda e: ", ".join(e.attr("features") or ())),
        )),
    ))


def build_vehicle_schema() -> AttributeSchema:
    return AttributeSchema(VEHICLE, (
        Section("Pricing & Value", (
            Field("Starting Price", lambda e: e.price, highlight=True, format=fmt.currency()),
            Field("Monthly EMI", lambda e: monthly_estimate(e.price), format=fmt.currency("/mo")),
            Field("Warranty", _attr("warranty")),
        )),
        Section("Performance Specifications", (
            Field("Engine Type", _engine_type, highlight=True),
            Field("Engine", _attr("engine")),
            Field("Power Output", _attr("power_hp"), format=fmt.number(" HP")),
            Field("Fuel Efficiency", _attr("fuel_economy"), format=fmt.number(" km/L")),
            Field("Transmission", _attr("transmission")),
        )),
        Section("Safety & Technology", (
            Field("Safety Rating", _attr("safety_rating"), highlight=True),
            Field("Infotainment Screen", _attr("screen_in"), format=fmt.number('"')),
        )),
        Section("Comfort & Convenience", (
            Field("Seating Capacity", _attr("seats"), format=fmt.number(" seats")),
            Field("Sunroof", _attr("sunroof"), format=fmt.yes_no),
        )),
    ))


def register_defaults(target=registry):
    """
    Register the built-in schemas. Called once from CatalogConfig.ready();
    the shared registry is read-only after startup, and the engine itself is
    handed its schema rather than looking it up.
    """
    target.register(build_grade_schema())
    target.register(build_vehicle_schema())
    return target
