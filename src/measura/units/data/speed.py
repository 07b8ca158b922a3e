from measura.core.unit import SubCategory, Unit, UnitCategory

_METRIC = (
    Unit.base("meter_per_second", "Meter per Second", "m/s",
              aliases=("metres per second", "meters per second", "m/sec"),
              plural_name="meters per second"),
    Unit.linear("kilometer_per_second", "Kilometer per Second", "km/s", 1000.0,
                aliases=("kilometres per second", "kilometers per second", "km/sec"),
                plural_name="kilometers per second"),
    Unit.linear("kilometer_per_hour", "Kilometer per Hour", "km/h", 1 / 3.6,
                aliases=("kilometres per hour", "kilometers per hour", "kph"),
                plural_name="kilometers per hour"),
    Unit.linear("centimeter_per_second", "Centimeter per Second", "cm/s", 0.01,
                aliases=("centimetres per second", "centimeters per second", "cm/sec"),
                plural_name="centimeters per second"),
)

_IMPERIAL = (
    Unit.linear("mile_per_hour", "Mile per Hour", "mph", 0.44704,
                aliases=("miles per hour", "mi/h"), plural_name="miles per hour"),
    Unit.linear("foot_per_second", "Foot per Second", "ft/s", 0.3048,
                aliases=("feet per second", "fps", "ft/sec"), plural_name="feet per second"),
    Unit.linear("inch_per_second", "Inch per Second", "in/s", 0.0254,
                aliases=("inches per second", "ips", "in/sec"), plural_name="inches per second"),
)

_OTHER = (
    Unit.linear("knot", "Knot", "kn", 1852 / 3600,
                aliases=("knots", "kt", "kts", "nautical mile per hour"), plural_name="knots"),
    Unit.linear("speed_of_light", "Speed of Light", "c", 299_792_458.0,
                aliases=("lightspeed", "speed of light in vacuum"), plural_name="times light speed"),
    Unit.linear("mach", "Mach", "Mach", 343.0,
                aliases=("mach number", "speed of sound in air"), plural_name="Mach"),
)

CATEGORY = UnitCategory(
    id="speed",
    name="Speed",
    description="Units for measuring velocity",
    base_unit_id="meter_per_second",
    popular_units=("kilometer_per_hour", "mile_per_hour", "meter_per_second", "knot"),
    subcategories=(
        SubCategory("metric", "Metric", _METRIC),
        SubCategory("imperial", "Imperial / US", _IMPERIAL),
        SubCategory("other", "Maritime & Physics", _OTHER),
    ),
)
