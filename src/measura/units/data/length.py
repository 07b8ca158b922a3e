from measura.core.unit import SubCategory, Unit, UnitCategory

_METRIC = (
    Unit.base("meter", "Meter", "m",
              aliases=("metre", "metres", "meters"), plural_name="meters"),
    Unit.linear("kilometer", "Kilometer", "km", 1000.0,
                aliases=("kilometre", "kilometres", "kms"), plural_name="kilometers"),
    Unit.linear("centimeter", "Centimeter", "cm", 0.01,
                aliases=("centimetre", "centimetres"), plural_name="centimeters"),
    Unit.linear("millimeter", "Millimeter", "mm", 0.001,
                aliases=("millimetre", "millimetres"), plural_name="millimeters"),
    Unit.linear("micrometer", "Micrometer", "µm", 1e-6,
                aliases=("micron", "microns", "micrometre", "um"), plural_name="micrometers"),
    Unit.linear("nanometer", "Nanometer", "nm", 1e-9,
                aliases=("nanometre",), plural_name="nanometers"),
    Unit.linear("decimeter", "Decimeter", "dm", 0.1,
                aliases=("decimetre",), plural_name="decimeters"),
)

_IMPERIAL = (
    Unit.linear("inch", "Inch", "in", 0.0254,
                aliases=("inches", '"', "″"), plural_name="inches"),
    Unit.linear("foot", "Foot", "ft", 0.3048,
                aliases=("feet", "'", "′"), plural_name="feet"),
    Unit.linear("yard", "Yard", "yd", 0.9144,
                aliases=("yards",), plural_name="yards"),
    Unit.linear("mile", "Mile", "mi", 1609.344,
                aliases=("miles", "statute mile"), plural_name="miles"),
)

_NAUTICAL_AND_ASTRONOMICAL = (
    Unit.linear("nautical_mile", "Nautical Mile", "nmi", 1852.0,
                aliases=("nautical miles", "NM"), plural_name="nautical miles"),
    Unit.linear("astronomical_unit", "Astronomical Unit", "au", 149_597_870_700.0,
                aliases=("astronomical units", "AU"), plural_name="astronomical units"),
    Unit.linear("light_year", "Light Year", "ly", 9_460_730_472_580_800.0,
                aliases=("light years", "lightyear"), plural_name="light years"),
)

CATEGORY = UnitCategory(
    id="length",
    name="Length",
    description="Units for measuring distance or length",
    base_unit_id="meter",
    popular_units=("meter", "kilometer", "centimeter", "millimeter", "inch", "foot", "yard", "mile"),
    subcategories=(
        SubCategory("metric", "Metric", _METRIC, "International System of Units (SI)"),
        SubCategory("imperial", "Imperial / US", _IMPERIAL, "Imperial and US customary units"),
        SubCategory("nautical", "Nautical & Astronomical", _NAUTICAL_AND_ASTRONOMICAL),
    ),
)
