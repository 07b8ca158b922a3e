from measura.core.unit import SubCategory, Unit, UnitCategory

_METRIC = (
    Unit.base("square_meter", "Square Meter", "m²",
              aliases=("square metres", "square meters", "sq m", "m2"), plural_name="square meters"),
    Unit.linear("square_kilometer", "Square Kilometer", "km²", 1_000_000.0,
                aliases=("square kilometres", "square kilometers", "sq km", "km2"),
                plural_name="square kilometers"),
    Unit.linear("square_centimeter", "Square Centimeter", "cm²", 0.0001,
                aliases=("square centimetres", "square centimeters", "sq cm", "cm2"),
                plural_name="square centimeters"),
    Unit.linear("square_millimeter", "Square Millimeter", "mm²", 0.000001,
                aliases=("square millimetres", "square millimeters", "sq mm", "mm2"),
                plural_name="square millimeters"),
    Unit.linear("hectare", "Hectare", "ha", 10_000.0,
                aliases=("hectares",), plural_name="hectares"),
    Unit.linear("are", "Are", "a", 100.0,
                aliases=("ares",), plural_name="ares"),
)

_IMPERIAL = (
    Unit.linear("square_inch", "Square Inch", "in²", 0.00064516,
                aliases=("square inches", "sq in", "in2"), plural_name="square inches"),
    Unit.linear("square_foot", "Square Foot", "ft²", 0.09290304,
                aliases=("square feet", "sq ft", "ft2"), plural_name="square feet"),
    Unit.linear("square_yard", "Square Yard", "yd²", 0.83612736,
                aliases=("square yards", "sq yd", "yd2"), plural_name="square yards"),
    Unit.linear("acre", "Acre", "ac", 4046.8564224,
                aliases=("acres",), plural_name="acres"),
    Unit.linear("square_mile", "Square Mile", "mi²", 2_589_988.110336,
                aliases=("square miles", "sq mi", "mi2"), plural_name="square miles"),
)

CATEGORY = UnitCategory(
    id="area",
    name="Area",
    description="Units for measuring two-dimensional space",
    base_unit_id="square_meter",
    popular_units=("square_meter", "square_kilometer", "square_foot", "acre", "hectare"),
    subcategories=(
        SubCategory("metric", "Metric", _METRIC, "International System of Units (SI)"),
        SubCategory("imperial", "Imperial / US", _IMPERIAL),
    ),
)
