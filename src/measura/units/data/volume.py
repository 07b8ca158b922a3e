from measura.core.unit import SubCategory, Unit, UnitCategory

_US_GALLON = 3.785411784  # liters

_METRIC = (
    Unit.base("liter", "Liter", "L",
              aliases=("litre", "litres", "liters", "l"), plural_name="liters"),
    Unit.linear("milliliter", "Milliliter", "mL",  0.001,
                aliases=("millilitre", "ml", "cc"), plural_name="milliliters"),
    Unit.linear("deciliter", "Deciliter", "dL", 0.1,
                aliases=("decilitre", "dl"), plural_name="deciliters"),
    Unit.linear("centiliter", "Centiliter", "cL", 0.01,
                aliases=("centilitre", "cl"), plural_name="centiliters"),
    Unit.linear("cubic_meter", "Cubic Meter", "m³", 1000.0,
                aliases=("cubic metre", "m3", "cu m"), plural_name="cubic meters"),
    Unit.linear("cubic_centimeter", "Cubic Centimeter", "cm³", 0.001,
                aliases=("cubic centimetre", "cm3"), plural_name="cubic centimeters"),
)

_US_CUSTOMARY = (
    Unit.linear("gallon_us", "Gallon (US)", "gal", _US_GALLON,
                aliases=("gallon", "gallons", "US gallon"), plural_name="gallons"),
    Unit.linear("quart_us", "Quart (US)", "qt", _US_GALLON / 4,
                aliases=("quart", "quarts"), plural_name="quarts"),
    Unit.linear("pint_us", "Pint (US)", "pt", _US_GALLON / 8,
                aliases=("pint", "pints"), plural_name="pints"),
    Unit.linear("cup_us", "Cup (US)", "cup", _US_GALLON / 16,
                aliases=("cups", "c"), plural_name="cups"),
    Unit.linear("fluid_ounce_us", "Fluid Ounce (US)", "fl oz", _US_GALLON / 128,
                aliases=("fluid ounce", "fluid ounces", "floz"), plural_name="fluid ounces"),
    Unit.linear("tablespoon_us", "Tablespoon (US)", "tbsp", _US_GALLON / 256,
                aliases=("tablespoon", "tablespoons", "tbs", "T"), plural_name="tablespoons"),
    Unit.linear("teaspoon_us", "Teaspoon (US)", "tsp", _US_GALLON / 768,
                aliases=("teaspoon", "teaspoons", "t"), plural_name="teaspoons"),
    Unit.linear("cubic_foot", "Cubic Foot", "ft³", 28.316846592,
                aliases=("cubic feet", "ft3", "cu ft"), plural_name="cubic feet"),
    Unit.linear("cubic_inch", "Cubic Inch", "in³", 0.016387064,
                aliases=("cubic inches", "in3", "cu in"), plural_name="cubic inches"),
)

_IMPERIAL = (
    Unit.linear("gallon_imperial", "Gallon (Imperial)", "imp gal", 4.54609,
                aliases=("imperial gallon", "UK gallon"), plural_name="imperial gallons"),
    Unit.linear("pint_imperial", "Pint (Imperial)", "imp pt", 0.56826125,
                aliases=("imperial pint", "UK pint"), plural_name="imperial pints"),
    Unit.linear("fluid_ounce_imperial", "Fluid Ounce (Imperial)", "imp fl oz", 0.0284130625,
                aliases=("imperial fluid ounce", "UK fluid ounce"),
                plural_name="imperial fluid ounces"),
)

CATEGORY = UnitCategory(
    id="volume",
    name="Volume",
    description="Units for measuring three-dimensional space",
    base_unit_id="liter",
    popular_units=("liter", "milliliter", "cubic_meter", "gallon_us", "cup_us", "fluid_ounce_us"),
    subcategories=(
        SubCategory("metric", "Metric", _METRIC),
        SubCategory("us", "US Customary", _US_CUSTOMARY),
        SubCategory("imperial", "Imperial", _IMPERIAL),
    ),
)
