from measura.core.unit import Unit, UnitCategory

CATEGORY = UnitCategory(
    id="mass",
    name="Mass",
    description="Units for measuring mass or weight",
    base_unit_id="kilogram",
    popular_units=("kilogram", "gram", "milligram", "pound", "ounce"),
    units=(
        Unit.base("kilogram", "Kilogram", "kg",
                  aliases=("kilo", "kilos", "kilograms"), plural_name="kilograms"),
        Unit.linear("gram", "Gram", "g", 0.001,
                    aliases=("gramme", "grams"), plural_name="grams"),
        Unit.linear("milligram", "Milligram", "mg", 1e-6,
                    aliases=("milligramme",), plural_name="milligrams"),
        Unit.linear("microgram", "Microgram", "µg", 1e-9,
                    aliases=("mcg", "ug"), plural_name="micrograms"),
        Unit.linear("metric_ton", "Metric Ton", "t", 1000.0,
                    aliases=("tonne", "tonnes", "metric tons"), plural_name="metric tons"),
        Unit.linear("pound", "Pound", "lb", 0.45359237,
                    aliases=("lbs", "pounds"), plural_name="pounds"),
        Unit.linear("ounce", "Ounce", "oz", 0.028349523125,
                    aliases=("ounces",), plural_name="ounces"),
        Unit.linear("stone", "Stone", "st", 6.35029318,
                    aliases=("stones",), plural_name="stone"),
        Unit.linear("short_ton", "Short Ton", "ton", 907.18474,
                    aliases=("US ton", "short tons"), plural_name="short tons"),
        Unit.linear("carat", "Carat", "ct", 0.0002,
                    aliases=("carats",), plural_name="carats"),
    ),
)
