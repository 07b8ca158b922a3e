from measura.core.unit import Unit, UnitCategory

CATEGORY = UnitCategory(
    id="pressure",
    name="Pressure",
    description="Units for measuring pressure",
    base_unit_id="pascal",
    popular_units=("pascal", "kilopascal", "bar", "psi", "atmosphere"),
    units=(
        Unit.base("pascal", "Pascal", "Pa", aliases=("pascals",), plural_name="pascals"),
        Unit.linear("kilopascal", "Kilopascal", "kPa", 1e3, aliases=("kilopascals",), plural_name="kilopascals"),
        Unit.linear("megapascal", "Megapascal", "MPa", 1e6, aliases=("megapascals",), plural_name="megapascals"),
        Unit.linear("bar", "Bar", "bar", 1e5, aliases=("bars",), plural_name="bars"),
        Unit.linear("millibar", "Millibar", "mbar", 100.0, aliases=("millibars", "hPa"), plural_name="millibars"),
        Unit.linear("atmosphere", "Atmosphere", "atm", 101_325.0,
                    aliases=("atmospheres", "standard atmosphere"), plural_name="atmospheres"),
        Unit.linear("psi", "Pound per Square Inch", "psi", 6894.757293168361,
                    aliases=("pounds per square inch", "lbf/in²"), plural_name="pounds per square inch"),
        Unit.linear("torr", "Torr", "Torr", 101_325.0 / 760, aliases=("torrs",), plural_name="torr"),
        Unit.linear("millimeter_of_mercury", "Millimeter of Mercury", "mmHg", 133.322387415,
                    aliases=("millimetres of mercury", "mm Hg"), plural_name="millimeters of mercury"),
    ),
)
