"""Temperature scales. Celsius is the base; the others are affine maps onto it."""

from measura.core.unit import Unit, UnitCategory

CATEGORY = UnitCategory(
    id="temperature",
    name="Temperature",
    description="Temperature measurement scales",
    base_unit_id="celsius",
    popular_units=("celsius", "fahrenheit", "kelvin"),
    units=(
        Unit.base("celsius", "Celsius", "°C",
                  aliases=("centigrade", "degrees Celsius", "C", "deg C"),
                  plural_name="degrees Celsius"),
        # F = C × 9/5 + 32
        Unit.affine("fahrenheit", "Fahrenheit", "°F", 5 / 9, 32.0,
                    aliases=("degrees Fahrenheit", "F", "deg F"),
                    plural_name="degrees Fahrenheit"),
        Unit.affine("kelvin", "Kelvin", "K", 1.0, 273.15,
                    aliases=("kelvins", "degrees Kelvin", "deg K"),
                    plural_name="kelvins"),
        # R = C × 9/5 + 491.67
        Unit.affine("rankine", "Rankine", "°R", 5 / 9, 491.67,
                    aliases=("degrees Rankine", "R", "deg R"),
                    plural_name="degrees Rankine"),
        Unit.affine("reaumur", "Réaumur", "°Ré", 5 / 4,
                    aliases=("degrees Reaumur", "Reaumur", "Ré", "Re"),
                    plural_name="degrees Réaumur"),
        # De = (100 - C) × 3/2
        Unit.affine("delisle", "Delisle", "°De", -2 / 3, 150.0,
                    aliases=("degrees Delisle", "Delisle", "De"),
                    plural_name="degrees Delisle"),
        Unit.affine("newton", "Newton", "°N", 100 / 33,
                    aliases=("degrees Newton",),
                    plural_name="degrees Newton"),
        # Rø = C × 21/40 + 7.5
        Unit.affine("romer", "Rømer", "°Rø", 40 / 21, 7.5,
                    aliases=("degrees Romer", "Romer", "Rø", "Ro"),
                    plural_name="degrees Rømer"),
        # UK oven dial: Gas Mark 1 = 135 °C, 13.9 °C per step
        Unit.affine("gas_mark", "Gas Mark", "GM", 13.9, 1 - 135 / 13.9,
                    aliases=("gas mark", "gas"),
                    plural_name="gas marks"),
    ),
)
