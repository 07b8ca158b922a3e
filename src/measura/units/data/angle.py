import math

from measura.core.unit import Unit, UnitCategory

CATEGORY = UnitCategory(
    id="angle",
    name="Angle",
    description="Units for measuring plane angles",
    base_unit_id="degree",
    popular_units=("degree", "radian", "gradian", "turn"),
    units=(
        Unit.base("degree", "Degree", "°", aliases=("degrees", "deg"), plural_name="degrees"),
        Unit.linear("radian", "Radian", "rad", 180 / math.pi, aliases=("radians",), plural_name="radians"),
        Unit.linear("gradian", "Gradian", "grad", 0.9,
                    aliases=("gradians", "gon", "grade"), plural_name="gradians"),
        Unit.linear("arcminute", "Arcminute", "′", 1 / 60,
                    aliases=("arcminutes", "minute of arc", "arcmin"), plural_name="arcminutes"),
        Unit.linear("arcsecond", "Arcsecond", "″", 1 / 3600,
                    aliases=("arcseconds", "second of arc", "arcsec"), plural_name="arcseconds"),
        Unit.linear("turn", "Turn", "tr", 360.0,
                    aliases=("turns", "revolution", "revolutions", "rev"), plural_name="turns"),
    ),
)
