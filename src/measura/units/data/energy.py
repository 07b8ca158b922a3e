from measura.core.unit import Unit, UnitCategory

CATEGORY = UnitCategory(
    id="energy",
    name="Energy",
    description="Units for measuring energy",
    base_unit_id="joule",
    units=(
        Unit.base("joule", "Joule", "J", aliases=("joules",), plural_name="joules"),
        Unit.linear("kilojoule", "Kilojoule", "kJ", 1e3, aliases=("kilojoules",), plural_name="kilojoules"),
        Unit.linear("megajoule", "Megajoule", "MJ", 1e6, aliases=("megajoules",), plural_name="megajoules"),
        Unit.linear("calorie", "Calorie", "cal", 4.184,
                    aliases=("calories", "small calorie"), plural_name="calories"),
        Unit.linear("kilocalorie", "Kilocalorie", "kcal", 4184.0,
                    aliases=("kilocalories", "food calorie", "Cal"), plural_name="kilocalories"),
        Unit.linear("watt_hour", "Watt Hour", "Wh", 3600.0, aliases=("watt hours",), plural_name="watt hours"),
        Unit.linear("kilowatt_hour", "Kilowatt Hour", "kWh", 3.6e6,
                    aliases=("kilowatt hours", "kw h"), plural_name="kilowatt hours"),
        Unit.linear("british_thermal_unit", "British Thermal Unit", "BTU", 1055.05585262,
                    aliases=("btu", "british thermal units"), plural_name="British thermal units"),
        Unit.linear("electronvolt", "Electronvolt", "eV", 1.602176634e-19,
                    aliases=("electron volt", "electronvolts"), plural_name="electronvolts"),
        Unit.linear("foot_pound", "Foot-Pound", "ft·lbf", 1.3558179483314004,
                    aliases=("foot pound", "foot-pounds", "ft lbf"), plural_name="foot-pounds"),
    ),
)
