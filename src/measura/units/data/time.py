from measura.core.unit import Unit, UnitCategory

_DAY = 86_400.0
_YEAR = 365.2425 * _DAY  # Gregorian mean

CATEGORY = UnitCategory(
    id="time",
    name="Time",
    description="Units for measuring time intervals",
    base_unit_id="second",
    popular_units=("second", "minute", "hour", "day", "week"),
    units=(
        Unit.base("second", "Second", "s",
                  aliases=("sec", "secs", "seconds"), plural_name="seconds"),
        Unit.linear("millisecond", "Millisecond", "ms", 0.001,
                    aliases=("msec",), plural_name="milliseconds"),
        Unit.linear("microsecond", "Microsecond", "µs", 1e-6,
                    aliases=("us", "usec"), plural_name="microseconds"),
        Unit.linear("nanosecond", "Nanosecond", "ns", 1e-9,
                    aliases=("nsec",), plural_name="nanoseconds"),
        Unit.linear("minute", "Minute", "min",  60.0,
                    aliases=("mins", "minutes"), plural_name="minutes"),
        Unit.linear("hour", "Hour", "h", 3600.0,
                    aliases=("hr", "hrs", "hours"), plural_name="hours"),
        Unit.linear("day", "Day", "d", _DAY,
                    aliases=("days",), plural_name="days"),
        Unit.linear("week", "Week", "wk", 7 * _DAY,
                    aliases=("weeks",), plural_name="weeks"),
        Unit.linear("fortnight", "Fortnight", "fn", 14 * _DAY,
                    aliases=("fortnights",), plural_name="fortnights"),
        Unit.linear("month", "Month", "mo", _YEAR / 12,
                    aliases=("months",), plural_name="months"),
        Unit.linear("year", "Year", "yr", _YEAR,
                    aliases=("years", "annum"), plural_name="years"),
        Unit.linear("decade", "Decade", "dec", 10 * _YEAR,
                    aliases=("decades",), plural_name="decades"),
        Unit.linear("century", "Century", "c", 100 * _YEAR,
                    aliases=("centuries",), plural_name="centuries"),
    ),
)
