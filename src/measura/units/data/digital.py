"""Digital information units.

Byte is the base. The binary (IEC) and decimal (SI) families live in separate
subcategories; ``bit`` and ``byte`` are declared in the binary family only.
"""

from measura.core.unit import SubCategory, Unit, UnitCategory


def _byte_multiple(id: str, name: str, symbol: str, factor: float) -> Unit:
    plural = name.lower() + "s"
    return Unit.linear(id, name, symbol, factor, aliases=(plural,), plural_name=plural)


_BINARY = (
    Unit.linear("bit", "Bit", "bit", 0.125, aliases=("bits", "b"), plural_name="bits"),
    Unit.base("byte", "Byte", "B", aliases=("bytes", "octet"), plural_name="bytes"),
    _byte_multiple("kibibyte", "Kibibyte", "KiB", 1024.0),
    _byte_multiple("mebibyte", "Mebibyte", "MiB", 1024.0 ** 2),
    _byte_multiple("gibibyte", "Gibibyte", "GiB", 1024.0 ** 3),
    _byte_multiple("tebibyte", "Tebibyte", "TiB", 1024.0 ** 4),
    _byte_multiple("pebibyte", "Pebibyte", "PiB", 1024.0 ** 5),
)

_DECIMAL = (
    _byte_multiple("kilobyte", "Kilobyte", "KB", 1e3),
    _byte_multiple("megabyte", "Megabyte", "MB", 1e6),
    _byte_multiple("gigabyte", "Gigabyte", "GB", 1e9),
    _byte_multiple("terabyte", "Terabyte", "TB", 1e12),
    _byte_multiple("petabyte", "Petabyte", "PB", 1e15),
)

_BITS = (
    Unit.linear("kilobit", "Kilobit", "Kb", 125.0, aliases=("kilobits", "Kbit"), plural_name="kilobits"),
    Unit.linear("megabit", "Megabit", "Mb", 125e3, aliases=("megabits", "Mbit"), plural_name="megabits"),
    Unit.linear("gigabit", "Gigabit", "Gb", 125e6, aliases=("gigabits", "Gbit"), plural_name="gigabits"),
)

_COMPUTING = (
    Unit.linear("nibble", "Nibble", "nibble", 0.5,
                aliases=("nibbles", "nybble", "half-byte"), plural_name="nibbles"),
    Unit.linear("word", "Word", "word", 4.0,
                aliases=("words", "computer word"), plural_name="words"),
    Unit.linear("sector", "Sector", "sector", 512.0,
                aliases=("sectors", "disk sector"), plural_name="sectors"),
)

CATEGORY = UnitCategory(
    id="digital",
    name="Digital",
    description="Units for measuring digital information",
    base_unit_id="byte",
    popular_units=("byte", "kilobyte", "megabyte", "gigabyte", "terabyte", "bit"),
    subcategories=(
        SubCategory("binary", "Binary (IEC)", _BINARY, "Power-of-two units as defined by IEC"),
        SubCategory("decimal", "Decimal (SI)", _DECIMAL, "Power-of-ten units"),
        SubCategory("bits", "Bits", _BITS),
        SubCategory("computing", "Computing", _COMPUTING),
    ),
)
