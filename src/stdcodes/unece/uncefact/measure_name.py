"""UN/CEFACT unit of measure names.

Human-readable names of the units declared by ``MeasureCode``.
"""

from __future__ import annotations

from ...registry import CodeRegistry


class MeasureName(CodeRegistry):
    """Unit names, member for member with ``MeasureCode``."""

    # Quantity units
    PIECE = "Piece"
    UNIT = "Unit"
    PAIR = "Pair"
    DOZEN = "Dozen"
    GROSS = "Gross"
    HUNDRED = "Hundred"
    THOUSAND = "Thousand"
    TEN_PAIRS = "Ten Pairs"

    # Mass units (weight)
    KILOGRAM = "Kilogram"
    GRAM = "Gram"
    MILLIGRAM = "Milligram"
    METRIC_TON = "Metric Ton"
    POUND = "Pound"
    OUNCE = "Ounce"
    CARAT = "Carat"

    # Length units
    METER = "Meter"
    CENTIMETER = "Centimeter"
    HECTOMETER = "Hectometer"
    MILLIMETER = "Millimeter"
    KILOMETER = "Kilometer"
    INCH = "Inch"
    FOOT = "Foot"
    YARD = "Yard"
    MILE = "Mile"

    # Area units
    ACRE = "Acre"
    ACRE_FOOT = "Acre-Foot"
    HECTARE = "Hectare"
    SQUARE_CENTIMETER = "Square Centimeter"
    SQUARE_DECIMETER = "Square Decimeter"
    SQUARE_FOOT = "Square Foot"
    SQUARE_INCH = "Square Inch"
    SQUARE_KILOMETER = "Square Kilometer"
    SQUARE_METER = "Square Meter"
    SQUARE_MILLIMETER = "Square Millimeter"
    SQUARE_MILE = "Square Mile"
    SQUARE_YARD = "Square Yard"

    # Volume units
    BARREL = "Barrel"
    CUBIC_FOOT = "Cubic Foot"
    CUBIC_METER = "Cubic Meter"
    CUBIC_CENTIMETER = "Cubic Centimeter"
    CUBIC_DECIMETER = "Cubic Decimeter"
    IMPERIAL_GALLON = "Imperial Gallon"
    LITER = "Liter"
    MILLILITER = "Milliliter"
    US_GALLON = "US Gallon"

    # Time units
    DAY = "Day"
    HOUR = "Hour"
    MINUTE = "Minute"
    SECOND = "Second"
    MONTH = "Month"
    YEAR = "Year"
    WEEK = "Week"

    # Percentage and ratio units
    PERCENT = "Percent"
    PER_THOUSAND = "Per Thousand"
    PARTS_PER_MILLION = "Parts Per Million"

    # Energy units
    CALORIE = "Calorie"
    JOULE = "Joule"
    KILOCALORIE = "Kilocalorie"
    KILOJOULE = "Kilojoule"
    KILOWATT_HOUR = "Kilowatt-Hour"

    # Pressure units
    PASCAL = "Pascal"
    BAR = "Bar"
    MILLIBAR = "Millibar"
    POUND_PER_SQUARE_INCH = "Pound per Square Inch"

    # Temperature units
    CELSIUS = "Degree Celsius"
    FAHRENHEIT = "Degree Fahrenheit"
    KELVIN = "Kelvin"

    # Generic / dimensionless units & factors
    COUNT = "Count"
    NUMBER = "Number"
    RATIO = "Ratio"
    UNIT_OF_CAPITAL = "Unit of Capital"
    SCORE = "Score"
    POINT = "Point"

    # Degrees units
    ANGULAR = "Angular Degree"
    RADIAN = "Radian"

    # Common miscellaneous units
    AMPERE = "Ampere"
    BECQUEREL = "Becquerel"
    BIT = "Bit"
    BYTE = "Byte"
    COULOMB = "Coulomb"
    DECIBEL = "Decibel"
    FARAD = "Farad"
    GIGABYTE = "Gigabyte"
    GRAY = "Gray"
    HENRY = "Henry"
    HERTZ = "Hertz"
    KILOHERTZ = "Kilohertz"
    KILOBYTE = "Kilobyte"
    KILOWATT = "Kilowatt"
    LUMEN = "Lumen"
    LUX = "Lux"
    MEGAHERTZ = "Megahertz"
    MEGABYTE = "Megabyte"
    NEWTON = "Newton"
    OHM = "Ohm"
    POUND_FORCE = "Pound-force"
    REVOLUTION_PER_MINUTE = "Revolution per Minute"
    SIEVERT = "Sievert"
    SIEMENS = "Siemens"
    TESLA = "Tesla"
    VOLT = "Volt"
    WATT = "Watt"
    WEBER = "Weber"

    @classmethod
    def get_code(cls, name: str) -> str | None:
        """Return the unit code of a unit name, or None."""
        from .measure_code import MeasureCode

        return cls._lookup_paired(MeasureCode, name)

    @classmethod
    def get_symbol(cls, name: str) -> str | None:
        """Return the unit symbol of a unit name, or None."""
        from .measure_symbol import MeasureSymbol

        return cls._lookup_paired(MeasureSymbol, name)

    @classmethod
    def get_from_code(cls, code: str) -> str | None:
        from .measure_code import MeasureCode

        return MeasureCode.get_name(code)

    @classmethod
    def get_from_symbol(cls, symbol: str) -> str | None:
        from .measure_symbol import MeasureSymbol

        return MeasureSymbol.get_name(symbol)
