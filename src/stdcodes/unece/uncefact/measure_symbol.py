"""UN/CEFACT unit of measure display symbols.

Symbols of the units declared by ``MeasureCode``. A few units have no SI
symbol; those use a conventional short form (``"qty"``, ``"score"``).
"""

from __future__ import annotations

from ...registry import CodeRegistry


class MeasureSymbol(CodeRegistry):
    """Unit symbols, member for member with ``MeasureCode``."""

    # Quantity units
    PIECE = "pc"  # Piece / Each
    UNIT = "un"  # Each / Unit (Using 'un' for unit symbol)
    PAIR = "pr"  # Pair
    DOZEN = "dz"  # Dozen
    GROSS = "gr"  # Gross (144 units)
    HUNDRED = "100"
    THOUSAND = "1000"
    TEN_PAIRS = "10pr"

    # Mass units (weight)
    KILOGRAM = "kg"
    GRAM = "g"
    MILLIGRAM = "mg"
    METRIC_TON = "t"
    POUND = "lb"
    OUNCE = "oz"
    CARAT = "ct"

    # Length units
    METER = "m"
    CENTIMETER = "cm"
    HECTOMETER = "hm"  # 100 meters
    MILLIMETER = "mm"
    KILOMETER = "km"
    INCH = "in"
    FOOT = "ft"
    YARD = "yd"
    MILE = "mi"  # Statute mile

    # Area units
    ACRE = "ac"  # Acre
    ACRE_FOOT = "ac-ft"  # Acre Foot (volume unit symbol)
    HECTARE = "ha"  # Hectare
    SQUARE_CENTIMETER = "cm²"  # Square Centimeter
    SQUARE_DECIMETER = "dm²"  # Square Decimeter
    SQUARE_FOOT = "ft²"  # Square Foot
    SQUARE_INCH = "in²"  # Square Inch
    SQUARE_KILOMETER = "km²"  # Square Kilometer
    SQUARE_METER = "m²"  # Square Meter (M2)
    SQUARE_MILLIMETER = "mm²"  # Square Millimeter
    SQUARE_MILE = "mi²"  # Square Mile (statute mile)
    SQUARE_YARD = "yd²"  # Square Yard

    # Volume units
    LITER = "L"  # Liter
    MILLILITER = "mL"  # Milliliter
    CUBIC_METER = "m³"  # Cubic Meter (M3)
    CUBIC_CENTIMETER = "cm³"  # Cubic Centimeter
    CUBIC_DECIMETER = "dm³"  # Cubic Decimeter
    US_GALLON = "gal (US)"  # US Gallon
    IMPERIAL_GALLON = "gal (Imp)"  # Imperial Gallon (UK)
    BARREL = "bbl"  # Barrel
    CUBIC_FOOT = "ft³"  # Cubic Foot

    # Time units
    DAY = "day"  # Day
    HOUR = "h"  # Hour
    MINUTE = "min"  # Minute
    SECOND = "s"  # Second
    MONTH = "month"  # Month
    YEAR = "yr"  # Year
    WEEK = "wk"  # Week

    # Percentage and ratio units
    PERCENT = "%"
    PER_THOUSAND = "‰"
    PARTS_PER_MILLION = "ppm"

    # Energy units
    KILOWATT_HOUR = "kWh"
    JOULE = "J"
    KILOJOULE = "kJ"
    CALORIE = "cal"  # Large calorie
    KILOCALORIE = "kcal"

    # Pressure units
    PASCAL = "Pa"
    BAR = "bar"
    MILLIBAR = "mbar"
    POUND_PER_SQUARE_INCH = "psi"

    # Temperature units
    CELSIUS = "°C"
    FAHRENHEIT = "°F"
    KELVIN = "K"

    # Generic / dimensionless units & factors
    COUNT = "#"  # Similar to NMB, often for specific items
    NUMBER = "qty"  # Number / Quantity (using 'qty' for symbol)
    RATIO = "ratio"
    UNIT_OF_CAPITAL = "UC"  # Unit of Capital
    SCORE = "score"  # For points or a numerical rating
    POINT = "pt"  # e.g., a single point in a system

    # Degrees units
    ANGULAR = "°"  # Angular Degree
    RADIAN = "rad"  # Radian

    # Common miscellaneous units
    AMPERE = "A"
    BECQUEREL = "Bq"
    BIT = "bit"
    BYTE = "B"
    COULOMB = "C"
    DECIBEL = "dB"
    FARAD = "F"
    GIGABYTE = "GB"  # No direct UN/CEFACT code, symbol is standard
    GRAY = "Gy"
    HENRY = "H"
    HERTZ = "Hz"
    KILOHERTZ = "kHz"
    KILOBYTE = "KB"
    KILOWATT = "kW"
    LUMEN = "lm"
    LUX = "lx"
    MEGAHERTZ = "MHz"
    MEGABYTE = "MB"
    NEWTON = "N"
    OHM = "Ω"
    POUND_FORCE = "lbf"
    REVOLUTION_PER_MINUTE = "rpm"
    SIEVERT = "Sv"
    SIEMENS = "S"
    TESLA = "T"
    VOLT = "V"
    WATT = "W"
    WEBER = "Wb"

    @classmethod
    def get_code(cls, symbol: str) -> str | None:
        """Return the unit code of a unit symbol, or None."""
        from .measure_code import MeasureCode

        return cls._lookup_paired(MeasureCode, symbol)

    @classmethod
    def get_name(cls, symbol: str) -> str | None:
        """Return the unit name of a unit symbol, or None."""
        from .measure_name import MeasureName

        return cls._lookup_paired(MeasureName, symbol)

    @classmethod
    def get_from_code(cls, code: str) -> str | None:
        from .measure_code import MeasureCode

        return MeasureCode.get_symbol(code)

    @classmethod
    def get_from_name(cls, name: str) -> str | None:
        from .measure_name import MeasureName

        return MeasureName.get_symbol(name)
