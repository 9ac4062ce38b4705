"""UN/CEFACT unit of measure codes (Recommendation 20).

A selection of the unit codes most used in commercial and logistics data.
``MeasureName`` and ``MeasureSymbol`` declare the same member names with the
human-readable name and the display symbol of each unit, so any of the three
values can be translated into the others.

Example:
    >>> MeasureCode.PERCENT
    <MeasureCode.PERCENT: 'PC1'>
    >>> MeasureCode.get_name("PC1")
    'Percent'
    >>> MeasureCode.get_symbol("PC1")
    '%'
    >>> MeasureCode.get_from_symbol("%")
    'PC1'

Reference: https://unece.org/trade/uncefact/cl-recommendations
"""

from __future__ import annotations

from ...registry import CodeRegistry


class MeasureCode(CodeRegistry):
    """UN/CEFACT Recommendation 20 unit codes."""

    # Quantity units
    PIECE = "PCE"
    UNIT = "C62"  # Each / Unit (often synonymous with PCE)
    PAIR = "PR"
    DOZEN = "DZN"
    GROSS = "GRO"  # Gross (144 units)
    HUNDRED = "CEN"
    THOUSAND = "THM"
    TEN_PAIRS = "DPA"

    # Mass units (weight)
    CARAT = "CT"
    GRAM = "GRM"
    KILOGRAM = "KGM"
    METRIC_TON = "TNE"
    MILLIGRAM = "MGM"
    OUNCE = "OZA"
    POUND = "LBR"

    # Length units
    CENTIMETER = "CMT"
    FOOT = "FOT"
    HECTOMETER = "HMT"  # Hectometer (100 meters)
    INCH = "INH"
    KILOMETER = "KMT"
    METER = "MTR"
    MILE = "SMI"  # Mile (statute mile)
    MILLIMETER = "MMT"
    YARD = "YRD"

    # Area units
    ACRE = "ACR"
    ACRE_FOOT = "AFK"
    HECTARE = "HAR"
    SQUARE_CENTIMETER = "CMK"
    SQUARE_DECIMETER = "DMK"
    SQUARE_FOOT = "FTK"
    SQUARE_INCH = "INK"
    SQUARE_KILOMETER = "KMK"
    SQUARE_METER = "MTK"  # Square Meter (M2)
    SQUARE_MILLIMETER = "MMK"
    SQUARE_MILE = "SMK"  # Square Mile (statute mile)
    SQUARE_YARD = "YKM"

    # Volume units
    LITER = "LTR"
    MILLILITER = "MLT"
    CUBIC_METER = "MTQ"  # Cubic Meter (M3)
    CUBIC_CENTIMETER = "CMQ"
    CUBIC_DECIMETER = "DMQ"
    US_GALLON = "GLD"
    IMPERIAL_GALLON = "GLI"  # Imperial Gallon (UK)
    BARREL = "BLL"
    CUBIC_FOOT = "FTQ"

    # Time units
    DAY = "DAY"
    HOUR = "HUR"
    MINUTE = "MIN"
    SECOND = "SEC"
    MONTH = "MON"
    YEAR = "ANN"
    WEEK = "WEE"

    # Percentage and ratio units
    PERCENT = "PC1"
    PER_THOUSAND = "PER"
    PARTS_PER_MILLION = "PPM"

    # Energy units
    KILOWATT_HOUR = "KWH"
    JOULE = "JOU"
    KILOJOULE = "KJO"
    CALORIE = "CAL"  # Calorie (large calorie)
    KILOCALORIE = "KCC"

    # Pressure units
    PASCAL = "PAL"
    BAR = "BAR"
    MILLIBAR = "MBR"
    POUND_PER_SQUARE_INCH = "PSI"

    # Temperature units
    CELSIUS = "CEL"
    FAHRENHEIT = "FAH"
    KELVIN = "KEL"

    # Generic / dimensionless units & factors
    COUNT = "CBR"  # Count (similar to NMB, often for specific items)
    NUMBER = "NMB"  # Number / Count / Factor (dimensionless)
    RATIO = "RTO"  # Ratio (often used for dimensionless quantities)
    UNIT_OF_CAPITAL = "UC"  # Unit of Capital (monetary units)
    SCORE = "SCO"  # Score (for points or a numerical rating)
    POINT = "PT"  # Point (e.g., a single point in a system)

    # Degrees units
    ANGULAR = "DD"
    RADIAN = "RAD"

    # Common miscellaneous units
    AMPERE = "AMP"
    BECQUEREL = "BQL"
    BIT = "BIT"
    BYTE = "BTE"
    COULOMB = "CLB"
    DECIBEL = "DB"
    FARAD = "FAR"
    GIGABYTE = "GB"  # Gigabyte (no direct UN/CEFACT code, common symbol)
    GRAY = "GRY"
    HENRY = "HNH"
    HERTZ = "HTZ"
    KILOHERTZ = "KHZ"
    KILOBYTE = "KB"
    KILOWATT = "KWT"
    LUMEN = "LUM"
    LUX = "LUX"
    MEGAHERTZ = "MHZ"
    MEGABYTE = "MB"
    NEWTON = "NEW"
    OHM = "OHM"
    POUND_FORCE = "LBF"
    REVOLUTION_PER_MINUTE = "RPM"
    SIEVERT = "SVT"
    SIEMENS = "SIE"
    TESLA = "TSL"
    VOLT = "VLT"
    WATT = "WTT"
    WEBER = "WEB"

    @classmethod
    def get_from_name(cls, name: str) -> str | None:
        """Return the unit code for a unit name, or None."""
        from .measure_name import MeasureName

        return MeasureName.get_code(name)

    @classmethod
    def get_from_symbol(cls, symbol: str) -> str | None:
        """Return the unit code for a unit symbol, or None."""
        from .measure_symbol import MeasureSymbol

        return MeasureSymbol.get_code(symbol)

    @classmethod
    def get_name(cls, code: str) -> str | None:
        """Return the unit name for a unit code (``"KGM"`` -> ``"Kilogram"``), or None."""
        from .measure_name import MeasureName

        return cls._lookup_paired(MeasureName, code)

    @classmethod
    def get_symbol(cls, code: str) -> str | None:
        """Return the unit symbol for a unit code (``"KGM"`` -> ``"kg"``), or None."""
        from .measure_symbol import MeasureSymbol

        return cls._lookup_paired(MeasureSymbol, code)
