"""UN/CEFACT units of measure (Recommendation 20) and package types (Recommendation 21)."""

from .measure_code import MeasureCode
from .measure_name import MeasureName
from .measure_symbol import MeasureSymbol
from .package_code import PackageCode
from .package_name import PackageName

__all__ = [
    "MeasureCode",
    "MeasureName",
    "MeasureSymbol",
    "PackageCode",
    "PackageName",
]
