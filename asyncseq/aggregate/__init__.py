from .extrema import maximum, maximum_by, minimum, minimum_by
from .logic import all, and_, any, or_
from .null import none_null
from .numeric import average, product, sum

__all__ = (
    # Numeric
    "average",
    "product",
    "sum",
    # Logic
    "all",
    "and_",
    "any",
    "or_",
    # Extrema
    "maximum",
    "maximum_by",
    "minimum",
    "minimum_by",
    # Null
    "none_null",
)
