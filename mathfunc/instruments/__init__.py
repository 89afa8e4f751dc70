"""Financial instruments."""

from .market import Quote
from .fixedincome import Bond
from .options import Option, EuropeanOption

__all__ = [
    # Market data
    "Quote",
    # Fixed Income
    "Bond",
    # Options
    "Option",
    "EuropeanOption",
]
