"""
Floored roots and logarithms for fixed-width integer types.

Public API re-export:
	IntegerMath    — policy-bound sqrt, cbrt, log2, log10, ln, log
	DomainPolicy   — exact refinement and negative-cbrt switches
	ElementType    — one of the ten supported integer element types
	sqrt, cbrt, log2, log10, ln, log — default-policy proxies
"""

from .config import DomainPolicy
from .core import IntegerMath, cbrt, ln, log, log2, log10, sqrt
from .dtypes import ELEMENT_TYPES, ElementType, element_type
from .errors import InvalidDomainError, UnsupportedTypeError

__all__ = [
	"IntegerMath", "DomainPolicy",
	"ElementType", "ELEMENT_TYPES", "element_type",
	"InvalidDomainError", "UnsupportedTypeError",
	"sqrt", "cbrt", "log2", "log10", "ln", "log",
]
