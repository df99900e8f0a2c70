"""
Behavior switches for IntegerMath.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class DomainPolicy:
	"""
	Immutable policy bound to an IntegerMath instance.

	  • exact:        refine the float estimate to the exact floored result
	  • signed_cbrt:  accept negative cbrt operands, truncating toward zero
	"""
	exact: bool = True
	signed_cbrt: bool = False
