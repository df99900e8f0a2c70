"""
IntegerMath (production)
------------------------
Floored roots and logarithms on fixed-width integers:

  • Roots:       sqrt, cbrt
  • Logarithms:  log2, log10, ln, log(v, base)

Every operation takes a NumPy integer scalar or array of one of the ten element
types (see intmath.dtypes) and returns the same element type with the fractional
part truncated. Under the default policy the result is the exact floor; with
exact=False it is the truncated value computed in the element type's float
domain. Operands outside the domain raise InvalidDomainError before anything is computed:

  • sqrt, cbrt:              v >= 0  (cbrt accepts v < 0 with signed_cbrt)
  • log2, log10, ln, log:    v > 0

Public API:
  • class IntegerMath: policy-bound operations
  • top-level proxies with the same names, bound to the default policy
"""

from __future__ import annotations
from typing import Callable, Optional
import numpy as np

from intmath.config import DomainPolicy
from intmath.dtypes import ElementType, coerce
from intmath.errors import InvalidDomainError
from intmath.exact import ExactFloor


_NONNEG = "nonneg"
_POSITIVE = "positive"


class IntegerMath:
	"""Roots and logarithms over the fixed-width integer element types."""

	def __init__(self, policy: Optional[DomainPolicy] = None) -> None:
		self.policy = policy if policy is not None else DomainPolicy()

	@staticmethod
	def _check_domain(op: str, arr: np.ndarray, et: ElementType, domain: Optional[str]) -> None:
		"""
		Raise InvalidDomainError naming the first element outside `domain`.
		"""
		if domain == _POSITIVE:
			bad = arr <= 0
		elif domain == _NONNEG and et.signed:
			bad = arr < 0
		else:
			return
		if np.any(bad):
			flat = arr.reshape(-1)
			first = flat[int(np.argmax(bad.reshape(-1)))]
			raise InvalidDomainError(op, int(first), positive=(domain == _POSITIVE))

	def _apply(
		self,
		op: str,
		v,
		dtype,
		estimate: Callable[[np.ndarray], np.ndarray],
		exact: Callable[[np.ndarray], np.ndarray],
		domain: Optional[str],
	):
		"""
		Validate `v`, then return either the exact result or the truncated
		float estimate computed in the element type's float domain.
		"""
		arr, et, scalar = coerce(v, dtype)
		self._check_domain(op, arr, et, domain)
		if self.policy.exact:
			out = np.asarray(exact(arr)).reshape(arr.shape).astype(et.dtype)
		else:
			est = np.asarray(np.trunc(estimate(arr.astype(et.float_dtype))))
			out = est.astype(et.dtype)
		if scalar:
			return out[()]
		return out

	@staticmethod
	def _each(fn: Callable[[int], int]) -> Callable[[np.ndarray], np.ndarray]:
		"""Lift an exact Python-int routine over every element of an array."""
		def run(arr: np.ndarray) -> np.ndarray:
			return np.asarray([fn(int(x)) for x in arr.reshape(-1)], dtype=object)
		return run

	@staticmethod
	def _check_base(base) -> int:
		if isinstance(base, (bool, np.bool_)) or not isinstance(base, (int, np.integer)):
			raise ValueError(f"log base must be an integer >= 2, got {base!r}")
		if int(base) < 2:
			raise ValueError(f"log base must be an integer >= 2, got {base!r}")
		return int(base)

	def sqrt(self, v, dtype=None):
		"""Floored square root."""
		return self._apply("sqrt", v, dtype, np.sqrt, self._each(lambda x: ExactFloor.root(x, 2)), _NONNEG)

	def cbrt(self, v, dtype=None):
		"""
		Floored cube root. Negative operands raise unless the policy sets
		`signed_cbrt`, in which case the result is truncated toward zero.
		"""
		domain = None if self.policy.signed_cbrt else _NONNEG
		return self._apply("cbrt", v, dtype, np.cbrt, self._each(lambda x: ExactFloor.root(x, 3)), domain)

	def log(self, v, base: int, dtype=None):
		"""
		Floored logarithm in an integer `base` >= 2.
		"""
		b = self._check_base(base)
		if b == 2:
			estimate = np.log2
		elif b == 10:
			estimate = np.log10
		else:
			def estimate(a):
				return np.log(a) / np.log(a.dtype.type(b))
		return self._apply("log", v, dtype, estimate, self._each(lambda x: ExactFloor.log(x, b)), _POSITIVE)

	def log2(self, v, dtype=None):
		"""Floored base-2 logarithm."""
		return self._apply("log2", v, dtype, np.log2, self._each(lambda x: ExactFloor.log(x, 2)), _POSITIVE)

	def log10(self, v, dtype=None):
		"""Floored base-10 logarithm."""
		return self._apply("log10", v, dtype, np.log10, self._each(lambda x: ExactFloor.log(x, 10)), _POSITIVE)

	def ln(self, v, dtype=None):
		"""Floored natural logarithm."""
		return self._apply("ln", v, dtype, np.log, ExactFloor.ln, _POSITIVE)


_DEFAULT = IntegerMath()

sqrt = _DEFAULT.sqrt
cbrt = _DEFAULT.cbrt
log = _DEFAULT.log
log2 = _DEFAULT.log2
log10 = _DEFAULT.log10
ln = _DEFAULT.ln
