"""
Exact floor refinement
----------------------
Integer-only routines that give the exact floored result of a root or a
logarithm, independent of float precision:

  • root(v, n)     → largest r with r**n <= v          (sympy integer_nthroot)
  • log(v, base)   → largest k with base**k <= v       (sympy integer_log)
  • ln(values)     → largest k with E**k <= v          (boundary table, vectorized)

root and log take Python ints; ln takes a whole array of positive values up to
2**64 - 1. Callers own the domain checks.
"""

from __future__ import annotations
from functools import lru_cache
import numpy as np
import sympy as sp
from sympy import integer_log, integer_nthroot


_U64_MAX = 2**64 - 1


@lru_cache(maxsize=1)
def ln_boundaries() -> np.ndarray:
	"""
	Return ceil(E**k) for every k with E**k <= 2**64 - 1, as uint64.

	For an integer v >= 1, E**k <= v iff ceil(E**k) <= v, so floor(ln v) is
	the index of the last boundary not above v.
	"""
	out: list[int] = []
	k = 0
	while True:
		b = int(sp.ceiling(sp.exp(sp.Integer(k))))
		if b > _U64_MAX:
			break
		out.append(b)
		k += 1
	table = np.asarray(out, dtype=np.uint64)
	table.setflags(write=False)
	return table


class ExactFloor:
	"""Exact floored roots and logarithms."""

	@staticmethod
	def root(v: int, n: int) -> int:
		"""
		Return the n-th root of `v` truncated toward zero. Negative `v` is
		accepted for odd `n` only.
		"""
		v = int(v)
		n = int(n)
		if v < 0:
			if n % 2 == 0:
				raise ValueError(f"even root of a negative value: {v}")
			return -ExactFloor.root(-v, n)
		r, _ = integer_nthroot(v, n)
		return int(r)

	@staticmethod
	def log(v: int, base: int) -> int:
		"""Floored integer-base logarithm of `v` >= 1."""
		k, _ = integer_log(int(v), int(base))
		return int(k)

	@staticmethod
	def ln(values) -> np.ndarray:
		"""
		Floored natural logarithm of every element of `values` (each >= 1).
		"""
		a = np.asarray(values).astype(np.uint64)
		return np.searchsorted(ln_boundaries(), a, side="right").astype(np.int64) - 1
