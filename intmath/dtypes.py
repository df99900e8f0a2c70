"""
Element types
-------------
Registry of the ten fixed-width integer element types and the float domain
each one is computed in:

  • signed:   i8, i16, i32, i64, isize
  • unsigned: u8, u16, u32, u64, usize

Types up to 32 bits compute in float64, which holds their whole range exactly.
64-bit and pointer-sized types compute in numpy.longdouble when its mantissa
holds 64 bits (x87 extended precision) and in float64 otherwise.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple
import logging
import numpy as np

from intmath.errors import UnsupportedTypeError


logger = logging.getLogger(__name__)

_SPECS: Tuple[Tuple[str, type], ...] = (
	("i8", np.int8),
	("i16", np.int16),
	("i32", np.int32),
	("i64", np.int64),
	("isize", np.intp),
	("u8", np.uint8),
	("u16", np.uint16),
	("u32", np.uint32),
	("u64", np.uint64),
	("usize", np.uintp),
)


@dataclass(frozen=True)
class ElementType:
	"""
	One fixed-width integer element type.
	"""
	name: str
	dtype: np.dtype
	bits: int
	signed: bool
	float_dtype: np.dtype

	@property
	def min(self) -> int:
		return int(np.iinfo(self.dtype).min)

	@property
	def max(self) -> int:
		return int(np.iinfo(self.dtype).max)


def float_domain(bits: int) -> np.dtype:
	"""
	Return the narrowest float dtype that represents every `bits`-bit integer
	exactly, or float64 when no available float type does.
	"""
	for ft in (np.float64, np.longdouble):
		if np.finfo(ft).nmant + 1 >= int(bits):
			return np.dtype(ft)
	return np.dtype(np.float64)


def _build_registry() -> Dict[str, ElementType]:
	out: Dict[str, ElementType] = {}
	for name, scalar in _SPECS:
		dt = np.dtype(scalar)
		bits = dt.itemsize * 8
		out[name] = ElementType(name, dt, bits, dt.kind == "i", float_domain(bits))
	logger.debug("64-bit element types compute in %s", out["u64"].float_dtype.name)
	return out


ELEMENT_TYPES: Dict[str, ElementType] = _build_registry()


def element_type(kind) -> ElementType:
	"""
	Resolve a registry name, a dtype-like, or a NumPy scalar/array to its
	ElementType. Where two names share a dtype (i64 and isize on 64-bit
	platforms) the fixed-width name wins.
	"""
	if isinstance(kind, str) and kind in ELEMENT_TYPES:
		return ELEMENT_TYPES[kind]
	if kind is None or isinstance(kind, bool):
		raise UnsupportedTypeError(f"unsupported element type: {kind!r}")
	if isinstance(kind, (np.ndarray, np.generic)):
		dt = kind.dtype
	else:
		try:
			dt = np.dtype(kind)
		except (TypeError, ValueError) as exc:
			raise UnsupportedTypeError(f"unsupported element type: {kind!r}") from exc
	for et in ELEMENT_TYPES.values():
		if et.dtype == dt:
			return et
	raise UnsupportedTypeError(f"unsupported element type: {dt}")


def coerce(v, dtype=None) -> Tuple[np.ndarray, ElementType, bool]:
	"""
	Return (array, element_type, is_scalar) for an operand.

	NumPy integer scalars and arrays carry their own element type. Plain Python
	ints, or nested lists of them, need an explicit `dtype` and must fit it.
	"""
	if isinstance(v, (np.ndarray, np.generic)):
		et = element_type(v)
		if dtype is not None and element_type(dtype).dtype != et.dtype:
			raise UnsupportedTypeError(f"operand is {et.name}, not {element_type(dtype).name}")
		arr = np.asarray(v)
		return arr, et, arr.ndim == 0

	if dtype is None:
		raise UnsupportedTypeError(
			f"{type(v).__name__} operand needs an explicit dtype; pass a NumPy integer or dtype="
		)
	et = element_type(dtype)
	raw = np.asarray(v, dtype=object)
	for x in raw.reshape(-1):
		if isinstance(x, (bool, np.bool_)) or not isinstance(x, (int, np.integer)):
			raise UnsupportedTypeError(f"{x!r} is not an integer")
		if not et.min <= int(x) <= et.max:
			raise UnsupportedTypeError(f"{int(x)} is out of range for {et.name}")
	arr = raw.astype(et.dtype)
	return arr, et, arr.ndim == 0
