"""Tests for intmath/exact.py — exact floored roots and logarithms."""

import math

import numpy as np
import pytest
import sympy as sp

from intmath.exact import ExactFloor, ln_boundaries


class TestRoot:
	def test_square(self):
		assert ExactFloor.root(0, 2) == 0
		assert ExactFloor.root(63, 2) == 7
		assert ExactFloor.root(64, 2) == 8
		assert ExactFloor.root(2**64 - 1, 2) == 2**32 - 1

	def test_cube(self):
		assert ExactFloor.root(26, 3) == 2
		assert ExactFloor.root(27, 3) == 3
		assert ExactFloor.root(2**64 - 1, 3) == 2642245

	def test_odd_root_of_negative_truncates_toward_zero(self):
		assert ExactFloor.root(-27, 3) == -3
		assert ExactFloor.root(-28, 3) == -3
		assert ExactFloor.root(-128, 3) == -5

	def test_even_root_of_negative(self):
		with pytest.raises(ValueError):
			ExactFloor.root(-4, 2)

	def test_matches_isqrt(self):
		for v in (1, 2, 3, 10**6 - 1, 10**6, 2**53 + 1, 2**63 - 1):
			assert ExactFloor.root(v, 2) == math.isqrt(v)


class TestLog:
	def test_integer_bases(self):
		assert ExactFloor.log(1, 2) == 0
		assert ExactFloor.log(1023, 2) == 9
		assert ExactFloor.log(1024, 2) == 10
		assert ExactFloor.log(999, 10) == 2
		assert ExactFloor.log(1000, 10) == 3
		assert ExactFloor.log(80, 3) == 3

	def test_near_power_of_ten_u64(self):
		assert ExactFloor.log(10**19 - 1, 10) == 18
		assert ExactFloor.log(10**19, 10) == 19


class TestLn:
	def test_small(self):
		assert ExactFloor.ln(1) == 0
		assert ExactFloor.ln(2) == 0
		assert ExactFloor.ln(3) == 1
		assert ExactFloor.ln(7) == 1
		assert ExactFloor.ln(8) == 2

	def test_around_e_power(self):
		# e**10 ~= 22026.47
		assert ExactFloor.ln(22026) == 9
		assert ExactFloor.ln(22027) == 10

	def test_u64_max(self):
		assert ExactFloor.ln(2**64 - 1) == 44

	def test_array(self):
		r = ExactFloor.ln(np.array([1, 3, 8, 22026, 22027], dtype=np.uint32))
		assert r.tolist() == [0, 1, 2, 9, 10]


class TestLnBoundaries:
	def test_covers_u64(self):
		table = ln_boundaries()
		assert table.dtype == np.dtype(np.uint64)
		assert len(table) == 45
		assert int(table[0]) == 1
		assert int(table[1]) == 3
		assert int(table[10]) == 22027

	def test_each_boundary_is_ceil_of_e_power(self):
		for k, b in enumerate(ln_boundaries().tolist()):
			assert sp.exp(k) <= b
			assert k == 0 or sp.exp(k) > b - 1

	def test_read_only(self):
		with pytest.raises(ValueError):
			ln_boundaries()[0] = 0
