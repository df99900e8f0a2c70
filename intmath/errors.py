"""
Exception types raised by the integer math operations.
"""

from __future__ import annotations


class InvalidDomainError(ValueError):
	"""
	Raised when an operand lies outside an operation's domain: a negative value
	for a root, or a value <= 0 for a logarithm.

	`op` names the operation and `value` holds the first offending element.
	"""

	def __init__(self, op: str, value: int, positive: bool = False) -> None:
		self.op = op
		self.value = int(value)
		if positive:
			msg = f"cannot take {op} of a value less than or equal to 0: {self.value}"
		else:
			msg = f"cannot take {op} of a negative value: {self.value}"
		super().__init__(msg)


class UnsupportedTypeError(TypeError):
	"""Raised when an operand is not one of the supported fixed-width integer types."""
