from __future__ import annotations
import logging
from typing import Union
import numpy as np

LOG = logging.getLogger(__name__)

# Python ints are the arbitrary-precision integers; numpy scalars are accepted
# wherever a machine integer is expected.
BigInt = int
MachineInt = Union[int, np.integer]

ZERO: BigInt = 0
ONE: BigInt = 1

def as_bigint(value: MachineInt) -> BigInt:
	if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
		raise TypeError(f"Expected an integer, got {type(value).__name__}")
	return int(value)

def gcd(a: BigInt, b: BigInt) -> BigInt:
	"""Greatest common divisor by Euclid's algorithm.

	gcd(0, x) is x and gcd(x, 0) is x. Iterative, so very large operands
	do not grow the stack.
	"""
	while True:
		if a == ZERO:
			return b
		if b == ZERO:
			return a
		try:
			a, b = b, a % b
		except ZeroDivisionError:
			LOG.debug("gcd: modulo of %d by %d failed, returning zero", a, b)
			return ZERO

def lcm(a: BigInt, b: BigInt) -> BigInt:
	# gcd(a, b) is nonzero unless both are zero
	return (a * b) // gcd(a, b)
