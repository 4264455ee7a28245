from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from bigint import BigInt, MachineInt, ZERO, ONE, as_bigint, gcd, lcm

LOG = logging.getLogger(__name__)

class Sign(Enum):
	POSITIVE = "+"
	NEGATIVE = "-"
	def flipped(self) -> Sign:
		return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE

@dataclass(frozen=True, eq=False)
class Rational:
	"""Exact signed fraction.

	The magnitude is numerator/denominator, both non-negative; the sign is
	carried only by `sign`. Values are not kept in lowest terms, the
	arithmetic functions reduce their results. Zero is always POSITIVE.
	"""
	numerator: BigInt = ZERO
	denominator: BigInt = ONE
	sign: Sign = Sign.POSITIVE

	def __post_init__(self) -> None:
		object.__setattr__(self, "numerator", as_bigint(self.numerator))
		object.__setattr__(self, "denominator", as_bigint(self.denominator))
		if self.numerator < ZERO or self.denominator < ZERO:
			raise ValueError("numerator and denominator must be non-negative")
		if self.denominator == ZERO:
			LOG.debug("rejected zero denominator (numerator %d)", self.numerator)
			raise ZeroDivisionError("zero denominator")
		if self.numerator == ZERO and self.sign is Sign.NEGATIVE:
			object.__setattr__(self, "sign", Sign.POSITIVE)

	@staticmethod
	def of(num: MachineInt, den: MachineInt = 1) -> Rational:
		return from_int(num, den)

	def is_zero(self) -> bool:
		return self.numerator == ZERO
	def is_positive(self) -> bool:
		return is_positive(self)
	def is_int(self) -> bool:
		return self.reduced().denominator == ONE
	def reduced(self) -> Rational:
		return reduce(self)
	def to_int(self) -> int:
		# floor, like integer division on the signed value
		q, rem = divmod(self.numerator, self.denominator)
		if self.sign is Sign.NEGATIVE:
			return -q if rem == ZERO else -q - 1
		return q
	def to_string(self) -> str:
		r = self.reduced()
		body = str(r.numerator) if r.denominator == ONE else f"{r.numerator}/{r.denominator}"
		return f"-{body}" if r.sign is Sign.NEGATIVE else body
	def __str__(self) -> str:
		return self.to_string()

	def __add__(self, other: object) -> Rational:
		rhs = _coerce(other)
		return NotImplemented if rhs is None else add(self, rhs)
	def __radd__(self, other: object) -> Rational:
		lhs = _coerce(other)
		return NotImplemented if lhs is None else add(lhs, self)
	def __sub__(self, other: object) -> Rational:
		rhs = _coerce(other)
		return NotImplemented if rhs is None else sub(self, rhs)
	def __rsub__(self, other: object) -> Rational:
		lhs = _coerce(other)
		return NotImplemented if lhs is None else sub(lhs, self)
	def __mul__(self, other: object) -> Rational:
		rhs = _coerce(other)
		return NotImplemented if rhs is None else mul(self, rhs)
	def __rmul__(self, other: object) -> Rational:
		lhs = _coerce(other)
		return NotImplemented if lhs is None else mul(lhs, self)
	def __truediv__(self, other: object) -> Rational:
		rhs = _coerce(other)
		return NotImplemented if rhs is None else div(self, rhs)
	def __rtruediv__(self, other: object) -> Rational:
		lhs = _coerce(other)
		return NotImplemented if lhs is None else div(lhs, self)
	def __pow__(self, exp: object) -> Rational:
		try:
			exp = as_bigint(exp)
		except TypeError:
			return NotImplemented
		return power(self, exp)
	def __neg__(self) -> Rational:
		return negate(self)
	def __abs__(self) -> Rational:
		return abs_value(self)
	def __bool__(self) -> bool:
		return not self.is_zero()

	def __eq__(self, other: object) -> bool:
		rhs = _coerce(other)
		return NotImplemented if rhs is None else equals(self, rhs)
	def __hash__(self) -> int:
		r = self.reduced()
		if r.denominator == ONE:
			# equal to an int, so hash like one
			return hash(-r.numerator if r.sign is Sign.NEGATIVE else r.numerator)
		return hash((r.numerator, r.denominator, r.sign))
	def __lt__(self, other: object) -> bool:
		rhs = _coerce(other)
		return NotImplemented if rhs is None else lt(self, rhs)
	def __le__(self, other: object) -> bool:
		rhs = _coerce(other)
		return NotImplemented if rhs is None else lte(self, rhs)
	def __gt__(self, other: object) -> bool:
		rhs = _coerce(other)
		return NotImplemented if rhs is None else gt(self, rhs)
	def __ge__(self, other: object) -> bool:
		rhs = _coerce(other)
		return NotImplemented if rhs is None else gte(self, rhs)

def _coerce(value: object) -> Optional[Rational]:
	if isinstance(value, Rational):
		return value
	try:
		return from_int(value, 1)
	except TypeError:
		return None

# -----------------
# Construction
# -----------------
def from_int(n: MachineInt, d: MachineInt) -> Rational:
	"""Build n/d from machine integers. The result is not reduced."""
	n, d = as_bigint(n), as_bigint(d)
	same = (n >= 0 and d >= 0) or (n < 0 and d < 0)
	return Rational(abs(n), abs(d), Sign.POSITIVE if same else Sign.NEGATIVE)

def from_bigint(n: BigInt, d: BigInt) -> Rational:
	if isinstance(n, bool) or isinstance(d, bool) or not isinstance(n, int) or not isinstance(d, int):
		raise TypeError("from_bigint expects integers")
	if n >= ZERO:
		sign = Sign.POSITIVE if d >= ZERO else Sign.NEGATIVE
	else:
		sign = Sign.POSITIVE if d < ZERO else Sign.NEGATIVE
	return Rational(abs(n), abs(d), sign)

# -----------------
# Sign helpers
# -----------------
def is_positive(r: Rational) -> bool:
	return r.sign is Sign.POSITIVE

def negate(r: Rational) -> Rational:
	return Rational(r.numerator, r.denominator, r.sign.flipped())

def same_sign(a: Rational, b: Rational) -> bool:
	return a.sign is b.sign

def abs_value(r: Rational) -> Rational:
	return Rational(r.numerator, r.denominator, Sign.POSITIVE)

# -----------------
# Normalization
# -----------------
def normalize(a: Rational, b: Rational) -> Tuple[Rational, Rational]:
	"""Rescale a and b onto the lcm of their denominators, signs untouched."""
	common = lcm(a.denominator, b.denominator)
	return (
		Rational(a.numerator * (common // a.denominator), common, a.sign),
		Rational(b.numerator * (common // b.denominator), common, b.sign),
	)

def reduce(r: Rational) -> Rational:
	g = gcd(r.numerator, r.denominator)
	return Rational(r.numerator // g, r.denominator // g, r.sign)

# -----------------
# Arithmetic
# -----------------
def _add_nums(a: Rational, b: Rational) -> BigInt:
	# a and b already share a denominator; the difference may be negative
	if same_sign(a, b):
		return a.numerator + b.numerator
	if is_positive(a):
		return a.numerator - b.numerator
	return b.numerator - a.numerator

def _add_sign(a: Rational, b: Rational) -> Sign:
	if same_sign(a, b):
		return a.sign
	if is_positive(a):
		return Sign.POSITIVE if gte(abs_value(a), abs_value(b)) else Sign.NEGATIVE
	return Sign.POSITIVE if gte(abs_value(b), abs_value(a)) else Sign.NEGATIVE

def add(a: Rational, b: Rational) -> Rational:
	na, nb = normalize(a, b)
	raw = _add_nums(na, nb)
	# the sign comes from comparing magnitudes; store |raw| so numerator stays >= 0
	return reduce(Rational(abs(raw), na.denominator, _add_sign(na, nb)))

def sub(a: Rational, b: Rational) -> Rational:
	return add(a, negate(b))

def mul(a: Rational, b: Rational) -> Rational:
	sign = Sign.POSITIVE if same_sign(a, b) else Sign.NEGATIVE
	return reduce(Rational(a.numerator * b.numerator, a.denominator * b.denominator, sign))

def _reciprocal(r: Rational) -> Rational:
	# keeps the sign field, so mul() sees the divisor's sign
	if r.numerator == ZERO:
		raise ZeroDivisionError("division by zero")
	return Rational(r.denominator, r.numerator, r.sign)

def div(a: Rational, b: Rational) -> Rational:
	return mul(a, _reciprocal(b))

def power(r: Rational, exp: int) -> Rational:
	if exp == 0:
		return Rational(ONE, ONE)
	base = r
	if exp < 0:
		base, exp = _reciprocal(r), -exp
	sign = Sign.NEGATIVE if base.sign is Sign.NEGATIVE and exp % 2 == 1 else Sign.POSITIVE
	return reduce(Rational(base.numerator ** exp, base.denominator ** exp, sign))

# -----------------
# Comparison
# -----------------
def gt(a: Rational, b: Rational) -> bool:
	if not same_sign(a, b):
		return is_positive(a)
	na, nb = normalize(a, b)
	if is_positive(a):
		return na.numerator > nb.numerator
	# larger magnitude is the smaller negative value
	return nb.numerator > na.numerator

def equals(a: Rational, b: Rational) -> bool:
	ra, rb = reduce(a), reduce(b)
	return (ra.numerator, ra.denominator, ra.sign) == (rb.numerator, rb.denominator, rb.sign)

def gte(a: Rational, b: Rational) -> bool:
	return gt(a, b) or equals(a, b)

def lt(a: Rational, b: Rational) -> bool:
	return gt(b, a)

def lte(a: Rational, b: Rational) -> bool:
	return gte(b, a)
