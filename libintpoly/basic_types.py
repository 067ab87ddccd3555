#!/usr/bin/env python3
#
#   libintpoly : univariate polynomials over fixed-width integers
#

import logging
import random
import unittest
from itertools import groupby

import numpy as np

_logger = logging.getLogger(__name__)

########################################################################################################################
#   Fixed-width Coefficients
########################################################################################################################

# Coefficients are signed 64-bit machine integers, arithmetic on them wraps around
COEFF_DTYPE = np.int64
COEFF_MIN = int(np.iinfo(COEFF_DTYPE).min)
COEFF_MAX = int(np.iinfo(COEFF_DTYPE).max)

INTEGER_TYPES = (int, np.integer)

def coeff_array(coeffs):
    """
    Packs coefficients into a numpy buffer of the coefficient dtype.

    Raises OverflowError if any coefficient does not fit.
    """
    if isinstance(coeffs, np.ndarray):
        assert np.issubdtype(coeffs.dtype, np.integer) , f"Coefficients should be integers, got {coeffs.dtype}"
    else:
        coeffs = list(coeffs)
        assert all(isinstance(c, INTEGER_TYPES) for c in coeffs) , f"Coefficients should be integers, got {coeffs!r}"
    return np.array(coeffs, dtype=COEFF_DTYPE)

########################################################################################################################
#   Terms
########################################################################################################################

class Term:
    """
    A single monomial `coefficient * x^power`
    """

    def __init__(self, coefficient : int, power : int):
        assert isinstance(coefficient, INTEGER_TYPES) , f"Coefficients should be integers, got {coefficient!r}"
        assert isinstance(power, INTEGER_TYPES) , f"Powers should be integers, got {power!r}"
        assert power >= 0 , f"Powers should be nonnegative, got {power}"
        self.coefficient = int(coefficient)
        self.power = int(power)

    def __iter__(self):
        yield self.coefficient
        yield self.power

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.coefficient == other.coefficient and self.power == other.power

    def __hash__(self):
        return hash((self.coefficient, self.power))

    def __repr__(self):
        return f"Term({self.coefficient}, {self.power})"

    def __str__(self):
        if self.power == 0:
            return f"{self.coefficient}"
        mon = "x" if self.power == 1 else f"x^{{{self.power}}}"
        if self.coefficient == 1:
            return mon
        if self.coefficient == -1:
            return f"-{mon}"
        return f"{self.coefficient} {mon}"

########################################################################################################################
#   Polynomial
########################################################################################################################

class Polynomial:
    """
    Univariate polynomial with integer coefficients, stored as a sparse list of terms.

    `Polynomial()` is the invalid polynomial (degree -1). It is what failed operations return, and it absorbs every
    arithmetic operation it takes part in.
    """

    def __init__(self, terms=None):
        self.degree = -1
        self.terms = []
        if terms is None:
            return
        # placeholder, the real degree is computed on normalization
        self.degree = 1
        self.terms = [term if isinstance(term, Term) else Term(*term) for term in terms]
        self.normalize()

    @classmethod
    def from_terms(cls, terms):
        return cls(terms)

    @classmethod
    def from_coeffs(cls, coeffs, n : int = None):
        """
        Builds the polynomial with coefficient `coeffs[i]` for power `i`, using the first `n` entries.

        With `n == 0` the result is the invalid polynomial.
        """
        coeffs = coeff_array(coeffs)
        if n is None:
            n = len(coeffs)
        assert 0 <= n <= len(coeffs) , f"Need {n} coefficients, got {len(coeffs)}"

        p = cls()
        p.degree = n - 1
        p.terms = [Term(c, i) for i,c in enumerate(coeffs[:n])]
        p.normalize()
        return p

    @classmethod
    def linear(cls, b : int, a : int):
        """
        The binomial a x + b
        """
        p = cls()
        p.degree = 1
        p.terms = [Term(b, 0), Term(a, 1)]
        p.normalize()
        return p

    @staticmethod
    def ZERO():
        return Polynomial([])

    def normalize(self):
        """
        Restores the canonical form: terms sorted by decreasing power, like powers merged, zero terms removed and the
        degree recomputed. The zero polynomial gets degree 0.
        """
        if self.degree < 0:
            self.terms = []
            return

        ordered = sorted(self.terms, key=lambda term : term.power, reverse=True)

        merged = []
        for power,run in groupby(ordered, key=lambda term : term.power):
            coeff = np.add.reduce(coeff_array([term.coefficient for term in run]))
            if coeff != 0:
                merged.append(Term(coeff, power))

        self.terms = merged
        self.degree = merged[0].power if len(merged) != 0 else 0

    def copy(self):
        p = Polynomial()
        p.degree = self.degree
        p.terms = list(self.terms)
        return p

    def get_degree(self):
        return self.degree

    def get_coeff(self, power : int):
        # absent powers have an implicit zero coefficient
        for term in self.terms:
            if term.power == power:
                return term.coefficient
        return 0

    def __getitem__(self, power : int):
        return self.get_coeff(power)

    def __iter__(self):
        for term in self.terms:
            yield term

    def is_valid(self):
        return self.degree >= 0

    def is_zero(self):
        return self.is_valid() and len(self.terms) == 0

    def leading_coeff(self):
        if len(self.terms) == 0:
            return 0
        return self.terms[0].coefficient

    def coeffs(self):
        """
        Dense coefficient buffer, entry `i` holds the coefficient of x^i
        """
        dense = np.zeros(self.degree + 1, dtype=COEFF_DTYPE)
        for term in self.terms:
            dense[term.power] = term.coefficient
        return dense

    def __hash__(self):
        # constants compare equal to plain ints, so they hash like them
        if self.degree == 0:
            return hash(self.get_coeff(0))
        return hash((self.degree, tuple(self.terms)))

    def __repr__(self):
        if not self.is_valid():
            return "Polynomial()"
        return f"Polynomial({repr(self.terms)})"

    def __str__(self):
        if not self.is_valid():
            return "invalid"
        if len(self.terms) == 0:
            return "0"
        return " + ".join(str(term) for term in self.terms)

    def __call__(self, x : int):
        if not self.is_valid():
            raise ValueError("Cannot evaluate the invalid polynomial")
        # Horner's scheme, in the coefficient dtype so that it wraps like every other operation
        x = coeff_array([x])
        acc = np.zeros(1, dtype=COEFF_DTYPE)
        for c in reversed(self.coeffs()):
            acc = acc * x + c
        return int(acc[0])

    @staticmethod
    def _coerce(other):
        if isinstance(other, Polynomial):
            return other
        if isinstance(other, INTEGER_TYPES):
            return Polynomial.from_coeffs([other])
        return None

    def __add__(self, other):
        other = Polynomial._coerce(other)
        if other is None:
            return NotImplemented

        if not self.is_valid() or not other.is_valid():
            return Polynomial()

        result = np.zeros(max(self.degree, other.degree) + 1, dtype=COEFF_DTYPE)
        result[:self.degree + 1] += self.coeffs()
        result[:other.degree + 1] += other.coeffs()
        # cancelled leading terms are dropped on normalization
        return Polynomial.from_coeffs(result)

    def __radd__(self, other):
        return self.__add__(other)

    def __neg__(self):
        """
        Returns the additive inverse of this polynomial
        """
        return self * -1

    def __sub__(self, other):
        other = Polynomial._coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = Polynomial._coerce(other)
        if other is None:
            return NotImplemented
        return other + (-self)

    def _scale_terms(self, scale):
        coeffs = coeff_array([term.coefficient for term in self.terms]) * COEFF_DTYPE(scale)
        self.terms = [Term(c, term.power) for c,term in zip(coeffs, self.terms)]
        self.normalize()

    def _mul_scalar(self, scale):
        if not self.is_valid():
            return Polynomial()
        result = self.copy()
        result._scale_terms(scale)
        return result

    def _mul_term(self, term : Term):
        if not self.is_valid():
            return Polynomial()
        # shift up by term.power, the low slots stay zero
        result = np.zeros(self.degree + 1 + term.power, dtype=COEFF_DTYPE)
        result[term.power:] = self.coeffs() * COEFF_DTYPE(term.coefficient)
        return Polynomial.from_coeffs(result)

    def _mul_poly(self, other):
        if not self.is_valid() or not other.is_valid():
            return Polynomial()
        result = Polynomial.ZERO()
        for term in other.terms:
            result = result + self._mul_term(term)
        return result

    def __mul__(self, other):
        if isinstance(other, Term):
            return self._mul_term(other)
        if isinstance(other, Polynomial):
            return self._mul_poly(other)
        if isinstance(other, INTEGER_TYPES):
            return self._mul_scalar(other)
        return NotImplemented

    def __rmul__(self, other):
        # Polynomial rings are commutative
        return self.__mul__(other)

    def __imul__(self, scale):
        """
        Scales this polynomial in place
        """
        if not isinstance(scale, INTEGER_TYPES):
            return NotImplemented
        self._scale_terms(scale)
        return self

    def __pow__(self, power : int):
        assert isinstance(power, INTEGER_TYPES) and power >= 0 , f"Exponent should be a nonnegative integer, got {power}"
        if not self.is_valid():
            return Polynomial()
        p = Polynomial.from_coeffs([1])
        for _ in range(power):
            p = p * self
        return p

    def __truediv__(self, other):
        """
        Exact division. Succeeds only if every quotient coefficient is an integer and the remainder vanishes,
        otherwise the invalid polynomial is returned.
        """
        other = Polynomial._coerce(other)
        if other is None:
            return NotImplemented

        if not self.is_valid() or not other.is_valid():
            return Polynomial()
        if self == Polynomial.ZERO():
            return self.copy()
        if other.degree > self.degree:
            _logger.debug("division failed: divisor degree %d exceeds dividend degree %d", other.degree, self.degree)
            return Polynomial()
        if other.is_zero():
            _logger.debug("division failed: division by the zero polynomial")
            return Polynomial()

        quot_size = self.degree - other.degree + 1
        quot = np.zeros(quot_size, dtype=COEFF_DTYPE)
        lead_div = other.get_coeff(other.degree)

        remainder = self
        for i in reversed(range(quot_size)):
            lead_rem = remainder.get_coeff(i + other.degree)
            if lead_rem % lead_div != 0:
                _logger.debug("division failed: %d is not divisible by %d at power %d", lead_rem, lead_div, i)
                break
            q = lead_rem // lead_div
            if not COEFF_MIN <= q <= COEFF_MAX:
                _logger.debug("division failed: quotient coefficient %d out of range at power %d", q, i)
                return Polynomial()
            quot[i] = q
            remainder = remainder - other * Term(q, i)

        if remainder != Polynomial.ZERO():
            _logger.debug("division failed: nonzero remainder %s", remainder)
            return Polynomial()

        return Polynomial.from_coeffs(quot)

    __floordiv__ = __truediv__

    def __eq__(self, other):
        other = Polynomial._coerce(other)
        if other is None:
            return NotImplemented
        if self.degree != other.degree:
            return False
        if len(self.terms) != len(other.terms):
            return False
        return all(a == b for a,b in zip(self.terms, other.terms))

    def differentiate(self):
        """
        Formal derivative with respect to x
        """
        if not self.is_valid():
            return Polynomial()
        terms = [term for term in self.terms if term.power != 0]
        coeffs = coeff_array([term.coefficient for term in terms]) * coeff_array([term.power for term in terms])
        return Polynomial([Term(c, term.power - 1) for c,term in zip(coeffs, terms)])

########################################################################################################################
#   Unit Tests
########################################################################################################################

def rand_poly(max_degree : int = 5, bound : int = 50):
    # nonzero leading coefficient, so the degree is exactly as drawn
    degree = random.randint(0, max_degree)
    coeffs = [random.randint(-bound, bound) for _ in range(degree)]
    coeffs.append(random.choice([-1, 1]) * random.randint(1, bound))
    return Polynomial.from_coeffs(coeffs)

class TestTerm(unittest.TestCase):

    def test_fields(self):
        t = Term(3, 2)
        self.assertEqual(t.coefficient, 3)
        self.assertEqual(t.power, 2)
        self.assertEqual(tuple(t), (3, 2))
        self.assertEqual(t, Term(3, 2))
        self.assertNotEqual(t, Term(3, 1))
        self.assertEqual(hash(t), hash(Term(3, 2)))

    def test_negative_power(self):
        with self.assertRaises(AssertionError):
            Term(1, -1)

    def test_str(self):
        self.assertEqual(str(Term(3, 2)), "3 x^{2}")
        self.assertEqual(str(Term(1, 1)), "x")
        self.assertEqual(str(Term(-1, 4)), "-x^{4}")
        self.assertEqual(str(Term(-7, 0)), "-7")

class TestConstruction(unittest.TestCase):

    def test_invalid(self):
        p = Polynomial()
        self.assertEqual(p.get_degree(), -1)
        self.assertEqual(p.terms, [])
        self.assertFalse(p.is_valid())
        self.assertEqual(repr(p), "Polynomial()")

    def test_from_coeffs(self):
        p = Polynomial.from_coeffs([6, 0, 3])
        self.assertEqual(p.terms, [Term(3, 2), Term(6, 0)])
        self.assertEqual(p.get_degree(), 2)
        self.assertEqual(p.get_coeff(1), 0)
        self.assertEqual(p[2], 3)
        self.assertEqual(p.leading_coeff(), 3)

    def test_from_coeffs_prefix(self):
        p = Polynomial.from_coeffs([1, 2, 3, 4], 2)
        self.assertEqual(p.terms, [Term(2, 1), Term(1, 0)])
        self.assertEqual(Polynomial.from_coeffs(np.array([5, 0, 0])), Polynomial([Term(5, 0)]))

    def test_from_coeffs_empty(self):
        self.assertFalse(Polynomial.from_coeffs([]).is_valid())

    def test_from_terms(self):
        p = Polynomial.from_terms([Term(1, 0), Term(2, 3), Term(4, 0), Term(-2, 3), Term(0, 7)])
        self.assertEqual(p.terms, [Term(5, 0)])
        self.assertEqual(p.get_degree(), 0)
        self.assertEqual(Polynomial([(1, 2), (1, 0)]).terms, [Term(1, 2), Term(1, 0)])

    def test_zero(self):
        z = Polynomial([])
        self.assertTrue(z.is_zero())
        self.assertEqual(z.get_degree(), 0)
        self.assertEqual(z, Polynomial.ZERO())
        self.assertEqual(str(z), "0")
        self.assertNotEqual(z, Polynomial.from_coeffs([5]))

    def test_linear(self):
        p = Polynomial.linear(5, 2)
        self.assertEqual(p.terms, [Term(2, 1), Term(5, 0)])
        self.assertEqual(p.get_degree(), 1)
        c = Polynomial.linear(5, 0)
        self.assertEqual(c.terms, [Term(5, 0)])
        self.assertEqual(c.get_degree(), 0)

    def test_constructors_agree(self):
        p1 = Polynomial.from_coeffs([1, 1])
        p2 = Polynomial.linear(1, 1)
        p3 = Polynomial([Term(1, 1), Term(1, 0)])
        self.assertEqual(p1, p2)
        self.assertEqual(p2, p3)
        self.assertEqual(hash(p1), hash(p3))

    def test_out_of_range(self):
        with self.assertRaises(OverflowError):
            Polynomial.from_coeffs([COEFF_MAX + 1])
        with self.assertRaises(OverflowError):
            Polynomial([Term(COEFF_MIN - 1, 0)])

    def test_non_integer_coeffs(self):
        with self.assertRaises(AssertionError):
            Polynomial.from_coeffs([1.5])
        with self.assertRaises(AssertionError):
            Polynomial.from_coeffs(np.array([1.0, 2.0]))

    def test_iteration(self):
        p = Polynomial.from_coeffs([6, 0, 3])
        self.assertEqual(list(p), [Term(3, 2), Term(6, 0)])
        self.assertIn(Term(6, 0), p)
        self.assertNotIn(5, p)
        self.assertNotIn(Term(6, 1), p)
        self.assertEqual(list(Polynomial()), [])
        self.assertEqual(list(Polynomial.ZERO()), [])

    def test_str(self):
        self.assertEqual(str(Polynomial.from_coeffs([6, -1, 3])), "3 x^{2} + -x + 6")
        self.assertEqual(str(Polynomial()), "invalid")

class TestNormalize(unittest.TestCase):

    def test_idempotent(self):
        for _ in range(200):
            p = rand_poly()
            q = p.copy()
            q.normalize()
            self.assertEqual(p, q)
            self.assertEqual(p.terms, q.terms)

    def test_invariants(self):
        for _ in range(200):
            terms = [Term(random.randint(-3, 3), random.randint(0, 6)) for _ in range(random.randint(0, 10))]
            p = Polynomial(terms)
            powers = [term.power for term in p.terms]
            self.assertEqual(powers, sorted(set(powers), reverse=True))
            self.assertTrue(all(term.coefficient != 0 for term in p.terms))
            self.assertEqual(p.get_degree(), powers[0] if len(powers) != 0 else 0)

    def test_invalid_drops_terms(self):
        p = Polynomial()
        p.terms = [Term(1, 1)]
        p.normalize()
        self.assertEqual(p.terms, [])
        self.assertEqual(p.get_degree(), -1)

class TestAddition(unittest.TestCase):

    def test_cancellation(self):
        p = Polynomial.linear(5, 2)
        q = Polynomial.linear(-5, 1)
        r = p + q
        self.assertEqual(r.terms, [Term(3, 1)])
        self.assertEqual(r.get_degree(), 1)

    def test_leading_cancellation(self):
        p = Polynomial.from_coeffs([1, 2, 3])
        q = Polynomial.from_coeffs([0, 0, -3])
        self.assertEqual((p + q).get_degree(), 1)
        self.assertTrue((p - p).is_zero())

    def test_laws(self):
        for _ in range(200):
            p, q, r = rand_poly(), rand_poly(), rand_poly()
            self.assertEqual(p + q, q + p)
            self.assertEqual((p + q) + r, p + (q + r))
            self.assertEqual(p + Polynomial.ZERO(), p)

    def test_int(self):
        p = Polynomial.from_coeffs([1, 1])
        self.assertEqual(p + 2, Polynomial.from_coeffs([3, 1]))
        self.assertEqual(2 - p, Polynomial.from_coeffs([1, -1]))

    def test_invalid(self):
        p = Polynomial.from_coeffs([1, 1])
        self.assertFalse((p + Polynomial()).is_valid())
        self.assertFalse((Polynomial() + p).is_valid())

    def test_wraparound(self):
        p = Polynomial.from_coeffs([COEFF_MAX]) + Polynomial.from_coeffs([1])
        self.assertEqual(p, Polynomial.from_coeffs([COEFF_MIN]))

class TestMultiplication(unittest.TestCase):

    def test_scalar(self):
        for _ in range(200):
            p = rand_poly()
            self.assertEqual(p * 1, p)
            self.assertEqual(3 * p, p + p + p)
            z = p * 0
            self.assertTrue(z.is_zero())
            self.assertEqual(z.get_degree(), 0)

    def test_scalar_invalid(self):
        self.assertFalse((Polynomial() * 3).is_valid())

    def test_scalar_wraparound(self):
        self.assertEqual(Polynomial.from_coeffs([COEFF_MAX]) * 2, Polynomial.from_coeffs([-2]))

    def test_in_place(self):
        p = Polynomial.from_coeffs([1, 2])
        alias = p
        p *= 3
        self.assertIs(p, alias)
        self.assertEqual(p, Polynomial.from_coeffs([3, 6]))
        p *= 0
        self.assertIs(p, alias)
        self.assertTrue(p.is_zero())

        q = Polynomial()
        q *= 2
        self.assertFalse(q.is_valid())

    def test_in_place_does_not_leak(self):
        p = Polynomial.from_coeffs([1, 2])
        q = p.copy()
        r = p * 1
        p *= 5
        self.assertEqual(q, Polynomial.from_coeffs([1, 2]))
        self.assertEqual(r, Polynomial.from_coeffs([1, 2]))

    def test_term(self):
        p = Polynomial.from_coeffs([1, 1])
        r = p * Term(2, 1)
        self.assertEqual(r.terms, [Term(2, 2), Term(2, 1)])
        self.assertEqual(Term(2, 1) * p, r)
        self.assertEqual(p * Term(5, 0), p * 5)
        self.assertTrue((p * Term(0, 3)).is_zero())
        self.assertFalse((Polynomial() * Term(1, 1)).is_valid())

    def test_poly(self):
        p = Polynomial.from_coeffs([1, 1])
        q = Polynomial.from_coeffs([-1, 1])
        self.assertEqual(p * q, Polynomial.from_coeffs([-1, 0, 1]))
        self.assertEqual(p ** 2, Polynomial.from_coeffs([1, 2, 1]))
        self.assertEqual(p ** 0, Polynomial.from_coeffs([1]))
        self.assertTrue((p * Polynomial.ZERO()).is_zero())
        self.assertFalse((p * Polynomial()).is_valid())

    def test_poly_laws(self):
        for _ in range(100):
            p, q, r = rand_poly(3, 10), rand_poly(3, 10), rand_poly(3, 10)
            self.assertEqual(p * q, q * p)
            self.assertEqual(p * (q + r), p * q + p * r)

class TestDivision(unittest.TestCase):

    def test_exact(self):
        p = Polynomial.from_coeffs([0, 0, 1])
        q = Polynomial.from_coeffs([0, 1])
        r = p / q
        self.assertEqual(r.terms, [Term(1, 1)])
        self.assertEqual(r.get_degree(), 1)

    def test_factor(self):
        # x^2 - 1 = (x + 1)(x - 1)
        p = Polynomial.from_coeffs([-1, 0, 1])
        self.assertEqual(p / Polynomial.linear(1, 1), Polynomial.linear(-1, 1))
        self.assertEqual(p // Polynomial.linear(-1, 1), Polynomial.linear(1, 1))

    def test_divisor_degree_too_large(self):
        p = Polynomial.from_coeffs([1, 1])
        q = Polynomial.from_coeffs([1, 1, 1])
        r = p / q
        self.assertFalse(r.is_valid())
        self.assertEqual(r.get_degree(), -1)
        self.assertEqual(r, Polynomial())

    def test_inexact(self):
        # 2x / 3x
        self.assertFalse((Polynomial([Term(2, 1)]) / Polynomial([Term(3, 1)])).is_valid())
        # (x^2 + 1) / (x + 1) leaves a remainder
        self.assertFalse((Polynomial.from_coeffs([1, 0, 1]) / Polynomial.linear(1, 1)).is_valid())

    def test_zero_dividend(self):
        z = Polynomial.ZERO()
        self.assertEqual(z / Polynomial.from_coeffs([1, 1, 1]), z)

    def test_zero_divisor(self):
        self.assertFalse((Polynomial.from_coeffs([1, 1]) / Polynomial.ZERO()).is_valid())

    def test_invalid(self):
        p = Polynomial.from_coeffs([1, 1])
        self.assertFalse((p / Polynomial()).is_valid())
        self.assertFalse((Polynomial() / p).is_valid())

    def test_constant_divisor(self):
        p = Polynomial.from_coeffs([4, -6, 2])
        self.assertEqual(p / 2, Polynomial.from_coeffs([2, -3, 1]))
        self.assertFalse((p / 4).is_valid())

    def test_inverse_of_multiplication(self):
        for _ in range(200):
            p, q = rand_poly(4, 20), rand_poly(4, 20)
            self.assertEqual((p * q) / q, p)

    def test_extreme_coefficients(self):
        self.assertEqual(Polynomial.from_coeffs([COEFF_MIN]) / Polynomial.from_coeffs([1]),
                         Polynomial.from_coeffs([COEFF_MIN]))
        self.assertEqual(Polynomial.from_coeffs([0, COEFF_MIN]) / Polynomial.from_coeffs([0, 1]),
                         Polynomial.from_coeffs([COEFF_MIN]))
        self.assertEqual(Polynomial.from_coeffs([COEFF_MIN, COEFF_MIN]) / Polynomial.linear(1, 1),
                         Polynomial.from_coeffs([COEFF_MIN]))

    def test_quotient_out_of_range(self):
        # -2^63 / -1 has no 64-bit quotient
        r = Polynomial.from_coeffs([COEFF_MIN]) / Polynomial.from_coeffs([-1])
        self.assertFalse(r.is_valid())
        r = Polynomial.from_coeffs([0, COEFF_MIN]) / Polynomial.from_coeffs([0, -1])
        self.assertFalse(r.is_valid())

class TestEquality(unittest.TestCase):

    def test_relation(self):
        for _ in range(100):
            p = rand_poly()
            q = Polynomial(list(p.terms))
            r = Polynomial.from_coeffs(p.coeffs())
            self.assertEqual(p, p)
            self.assertEqual(p, q)
            self.assertEqual(q, p)
            self.assertEqual(q, r)
            self.assertEqual(p, r)

    def test_powers_compared(self):
        self.assertNotEqual(Polynomial.from_coeffs([1, 0, 1]), Polynomial.from_coeffs([0, 1, 1]))

    def test_invalid(self):
        self.assertEqual(Polynomial(), Polynomial())
        self.assertNotEqual(Polynomial(), Polynomial.ZERO())
        self.assertNotEqual(Polynomial.from_coeffs([1]), Polynomial())

    def test_int(self):
        self.assertEqual(Polynomial.from_coeffs([7]), 7)
        self.assertEqual(Polynomial.ZERO(), 0)
        self.assertNotEqual(Polynomial.from_coeffs([7, 1]), 7)

    def test_hash_matches_int(self):
        self.assertEqual(hash(Polynomial.from_coeffs([7])), hash(7))
        self.assertEqual(hash(Polynomial.ZERO()), hash(0))
        lookup = {7: "seven", Polynomial.from_coeffs([1, 1]): "x + 1"}
        self.assertEqual(lookup[Polynomial.from_coeffs([7])], "seven")
        self.assertEqual(lookup[Polynomial.linear(1, 1)], "x + 1")
        self.assertIn(Polynomial.from_coeffs([-3]), {-3})

class TestCalculus(unittest.TestCase):

    def test_eval(self):
        p = Polynomial.from_coeffs([6, 0, 3])
        self.assertEqual(p(0), 6)
        self.assertEqual(p(2), 18)
        self.assertEqual(p(-1), 9)
        self.assertEqual(Polynomial.ZERO()(5), 0)
        with self.assertRaises(ValueError):
            Polynomial()(1)

    def test_eval_wraparound(self):
        self.assertEqual(Polynomial.linear(1, 1)(COEFF_MAX), COEFF_MIN)

    def test_differentiate(self):
        p = Polynomial.from_coeffs([6, 5, 3])
        self.assertEqual(p.differentiate(), Polynomial.from_coeffs([5, 6]))
        self.assertTrue(Polynomial.from_coeffs([6]).differentiate().is_zero())
        self.assertFalse(Polynomial().differentiate().is_valid())
