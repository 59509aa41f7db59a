#!/usr/bin/env python3
#
#   Sparse multivariate polynomials in recursive form
#
#   A polynomial in x_0 is either a constant or a sum of monomials p * x_0^e, where each coefficient p is itself a
#   polynomial in x_1, and so on.
#

import io
import logging
import random
import sys

from libmpoly.coeff import (COEFF_MAX, COEFF_MIN, CoefficientOverflowError, ExponentOverflowError, check_coeff,
                            check_exp, coeff_add, coeff_mul, coeff_neg, coeff_pow, exp_add)

_logger = logging.getLogger(__name__)

########################################################################################################################
#   Monomial
########################################################################################################################

class Mono:
    """
    The monomial `p * x^exp`. The coefficient `p` is a polynomial over the next variable (not over x).
    """

    def __init__(self, p, exp : int):
        assert isinstance(p, Poly) , f"Monomial coefficient must be a Poly, got {type(p).__name__}"
        self.p = p
        self.exp = check_exp(exp)

    @staticmethod
    def from_poly(p, exp : int):
        """
        Takes ownership of p
        """
        return Mono(p, exp)

    def clone(self):
        return Mono(self.p.clone(), self.exp)

    def destroy(self):
        self.p.destroy()

    def is_eq(self, other):
        return self.exp == other.exp and self.p.is_eq(other.p)

    def __eq__(self, other):
        if not isinstance(other, Mono):
            return NotImplemented
        return self.is_eq(other)

    def __hash__(self):
        return hash((self.exp, self.p))

    def __repr__(self):
        return f"Mono({repr(self.p)}, {self.exp})"

    def __str__(self):
        return f"({self.p.to_string()},{self.exp})"

########################################################################################################################
#   Polynomial
########################################################################################################################

class Poly:
    """
    Either a coefficient (monos is None) or a sum of monomials sorted by strictly increasing exponent.

    Canonical form:
      - zero is always the coefficient 0
      - no monomial has a zero coefficient
      - a lone x^0 monomial with a constant coefficient is stored as that constant

    Every operation borrows its operands and returns a fresh tree, so results never share nodes with inputs.
    """

    def __init__(self, c : int = 0, monos = None):
        self.c = c
        self.monos = monos

    @staticmethod
    def from_coeff(c):
        return Poly(check_coeff(c))

    @staticmethod
    def zero():
        return Poly(0)

    @staticmethod
    def add_monos(monos):
        """
        Sums a collection of monomials into a canonical polynomial. Takes ownership of the monomials.

        Monomials may come in any order and may repeat exponents, repeats are merged by adding their coefficients.
        """
        monos = sorted(monos, key=lambda m: m.exp)
        merged = []
        for m in monos:
            if len(merged) != 0 and merged[-1].exp == m.exp:
                merged[-1] = Mono(merged[-1].p.add(m.p), m.exp)
            else:
                merged.append(m)
        if len(merged) != len(monos):
            _logger.debug("add_monos: merged %d monomials into %d", len(monos), len(merged))
        return Poly._canonical(merged)

    @staticmethod
    def _canonical(monos):
        """
        Drops zero terms and collapses a constant x^0 term. `monos` must already be sorted with unique exponents.
        """
        monos = [m for m in monos if not m.p.is_zero()]
        if len(monos) == 0:
            return Poly.zero()
        if len(monos) == 1 and monos[0].exp == 0 and monos[0].p.is_coeff():
            return monos[0].p
        return Poly(0, monos)

    def is_coeff(self):
        return self.monos is None

    def is_zero(self):
        return self.monos is None and self.c == 0

    def clone(self):
        if self.is_coeff():
            return Poly(self.c)
        return Poly(0, [m.clone() for m in self.monos])

    def destroy(self):
        """
        Releases the whole subtree. Leaves this polynomial as the zero coefficient, so a second call does nothing.
        """
        if self.monos is not None:
            for m in self.monos:
                m.destroy()
            self.monos = None
        self.c = 0

    ####################################################################################################################
    #   Arithmetic
    ####################################################################################################################

    def add(self, other):
        if self.is_coeff() and other.is_coeff():
            return Poly(coeff_add(self.c, other.c))

        if self.is_coeff():
            return other._add_coeff(self.c)
        if other.is_coeff():
            return self._add_coeff(other.c)

        i = 0
        j = 0
        monos = []
        L1 = len(self.monos)
        L2 = len(other.monos)
        while i < L1 or j < L2:
            if (i < L1 and j < L2) and self.monos[i].exp == other.monos[j].exp:
                # term exists in both polynomials
                monos.append(Mono(self.monos[i].p.add(other.monos[j].p), self.monos[i].exp))
                i += 1
                j += 1
            elif i == L1 or (j < L2 and self.monos[i].exp > other.monos[j].exp):
                # term exists only in second polynomial
                monos.append(other.monos[j].clone())
                j += 1
            else:
                # term exists only in first polynomial
                monos.append(self.monos[i].clone())
                i += 1
        return Poly._canonical(monos)

    def _add_coeff(self, c):
        """
        self + c for a sum of monomials self, c is merged into the x^0 term
        """
        if c == 0:
            return self.clone()
        first = self.monos[0]
        if first.exp == 0:
            head = Mono(first.p.add(Poly(c)), 0)
            rest = self.monos[1:]
        else:
            head = Mono(Poly(c), 0)
            rest = self.monos
        return Poly._canonical([head] + [m.clone() for m in rest])

    def neg(self):
        if self.is_coeff():
            return Poly(coeff_neg(self.c))
        return Poly(0, [Mono(m.p.neg(), m.exp) for m in self.monos])

    def sub(self, other):
        return self.add(other.neg())

    def mul(self, other):
        if self.is_coeff() and other.is_coeff():
            return Poly(coeff_mul(self.c, other.c))

        if self.is_coeff():
            return other._mul_coeff(self)
        if other.is_coeff():
            return self._mul_coeff(other)

        _logger.debug("mul: %d x %d monomials", len(self.monos), len(other.monos))
        monos = []
        for a in self.monos:
            for b in other.monos:
                monos.append(Mono(a.p.mul(b.p), exp_add(a.exp, b.exp)))
        return Poly.add_monos(monos)

    def _mul_coeff(self, c):
        """
        Scales every coefficient of the sum of monomials self by the constant polynomial c
        """
        if c.is_zero():
            return Poly.zero()
        return Poly._canonical([Mono(m.p.mul(c), m.exp) for m in self.monos])

    ####################################################################################################################
    #   Degree & Equality
    ####################################################################################################################

    def deg_by(self, var_idx : int):
        """
        Degree with respect to the variable at nesting depth var_idx (-1 for the zero polynomial).
        Index 0 is the main variable of this polynomial, larger indices address variables of the coefficients.
        """
        assert var_idx >= 0 , f"Variable index should be nonnegative, got {var_idx}"
        if self.is_coeff():
            return -1 if self.c == 0 else 0
        if var_idx == 0:
            return self.monos[-1].exp
        return max(m.p.deg_by(var_idx - 1) for m in self.monos)

    def deg(self):
        """
        Total degree (-1 for the zero polynomial)
        """
        if self.is_coeff():
            return -1 if self.c == 0 else 0
        return max(m.exp + m.p.deg() for m in self.monos)

    def is_eq(self, other):
        if self.is_coeff() != other.is_coeff():
            return False
        if self.is_coeff():
            return self.c == other.c
        if len(self.monos) != len(other.monos):
            return False
        return all(a.is_eq(b) for a,b in zip(self.monos, other.monos))

    ####################################################################################################################
    #   Evaluation
    ####################################################################################################################

    def at(self, x):
        """
        Substitutes x for the main variable. For p(x_0, x_1, x_2, ...) the result is p(x, x_0, x_1, ...), i.e. the
        variables of the coefficients move up by one.
        """
        x = check_coeff(x)
        if self.is_coeff():
            return self.clone()

        _logger.debug("at: evaluating %d monomials at %d", len(self.monos), x)
        result = Poly.zero()
        for m in self.monos:
            result = result.add(m.p.mul(Poly(coeff_pow(x, m.exp))))
        return result

    ####################################################################################################################
    #   Printing
    ####################################################################################################################

    def to_string(self):
        if self.is_coeff():
            return str(self.c)
        return "+".join(str(m) for m in self.monos)

    def print(self, file=None):
        print(self.to_string(), file=file if file is not None else sys.stdout)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        if self.is_coeff():
            return f"Poly.from_coeff({self.c})"
        return "P(" + ", ".join(f"({repr(m.p)}, {m.exp})" for m in self.monos) + ")"

    ####################################################################################################################
    #   Operators
    ####################################################################################################################

    @staticmethod
    def cvt_other(other):
        if isinstance(other, Poly):
            return other
        return Poly.from_coeff(other)

    def __add__(self, other):
        return self.add(Poly.cvt_other(other))

    def __radd__(self, other):
        return Poly.cvt_other(other).add(self)

    def __sub__(self, other):
        return self.sub(Poly.cvt_other(other))

    def __rsub__(self, other):
        return Poly.cvt_other(other).sub(self)

    def __mul__(self, other):
        return self.mul(Poly.cvt_other(other))

    def __rmul__(self, other):
        return Poly.cvt_other(other).mul(self)

    def __neg__(self):
        return self.neg()

    def __eq__(self, other):
        if isinstance(other, Poly):
            return self.is_eq(other)
        elif isinstance(other, int):
            return self.is_coeff() and self.c == other
        return NotImplemented

    def __hash__(self):
        if self.is_coeff():
            return hash(self.c)
        return hash(tuple((m.exp, hash(m.p)) for m in self.monos))

    def __call__(self, x):
        return self.at(x)

C = Poly.from_coeff

def P(*terms):
    """
    Builds a polynomial from (coeff, exp) pairs, coeff being a Poly or an integer.

        P((1, 1))                   -> x_0
        P((P((1, 2)), 0), (3, 1))   -> x_1^2 + 3 x_0
    """
    return Poly.add_monos([Mono.from_poly(Poly.cvt_other(c), e) for c,e in terms])

########################################################################################################################
#   Unit Tests
########################################################################################################################

import unittest

def rand_poly(depth : int, max_terms : int = 3, max_exp : int = 4, max_coeff : int = 5):
    """
    Random polynomial in `depth` variables with small coefficients
    """
    if depth == 0 or random.random() < 0.2:
        return C(random.randint(-max_coeff, max_coeff))
    return P(*[(rand_poly(depth - 1, max_terms, max_exp, max_coeff), random.randint(0, max_exp))
               for _ in range(random.randint(0, max_terms))])

def is_canonical(p):
    if p.is_coeff():
        return True
    if len(p.monos) == 0:
        return False
    if len(p.monos) == 1 and p.monos[0].exp == 0 and p.monos[0].p.is_coeff():
        return False
    for i,m in enumerate(p.monos):
        if m.p.is_zero() or not is_canonical(m.p):
            return False
        if i > 0 and p.monos[i - 1].exp >= m.exp:
            return False
    return True

class TestConstruction(unittest.TestCase):

    def test_coeff(self):
        p = C(5)
        self.assertTrue(p.is_coeff())
        self.assertFalse(p.is_zero())
        self.assertEqual(p.c, 5)

        z = Poly.zero()
        self.assertTrue(z.is_coeff())
        self.assertTrue(z.is_zero())
        self.assertTrue(C(0).is_zero())

    def test_coeff_range(self):
        self.assertEqual(C(COEFF_MAX).c, COEFF_MAX)
        self.assertEqual(C(COEFF_MIN).c, COEFF_MIN)
        self.assertRaises(CoefficientOverflowError, C, COEFF_MAX + 1)
        self.assertRaises(TypeError, C, 1.5)

    def test_mono(self):
        m = Mono.from_poly(C(3), 2)
        self.assertEqual(m.exp, 2)
        self.assertTrue(m.p.is_eq(C(3)))
        self.assertRaises(AssertionError, Mono, C(1), -1)
        self.assertRaises(AssertionError, Mono, 1, 1)

    def test_sorts_input(self):
        p = P((3, 5), (1, 1), (2, 3))
        self.assertEqual([m.exp for m in p.monos], [1, 3, 5])
        self.assertEqual([m.p.c for m in p.monos], [1, 2, 3])

    def test_merges_equal_exponents(self):
        p = P((1, 2), (4, 0), (2, 2))
        self.assertEqual(p, P((4, 0), (3, 2)))
        self.assertEqual(len(p.monos), 2)

    def test_cancelling_monomials(self):
        p = Poly.add_monos([Mono.from_poly(C(3), 2), Mono.from_poly(C(-3), 2)])
        self.assertTrue(p.is_zero())
        self.assertTrue(p.is_coeff())

    def test_drops_zero_terms(self):
        p = P((0, 1), (2, 3), (C(0), 4))
        self.assertEqual(len(p.monos), 1)
        self.assertEqual(p.monos[0].exp, 3)
        self.assertTrue(P().is_zero())
        self.assertTrue(Poly.add_monos([]).is_zero())

    def test_collapse(self):
        p = Poly.add_monos([Mono.from_poly(C(7), 0)])
        self.assertTrue(p.is_coeff())
        self.assertEqual(p.c, 7)

        # a constant term next to other terms stays a monomial
        q = P((7, 0), (1, 1))
        self.assertFalse(q.is_coeff())
        self.assertEqual(len(q.monos), 2)

        # collapses after merging
        r = P((7, 0), (1, 1), (-1, 1))
        self.assertTrue(r.is_eq(C(7)))

    def test_non_constant_x0_coefficient_is_kept(self):
        y = P((1, 1))
        p = P((y, 0))
        self.assertFalse(p.is_coeff())
        self.assertEqual(p.deg_by(0), 0)
        self.assertEqual(p.deg_by(1), 1)
        self.assertFalse(p.is_eq(y))

    def test_clone(self):
        for _ in range(100):
            p = rand_poly(3)
            q = p.clone()
            self.assertTrue(p.is_eq(q))
            q.destroy()
            self.assertTrue(q.is_zero())
            self.assertTrue(is_canonical(p))

    def test_clone_independence(self):
        y = P((1, 1), (2, 2))
        p = P((y, 1), (5, 3))
        q = p.clone()
        self.assertIsNot(q.monos[0].p, p.monos[0].p)
        q.destroy()
        self.assertEqual(p, P((P((1, 1), (2, 2)), 1), (5, 3)))

    def test_destroy_twice(self):
        p = P((P((1, 1)), 2))
        p.destroy()
        self.assertTrue(p.is_zero())
        p.destroy()
        self.assertTrue(p.is_zero())

    def test_random_canonical(self):
        for _ in range(200):
            self.assertTrue(is_canonical(rand_poly(3)))

class TestArithmetic(unittest.TestCase):

    def test_add_coeffs(self):
        self.assertEqual(C(2).add(C(3)), C(5))
        self.assertTrue(C(2).add(C(-2)).is_zero())

    def test_add_cancels(self):
        a = P((1, 1))
        b = P((-1, 1))
        c = a.add(b)
        self.assertTrue(c.is_zero())
        self.assertTrue(c.is_eq(C(0)))
        self.assertTrue(c.is_eq(Poly.zero()))

    def test_add_coeff_to_sum(self):
        x = P((1, 1))
        self.assertEqual(x.add(C(3)), P((3, 0), (1, 1)))
        self.assertEqual(C(3).add(x), P((3, 0), (1, 1)))
        self.assertEqual(P((2, 0), (1, 1)).add(C(3)), P((5, 0), (1, 1)))
        self.assertEqual(P((-3, 0), (1, 1)).add(C(3)), P((1, 1)))
        self.assertEqual(x.add(C(0)), x)

    def test_add_coeff_to_nested_constant_term(self):
        y = P((1, 1))
        p = P((y, 0), (1, 1))
        self.assertEqual(p.add(C(2)), P((P((2, 0), (1, 1)), 0), (1, 1)))

    def test_add_collapses(self):
        p = P((7, 0), (1, 2))
        q = P((-1, 2))
        r = p.add(q)
        self.assertTrue(r.is_coeff())
        self.assertEqual(r.c, 7)

    def test_add_merge(self):
        p = P((1, 0), (2, 2), (3, 4))
        q = P((1, 1), (-2, 2), (1, 5))
        self.assertEqual(p.add(q), P((1, 0), (1, 1), (3, 4), (1, 5)))

    def test_add_does_not_share(self):
        p = P((P((1, 1)), 1))
        q = P((1, 2))
        r = p.add(q)
        self.assertIsNot(r.monos[0].p, p.monos[0].p)
        r.destroy()
        self.assertEqual(p, P((P((1, 1)), 1)))

    def test_neg_sub(self):
        p = P((P((1, 1), (-2, 3)), 1), (5, 2))
        self.assertEqual(p.neg(), P((P((-1, 1), (2, 3)), 1), (-5, 2)))
        self.assertEqual(p.neg().neg(), p)
        self.assertTrue(p.sub(p).is_zero())
        self.assertEqual(C(4).sub(C(6)), C(-2))

    def test_mul_coeffs(self):
        self.assertEqual(C(6).mul(C(-7)), C(-42))
        self.assertTrue(C(6).mul(C(0)).is_zero())

    def test_mul_by_scalar(self):
        p = P((P((1, 1)), 0), (2, 3))
        self.assertEqual(p.mul(C(3)), P((P((3, 1)), 0), (6, 3)))
        self.assertEqual(C(3).mul(p), P((P((3, 1)), 0), (6, 3)))
        z = p.mul(C(0))
        self.assertTrue(z.is_zero())
        self.assertTrue(z.is_coeff())

    def test_mul(self):
        # (1 + x)(1 - x) = 1 - x^2
        a = P((1, 0), (1, 1))
        b = P((1, 0), (-1, 1))
        self.assertEqual(a.mul(b), P((1, 0), (-1, 2)))

        # (x + y)^2 = x^2 + 2xy + y^2
        y = P((1, 1))
        s = P((y, 0), (1, 1))
        expected = P((P((1, 2)), 0), (P((2, 1)), 1), (1, 2))
        self.assertEqual(s.mul(s), expected)

    def test_mul_collapse(self):
        # (2 + x)(2 - x) + x^2 = 4
        a = P((2, 0), (1, 1))
        b = P((2, 0), (-1, 1))
        r = a.mul(b).add(P((1, 2)))
        self.assertTrue(r.is_coeff())
        self.assertEqual(r.c, 4)

    def test_mul_logs(self):
        with self.assertLogs(_logger, level="DEBUG") as cm:
            P((1, 1), (1, 2)).mul(P((1, 3)))
        self.assertIn("mul: 2 x 1 monomials", cm.output[0])

    def test_operators(self):
        x = P((1, 1))
        self.assertEqual(x + 1, P((1, 0), (1, 1)))
        self.assertEqual(1 + x, P((1, 0), (1, 1)))
        self.assertEqual(x - 1, P((-1, 0), (1, 1)))
        self.assertEqual(1 - x, P((1, 0), (-1, 1)))
        self.assertEqual(2 * x, P((2, 1)))
        self.assertEqual(x * x, P((1, 2)))
        self.assertEqual(-x, P((-1, 1)))
        self.assertEqual(x - x, 0)
        self.assertNotEqual(x, 0)
        self.assertEqual(C(3), 3)

    def test_hash(self):
        a = P((P((1, 1)), 1), (2, 3))
        b = P((2, 3), (P((1, 1)), 1))
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b, a.clone()}), 1)

    def test_overflow(self):
        self.assertRaises(CoefficientOverflowError, C(COEFF_MAX).add, C(1))
        self.assertRaises(CoefficientOverflowError, C(COEFF_MIN).neg)
        big = P((2**62, 1))
        self.assertRaises(CoefficientOverflowError, big.mul, C(2))
        self.assertRaises(CoefficientOverflowError, big.add, big)

    def test_exponent_overflow(self):
        a = P((1, 2**31 - 1))
        self.assertEqual(a.mul(C(2)).deg(), 2**31 - 1)
        self.assertRaises(ExponentOverflowError, a.mul, P((1, 1)))

class TestProperties(unittest.TestCase):

    def test_additive_identity_inverse(self):
        for _ in range(200):
            p = rand_poly(3)
            self.assertTrue(p.add(Poly.zero()).is_eq(p))
            self.assertTrue(p.add(p.neg()).is_zero())

    def test_commutativity(self):
        for _ in range(200):
            p = rand_poly(3)
            q = rand_poly(3)
            self.assertTrue(p.add(q).is_eq(q.add(p)))
            self.assertTrue(p.mul(q).is_eq(q.mul(p)))

    def test_associativity(self):
        for _ in range(100):
            p, q, r = rand_poly(3), rand_poly(3), rand_poly(3)
            self.assertTrue(p.add(q).add(r).is_eq(p.add(q.add(r))))
            self.assertTrue(p.mul(q).mul(r).is_eq(p.mul(q.mul(r))))

    def test_distributivity(self):
        for _ in range(100):
            p, q, r = rand_poly(3), rand_poly(3), rand_poly(3)
            self.assertTrue(p.mul(q.add(r)).is_eq(p.mul(q).add(p.mul(r))))

    def test_results_canonical(self):
        for _ in range(200):
            p, q = rand_poly(3), rand_poly(3)
            for r in (p.add(q), p.sub(q), p.mul(q), p.neg(), p.at(random.randint(-3, 3))):
                self.assertTrue(is_canonical(r), repr(r))

    def test_zero_uniqueness(self):
        for _ in range(200):
            p = rand_poly(3)
            self.assertEqual(p.is_zero(), p.is_coeff() and p.c == 0)
            if not p.is_coeff():
                self.assertFalse(p.is_zero())

    def test_degree_of_product(self):
        for _ in range(200):
            p, q = rand_poly(3), rand_poly(3)
            if p.is_zero() or q.is_zero():
                self.assertEqual(p.mul(q).deg(), -1)
            else:
                self.assertEqual(p.mul(q).deg(), p.deg() + q.deg())

class TestDegree(unittest.TestCase):

    def test_coeff(self):
        self.assertEqual(C(0).deg(), -1)
        self.assertEqual(C(5).deg(), 0)
        for i in range(4):
            self.assertEqual(C(0).deg_by(i), -1)
            self.assertEqual(C(5).deg_by(i), 0)

    def test_deg_by(self):
        # x^3 + x y^4 + 2 z
        p = P((P((P((2, 1)), 0)), 0), (P((1, 4)), 1), (1, 3))
        self.assertEqual(p.deg_by(0), 3)
        self.assertEqual(p.deg_by(1), 4)
        self.assertEqual(p.deg_by(2), 1)
        self.assertEqual(p.deg_by(3), 0)
        self.assertRaises(AssertionError, p.deg_by, -1)

    def test_deg_by_later_variable_in_low_term(self):
        # x y^5 + x^2 y
        p = P((P((1, 5)), 1), (P((1, 1)), 2))
        self.assertEqual(p.deg_by(0), 2)
        self.assertEqual(p.deg_by(1), 5)

    def test_deg(self):
        # x y^5 + x^2 y
        p = P((P((1, 5)), 1), (P((1, 1)), 2))
        self.assertEqual(p.deg(), 6)
        self.assertEqual(P((1, 1)).deg(), 1)
        self.assertEqual(P((3, 0), (1, 7)).deg(), 7)

class TestEquality(unittest.TestCase):

    def test_is_eq(self):
        self.assertTrue(C(3).is_eq(C(3)))
        self.assertFalse(C(3).is_eq(C(4)))
        self.assertFalse(C(1).is_eq(P((1, 1))))
        self.assertFalse(P((1, 1)).is_eq(C(1)))
        self.assertTrue(P((1, 1), (2, 2)).is_eq(P((2, 2), (1, 1))))
        self.assertFalse(P((1, 1), (2, 2)).is_eq(P((1, 1))))
        self.assertFalse(P((1, 1)).is_eq(P((1, 2))))
        self.assertFalse(P((P((1, 1)), 1)).is_eq(P((P((1, 2)), 1))))

class TestEvaluation(unittest.TestCase):

    def test_at_variable(self):
        self.assertEqual(P((1, 1)).at(5), C(5))
        self.assertEqual(P((1, 1))(5), C(5))

    def test_at_coeff(self):
        p = C(7)
        q = p.at(100)
        self.assertEqual(q, C(7))
        self.assertIsNot(q, p)

    def test_at_zero(self):
        # 3 + x^2 at 0 = 3, x^0 is 1 even at 0
        self.assertEqual(P((3, 0), (1, 2)).at(0), C(3))
        self.assertTrue(P((1, 2)).at(0).is_zero())

    def test_at_univariate(self):
        # 1 - 2x + x^3
        p = P((1, 0), (-2, 1), (1, 3))
        for x in range(-10, 11):
            self.assertEqual(p.at(x), C(1 - 2 * x + x ** 3))

    def test_at_shifts_variables(self):
        # x y + x^2 + y^2 at x=2 -> y^2 + 2y + 4
        p = P((P((1, 2)), 0), (P((1, 1)), 1), (1, 2))
        self.assertEqual(p.at(2), P((4, 0), (2, 1), (1, 2)))

    def test_at_cancels(self):
        # x y - 2 y at x=2 -> 0
        p = P((P((-2, 1)), 0), (P((1, 1)), 1))
        self.assertTrue(p.at(2).is_zero())

    def test_at_overflow(self):
        self.assertRaises(CoefficientOverflowError, P((1, 64)).at, 2)
        self.assertRaises(CoefficientOverflowError, P((1, 1)).at, COEFF_MAX + 1)
        self.assertEqual(P((1, 2**31 - 1)).at(-1), C(-1))

    def test_at_random(self):
        for _ in range(100):
            p, q = rand_poly(2), rand_poly(2)
            x = random.randint(-3, 3)
            self.assertTrue(p.add(q).at(x).is_eq(p.at(x).add(q.at(x))))
            self.assertTrue(p.mul(q).at(x).is_eq(p.at(x).mul(q.at(x))))

class TestPrinting(unittest.TestCase):

    def test_to_string(self):
        self.assertEqual(C(0).to_string(), "0")
        self.assertEqual(C(-12).to_string(), "-12")
        self.assertEqual(P((1, 1)).to_string(), "(1,1)")
        self.assertEqual(P((3, 0), (-1, 2)).to_string(), "(3,0)+(-1,2)")
        self.assertEqual(str(P((1, 1), (P((1, 0), (2, 1)), 3))), "(1,1)+((1,0)+(2,1),3)")

    def test_print(self):
        out = io.StringIO()
        P((1, 1), (2, 4)).print(file=out)
        self.assertEqual(out.getvalue(), "(1,1)+(2,4)\n")

    def test_repr(self):
        self.assertEqual(repr(C(4)), "Poly.from_coeff(4)")
        p = P((P((1, 1)), 0), (2, 3))
        self.assertEqual(repr(p), "P((P((Poly.from_coeff(1), 1)), 0), (Poly.from_coeff(2), 3))")
