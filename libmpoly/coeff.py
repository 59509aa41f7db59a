#!/usr/bin/env python3
#
#   Fixed-width coefficient and exponent arithmetic
#

import random

import numpy as np

# Coefficients are C longs, exponents are C ints
COEFF_DTYPE = np.int64
EXP_DTYPE = np.int32

COEFF_MIN = int(np.iinfo(COEFF_DTYPE).min)
COEFF_MAX = int(np.iinfo(COEFF_DTYPE).max)
EXP_MAX = int(np.iinfo(EXP_DTYPE).max)

class CoefficientOverflowError(OverflowError):
    pass

class ExponentOverflowError(OverflowError):
    pass

def check_coeff(c):
    """
    Validates that c is an integer representable as a coefficient and returns it as a python int
    """
    if isinstance(c, (bool, np.bool_)) or not isinstance(c, (int, np.integer)):
        raise TypeError(f"Coefficients must be integers, got {type(c).__name__}")
    c = int(c)
    if c < COEFF_MIN or c > COEFF_MAX:
        raise CoefficientOverflowError(f"{c} does not fit in {np.dtype(COEFF_DTYPE).name}")
    return c

def check_exp(e):
    if isinstance(e, (bool, np.bool_)) or not isinstance(e, (int, np.integer)):
        raise TypeError(f"Exponents must be integers, got {type(e).__name__}")
    e = int(e)
    assert e >= 0 , f"Exponents should be nonnegative, got {e}"
    if e > EXP_MAX:
        raise ExponentOverflowError(f"{e} does not fit in {np.dtype(EXP_DTYPE).name}")
    return e

def coeff_add(a, b):
    return check_coeff(a + b)

def coeff_mul(a, b):
    return check_coeff(a * b)

def coeff_neg(a):
    return check_coeff(-a)

def coeff_pow(x, e):
    """
    x ** e for a coefficient x and exponent e, by repeated squaring.

    Overflow is reported as soon as a partial product leaves the coefficient range, so huge exponents never build
    huge intermediates. x ** 0 is 1 for every x, including 0.
    """
    x = check_coeff(x)
    if e == 0:
        return 1
    # |x| <= 1 never overflows, whatever the exponent
    if x in (0, 1):
        return x
    if x == -1:
        return -1 if e % 2 else 1

    result = 1
    base = x
    while True:
        if e & 1:
            result = coeff_mul(result, base)
        e >>= 1
        if e == 0:
            return result
        base = coeff_mul(base, base)

def exp_add(a, b):
    r = a + b
    if r > EXP_MAX:
        raise ExponentOverflowError(f"{a} + {b} does not fit in {np.dtype(EXP_DTYPE).name}")
    return r

########################################################################################################################
#   Unit Tests
########################################################################################################################

import unittest

class TestCheckCoeff(unittest.TestCase):

    def test_range(self):
        self.assertEqual(check_coeff(0), 0)
        self.assertEqual(check_coeff(COEFF_MAX), 2**63 - 1)
        self.assertEqual(check_coeff(COEFF_MIN), -2**63)
        self.assertRaises(CoefficientOverflowError, check_coeff, COEFF_MAX + 1)
        self.assertRaises(CoefficientOverflowError, check_coeff, COEFF_MIN - 1)

    def test_types(self):
        self.assertEqual(check_coeff(np.int64(-5)), -5)
        self.assertIs(type(check_coeff(np.int32(7))), int)
        self.assertRaises(TypeError, check_coeff, 1.0)
        self.assertRaises(TypeError, check_coeff, "1")
        self.assertRaises(TypeError, check_coeff, True)

    def test_overflow_is_overflow_error(self):
        self.assertTrue(issubclass(CoefficientOverflowError, OverflowError))
        self.assertTrue(issubclass(ExponentOverflowError, OverflowError))

class TestCheckedArithmetic(unittest.TestCase):

    def test_add(self):
        for _ in range(1000):
            a = random.randint(-2**40, 2**40)
            b = random.randint(-2**40, 2**40)
            self.assertEqual(coeff_add(a, b), a + b)
        self.assertRaises(CoefficientOverflowError, coeff_add, COEFF_MAX, 1)
        self.assertRaises(CoefficientOverflowError, coeff_add, COEFF_MIN, -1)

    def test_mul(self):
        for _ in range(1000):
            a = random.randint(-2**30, 2**30)
            b = random.randint(-2**30, 2**30)
            self.assertEqual(coeff_mul(a, b), a * b)
        self.assertRaises(CoefficientOverflowError, coeff_mul, 2**32, 2**31)
        self.assertEqual(coeff_mul(-2**32, 2**31), COEFF_MIN)

    def test_neg(self):
        self.assertEqual(coeff_neg(5), -5)
        self.assertEqual(coeff_neg(COEFF_MAX), COEFF_MIN + 1)
        self.assertRaises(CoefficientOverflowError, coeff_neg, COEFF_MIN)

    def test_pow(self):
        for x in range(-10, 11):
            for e in range(0, 15):
                self.assertEqual(coeff_pow(x, e), x ** e)
        self.assertEqual(coeff_pow(0, 0), 1)
        self.assertEqual(coeff_pow(2, 62), 2**62)
        self.assertEqual(coeff_pow(-2, 63), COEFF_MIN)
        self.assertRaises(CoefficientOverflowError, coeff_pow, 2, 63)
        self.assertRaises(CoefficientOverflowError, coeff_pow, 3, 1000)

    def test_pow_huge_exponent(self):
        self.assertEqual(coeff_pow(1, EXP_MAX), 1)
        self.assertEqual(coeff_pow(-1, EXP_MAX), -1)
        self.assertEqual(coeff_pow(0, EXP_MAX), 0)
        self.assertRaises(CoefficientOverflowError, coeff_pow, 2, EXP_MAX)

    def test_exp(self):
        self.assertEqual(exp_add(3, 4), 7)
        self.assertEqual(exp_add(EXP_MAX - 1, 1), EXP_MAX)
        self.assertRaises(ExponentOverflowError, exp_add, EXP_MAX, 1)
        self.assertEqual(check_exp(np.int32(3)), 3)
        self.assertRaises(AssertionError, check_exp, -1)
        self.assertRaises(ExponentOverflowError, check_exp, EXP_MAX + 1)
