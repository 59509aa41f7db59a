#!/usr/bin/env python3
#
#   libmpoly : LIBrary for sparse Multivariate POLYnomials over fixed-width integers
#

from libmpoly.coeff import CoefficientOverflowError, ExponentOverflowError
from libmpoly.poly import C, Mono, P, Poly
