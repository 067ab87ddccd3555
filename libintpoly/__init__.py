#!/usr/bin/env python3
#
#   libintpoly : LIBrary for INTeger POLYnomials in one variable
#

from libintpoly.basic_types import COEFF_DTYPE, COEFF_MAX, COEFF_MIN, Polynomial, Term
