"""
Core multiplication algorithm, integer primitives, and contracts.

This module contains the Karatsuba core and its boundary models; it is
independent of any input/output surface.
"""
