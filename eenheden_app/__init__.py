"""
Eenheden App - Contract Unit Accrual Engine

Tracks clients and their contracts, converts every contract into Eenheden
(units) and computes the progressive FT1/FT2/FT3 revenue schedule over the
units accrued across the whole portfolio.
"""

__version__ = "0.1.0"
__author__ = "Eenheden Team"
