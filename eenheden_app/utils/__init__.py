"""
Utility functions module.

Numeric coercion, time handling and identifier generation shared across
the accrual engine and the client registry.

Numeric Semantics:
- Amounts and units are Decimal end to end
- Caller input is coerced through str() so floats keep their printed value
- Percentages for display are returned as float
"""
