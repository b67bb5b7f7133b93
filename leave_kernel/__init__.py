"""
Leave Kernel

Value types, rounding rules, typed exceptions and structured logging shared
by the leave accounting engines:
- Decimal-only day quantities
- Derived (never stored) remaining balances
- One rounding convention for every calculator
"""

__version__ = "0.1.0"
