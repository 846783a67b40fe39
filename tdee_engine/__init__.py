"""TDEE engine.

Estimates Total Daily Energy Expenditure from profile, activity and diet
inputs. The domain layer is a set of pure formulas; the application layer
composes them end to end.
"""

__version__ = "0.1.0"
