"""Return-to-work childcare calculator.

Works out what a parent keeps from going back to work once income tax, the
Medicare levy and out-of-pocket childcare after the Child Care Subsidy are
taken into account, and sweeps that figure across incomes and hours worked.
"""

__version__ = "0.1.0"
