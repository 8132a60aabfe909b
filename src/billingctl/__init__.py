"""billingctl — command validation and dispatch for the billing platform."""

__version__ = "0.3.0"
