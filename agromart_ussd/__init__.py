"""Lovitti Agro Mart USSD gateway."""

__version__ = "0.1.0"
