"""Backend for the SIP (systematic investment plan) calculator."""

__version__ = "0.1.0"
