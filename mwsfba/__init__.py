"""MWS Fulfillment request builder."""

__version__ = "0.1.0"
