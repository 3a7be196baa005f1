"""
Fulfillment API Module

Provides:
- Static FBA action catalog (inbound, inventory, outbound)
- ComplexList / Enum factories and member builders
- MwsClient transport adapter
"""

from . import fba
from .fba import get_schema, list_actions, new_request
from .mws_client import MwsClient

__all__ = [
    "fba",
    "get_schema",
    "list_actions",
    "new_request",
    "MwsClient",
]
