"""
gusapi

Async client for the GUS BIR1 (REGON) business registry service.
"""

from gusapi.adapter import IRegistryAdapter, ResultNode, SoapAdapter
from gusapi.api import GusApi
from gusapi.constants import Environment, ReportType, SearchParam, ValueName
from gusapi.exceptions import (
    GusApiError,
    InvalidResponseError,
    InvalidUserKeyError,
    NotFoundError,
    NotLoggedInError,
    SoapFaultError,
    TransportFault,
)

__version__ = "0.1.0"

__all__ = [
    "GusApi",
    "SoapAdapter",
    "IRegistryAdapter",
    "ResultNode",
    "Environment",
    "ReportType",
    "SearchParam",
    "ValueName",
    "GusApiError",
    "TransportFault",
    "SoapFaultError",
    "InvalidResponseError",
    "NotFoundError",
    "InvalidUserKeyError",
    "NotLoggedInError",
]
