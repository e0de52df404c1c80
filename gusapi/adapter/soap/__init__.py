# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (GUS Registry)
# Description: BIR1 SOAP adapter module.
# ============================================================================
"""BIR1 SOAP Adapter Module.

Components:
- SoapAdapter: Registry operations over SOAP (implements IRegistryAdapter)
- SoapClient: httpx transport with per-call header context
- SoapRequestBuilder: Builds SOAP 1.2 envelopes with WS-Addressing headers
- SoapResponseParser: Unwraps MTOM bodies, detects faults, reads results
- ResultNode: Navigable tree over decoded payloads

Usage:
    from gusapi.adapter.soap import SoapAdapter

    adapter = SoapAdapter(
        base_url="https://wyszukiwarkaregontest.stat.gov.pl/wsBIR/UslugaBIRzewnPubl.svc",
        address="https://wyszukiwarkaregontest.stat.gov.pl/wsBIR/UslugaBIRzewnPubl.svc",
    )
    sid = await adapter.login("abcde12345abcde12345")
    company = await adapter.search(sid, {"Nip": "5261040828"})
"""

from .adapter import SoapAdapter
from .client import SoapClient
from .envelope import HeaderContext, SoapRequestBuilder
from .operations import OPERATIONS, Operation, OperationName, get_operation
from .response_parser import SoapResponseParser
from .result_node import ResultNode

__all__ = [
    "SoapAdapter",
    "SoapClient",
    "HeaderContext",
    "SoapRequestBuilder",
    "SoapResponseParser",
    "ResultNode",
    "Operation",
    "OperationName",
    "OPERATIONS",
    "get_operation",
]
