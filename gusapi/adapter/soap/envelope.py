# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (GUS Registry)
# Description: SOAP 1.2 request builder with WS-Addressing headers.
# ============================================================================
"""SOAP Request Builder.

Builds SOAP 1.2 envelopes for BIR1 calls.
Single responsibility: XML envelope construction.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping
from xml.sax.saxutils import escape

from gusapi.constants import SESSION_HEADER

from .operations import DATA_CONTRACT_NAMESPACE, Operation

SOAP_ENVELOPE_NAMESPACE = "http://www.w3.org/2003/05/soap-envelope"
ADDRESSING_NAMESPACE = "http://www.w3.org/2005/08/addressing"
SOAP_CONTENT_TYPE = "application/soap+xml; charset=utf-8"

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


@dataclass(frozen=True)
class HeaderContext:
    """Headers for exactly one remote call.

    A new context is built for every call and handed to the transport,
    so nothing set for one call is visible to the next.

    Attributes:
        action: WS-Addressing Action URI.
        to: WS-Addressing To address.
        sid: Session id sent as an HTTP header, if any.
    """

    action: str
    to: str
    sid: str | None = None

    def soap_headers(self) -> dict[str, str]:
        """WS-Addressing header blocks, keyed by element name."""
        return {"Action": self.action, "To": self.to}

    def http_headers(self) -> dict[str, str]:
        """HTTP headers for the request carrying this call."""
        headers = {"Content-Type": f'{SOAP_CONTENT_TYPE}; action="{self.action}"'}
        if self.sid is not None:
            headers[SESSION_HEADER] = self.sid
        return headers


class SoapRequestBuilder:
    """Builds SOAP 1.2 XML envelopes.

    Handles XML escaping and parameter serialization. Nested mappings
    (search criteria) are written as DataContract elements.
    """

    BODY_PREFIX = "ns"
    DATA_PREFIX = "dat"

    def build_envelope(self, operation: Operation, params: Mapping[str, Any], context: HeaderContext) -> str:
        """Build a SOAP envelope for an operation call.

        Args:
            operation: Operation being called.
            params: Dictionary of parameters.
            context: Per-call header context.

        Returns:
            Complete SOAP XML envelope as string.
        """
        headers_xml = "\n    ".join(
            f"<wsa:{name}>{self._escape_xml(value)}</wsa:{name}>" for name, value in context.soap_headers().items()
        )
        params_xml = "\n      ".join(self._serialize_param(self.BODY_PREFIX, k, v) for k, v in params.items())
        method = f"{self.BODY_PREFIX}:{operation.soap_name}"

        return f"""<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="{SOAP_ENVELOPE_NAMESPACE}"
               xmlns:{self.BODY_PREFIX}="{operation.namespace}"
               xmlns:{self.DATA_PREFIX}="{DATA_CONTRACT_NAMESPACE}">
  <soap:Header xmlns:wsa="{ADDRESSING_NAMESPACE}">
    {headers_xml}
  </soap:Header>
  <soap:Body>
    <{method}>
      {params_xml}
    </{method}>
  </soap:Body>
</soap:Envelope>"""

    def _serialize_param(self, prefix: str, key: str, value: Any) -> str:
        """Serialize a parameter to XML.

        Args:
            prefix: Namespace prefix for the element.
            key: Parameter name.
            value: Parameter value.

        Returns:
            XML string for the parameter.
        """
        if isinstance(key, Enum):
            key = key.value
        tag = f"{prefix}:{key}"
        if value is None:
            return f"<{tag} />"
        if isinstance(value, Mapping):
            items = "".join(self._serialize_param(self.DATA_PREFIX, k, v) for k, v in value.items())
            return f"<{tag}>{items}</{tag}>"
        if isinstance(value, bool):
            return f"<{tag}>{str(value).lower()}</{tag}>"
        return f"<{tag}>{self._escape_xml(value)}</{tag}>"

    @staticmethod
    def _escape_xml(value: Any) -> str:
        """Escape XML special characters.

        Args:
            value: Value to escape.

        Returns:
            XML-safe string.
        """
        if value is None:
            return ""
        if isinstance(value, Enum):
            value = value.value
        return escape(str(value), _QUOTE_ENTITIES)
