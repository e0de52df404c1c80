# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (GUS Registry)
# Description: SOAP response parser for BIR1.
# ============================================================================
"""SOAP Response Parser.

Parses SOAP 1.2 responses from the BIR1 service.
Single responsibility: locating the envelope, faults and result fields.

The service answers with MTOM (multipart/related) bodies; the envelope is
cut out of the multipart payload before parsing.
"""

import logging
import re
from xml.etree import ElementTree

from gusapi.exceptions import InvalidResponseError, SoapFaultError

from .operations import Operation
from .result_node import local_name

logger = logging.getLogger(__name__)

_ENVELOPE_PATTERN = re.compile(rb"<(?:[\w.-]+:)?Envelope\b.*</(?:[\w.-]+:)?Envelope>", re.DOTALL)


class SoapResponseParser:
    """Parses SOAP XML responses.

    Extracts the result field of an operation and detects SOAP faults.
    """

    def extract_envelope(self, content: bytes) -> bytes | None:
        """Cut the SOAP envelope out of a (possibly multipart) body.

        Args:
            content: Raw HTTP response body.

        Returns:
            Envelope bytes, or None when the body contains no envelope.
        """
        match = _ENVELOPE_PATTERN.search(content)
        return match.group(0) if match else None

    def load(self, content: bytes, operation: Operation) -> ElementTree.Element:
        """Parse the envelope contained in a response body.

        Args:
            content: Raw HTTP response body.
            operation: Operation the response belongs to.

        Returns:
            Envelope root element.

        Raises:
            InvalidResponseError: If no well-formed envelope is present.
        """
        envelope = self.extract_envelope(content)
        if envelope is None:
            raise InvalidResponseError("Response contains no SOAP envelope", operation.soap_name)
        try:
            return ElementTree.fromstring(envelope)
        except ElementTree.ParseError as e:
            logger.error(f"Error parsing SOAP envelope for {operation.soap_name}: {e}")
            raise InvalidResponseError(f"Malformed SOAP envelope: {e}", operation.soap_name) from e

    def raise_for_fault(self, root: ElementTree.Element, operation: Operation) -> None:
        """Raise SoapFaultError if the envelope carries a Fault.

        Understands SOAP 1.2 (Code/Value, Reason/Text) and SOAP 1.1
        (faultcode, faultstring) layouts.
        """
        for elem in root.iter():
            if local_name(elem.tag) != "Fault":
                continue
            reason = self._find_text(elem, "Text") or self._find_text(elem, "faultstring") or "Unknown SOAP fault"
            code = self._find_text(elem, "Value") or self._find_text(elem, "faultcode")
            logger.warning(f"SOAP fault in {operation.soap_name}: {reason} ({code})")
            raise SoapFaultError(reason.strip(), code, operation.soap_name)

    def find_result(self, root: ElementTree.Element, operation: Operation) -> str | None:
        """Get the text of the operation's result field.

        Args:
            root: Envelope root element.
            operation: Operation the response belongs to.

        Returns:
            Result text ("" for an empty element), or None when the
            result element is missing.
        """
        result_tag = operation.result_field
        for elem in root.iter():
            if local_name(elem.tag) == result_tag:
                return elem.text or ""
        return None

    @staticmethod
    def _find_text(elem: ElementTree.Element, tag_name: str) -> str | None:
        for child in elem.iter():
            if local_name(child.tag) == tag_name:
                return child.text
        return None
