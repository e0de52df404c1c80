# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (GUS Registry)
# Description: SOAP transport over httpx.
# ============================================================================
"""SOAP Client.

Async transport that posts SOAP 1.2 envelopes to the BIR1 endpoint and
returns the result field of each operation.

Headers are supplied per call through a HeaderContext. The client keeps
no header state between calls; it only records the last exchange for
inspection (see last_request / last_response).
"""

import logging
from typing import Any, Mapping

import httpx

from gusapi.exceptions import InvalidResponseError

from .envelope import HeaderContext, SoapRequestBuilder
from .operations import Operation
from .response_parser import SoapResponseParser

logger = logging.getLogger(__name__)


class SoapClient:
    """Async SOAP transport for a single endpoint.

    Transport options are passed to httpx.AsyncClient unchanged
    (timeout, verify, proxy, cert, transport, ...).
    """

    def __init__(
        self,
        base_url: str,
        address: str,
        options: Mapping[str, Any] | None = None,
        request_builder: SoapRequestBuilder | None = None,
        response_parser: SoapResponseParser | None = None,
    ):
        """Initialize SOAP client.

        Args:
            base_url: SOAP service URL.
            address: Address sent in the WS-Addressing To header.
            options: Keyword arguments for httpx.AsyncClient.
            request_builder: Optional custom request builder.
            response_parser: Optional custom response parser.
        """
        self.base_url = base_url
        self.address = address
        self.options = dict(options or {})

        self._builder = request_builder or SoapRequestBuilder()
        self._parser = response_parser or SoapResponseParser()
        self._client: httpx.AsyncClient | None = None

        self.last_request: httpx.Request | None = None
        self.last_response: httpx.Response | None = None

    @property
    def last_request_headers(self) -> dict[str, str]:
        """HTTP headers of the last dispatched request."""
        if self.last_request is None:
            return {}
        return dict(self.last_request.headers)

    @property
    def last_request_body(self) -> str:
        """Envelope of the last dispatched request."""
        if self.last_request is None:
            return ""
        return self.last_request.content.decode("utf-8")

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            options = {"timeout": 30.0, **self.options}
            self._client = httpx.AsyncClient(**options)
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def header_context(self, operation: Operation, sid: str | None = None) -> HeaderContext:
        """Build a fresh header context for one call."""
        return HeaderContext(action=operation.action, to=self.address, sid=sid)

    async def call(
        self,
        operation: Operation,
        params: Mapping[str, Any],
        context: HeaderContext,
    ) -> str | None:
        """Dispatch one operation and return its result field.

        Args:
            operation: Operation to call.
            params: Request payload.
            context: Headers for this call only.

        Returns:
            Text of the <Operation>Result element, or None if absent.

        Raises:
            SoapFaultError: If the service answers with a SOAP Fault.
            InvalidResponseError: If the response carries no usable envelope.
            httpx.HTTPStatusError: On HTTP errors without a SOAP Fault.
            httpx.RequestError: On network errors.
        """
        client = await self._get_client()
        envelope = self._builder.build_envelope(operation, params, context)
        logger.debug(f"Calling {operation.soap_name} (action={context.action}, session={context.sid is not None})")

        try:
            response = await client.post(
                self.base_url,
                content=envelope.encode("utf-8"),
                headers=context.http_headers(),
            )
        except httpx.RequestError as e:
            logger.error(f"Request error calling {operation.soap_name}: {e}")
            raise

        self.last_request = response.request
        self.last_response = response

        try:
            root = self._parser.load(response.content, operation)
        except InvalidResponseError:
            if response.is_error:
                logger.error(f"HTTP error calling {operation.soap_name}: {response.status_code}")
                response.raise_for_status()
            raise

        self._parser.raise_for_fault(root, operation)
        if response.is_error:
            logger.error(f"HTTP error calling {operation.soap_name}: {response.status_code}")
            response.raise_for_status()

        return self._parser.find_result(root, operation)
