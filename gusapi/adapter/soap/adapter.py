# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (GUS Registry)
# Description: SOAP adapter for the BIR1 registry service.
# ============================================================================
"""SOAP Adapter.

Maps the registry operations onto SOAP calls:

- a fresh HeaderContext (Action, To, optional sid) is built for every call
- the call is dispatched through SoapClient
- search and full report payloads (XML inside a string) are decoded into
  ResultNode trees; a payload that cannot be decoded means "no data found"
"""

import logging
from typing import Any, Mapping
from xml.etree import ElementTree

from gusapi.constants import (
    PARAM_PARAM_NAME,
    PARAM_REGON,
    PARAM_REPORT_NAME,
    PARAM_SEARCH,
    PARAM_SESSION_ID,
    PARAM_USER_KEY,
)
from gusapi.exceptions import InvalidResponseError, NotFoundError

from .client import SoapClient
from .operations import Operation, OperationName, get_operation
from .result_node import ResultNode

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "1"}


class SoapAdapter:
    """Registry adapter over SOAP 1.2.

    Implements IRegistryAdapter.
    """

    def __init__(
        self,
        base_url: str,
        address: str,
        transport_options: Mapping[str, Any] | None = None,
        *,
        client: SoapClient | None = None,
    ):
        """Initialize adapter.

        Args:
            base_url: SOAP service URL.
            address: Address for the WS-Addressing To header.
            transport_options: Keyword arguments for the HTTP client
                (timeout, verify, proxy, ...).
            client: Optional preconfigured SOAP client.
        """
        self.base_url = base_url
        self.address = address
        self._client = client or SoapClient(base_url, address, transport_options)

    @property
    def client(self) -> SoapClient:
        return self._client

    async def close(self) -> None:
        await self._client.close()

    async def login(self, user_key: str) -> str:
        """Start a session.

        Args:
            user_key: User key issued by the registry.

        Returns:
            Session id.
        """
        result = await self._call(OperationName.LOGIN, {PARAM_USER_KEY: user_key})
        return self._require(result, OperationName.LOGIN)

    async def logout(self, sid: str) -> bool:
        """End a session.

        Args:
            sid: Session id.

        Returns:
            True if the service confirmed the logout.
        """
        result = await self._call(OperationName.LOGOUT, {PARAM_SESSION_ID: sid})
        return self._require(result, OperationName.LOGOUT).strip().lower() in _TRUE_VALUES

    async def search(self, sid: str, parameters: Mapping[str, str]) -> ResultNode:
        """Search records and return the first match.

        Args:
            sid: Session id.
            parameters: Search criteria (e.g., {"Nip": "..."}).

        Returns:
            The first "dane" element of the decoded result.

        Raises:
            NotFoundError: If the result cannot be decoded or holds no data.
        """
        return (await self.search_all(sid, parameters))[0]

    async def search_all(self, sid: str, parameters: Mapping[str, str]) -> list[ResultNode]:
        """Search records and return every match.

        The service sends one "dane" element per matching entity.

        Raises:
            NotFoundError: If the result cannot be decoded or holds no data.
        """
        result = await self._call(OperationName.SEARCH, {PARAM_SEARCH: dict(parameters)}, sid)
        root = self.decode_response(result, OperationName.SEARCH)
        records = root.find_all("dane")
        if not records:
            logger.warning("Search result has no data element")
            raise NotFoundError(operation=get_operation(OperationName.SEARCH).soap_name)
        return records

    async def get_full_data(self, sid: str, regon: str, report_type: str) -> ResultNode:
        """Download a full report.

        Args:
            sid: Session id.
            regon: REGON number of the entity.
            report_type: Report name (see ReportType).

        Returns:
            Root element of the decoded report.

        Raises:
            NotFoundError: If the result cannot be decoded.
        """
        result = await self._call(
            OperationName.FULL_REPORT,
            {PARAM_REGON: regon, PARAM_REPORT_NAME: report_type},
            sid,
        )
        return self.decode_response(result, OperationName.FULL_REPORT)

    async def get_value(self, sid: str | None, param_name: str) -> str:
        """Read a service value (status or message).

        Args:
            sid: Session id, or None for values available without a session.
            param_name: Value name (see ValueName).

        Returns:
            Raw value as returned by the service.
        """
        result = await self._call(OperationName.GET_VALUE, {PARAM_PARAM_NAME: param_name}, sid)
        return self._require(result, OperationName.GET_VALUE)

    async def _call(
        self,
        name: OperationName,
        payload: Mapping[str, Any],
        sid: str | None = None,
    ) -> str | None:
        """Dispatch a registered operation with its own header context."""
        operation = get_operation(name)
        params = operation.build_params(**payload)
        context = self._client.header_context(operation, sid)
        return await self._client.call(operation, params, context)

    def decode_response(self, response: str | None, name: OperationName) -> ResultNode:
        """Decode an XML string payload.

        Any decoding failure, including an empty payload, is reported
        as NotFoundError.
        """
        operation = get_operation(name)
        if not response:
            logger.info(f"Empty {operation.result_field}, no data found")
            raise NotFoundError(operation=operation.soap_name)
        try:
            return ResultNode.from_string(response)
        except (ElementTree.ParseError, ValueError) as e:
            logger.warning(f"Could not decode {operation.result_field}: {e}")
            raise NotFoundError(operation=operation.soap_name) from e

    @staticmethod
    def _require(result: str | None, name: OperationName) -> str:
        if result is None:
            operation: Operation = get_operation(name)
            raise InvalidResponseError(f"Response has no {operation.result_field} element", operation.soap_name)
        return result
