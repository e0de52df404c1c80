"""
Shared pytest fixtures for all tests.

Provides a fake BIR1 service served through httpx.MockTransport, so the
adapter runs its real envelope building, HTTP dispatch and parsing code.
"""

import re
from typing import AsyncGenerator
from xml.sax.saxutils import escape

import httpx
import pytest
import pytest_asyncio

from gusapi.adapter.soap import SoapAdapter
from gusapi.config.settings import GusSettings

SERVICE_URL = "https://wyszukiwarkaregontest.stat.gov.pl/wsBIR/UslugaBIRzewnPubl.svc"
PUBL_NS = "http://CIS/BIR/PUBL/2014/07"
BIR_NS = "http://CIS/BIR/2014/07"

_ACTION_PATTERN = re.compile(r'action="([^"]+)"')


def soap_response(soap_name: str, result: str | None, namespace: str = PUBL_NS) -> bytes:
    """Build a SOAP 1.2 response envelope carrying <soap_name>Result."""
    result_xml = "" if result is None else f"<{soap_name}Result>{escape(result)}</{soap_name}Result>"
    return (
        '<s:Envelope xmlns:s="http://www.w3.org/2003/05/soap-envelope" '
        'xmlns:a="http://www.w3.org/2005/08/addressing">'
        f'<s:Header><a:Action s:mustUnderstand="1">{namespace}/{soap_name}Response</a:Action></s:Header>'
        f'<s:Body><{soap_name}Response xmlns="{namespace}">{result_xml}</{soap_name}Response></s:Body>'
        "</s:Envelope>"
    ).encode("utf-8")


def soap_fault(reason: str, code: str = "s:Receiver") -> bytes:
    """Build a SOAP 1.2 Fault envelope."""
    return (
        '<s:Envelope xmlns:s="http://www.w3.org/2003/05/soap-envelope">'
        "<s:Body><s:Fault>"
        f"<s:Code><s:Value>{code}</s:Value></s:Code>"
        f'<s:Reason><s:Text xml:lang="en-US">{escape(reason)}</s:Text></s:Reason>'
        "</s:Fault></s:Body></s:Envelope>"
    ).encode("utf-8")


def mtom_wrap(envelope: bytes, boundary: str = "uuid:4b1c0fb2-0001+id=1") -> bytes:
    """Wrap an envelope the way the service does (multipart/related)."""
    return (
        f"--{boundary}\r\n"
        "Content-ID: <http://tempuri.org/0>\r\n"
        "Content-Transfer-Encoding: 8bit\r\n"
        'Content-Type: application/xop+xml;charset=utf-8;type="application/soap+xml"\r\n\r\n'
    ).encode("utf-8") + envelope + f"\r\n--{boundary}--\r\n".encode("utf-8")


class FakeRegistryService:
    """In-memory stand-in for the BIR1 endpoint.

    Replies are configured per SOAP operation name; every request is kept
    in `requests` for inspection. A fresh httpx.Response is built for each
    request.
    """

    SOAP_HEADERS = {"Content-Type": "application/soap+xml; charset=utf-8"}

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: dict[str, tuple[int, bytes, dict[str, str]]] = {}

    def reply(self, soap_name: str, result: str | None, namespace: str = PUBL_NS, mtom: bool = False) -> None:
        content = soap_response(soap_name, result, namespace)
        if mtom:
            headers = {"Content-Type": 'multipart/related; type="application/xop+xml"'}
            self._replies[soap_name] = (200, mtom_wrap(content), headers)
        else:
            self._replies[soap_name] = (200, content, self.SOAP_HEADERS)

    def fault(self, soap_name: str, reason: str, status_code: int = 500) -> None:
        self._replies[soap_name] = (status_code, soap_fault(reason), self.SOAP_HEADERS)

    def respond_with(
        self,
        soap_name: str,
        status_code: int,
        content: bytes,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._replies[soap_name] = (status_code, content, headers or {})

    @staticmethod
    def action_of(request: httpx.Request) -> str:
        match = _ACTION_PATTERN.search(request.headers.get("content-type", ""))
        return match.group(1) if match else ""

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        soap_name = self.action_of(request).rsplit("/", 1)[-1]
        if soap_name not in self._replies:
            return httpx.Response(500, content=soap_fault(f"No reply configured for {soap_name}"))
        status_code, content, headers = self._replies[soap_name]
        return httpx.Response(status_code, content=content, headers=headers)


@pytest.fixture
def service() -> FakeRegistryService:
    """Fake BIR1 service with no replies configured."""
    return FakeRegistryService()


@pytest.fixture
def transport_options(service: FakeRegistryService) -> dict:
    return {"transport": httpx.MockTransport(service.handler)}


@pytest_asyncio.fixture
async def adapter(transport_options: dict) -> AsyncGenerator[SoapAdapter, None]:
    """SoapAdapter wired to the fake service."""
    soap_adapter = SoapAdapter(SERVICE_URL, SERVICE_URL, transport_options)
    yield soap_adapter
    await soap_adapter.close()


@pytest.fixture
def settings() -> GusSettings:
    """Settings isolated from the process environment and .env files."""
    return GusSettings(_env_file=None, GUS_ENVIRONMENT="dev", GUS_USER_KEY=None)
