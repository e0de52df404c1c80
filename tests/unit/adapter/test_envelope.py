# ============================================================================
# Tests for SoapRequestBuilder and HeaderContext
# ============================================================================
"""Unit tests for SOAP 1.2 envelope construction."""

from dataclasses import FrozenInstanceError
from xml.etree import ElementTree

import pytest

from gusapi.adapter.soap.envelope import HeaderContext, SoapRequestBuilder
from gusapi.adapter.soap.operations import OperationName, get_operation
from gusapi.constants import SearchParam

SOAP = "{http://www.w3.org/2003/05/soap-envelope}"
WSA = "{http://www.w3.org/2005/08/addressing}"
PUBL = "{http://CIS/BIR/PUBL/2014/07}"
DAT = "{http://CIS/BIR/PUBL/2014/07/DataContract}"

ADDRESS = "https://wyszukiwarkaregontest.stat.gov.pl/wsBIR/UslugaBIRzewnPubl.svc"


def build(name: OperationName, params: dict, sid: str | None = None) -> ElementTree.Element:
    operation = get_operation(name)
    context = HeaderContext(action=operation.action, to=ADDRESS, sid=sid)
    return ElementTree.fromstring(SoapRequestBuilder().build_envelope(operation, params, context).encode())


class TestHeaderContext:
    """Tests for per-call header context."""

    def test_soap_headers(self) -> None:
        """Should expose Action and To."""
        context = HeaderContext(action="urn:action", to=ADDRESS)
        assert context.soap_headers() == {"Action": "urn:action", "To": ADDRESS}

    def test_http_headers_without_session(self) -> None:
        """Should not send a sid header without a session."""
        headers = HeaderContext(action="urn:action", to=ADDRESS).http_headers()
        assert "sid" not in headers
        assert headers["Content-Type"] == 'application/soap+xml; charset=utf-8; action="urn:action"'

    def test_http_headers_with_session(self) -> None:
        """Should carry the session id as an HTTP header."""
        headers = HeaderContext(action="urn:action", to=ADDRESS, sid="abc123").http_headers()
        assert headers["sid"] == "abc123"

    def test_is_immutable(self) -> None:
        """Should not allow headers to be changed after creation."""
        context = HeaderContext(action="urn:action", to=ADDRESS)
        with pytest.raises(FrozenInstanceError):
            context.sid = "x"  # type: ignore[misc]


class TestBuildEnvelope:
    """Tests for SoapRequestBuilder.build_envelope()."""

    def test_addressing_headers(self) -> None:
        """Should write WS-Addressing Action and To headers."""
        root = build(OperationName.LOGIN, {"pKluczUzytkownika": "key"})
        header = root.find(f"{SOAP}Header")
        assert header is not None
        assert header.findtext(f"{WSA}Action") == "http://CIS/BIR/PUBL/2014/07/IUslugaBIRzewnPubl/Zaloguj"
        assert header.findtext(f"{WSA}To") == ADDRESS

    def test_body_parameters(self) -> None:
        """Should place parameters in the operation namespace."""
        root = build(OperationName.LOGIN, {"pKluczUzytkownika": "abcde12345abcde12345"})
        call = root.find(f"{SOAP}Body/{PUBL}Zaloguj")
        assert call is not None
        assert call.findtext(f"{PUBL}pKluczUzytkownika") == "abcde12345abcde12345"

    def test_search_parameters_use_data_contract(self) -> None:
        """Should write nested search criteria as DataContract elements."""
        root = build(OperationName.SEARCH, {"pParametryWyszukiwania": {SearchParam.NIP: "5261040828"}})
        criteria = root.find(f"{SOAP}Body/{PUBL}DaneSzukaj/{PUBL}pParametryWyszukiwania")
        assert criteria is not None
        assert criteria.findtext(f"{DAT}Nip") == "5261040828"

    def test_get_value_namespace(self) -> None:
        """Should use the BIR namespace for GetValue."""
        root = build(OperationName.GET_VALUE, {"pNazwaParametru": "StatusUslugi"})
        call = root.find(f"{SOAP}Body/{{http://CIS/BIR/2014/07}}GetValue")
        assert call is not None
        assert call.findtext("{http://CIS/BIR/2014/07}pNazwaParametru") == "StatusUslugi"

    def test_escapes_values(self) -> None:
        """Should escape XML special characters."""
        root = build(OperationName.LOGIN, {"pKluczUzytkownika": "a<b>&'\""})
        assert root.findtext(f"{SOAP}Body/{PUBL}Zaloguj/{PUBL}pKluczUzytkownika") == "a<b>&'\""

    def test_none_value_is_empty_element(self) -> None:
        """Should serialize None as an empty element."""
        root = build(OperationName.LOGIN, {"pKluczUzytkownika": None})
        element = root.find(f"{SOAP}Body/{PUBL}Zaloguj/{PUBL}pKluczUzytkownika")
        assert element is not None
        assert element.text is None
