# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (GUS Registry)
# Description: Table of the remote operations exposed by BIR1.
# ============================================================================
"""SOAP Operation Table.

Every remote call the adapter can make is listed here with its SOAP name,
WS-Addressing action URI, body namespace and accepted parameters.

Usage:
    operation = get_operation(OperationName.LOGIN)
    params = operation.build_params(**{PARAM_USER_KEY: "..."})
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gusapi.constants import (
    PARAM_PARAM_NAME,
    PARAM_REGON,
    PARAM_REPORT_NAME,
    PARAM_SEARCH,
    PARAM_SESSION_ID,
    PARAM_USER_KEY,
)

PUBL_NAMESPACE = "http://CIS/BIR/PUBL/2014/07"
BIR_NAMESPACE = "http://CIS/BIR/2014/07"
DATA_CONTRACT_NAMESPACE = "http://CIS/BIR/PUBL/2014/07/DataContract"

_PUBL_ACTION = f"{PUBL_NAMESPACE}/IUslugaBIRzewnPubl"
_BIR_ACTION = f"{BIR_NAMESPACE}/IUslugaBIR"


class OperationName(str, Enum):
    """Remote operation names as published in the WSDL."""

    LOGIN = "login"
    LOGOUT = "logout"
    SEARCH = "search"
    FULL_REPORT = "fullReportDownload"
    GET_VALUE = "getValue"


@dataclass(frozen=True)
class Operation:
    """Configuration of one remote operation.

    Attributes:
        name: Logical operation name.
        soap_name: Element name of the request body (e.g., "Zaloguj").
        action: WS-Addressing Action URI.
        namespace: Namespace of the request body element.
        params: Parameter names accepted by the operation, in order.
    """

    name: OperationName
    soap_name: str
    action: str
    namespace: str
    params: tuple[str, ...] = field(default_factory=tuple)

    @property
    def result_field(self) -> str:
        """Name of the element holding the call result."""
        return f"{self.soap_name}Result"

    def build_params(self, **kwargs: Any) -> dict[str, Any]:
        """Build the request payload from keyword arguments.

        Args:
            **kwargs: Parameter values keyed by SOAP parameter name.

        Returns:
            Ordered dictionary of parameters for the request body.

        Raises:
            KeyError: If an argument is not accepted by the operation.
        """
        unknown = set(kwargs) - set(self.params)
        if unknown:
            raise KeyError(f"Operation '{self.soap_name}' does not accept: {', '.join(sorted(unknown))}")
        return {name: kwargs[name] for name in self.params if name in kwargs}


OPERATIONS: dict[OperationName, Operation] = {
    OperationName.LOGIN: Operation(
        name=OperationName.LOGIN,
        soap_name="Zaloguj",
        action=f"{_PUBL_ACTION}/Zaloguj",
        namespace=PUBL_NAMESPACE,
        params=(PARAM_USER_KEY,),
    ),
    OperationName.LOGOUT: Operation(
        name=OperationName.LOGOUT,
        soap_name="Wyloguj",
        action=f"{_PUBL_ACTION}/Wyloguj",
        namespace=PUBL_NAMESPACE,
        params=(PARAM_SESSION_ID,),
    ),
    OperationName.SEARCH: Operation(
        name=OperationName.SEARCH,
        soap_name="DaneSzukaj",
        action=f"{_PUBL_ACTION}/DaneSzukaj",
        namespace=PUBL_NAMESPACE,
        params=(PARAM_SEARCH,),
    ),
    OperationName.FULL_REPORT: Operation(
        name=OperationName.FULL_REPORT,
        soap_name="DanePobierzPelnyRaport",
        action=f"{_PUBL_ACTION}/DanePobierzPelnyRaport",
        namespace=PUBL_NAMESPACE,
        params=(PARAM_REGON, PARAM_REPORT_NAME),
    ),
    OperationName.GET_VALUE: Operation(
        name=OperationName.GET_VALUE,
        soap_name="GetValue",
        action=f"{_BIR_ACTION}/GetValue",
        namespace=BIR_NAMESPACE,
        params=(PARAM_PARAM_NAME,),
    ),
}


def get_operation(name: OperationName | str) -> Operation:
    """Look up an operation by its logical name.

    Raises:
        KeyError: If the name is not a known operation.
    """
    try:
        return OPERATIONS[OperationName(name)]
    except ValueError:
        raise KeyError(f"Operation '{name}' is not supported") from None
