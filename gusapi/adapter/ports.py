# ============================================================================
# SCOPE: APPLICATION LAYER (GUS Registry)
# Description: Registry adapter port.
# ============================================================================
"""Registry Adapter Port.

Defines the interface the GusApi facade uses to reach the registry.
Implementations: SoapAdapter.
"""

from typing import TYPE_CHECKING, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .soap.result_node import ResultNode


@runtime_checkable
class IRegistryAdapter(Protocol):
    """Remote operations of the registry service."""

    async def login(self, user_key: str) -> str:
        """Start a session.

        Returns:
            Session id issued by the service.
        """
        ...

    async def logout(self, sid: str) -> bool:
        """End a session."""
        ...

    async def search(self, sid: str, parameters: Mapping[str, str]) -> "ResultNode":
        """Search records.

        Raises:
            NotFoundError: If no record matches.
        """
        ...

    async def search_all(self, sid: str, parameters: Mapping[str, str]) -> list["ResultNode"]:
        """Search records, one node per matching entity.

        Raises:
            NotFoundError: If no record matches.
        """
        ...

    async def get_full_data(self, sid: str, regon: str, report_type: str) -> "ResultNode":
        """Download a full report for one REGON.

        Raises:
            NotFoundError: If no report is available.
        """
        ...

    async def get_value(self, sid: str | None, param_name: str) -> str:
        """Read a single service value."""
        ...

    async def close(self) -> None:
        """Close connections and release resources."""
        ...
