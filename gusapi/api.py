# ============================================================================
# SCOPE: APPLICATION LAYER (GUS Registry)
# Description: High-level client holding one registry session.
# ============================================================================
"""GusApi facade.

Wraps a registry adapter with a single in-memory session and convenience
lookups by NIP, REGON and KRS.

Usage:
    async with GusApi("abcde12345abcde12345", environment="dev") as api:
        company = await api.get_by_nip("5261040828")
        report = await api.get_full_report(company.Regon.text, ReportType.LEGAL)
"""

import logging
from typing import Iterable

from gusapi.adapter.ports import IRegistryAdapter
from gusapi.adapter.soap import ResultNode, SoapAdapter
from gusapi.config.settings import GusSettings, get_settings
from gusapi.constants import TEST_USER_KEY, Environment, ReportType, SearchParam, ValueName
from gusapi.exceptions import InvalidUserKeyError, NotLoggedInError

logger = logging.getLogger(__name__)

_MULTI_SEPARATOR = ","


class GusApi:
    """Registry client bound to one user key and one session at a time."""

    def __init__(
        self,
        user_key: str | None = None,
        environment: Environment | str | None = None,
        *,
        adapter: IRegistryAdapter | None = None,
        settings: GusSettings | None = None,
    ):
        """Initialize client.

        Args:
            user_key: Key issued by GUS. Defaults to the configured key.
            environment: "prod" or "dev". Defaults to the configured one.
            adapter: Optional adapter, built from settings when omitted.
            settings: Optional settings, loaded from the environment when omitted.
        """
        self._settings = settings or get_settings()
        self.environment = Environment(environment) if environment else self._settings.GUS_ENVIRONMENT
        self.user_key = user_key or self._settings.GUS_USER_KEY
        if not self.user_key and self.environment is Environment.DEV:
            self.user_key = TEST_USER_KEY

        if adapter is None:
            base_url = self._settings.GUS_BASE_URL or self.environment.url
            adapter = SoapAdapter(
                base_url,
                self._settings.GUS_ADDRESS or base_url,
                self._settings.transport_options(),
            )
        self._adapter = adapter
        self._sid: str | None = None

    async def __aenter__(self) -> "GusApi":
        try:
            await self.login()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            if self._sid is not None:
                await self.logout()
        finally:
            await self.close()

    @property
    def adapter(self) -> IRegistryAdapter:
        return self._adapter

    @property
    def session_id(self) -> str | None:
        return self._sid

    async def close(self) -> None:
        await self._adapter.close()

    async def login(self) -> bool:
        """Start a session with the configured user key.

        Raises:
            InvalidUserKeyError: If no key is configured or the service
                rejects it (empty session id).
        """
        if not self.user_key:
            raise InvalidUserKeyError("No user key configured")

        sid = await self._adapter.login(self.user_key)
        if not sid:
            logger.warning("Login rejected, empty session id returned")
            raise InvalidUserKeyError()

        self._sid = sid
        logger.info(f"Logged in to GUS registry ({self.environment.value})")
        return True

    async def logout(self) -> bool:
        """End the current session."""
        sid = self._require_session()
        try:
            result = await self._adapter.logout(sid)
        finally:
            self._sid = None
        logger.info("Logged out of GUS registry")
        return result

    async def is_logged(self) -> bool:
        """Ask the service whether the current session is still active."""
        if self._sid is None:
            return False
        return (await self.get_session_status()) == "1"

    # =========================================================================
    # Search
    # =========================================================================

    async def get_by_nip(self, nip: str) -> ResultNode:
        """Find an entity by NIP (tax identification number)."""
        return await self._search(SearchParam.NIP, nip)

    async def get_by_regon(self, regon: str) -> ResultNode:
        """Find an entity by REGON."""
        return await self._search(SearchParam.REGON, regon)

    async def get_by_krs(self, krs: str) -> ResultNode:
        """Find an entity by KRS number."""
        return await self._search(SearchParam.KRS, krs)

    async def get_by_regons9(self, regons: Iterable[str]) -> list[ResultNode]:
        """Find entities by a list of 9-digit REGON numbers, one node per match."""
        return await self._search_all(SearchParam.REGONS_9, _MULTI_SEPARATOR.join(regons))

    async def get_by_regons14(self, regons: Iterable[str]) -> list[ResultNode]:
        """Find local units by a list of 14-digit REGON numbers, one node per match."""
        return await self._search_all(SearchParam.REGONS_14, _MULTI_SEPARATOR.join(regons))

    async def get_by_nips(self, nips: Iterable[str]) -> list[ResultNode]:
        return await self._search_all(SearchParam.NIPS, _MULTI_SEPARATOR.join(nips))

    async def get_by_krss(self, krss: Iterable[str]) -> list[ResultNode]:
        return await self._search_all(SearchParam.KRSS, _MULTI_SEPARATOR.join(krss))

    async def get_full_report(self, regon: str, report_type: ReportType | str) -> ResultNode:
        """Download a full report for a REGON.

        Raises:
            NotFoundError: If the service returned no report.
        """
        sid = self._require_session()
        return await self._adapter.get_full_data(sid, regon, ReportType(report_type).value)

    # =========================================================================
    # Service values
    # =========================================================================

    async def get_session_status(self) -> str:
        """Session status: "1" active, "0" expired or unknown."""
        return await self._adapter.get_value(self._sid, ValueName.SESSION_STATUS.value)

    async def get_service_status(self) -> str:
        """Service status: "1" available, "2" unavailable, "0" technical break."""
        return await self._adapter.get_value(None, ValueName.SERVICE_STATUS.value)

    async def get_service_message(self) -> str:
        return await self._adapter.get_value(None, ValueName.SERVICE_MESSAGE.value)

    async def get_data_status(self) -> str:
        """Date of the registry data snapshot."""
        return await self._adapter.get_value(None, ValueName.DATA_STATUS.value)

    async def get_message_code(self) -> str:
        """Code describing the result of the last search in this session."""
        return await self._adapter.get_value(self._require_session(), ValueName.MESSAGE_CODE.value)

    async def get_result_search_message(self) -> str:
        """Message describing the result of the last search in this session."""
        return await self._adapter.get_value(self._require_session(), ValueName.MESSAGE_CONTENT.value)

    async def _search(self, param: SearchParam, value: str) -> ResultNode:
        sid = self._require_session()
        return await self._adapter.search(sid, {param.value: value})

    async def _search_all(self, param: SearchParam, value: str) -> list[ResultNode]:
        sid = self._require_session()
        return await self._adapter.search_all(sid, {param.value: value})

    def _require_session(self) -> str:
        if self._sid is None:
            raise NotLoggedInError()
        return self._sid
