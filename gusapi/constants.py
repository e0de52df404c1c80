# ============================================================================
# SCOPE: SHARED (GUS Registry)
# Description: Names and endpoints fixed by the BIR1 service contract.
# ============================================================================
"""BIR1 service constants.

Parameter names, search keys, value names and report types defined by the
public REGON search service (BIR1, version 2014/07).
"""

from enum import Enum

# Request parameter names
PARAM_USER_KEY = "pKluczUzytkownika"
PARAM_SESSION_ID = "pIdentyfikatorSesji"
PARAM_SEARCH = "pParametryWyszukiwania"
PARAM_REGON = "pRegon"
PARAM_REPORT_NAME = "pNazwaRaportu"
PARAM_PARAM_NAME = "pNazwaParametru"

# HTTP header carrying the session id
SESSION_HEADER = "sid"

# Endpoints
PRODUCTION_URL = "https://wyszukiwarkaregon.stat.gov.pl/wsBIR/UslugaBIRzewnPubl.svc"
TEST_URL = "https://wyszukiwarkaregontest.stat.gov.pl/wsBIR/UslugaBIRzewnPubl.svc"

# Published key for the test environment
TEST_USER_KEY = "abcde12345abcde12345"


class Environment(str, Enum):
    """Service environment."""

    PROD = "prod"
    DEV = "dev"

    @property
    def url(self) -> str:
        return PRODUCTION_URL if self is Environment.PROD else TEST_URL


class SearchParam(str, Enum):
    """Keys accepted inside pParametryWyszukiwania."""

    REGON = "Regon"
    NIP = "Nip"
    KRS = "Krs"
    REGONS_9 = "Regony9zn"
    REGONS_14 = "Regony14zn"
    NIPS = "Nipy"
    KRSS = "Krsy"


class ValueName(str, Enum):
    """Names accepted by GetValue."""

    DATA_STATUS = "StanDanych"
    MESSAGE_CODE = "KomunikatKod"
    MESSAGE_CONTENT = "KomunikatTresc"
    SESSION_STATUS = "StatusSesji"
    SERVICE_STATUS = "StatusUslugi"
    SERVICE_MESSAGE = "KomunikatUslugi"


class ReportType(str, Enum):
    """Full report names accepted by DanePobierzPelnyRaport."""

    PERSON = "PublDaneRaportFizycznaOsoba"
    PERSON_CEIDG = "PublDaneRaportDzialalnoscFizycznejCeidg"
    PERSON_AGRICULTURE = "PublDaneRaportDzialalnoscFizycznejRolnicza"
    PERSON_OTHER = "PublDaneRaportDzialalnoscFizycznejPozostala"
    PERSON_DELETED_BEFORE_2014 = "PublDaneRaportDzialalnoscFizycznejWKrupgn"
    PERSON_LOCALS = "PublDaneRaportLokalneFizycznej"
    PERSON_LOCAL = "PublDaneRaportLokalnaFizycznej"
    PERSON_ACTIVITIES = "PublDaneRaportDzialalnosciFizycznej"
    PERSON_LOCAL_ACTIVITIES = "PublDaneRaportDzialalnosciLokalnejFizycznej"
    LEGAL = "PublDaneRaportPrawna"
    LEGAL_ACTIVITIES = "PublDaneRaportDzialalnosciPrawnej"
    LEGAL_LOCALS = "PublDaneRaportLokalnePrawnej"
    LEGAL_LOCAL = "PublDaneRaportLokalnaPrawnej"
    LEGAL_LOCAL_ACTIVITIES = "PublDaneRaportDzialalnosciLokalnejPrawnej"
    LEGAL_PARTNERS = "PublDaneRaportWspolnicyPrawnej"
    UNIT_TYPE = "PublDaneRaportTypJednostki"
