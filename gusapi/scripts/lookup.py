"""
Look up an entity in the GUS registry from the command line.

    python -m gusapi.scripts.lookup --nip 5261040828 --dev
    python -m gusapi.scripts.lookup --regon 000331501 --report PublDaneRaportPrawna
    python -m gusapi.scripts.lookup --status --dev
"""

import argparse
import asyncio
import logging
import sys

import httpx

from gusapi.api import GusApi
from gusapi.config.settings import get_settings
from gusapi.constants import Environment, ReportType
from gusapi.exceptions import GusApiError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Consultar el registro REGON (GUS BIR1)")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--nip", help="Buscar por NIP")
    group.add_argument("--regon", help="Buscar por REGON")
    group.add_argument("--krs", help="Buscar por KRS")
    group.add_argument("--status", action="store_true", help="Mostrar estado del servicio")
    parser.add_argument("--report", choices=[r.value for r in ReportType], help="Descargar el informe completo")
    parser.add_argument("--key", help="Clave de usuario (por defecto GUS_USER_KEY)")
    parser.add_argument("--dev", action="store_true", help="Usar el entorno de pruebas")
    return parser


async def run(args: argparse.Namespace) -> int:
    environment = Environment.DEV if args.dev else None

    async with GusApi(args.key, environment) as api:
        if args.status:
            print(f"StatusUslugi: {await api.get_service_status()}")
            print(f"KomunikatUslugi: {await api.get_service_message()}")
            print(f"StanDanych: {await api.get_data_status()}")
            print(f"StatusSesji: {await api.get_session_status()}")
            return 0

        if args.nip:
            found = await api.get_by_nip(args.nip)
        elif args.regon:
            found = await api.get_by_regon(args.regon)
        else:
            found = await api.get_by_krs(args.krs)
        print(found.to_xml(pretty=True))

        if args.report:
            regon = found.get("Regon")
            if not regon:
                logger.error("Search result carries no REGON, cannot download report")
                return 1
            report = await api.get_full_report(regon, args.report)
            print(report.to_xml(pretty=True))

    return 0


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args()

    try:
        return asyncio.run(run(args))
    except GusApiError as e:
        logger.error(f"{e.code}: {e.message}")
        return 1
    except httpx.HTTPError as e:
        logger.error(f"HTTP error talking to GUS registry: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
