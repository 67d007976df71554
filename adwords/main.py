"""
Command line client for a few read-only AdWords v201802 operations.

    adwords-client report-fields URL KEYWORDS_PERFORMANCE_REPORT
    adwords-client locations URL "SELECT Id, LocationName WHERE LocationName IN ['Paris']"

Settings come from adwords.json and ADWORDS_* environment variables; the
flags below override them. Results are printed as JSON.
"""

import argparse
import json
import logging
import sys
from typing import Optional

from adwords._version import __version__
from adwords.config.app_settings import AppSettings, app_config
from adwords.soap.errors import SoapError, SoapFault
from adwords.util.logging_helper import parse_level, setup_logging
from adwords.v201802.location_criterion_service import LocationCriterionService
from adwords.v201802.models.common import ApiException
from adwords.v201802.models.location_criterion import Query
from adwords.v201802.models.report_definition import GetReportFields, ReportDefinitionReportType
from adwords.v201802.report_definition_service import ReportDefinitionService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="adwords-client", description=__doc__.splitlines()[1])
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--insecure", action="store_true", help="skip TLS certificate verification")
    parser.add_argument("--login", help="HTTP Basic login")
    parser.add_argument("--password", default="", help="HTTP Basic password")
    parser.add_argument("--developer-token", help="AdWords developer token (enables the RequestHeader)")
    parser.add_argument("--client-customer-id", help="AdWords client customer id")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR (default from settings)")

    commands = parser.add_subparsers(dest="command", required=True)

    fields = commands.add_parser("report-fields", help="list the fields of a report type")
    fields.add_argument("url", help="ReportDefinitionService endpoint URL")
    fields.add_argument("report_type", choices=[t.value for t in ReportDefinitionReportType], metavar="REPORT_TYPE")

    locations = commands.add_parser("locations", help="run an AWQL location query")
    locations.add_argument("url", help="LocationCriterionService endpoint URL")
    locations.add_argument("query", help="AWQL query")
    return parser


def settings_from_args(args: argparse.Namespace, base: AppSettings) -> AppSettings:
    """Overlay command line flags on loaded settings."""
    settings = base.model_copy(deep=True)
    if args.insecure:
        settings.transport.insecure_skip_verify = True
    if args.login:
        settings.auth.login = args.login
        settings.auth.password = args.password
    if args.developer_token:
        settings.adwords.developer_token = args.developer_token
    if args.client_customer_id:
        settings.adwords.client_customer_id = args.client_customer_id
    if args.log_level:
        settings.logging.level = args.log_level
    return settings


def run(args: argparse.Namespace, settings: AppSettings) -> dict:
    if args.command == "report-fields":
        service = ReportDefinitionService.from_settings(args.url, settings)
        response = service.get_report_fields(GetReportFields(report_type=args.report_type))
    else:
        service = LocationCriterionService.from_settings(args.url, settings)
        response = service.query(Query(query=args.query))
    return response.model_dump(mode="json", exclude_none=True, serialize_as_any=True)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args, app_config)
    # stdout carries the JSON result
    setup_logging(level=parse_level(settings.logging.level), stream=sys.stderr)

    try:
        result = run(args, settings)
    except SoapFault as exc:
        print(f"error: {exc}", file=sys.stderr)
        try:
            api_exception = ApiException.from_fault(exc)
        except SoapError:
            logger.debug("fault detail is not an ApiException", exc_info=True)
            api_exception = None
        if api_exception is not None:
            for error in api_exception.errors:
                print(f"  {error.api_error_type}: {error.error_string}", file=sys.stderr)
        return 1
    except SoapError as exc:
        logger.debug("call failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
