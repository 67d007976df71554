"""
Records for LocationCriterionService.

Namespace: https://adwords.google.com/api/adwords/cm/v201802
"""

from enum import StrEnum

from pydantic_xml import element

from adwords.soap.binding import OpenEnum
from adwords.v201802.models.common import ApiError, CmModel, Location, Selector


class LocationCriterionServiceErrorReason(StrEnum):
    REQUIRED_LOCATION_CRITERION_PREDICATE_MISSING = "REQUIRED_LOCATION_CRITERION_PREDICATE_MISSING"
    TOO_MANY_LOCATION_CRITERION_PREDICATES_SPECIFIED = "TOO_MANY_LOCATION_CRITERION_PREDICATES_SPECIFIED"
    INVALID_COUNTRY_CODE = "INVALID_COUNTRY_CODE"
    LOCATION_NAME_TOO_LARGE = "LOCATION_NAME_TOO_LARGE"
    LOCATION_CRITERION_SERVICE_ERROR = "LOCATION_CRITERION_SERVICE_ERROR"


class LocationCriterionServiceError(ApiError, tag="LocationCriterionServiceError"):
    reason: OpenEnum[LocationCriterionServiceErrorReason] | None = element(default=None)


class LocationCriterion(CmModel, tag="LocationCriterion"):
    """A location matched by a lookup, with its reach and canonical name."""

    location: Location | None = element(tag="location", default=None)
    canonical_name: str | None = element(tag="canonicalName", default=None)
    reach: int | None = element(tag="reach", default=None)
    locale: str | None = element(tag="locale", default=None)
    search_term: str | None = element(tag="searchTerm", default=None)
    country_code: str | None = element(tag="countryCode", default=None)


# --- get ---


class Get(CmModel, tag="get"):
    selector: Selector | None = element(tag="selector", default=None)


class GetResponse(CmModel, tag="getResponse"):
    rval: list[LocationCriterion] = element(tag="rval", default=[])


# --- query ---


class Query(CmModel, tag="query"):
    """AWQL form of get, e.g. ``SELECT Id, LocationName WHERE LocationName IN ['Paris']``."""

    query: str | None = element(tag="query", default=None)


class QueryResponse(CmModel, tag="queryResponse"):
    rval: list[LocationCriterion] = element(tag="rval", default=[])
