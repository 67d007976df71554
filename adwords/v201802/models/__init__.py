"""
XML records for the AdWords v201802 services.

Shared cm types are re-exported here. Operation wrappers (get, query, mutate
and friends) share names across services, so import those from the service's
own module.
"""

from adwords.v201802.models.common import (
    CM_NS,
    ApiError,
    ApiException,
    ApplicationException,
    Criterion,
    DateRange,
    FieldPathElement,
    Keyword,
    Language,
    ListReturnValue,
    Location,
    Money,
    Operation,
    Operator,
    OrderBy,
    Paging,
    Platform,
    Predicate,
    PredicateOperator,
    Selector,
    SoapHeader,
    SoapResponseHeader,
    SortOrder,
)
from adwords.v201802.models.location_criterion import LocationCriterion
from adwords.v201802.models.media import Audio, Image, Media, MediaBundle, MediaPage, Video
from adwords.v201802.models.offline_conversion_feed import (
    OfflineConversionFeed,
    OfflineConversionFeedOperation,
    OfflineConversionFeedReturnValue,
)
from adwords.v201802.models.report_definition import (
    EnumValuePair,
    ReportDefinitionField,
    ReportDefinitionReportType,
)
from adwords.v201802.models.traffic_estimator import (
    O_NS,
    CampaignEstimateRequest,
    KeywordEstimateRequest,
    TrafficEstimatorResult,
    TrafficEstimatorSelector,
)

__all__ = [
    # Common
    "CM_NS",
    "ApiError",
    "ApiException",
    "ApplicationException",
    "Criterion",
    "DateRange",
    "FieldPathElement",
    "Keyword",
    "Language",
    "ListReturnValue",
    "Location",
    "Money",
    "Operation",
    "Operator",
    "OrderBy",
    "Paging",
    "Platform",
    "Predicate",
    "PredicateOperator",
    "Selector",
    "SoapHeader",
    "SoapResponseHeader",
    "SortOrder",
    # LocationCriterionService
    "LocationCriterion",
    # MediaService
    "Audio",
    "Image",
    "Media",
    "MediaBundle",
    "MediaPage",
    "Video",
    # OfflineConversionFeedService
    "OfflineConversionFeed",
    "OfflineConversionFeedOperation",
    "OfflineConversionFeedReturnValue",
    # ReportDefinitionService
    "EnumValuePair",
    "ReportDefinitionField",
    "ReportDefinitionReportType",
    # TrafficEstimatorService
    "O_NS",
    "CampaignEstimateRequest",
    "KeywordEstimateRequest",
    "TrafficEstimatorResult",
    "TrafficEstimatorSelector",
]
