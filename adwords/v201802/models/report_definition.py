"""
Records for ReportDefinitionService.

Namespace: https://adwords.google.com/api/adwords/cm/v201802
"""

from enum import StrEnum

from pydantic_xml import element

from adwords.soap.binding import OpenEnum
from adwords.v201802.models.common import ApiError, CmModel


class ReportDefinitionReportType(StrEnum):
    KEYWORDS_PERFORMANCE_REPORT = "KEYWORDS_PERFORMANCE_REPORT"
    AD_PERFORMANCE_REPORT = "AD_PERFORMANCE_REPORT"
    URL_PERFORMANCE_REPORT = "URL_PERFORMANCE_REPORT"
    ADGROUP_PERFORMANCE_REPORT = "ADGROUP_PERFORMANCE_REPORT"
    CAMPAIGN_PERFORMANCE_REPORT = "CAMPAIGN_PERFORMANCE_REPORT"
    ACCOUNT_PERFORMANCE_REPORT = "ACCOUNT_PERFORMANCE_REPORT"
    GEO_PERFORMANCE_REPORT = "GEO_PERFORMANCE_REPORT"
    SEARCH_QUERY_PERFORMANCE_REPORT = "SEARCH_QUERY_PERFORMANCE_REPORT"
    AUTOMATIC_PLACEMENTS_PERFORMANCE_REPORT = "AUTOMATIC_PLACEMENTS_PERFORMANCE_REPORT"
    CAMPAIGN_NEGATIVE_KEYWORDS_PERFORMANCE_REPORT = "CAMPAIGN_NEGATIVE_KEYWORDS_PERFORMANCE_REPORT"
    CAMPAIGN_NEGATIVE_PLACEMENTS_PERFORMANCE_REPORT = "CAMPAIGN_NEGATIVE_PLACEMENTS_PERFORMANCE_REPORT"
    DESTINATION_URL_REPORT = "DESTINATION_URL_REPORT"
    SHARED_SET_REPORT = "SHARED_SET_REPORT"
    CAMPAIGN_SHARED_SET_REPORT = "CAMPAIGN_SHARED_SET_REPORT"
    SHARED_SET_CRITERIA_REPORT = "SHARED_SET_CRITERIA_REPORT"
    CREATIVE_CONVERSION_REPORT = "CREATIVE_CONVERSION_REPORT"
    CALL_METRICS_CALL_DETAILS_REPORT = "CALL_METRICS_CALL_DETAILS_REPORT"
    KEYWORDLESS_QUERY_REPORT = "KEYWORDLESS_QUERY_REPORT"
    KEYWORDLESS_CATEGORY_REPORT = "KEYWORDLESS_CATEGORY_REPORT"
    CRITERIA_PERFORMANCE_REPORT = "CRITERIA_PERFORMANCE_REPORT"
    CLICK_PERFORMANCE_REPORT = "CLICK_PERFORMANCE_REPORT"
    BUDGET_PERFORMANCE_REPORT = "BUDGET_PERFORMANCE_REPORT"
    BID_GOAL_PERFORMANCE_REPORT = "BID_GOAL_PERFORMANCE_REPORT"
    DISPLAY_KEYWORD_PERFORMANCE_REPORT = "DISPLAY_KEYWORD_PERFORMANCE_REPORT"
    PLACEHOLDER_FEED_ITEM_REPORT = "PLACEHOLDER_FEED_ITEM_REPORT"
    PLACEMENT_PERFORMANCE_REPORT = "PLACEMENT_PERFORMANCE_REPORT"
    CAMPAIGN_NEGATIVE_LOCATIONS_REPORT = "CAMPAIGN_NEGATIVE_LOCATIONS_REPORT"
    GENDER_PERFORMANCE_REPORT = "GENDER_PERFORMANCE_REPORT"
    AGE_RANGE_PERFORMANCE_REPORT = "AGE_RANGE_PERFORMANCE_REPORT"
    CAMPAIGN_LOCATION_TARGET_REPORT = "CAMPAIGN_LOCATION_TARGET_REPORT"
    CAMPAIGN_AD_SCHEDULE_TARGET_REPORT = "CAMPAIGN_AD_SCHEDULE_TARGET_REPORT"
    PAID_ORGANIC_QUERY_REPORT = "PAID_ORGANIC_QUERY_REPORT"
    AUDIENCE_PERFORMANCE_REPORT = "AUDIENCE_PERFORMANCE_REPORT"
    DISPLAY_TOPICS_PERFORMANCE_REPORT = "DISPLAY_TOPICS_PERFORMANCE_REPORT"
    USER_AD_DISTANCE_REPORT = "USER_AD_DISTANCE_REPORT"
    SHOPPING_PERFORMANCE_REPORT = "SHOPPING_PERFORMANCE_REPORT"
    PRODUCT_PARTITION_REPORT = "PRODUCT_PARTITION_REPORT"
    PARENTAL_STATUS_PERFORMANCE_REPORT = "PARENTAL_STATUS_PERFORMANCE_REPORT"
    PLACEHOLDER_REPORT = "PLACEHOLDER_REPORT"
    AD_CUSTOMIZERS_FEED_ITEM_REPORT = "AD_CUSTOMIZERS_FEED_ITEM_REPORT"
    LABEL_REPORT = "LABEL_REPORT"
    FINAL_URL_REPORT = "FINAL_URL_REPORT"
    VIDEO_PERFORMANCE_REPORT = "VIDEO_PERFORMANCE_REPORT"
    TOP_CONTENT_PERFORMANCE_REPORT = "TOP_CONTENT_PERFORMANCE_REPORT"
    CAMPAIGN_CRITERIA_REPORT = "CAMPAIGN_CRITERIA_REPORT"
    CAMPAIGN_GROUP_PERFORMANCE_REPORT = "CAMPAIGN_GROUP_PERFORMANCE_REPORT"
    LANDING_PAGE_REPORT = "LANDING_PAGE_REPORT"
    MARKETPLACE_PERFORMANCE_REPORT = "MARKETPLACE_PERFORMANCE_REPORT"
    UNKNOWN = "UNKNOWN"


class ReportDefinitionErrorReason(StrEnum):
    INVALID_DATE_RANGE_FOR_REPORT = "INVALID_DATE_RANGE_FOR_REPORT"
    INVALID_FIELD_NAME_FOR_REPORT = "INVALID_FIELD_NAME_FOR_REPORT"
    UNABLE_TO_FIND_MAPPING_FOR_THIS_REPORT = "UNABLE_TO_FIND_MAPPING_FOR_THIS_REPORT"
    INVALID_COLUMN_NAME_FOR_REPORT = "INVALID_COLUMN_NAME_FOR_REPORT"
    INVALID_REPORT_DEFINITION_ID = "INVALID_REPORT_DEFINITION_ID"
    REPORT_SELECTOR_CANNOT_BE_NULL = "REPORT_SELECTOR_CANNOT_BE_NULL"
    NO_ENUMS_FOR_THIS_COLUMN_NAME = "NO_ENUMS_FOR_THIS_COLUMN_NAME"
    INVALID_VIEW = "INVALID_VIEW"
    SORTING_NOT_SUPPORTED = "SORTING_NOT_SUPPORTED"
    PAGING_NOT_SUPPORTED = "PAGING_NOT_SUPPORTED"
    CUSTOMER_SERVING_TYPE_REPORT_MISMATCH = "CUSTOMER_SERVING_TYPE_REPORT_MISMATCH"
    CLIENT_SELECTOR_NO_CUSTOMER_IDENTIFIER = "CLIENT_SELECTOR_NO_CUSTOMER_IDENTIFIER"
    CLIENT_SELECTOR_INVALID_CUSTOMER_ID = "CLIENT_SELECTOR_INVALID_CUSTOMER_ID"
    REPORT_DEFINITION_ERROR = "REPORT_DEFINITION_ERROR"


class ReportDefinitionError(ApiError, tag="ReportDefinitionError"):
    reason: OpenEnum[ReportDefinitionErrorReason] | None = element(default=None)


class EnumValuePair(CmModel, tag="EnumValuePair"):
    """An enum value and the name it is displayed under in downloaded reports."""

    enum_value: str | None = element(tag="enumValue", default=None)
    enum_display_value: str | None = element(tag="enumDisplayValue", default=None)


class ReportDefinitionField(CmModel, tag="ReportDefinitionField"):
    """Describes one field (column) available in a report type."""

    field_name: str | None = element(tag="fieldName", default=None)
    display_field_name: str | None = element(tag="displayFieldName", default=None)
    xml_attribute_name: str | None = element(tag="xmlAttributeName", default=None)
    field_type: str | None = element(tag="fieldType", default=None)
    field_behavior: str | None = element(tag="fieldBehavior", default=None)
    enum_values: list[str] = element(tag="enumValues", default=[])
    can_select: bool | None = element(tag="canSelect", default=None)
    can_filter: bool | None = element(tag="canFilter", default=None)
    is_enum_type: bool | None = element(tag="isEnumType", default=None)
    is_beta: bool | None = element(tag="isBeta", default=None)
    is_zero_row_compatible: bool | None = element(tag="isZeroRowCompatible", default=None)
    enum_value_pairs: list[EnumValuePair] = element(tag="enumValuePairs", default=[])
    exclusive_fields: list[str] = element(tag="exclusiveFields", default=[])


# --- getReportFields ---


class GetReportFields(CmModel, tag="getReportFields"):
    """Request model for getReportFields."""

    report_type: OpenEnum[ReportDefinitionReportType] | None = element(tag="reportType", default=None)


class GetReportFieldsResponse(CmModel, tag="getReportFieldsResponse"):
    """Response model for getReportFields: the fields of the requested report type."""

    rval: list[ReportDefinitionField] = element(tag="rval", default=[])
