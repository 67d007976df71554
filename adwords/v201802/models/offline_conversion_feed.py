"""
Records for OfflineConversionFeedService.

Namespace: https://adwords.google.com/api/adwords/cm/v201802
"""

from enum import StrEnum

from pydantic_xml import element

from adwords.soap.binding import OpenEnum
from adwords.v201802.models.common import ApiError, CmModel, ListReturnValue, Operation


class OfflineConversionErrorReason(StrEnum):
    UNPARSEABLE_GCLID = "UNPARSEABLE_GCLID"
    CONVERSION_PRECEDES_CLICK = "CONVERSION_PRECEDES_CLICK"
    FUTURE_CONVERSION_TIME = "FUTURE_CONVERSION_TIME"
    EXPIRED_CLICK = "EXPIRED_CLICK"
    TOO_RECENT_CLICK = "TOO_RECENT_CLICK"
    INVALID_CLICK = "INVALID_CLICK"
    UNAUTHORIZED_USER = "UNAUTHORIZED_USER"
    INVALID_CONVERSION_TYPE = "INVALID_CONVERSION_TYPE"
    TOO_RECENT_CONVERSION_TYPE = "TOO_RECENT_CONVERSION_TYPE"
    CLICK_MISSING_CONVERSION_LABEL = "CLICK_MISSING_CONVERSION_LABEL"
    ATTRIBUTED_CREDIT_SET_FOR_NON_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION = (
        "ATTRIBUTED_CREDIT_SET_FOR_NON_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION"
    )
    ATTRIBUTION_MODEL_SET_FOR_NON_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION = (
        "ATTRIBUTION_MODEL_SET_FOR_NON_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION"
    )
    ATTRIBUTED_CREDIT_NOT_SET_FOR_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION = (
        "ATTRIBUTED_CREDIT_NOT_SET_FOR_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION"
    )
    ATTRIBUTED_CREDIT_ZERO_FOR_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION = (
        "ATTRIBUTED_CREDIT_ZERO_FOR_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION"
    )
    ATTRIBUTION_MODEL_NOT_SET_FOR_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION = (
        "ATTRIBUTION_MODEL_NOT_SET_FOR_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION"
    )
    ORDER_ID_NOT_PERMITTED_FOR_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION = (
        "ORDER_ID_NOT_PERMITTED_FOR_EXTERNALLY_ATTRIBUTED_CONVERSION_ACTION"
    )
    UNKNOWN = "UNKNOWN"


class OfflineConversionError(ApiError, tag="OfflineConversionError"):
    reason: OpenEnum[OfflineConversionErrorReason] | None = element(default=None)


class OfflineConversionFeed(CmModel, tag="OfflineConversionFeed"):
    """
    One offline conversion attributed to an ad click.

    ``conversion_time`` uses the ``yyyyMMdd HHmmss tz`` form, for example
    ``20180301 120000 America/New_York``.
    """

    google_click_id: str | None = element(tag="googleClickId", default=None)
    conversion_name: str | None = element(tag="conversionName", default=None)
    conversion_time: str | None = element(tag="conversionTime", default=None)
    conversion_value: float | None = element(tag="conversionValue", default=None)
    conversion_currency_code: str | None = element(tag="conversionCurrencyCode", default=None)
    external_attribution_credit: float | None = element(tag="externalAttributionCredit", default=None)
    external_attribution_model: str | None = element(tag="externalAttributionModel", default=None)


class OfflineConversionFeedOperation(Operation, tag="OfflineConversionFeedOperation"):
    operand: OfflineConversionFeed | None = element(tag="operand", default=None)


class OfflineConversionFeedReturnValue(ListReturnValue, tag="OfflineConversionFeedReturnValue"):
    value: list[OfflineConversionFeed] = element(tag="value", default=[])
    partial_failure_errors: list[ApiError] = element(tag="partialFailureErrors", default=[])


# --- mutate ---


class Mutate(CmModel, tag="mutate"):
    operations: list[OfflineConversionFeedOperation] = element(tag="operations", default=[])


class MutateResponse(CmModel, tag="mutateResponse"):
    rval: OfflineConversionFeedReturnValue | None = element(tag="rval", default=None)
