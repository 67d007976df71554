"""
Shared AdWords v201802 records in the ``cm`` namespace.

These types appear in several services: the ApiError hierarchy carried by
fault details, selectors and paging, the Request/Response SOAP headers,
criteria, and the Operation / ListReturnValue bases.
"""

from enum import StrEnum
from typing import Optional

from pydantic_xml import element

from adwords.soap.binding import OpenEnum, XmlRecord
from adwords.soap.errors import DeserializationError, SoapFault

CM_NS = "https://adwords.google.com/api/adwords/cm/v201802"
CM_NSMAP = {"": CM_NS}


class CmModel(XmlRecord, nsmap=CM_NSMAP):
    """Base of every record in the cm namespace."""


# --- Enumerations ---


class AuthenticationErrorReason(StrEnum):
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    CLIENT_CUSTOMER_ID_IS_REQUIRED = "CLIENT_CUSTOMER_ID_IS_REQUIRED"
    CLIENT_EMAIL_REQUIRED = "CLIENT_EMAIL_REQUIRED"
    CLIENT_CUSTOMER_ID_INVALID = "CLIENT_CUSTOMER_ID_INVALID"
    CLIENT_EMAIL_INVALID = "CLIENT_EMAIL_INVALID"
    CLIENT_EMAIL_FAILED_TO_AUTHENTICATE = "CLIENT_EMAIL_FAILED_TO_AUTHENTICATE"
    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    GOOGLE_ACCOUNT_DELETED = "GOOGLE_ACCOUNT_DELETED"
    GOOGLE_ACCOUNT_COOKIE_INVALID = "GOOGLE_ACCOUNT_COOKIE_INVALID"
    FAILED_TO_AUTHENTICATE_GOOGLE_ACCOUNT = "FAILED_TO_AUTHENTICATE_GOOGLE_ACCOUNT"
    GOOGLE_ACCOUNT_USER_AND_ADS_USER_MISMATCH = "GOOGLE_ACCOUNT_USER_AND_ADS_USER_MISMATCH"
    LOGIN_COOKIE_REQUIRED = "LOGIN_COOKIE_REQUIRED"
    NOT_ADS_USER = "NOT_ADS_USER"
    OAUTH_TOKEN_INVALID = "OAUTH_TOKEN_INVALID"
    OAUTH_TOKEN_EXPIRED = "OAUTH_TOKEN_EXPIRED"
    OAUTH_TOKEN_DISABLED = "OAUTH_TOKEN_DISABLED"
    OAUTH_TOKEN_REVOKED = "OAUTH_TOKEN_REVOKED"
    OAUTH_TOKEN_HEADER_INVALID = "OAUTH_TOKEN_HEADER_INVALID"
    LOGIN_COOKIE_INVALID = "LOGIN_COOKIE_INVALID"
    FAILED_TO_RETRIEVE_LOGIN_COOKIE = "FAILED_TO_RETRIEVE_LOGIN_COOKIE"
    USER_ID_INVALID = "USER_ID_INVALID"


class AuthorizationErrorReason(StrEnum):
    UNABLE_TO_AUTHORIZE = "UNABLE_TO_AUTHORIZE"
    NO_ADWORDS_ACCOUNT_FOR_CUSTOMER = "NO_ADWORDS_ACCOUNT_FOR_CUSTOMER"
    USER_PERMISSION_DENIED = "USER_PERMISSION_DENIED"
    EFFECTIVE_USER_PERMISSION_DENIED = "EFFECTIVE_USER_PERMISSION_DENIED"
    CUSTOMER_NOT_ACTIVE = "CUSTOMER_NOT_ACTIVE"
    USER_HAS_READONLY_PERMISSION = "USER_HAS_READONLY_PERMISSION"
    NO_CUSTOMER_FOUND = "NO_CUSTOMER_FOUND"
    SERVICE_ACCESS_DENIED = "SERVICE_ACCESS_DENIED"


class ClientTermsErrorReason(StrEnum):
    INCOMPLETE_SIGNUP_CURRENT_ADWORDS_TNC_NOT_AGREED = "INCOMPLETE_SIGNUP_CURRENT_ADWORDS_TNC_NOT_AGREED"


class CollectionSizeErrorReason(StrEnum):
    TOO_FEW = "TOO_FEW"
    TOO_MANY = "TOO_MANY"


class DatabaseErrorReason(StrEnum):
    CONCURRENT_MODIFICATION = "CONCURRENT_MODIFICATION"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    ACCESS_PROHIBITED = "ACCESS_PROHIBITED"
    CAMPAIGN_PRODUCT_NOT_SUPPORTED = "CAMPAIGN_PRODUCT_NOT_SUPPORTED"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    DATABASE_ERROR = "DATABASE_ERROR"
    UNKNOWN = "UNKNOWN"


class DateErrorReason(StrEnum):
    INVALID_FIELD_VALUES_IN_DATE = "INVALID_FIELD_VALUES_IN_DATE"
    INVALID_FIELD_VALUES_IN_DATE_TIME = "INVALID_FIELD_VALUES_IN_DATE_TIME"
    INVALID_STRING_DATE = "INVALID_STRING_DATE"
    INVALID_STRING_DATE_RANGE = "INVALID_STRING_DATE_RANGE"
    INVALID_STRING_DATE_TIME = "INVALID_STRING_DATE_TIME"
    EARLIER_THAN_MINIMUM_DATE = "EARLIER_THAN_MINIMUM_DATE"
    LATER_THAN_MAXIMUM_DATE = "LATER_THAN_MAXIMUM_DATE"
    DATE_RANGE_MINIMUM_DATE_LATER_THAN_MAXIMUM_DATE = "DATE_RANGE_MINIMUM_DATE_LATER_THAN_MAXIMUM_DATE"
    DATE_RANGE_MINIMUM_AND_MAXIMUM_DATES_BOTH_NULL = "DATE_RANGE_MINIMUM_AND_MAXIMUM_DATES_BOTH_NULL"


class DistinctErrorReason(StrEnum):
    DUPLICATE_ELEMENT = "DUPLICATE_ELEMENT"
    DUPLICATE_TYPE = "DUPLICATE_TYPE"


class IdErrorReason(StrEnum):
    NOT_FOUND = "NOT_FOUND"


class InternalApiErrorReason(StrEnum):
    UNEXPECTED_INTERNAL_API_ERROR = "UNEXPECTED_INTERNAL_API_ERROR"
    TRANSIENT_ERROR = "TRANSIENT_ERROR"
    UNKNOWN = "UNKNOWN"
    DOWNTIME = "DOWNTIME"
    ERROR_GENERATING_RESPONSE = "ERROR_GENERATING_RESPONSE"


class NotEmptyErrorReason(StrEnum):
    EMPTY_LIST = "EMPTY_LIST"


class NotWhitelistedErrorReason(StrEnum):
    CUSTOMER_NOT_WHITELISTED_FOR_API = "CUSTOMER_NOT_WHITELISTED_FOR_API"


class NullErrorReason(StrEnum):
    NULL_CONTENT = "NULL_CONTENT"


class OperationAccessDeniedReason(StrEnum):
    ACTION_NOT_PERMITTED = "ACTION_NOT_PERMITTED"
    ADD_OPERATION_NOT_PERMITTED = "ADD_OPERATION_NOT_PERMITTED"
    REMOVE_OPERATION_NOT_PERMITTED = "REMOVE_OPERATION_NOT_PERMITTED"
    SET_OPERATION_NOT_PERMITTED = "SET_OPERATION_NOT_PERMITTED"
    MUTATE_ACTION_NOT_PERMITTED_FOR_CLIENT = "MUTATE_ACTION_NOT_PERMITTED_FOR_CLIENT"
    OPERATION_NOT_PERMITTED_FOR_CAMPAIGN_TYPE = "OPERATION_NOT_PERMITTED_FOR_CAMPAIGN_TYPE"
    ADD_AS_REMOVED_NOT_PERMITTED = "ADD_AS_REMOVED_NOT_PERMITTED"
    OPERATION_NOT_PERMITTED_FOR_REMOVED_ENTITY = "OPERATION_NOT_PERMITTED_FOR_REMOVED_ENTITY"
    OPERATION_NOT_PERMITTED_FOR_AD_GROUP_TYPE = "OPERATION_NOT_PERMITTED_FOR_AD_GROUP_TYPE"
    UNKNOWN = "UNKNOWN"


class OperatorErrorReason(StrEnum):
    OPERATOR_NOT_SUPPORTED = "OPERATOR_NOT_SUPPORTED"


class QuotaCheckErrorReason(StrEnum):
    INVALID_TOKEN_HEADER = "INVALID_TOKEN_HEADER"
    ACCOUNT_DELINQUENT = "ACCOUNT_DELINQUENT"
    ACCOUNT_INACCESSIBLE = "ACCOUNT_INACCESSIBLE"
    ACCOUNT_INACTIVE = "ACCOUNT_INACTIVE"
    INCOMPLETE_SIGNUP = "INCOMPLETE_SIGNUP"
    DEVELOPER_TOKEN_NOT_APPROVED = "DEVELOPER_TOKEN_NOT_APPROVED"
    TERMS_AND_CONDITIONS_NOT_SIGNED = "TERMS_AND_CONDITIONS_NOT_SIGNED"
    MONTHLY_BUDGET_REACHED = "MONTHLY_BUDGET_REACHED"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"


class RangeErrorReason(StrEnum):
    TOO_LOW = "TOO_LOW"
    TOO_HIGH = "TOO_HIGH"


class RateExceededErrorReason(StrEnum):
    RATE_EXCEEDED = "RATE_EXCEEDED"


class ReadOnlyErrorReason(StrEnum):
    READ_ONLY = "READ_ONLY"


class RejectedErrorReason(StrEnum):
    UNKNOWN_VALUE = "UNKNOWN_VALUE"


class RequestErrorReason(StrEnum):
    UNKNOWN = "UNKNOWN"
    INVALID_INPUT = "INVALID_INPUT"
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"


class RequiredErrorReason(StrEnum):
    REQUIRED = "REQUIRED"


class SizeLimitErrorReason(StrEnum):
    REQUEST_SIZE_LIMIT_EXCEEDED = "REQUEST_SIZE_LIMIT_EXCEEDED"
    RESPONSE_SIZE_LIMIT_EXCEEDED = "RESPONSE_SIZE_LIMIT_EXCEEDED"
    INTERNAL_STORAGE_ERROR = "INTERNAL_STORAGE_ERROR"
    UNKNOWN = "UNKNOWN"


class StringFormatErrorReason(StrEnum):
    UNKNOWN = "UNKNOWN"
    ILLEGAL_CHARS = "ILLEGAL_CHARS"
    INVALID_FORMAT = "INVALID_FORMAT"


class StringLengthErrorReason(StrEnum):
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"


class QueryErrorReason(StrEnum):
    PARSING_FAILED = "PARSING_FAILED"
    MISSING_QUERY = "MISSING_QUERY"
    MISSING_SELECT_CLAUSE = "MISSING_SELECT_CLAUSE"
    MISSING_FROM_CLAUSE = "MISSING_FROM_CLAUSE"
    INVALID_SELECT_CLAUSE = "INVALID_SELECT_CLAUSE"
    INVALID_FROM_CLAUSE = "INVALID_FROM_CLAUSE"
    INVALID_WHERE_CLAUSE = "INVALID_WHERE_CLAUSE"
    INVALID_ORDER_BY_CLAUSE = "INVALID_ORDER_BY_CLAUSE"
    INVALID_LIMIT_CLAUSE = "INVALID_LIMIT_CLAUSE"
    INVALID_START_INDEX_IN_LIMIT_CLAUSE = "INVALID_START_INDEX_IN_LIMIT_CLAUSE"
    INVALID_PAGE_SIZE_IN_LIMIT_CLAUSE = "INVALID_PAGE_SIZE_IN_LIMIT_CLAUSE"
    INVALID_DURING_CLAUSE = "INVALID_DURING_CLAUSE"
    INVALID_MIN_DATE_IN_DURING_CLAUSE = "INVALID_MIN_DATE_IN_DURING_CLAUSE"
    INVALID_MAX_DATE_IN_DURING_CLAUSE = "INVALID_MAX_DATE_IN_DURING_CLAUSE"
    MAX_LESS_THAN_MIN_IN_DURING_CLAUSE = "MAX_LESS_THAN_MIN_IN_DURING_CLAUSE"
    VALIDATION_FAILED = "VALIDATION_FAILED"


class SelectorErrorReason(StrEnum):
    INVALID_FIELD_NAME = "INVALID_FIELD_NAME"
    MISSING_FIELDS = "MISSING_FIELDS"
    MISSING_PREDICATES = "MISSING_PREDICATES"
    OPERATOR_DOES_NOT_SUPPORT_MULTIPLE_VALUES = "OPERATOR_DOES_NOT_SUPPORT_MULTIPLE_VALUES"
    INVALID_PREDICATE_ENUM_VALUE = "INVALID_PREDICATE_ENUM_VALUE"
    MISSING_PREDICATE_OPERATOR = "MISSING_PREDICATE_OPERATOR"
    MISSING_PREDICATE_VALUES = "MISSING_PREDICATE_VALUES"
    INVALID_PREDICATE_FIELD_NAME = "INVALID_PREDICATE_FIELD_NAME"
    INVALID_PREDICATE_OPERATOR = "INVALID_PREDICATE_OPERATOR"
    INVALID_FIELD_SELECTION = "INVALID_FIELD_SELECTION"
    INVALID_PREDICATE_VALUE = "INVALID_PREDICATE_VALUE"
    INVALID_SORT_FIELD_NAME = "INVALID_SORT_FIELD_NAME"
    SELECTOR_ERROR = "SELECTOR_ERROR"
    FILTER_BY_DATE_RANGE_NOT_SUPPORTED = "FILTER_BY_DATE_RANGE_NOT_SUPPORTED"
    START_INDEX_IS_TOO_HIGH = "START_INDEX_IS_TOO_HIGH"
    TOO_MANY_PREDICATE_VALUES = "TOO_MANY_PREDICATE_VALUES"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class EntityNotFoundReason(StrEnum):
    INVALID_ID = "INVALID_ID"


class EntityAccessDeniedReason(StrEnum):
    READ_ACCESS_DENIED = "READ_ACCESS_DENIED"
    WRITE_ACCESS_DENIED = "WRITE_ACCESS_DENIED"


class EntityCountLimitExceededReason(StrEnum):
    ACCOUNT_LIMIT = "ACCOUNT_LIMIT"
    CAMPAIGN_LIMIT = "CAMPAIGN_LIMIT"
    ADGROUP_LIMIT = "ADGROUP_LIMIT"
    AD_GROUP_AD_LIMIT = "AD_GROUP_AD_LIMIT"
    AD_GROUP_CRITERION_LIMIT = "AD_GROUP_CRITERION_LIMIT"
    SHARED_SET_LIMIT = "SHARED_SET_LIMIT"
    MATCHING_FUNCTION_LIMIT = "MATCHING_FUNCTION_LIMIT"
    UNKNOWN = "UNKNOWN"


class NewEntityCreationErrorReason(StrEnum):
    CANNOT_SET_ID_FOR_ADD = "CANNOT_SET_ID_FOR_ADD"
    DUPLICATE_TEMP_IDS = "DUPLICATE_TEMP_IDS"
    TEMP_ID_ENTITY_HAD_ERRORS = "TEMP_ID_ENTITY_HAD_ERRORS"


class AdxErrorReason(StrEnum):
    UNSUPPORTED_FEATURE = "UNSUPPORTED_FEATURE"


class PagingErrorReason(StrEnum):
    START_INDEX_CANNOT_BE_NEGATIVE = "START_INDEX_CANNOT_BE_NEGATIVE"
    NUMBER_OF_RESULTS_CANNOT_BE_NEGATIVE = "NUMBER_OF_RESULTS_CANNOT_BE_NEGATIVE"


class RegionCodeErrorReason(StrEnum):
    INVALID_REGION_CODE = "INVALID_REGION_CODE"


class CurrencyCodeErrorReason(StrEnum):
    UNSUPPORTED_CURRENCY_CODE = "UNSUPPORTED_CURRENCY_CODE"


class PredicateOperator(StrEnum):
    EQUALS = "EQUALS"
    NOT_EQUALS = "NOT_EQUALS"
    IN = "IN"
    NOT_IN = "NOT_IN"
    GREATER_THAN = "GREATER_THAN"
    GREATER_THAN_EQUALS = "GREATER_THAN_EQUALS"
    LESS_THAN = "LESS_THAN"
    LESS_THAN_EQUALS = "LESS_THAN_EQUALS"
    STARTS_WITH = "STARTS_WITH"
    STARTS_WITH_IGNORE_CASE = "STARTS_WITH_IGNORE_CASE"
    CONTAINS = "CONTAINS"
    CONTAINS_IGNORE_CASE = "CONTAINS_IGNORE_CASE"
    DOES_NOT_CONTAIN = "DOES_NOT_CONTAIN"
    DOES_NOT_CONTAIN_IGNORE_CASE = "DOES_NOT_CONTAIN_IGNORE_CASE"
    CONTAINS_ANY = "CONTAINS_ANY"
    CONTAINS_ALL = "CONTAINS_ALL"
    CONTAINS_NONE = "CONTAINS_NONE"
    UNKNOWN = "UNKNOWN"


class SortOrder(StrEnum):
    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"


class Operator(StrEnum):
    ADD = "ADD"
    REMOVE = "REMOVE"
    SET = "SET"


class CriterionType(StrEnum):
    CONTENT_LABEL = "CONTENT_LABEL"
    KEYWORD = "KEYWORD"
    PLACEMENT = "PLACEMENT"
    VERTICAL = "VERTICAL"
    USER_LIST = "USER_LIST"
    USER_INTEREST = "USER_INTEREST"
    MOBILE_APPLICATION = "MOBILE_APPLICATION"
    MOBILE_APP_CATEGORY = "MOBILE_APP_CATEGORY"
    PRODUCT_PARTITION = "PRODUCT_PARTITION"
    IP_BLOCK = "IP_BLOCK"
    WEBPAGE = "WEBPAGE"
    LANGUAGE = "LANGUAGE"
    LOCATION = "LOCATION"
    AGE_RANGE = "AGE_RANGE"
    CARRIER = "CARRIER"
    OPERATING_SYSTEM_VERSION = "OPERATING_SYSTEM_VERSION"
    MOBILE_DEVICE = "MOBILE_DEVICE"
    GENDER = "GENDER"
    PARENT = "PARENT"
    PROXIMITY = "PROXIMITY"
    PLATFORM = "PLATFORM"
    PREFERRED_CONTENT = "PREFERRED_CONTENT"
    AD_SCHEDULE = "AD_SCHEDULE"
    LOCATION_GROUPS = "LOCATION_GROUPS"
    PRODUCT_SCOPE = "PRODUCT_SCOPE"
    YOUTUBE_VIDEO = "YOUTUBE_VIDEO"
    YOUTUBE_CHANNEL = "YOUTUBE_CHANNEL"
    APP_PAYMENT_MODEL = "APP_PAYMENT_MODEL"
    INCOME_RANGE = "INCOME_RANGE"
    INTERACTION_TYPE = "INTERACTION_TYPE"
    UNKNOWN = "UNKNOWN"


class KeywordMatchType(StrEnum):
    EXACT = "EXACT"
    PHRASE = "PHRASE"
    BROAD = "BROAD"


class LocationTargetingStatus(StrEnum):
    ACTIVE = "ACTIVE"
    OBSOLETE = "OBSOLETE"
    PHASING_OUT = "PHASING_OUT"


class CriterionUserListMembershipStatus(StrEnum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


# --- SOAP headers ---


class SoapHeader(CmModel, tag="RequestHeader"):
    """AdWords request header, sent in the SOAP Header of every call."""

    client_customer_id: str | None = element(tag="clientCustomerId", default=None)
    developer_token: str | None = element(tag="developerToken", default=None)
    user_agent: str | None = element(tag="userAgent", default=None)
    validate_only: bool | None = element(tag="validateOnly", default=None)
    partial_failure: bool | None = element(tag="partialFailure", default=None)


class SoapResponseHeader(CmModel, tag="ResponseHeader"):
    """AdWords response header, decoded from reply envelopes."""

    request_id: str | None = element(tag="requestId", default=None)
    service_name: str | None = element(tag="serviceName", default=None)
    method_name: str | None = element(tag="methodName", default=None)
    operations: int | None = element(tag="operations", default=None)
    response_time: int | None = element(tag="responseTime", default=None)


# --- ApiError hierarchy ---


class FieldPathElement(CmModel, tag="FieldPathElement"):
    field: str | None = element(tag="field", default=None)
    index: int | None = element(tag="index", default=None)


class ApiError(CmModel, tag="ApiError", discriminator="ApiError.Type"):
    """
    Base of every error reported inside an ApiException.

    The concrete variant is chosen from ``xsi:type`` or, failing that, from
    the ``ApiError.Type`` element.
    """

    field_path: str | None = element(tag="fieldPath", default=None)
    field_path_elements: list[FieldPathElement] = element(tag="fieldPathElements", default=[])
    trigger: str | None = element(tag="trigger", default=None)
    error_string: str | None = element(tag="errorString", default=None)
    api_error_type: str | None = element(tag="ApiError.Type", default=None)


class AuthenticationError(ApiError, tag="AuthenticationError"):
    reason: OpenEnum[AuthenticationErrorReason] | None = element(default=None)


class AuthorizationError(ApiError, tag="AuthorizationError"):
    reason: OpenEnum[AuthorizationErrorReason] | None = element(default=None)


class ClientTermsError(ApiError, tag="ClientTermsError"):
    reason: OpenEnum[ClientTermsErrorReason] | None = element(default=None)


class CollectionSizeError(ApiError, tag="CollectionSizeError"):
    reason: OpenEnum[CollectionSizeErrorReason] | None = element(default=None)


class DatabaseError(ApiError, tag="DatabaseError"):
    reason: OpenEnum[DatabaseErrorReason] | None = element(default=None)


class DateError(ApiError, tag="DateError"):
    reason: OpenEnum[DateErrorReason] | None = element(default=None)


class DistinctError(ApiError, tag="DistinctError"):
    reason: OpenEnum[DistinctErrorReason] | None = element(default=None)


class IdError(ApiError, tag="IdError"):
    reason: OpenEnum[IdErrorReason] | None = element(default=None)


class InternalApiError(ApiError, tag="InternalApiError"):
    reason: OpenEnum[InternalApiErrorReason] | None = element(default=None)


class NotEmptyError(ApiError, tag="NotEmptyError"):
    reason: OpenEnum[NotEmptyErrorReason] | None = element(default=None)


class NotWhitelistedError(ApiError, tag="NotWhitelistedError"):
    reason: OpenEnum[NotWhitelistedErrorReason] | None = element(default=None)


class NullError(ApiError, tag="NullError"):
    reason: OpenEnum[NullErrorReason] | None = element(default=None)


class OperationAccessDenied(ApiError, tag="OperationAccessDenied"):
    reason: OpenEnum[OperationAccessDeniedReason] | None = element(default=None)


class OperatorError(ApiError, tag="OperatorError"):
    reason: OpenEnum[OperatorErrorReason] | None = element(default=None)


class QuotaCheckError(ApiError, tag="QuotaCheckError"):
    reason: OpenEnum[QuotaCheckErrorReason] | None = element(default=None)


class RangeError(ApiError, tag="RangeError"):
    reason: OpenEnum[RangeErrorReason] | None = element(default=None)


class RateExceededError(ApiError, tag="RateExceededError"):
    """Too many requests; ``retry_after_seconds`` says when to try again."""

    reason: OpenEnum[RateExceededErrorReason] | None = element(default=None)
    rate_name: str | None = element(tag="rateName", default=None)
    rate_scope: str | None = element(tag="rateScope", default=None)
    retry_after_seconds: int | None = element(tag="retryAfterSeconds", default=None)


class ReadOnlyError(ApiError, tag="ReadOnlyError"):
    reason: OpenEnum[ReadOnlyErrorReason] | None = element(default=None)


class RejectedError(ApiError, tag="RejectedError"):
    reason: OpenEnum[RejectedErrorReason] | None = element(default=None)


class RequestError(ApiError, tag="RequestError"):
    reason: OpenEnum[RequestErrorReason] | None = element(default=None)


class RequiredError(ApiError, tag="RequiredError"):
    reason: OpenEnum[RequiredErrorReason] | None = element(default=None)


class SizeLimitError(ApiError, tag="SizeLimitError"):
    reason: OpenEnum[SizeLimitErrorReason] | None = element(default=None)


class StringFormatError(ApiError, tag="StringFormatError"):
    reason: OpenEnum[StringFormatErrorReason] | None = element(default=None)


class StringLengthError(ApiError, tag="StringLengthError"):
    reason: OpenEnum[StringLengthErrorReason] | None = element(default=None)


class QueryError(ApiError, tag="QueryError"):
    reason: OpenEnum[QueryErrorReason] | None = element(default=None)
    message: str | None = element(tag="message", default=None)


class SelectorError(ApiError, tag="SelectorError"):
    reason: OpenEnum[SelectorErrorReason] | None = element(default=None)


class EntityNotFound(ApiError, tag="EntityNotFound"):
    reason: OpenEnum[EntityNotFoundReason] | None = element(default=None)


class EntityAccessDenied(ApiError, tag="EntityAccessDenied"):
    reason: OpenEnum[EntityAccessDeniedReason] | None = element(default=None)


class EntityCountLimitExceeded(ApiError, tag="EntityCountLimitExceeded"):
    reason: OpenEnum[EntityCountLimitExceededReason] | None = element(default=None)
    enclosing_id: str | None = element(tag="enclosingId", default=None)
    limit: int | None = element(tag="limit", default=None)
    account_limit_type: str | None = element(tag="accountLimitType", default=None)
    existing_count: int | None = element(tag="existingCount", default=None)


class NewEntityCreationError(ApiError, tag="NewEntityCreationError"):
    reason: OpenEnum[NewEntityCreationErrorReason] | None = element(default=None)


class AdxError(ApiError, tag="AdxError"):
    reason: OpenEnum[AdxErrorReason] | None = element(default=None)


class PagingError(ApiError, tag="PagingError"):
    reason: OpenEnum[PagingErrorReason] | None = element(default=None)


class RegionCodeError(ApiError, tag="RegionCodeError"):
    reason: OpenEnum[RegionCodeErrorReason] | None = element(default=None)


class CurrencyCodeError(ApiError, tag="CurrencyCodeError"):
    reason: OpenEnum[CurrencyCodeErrorReason] | None = element(default=None)


class ApplicationException(CmModel, tag="ApplicationException", discriminator="ApplicationException.Type"):
    message: str | None = element(tag="message", default=None)
    application_exception_type: str | None = element(tag="ApplicationException.Type", default=None)


class ApiException(ApplicationException, tag="ApiException"):
    """
    Exception payload of an AdWords SOAP fault.

    The server places it in the fault ``<detail>`` as ``ApiExceptionFault``.
    """

    errors: list[ApiError] = element(tag="errors", default=[])

    @classmethod
    def from_fault(cls, fault: SoapFault) -> Optional["ApiException"]:
        """
        Decode the ApiException carried by a SOAP fault, if any.

        Args:
            fault: The fault raised by SoapClient.call().

        Returns:
            The decoded exception, or None when the fault has no detail
            element.

        Raises:
            DeserializationError: If the detail does not bind.
        """
        detail = fault.detail_element
        if detail is None:
            return None
        for child in detail:
            if not isinstance(child.tag, str):
                continue
            try:
                return cls.from_element(child)
            except ValueError as exc:
                raise DeserializationError(f"failed to decode fault detail: {exc}") from exc
        return None


# --- Selectors ---


class DateRange(CmModel, tag="DateRange"):
    """Inclusive range of dates in ``YYYYMMDD`` form."""

    min: str | None = element(tag="min", default=None)
    max: str | None = element(tag="max", default=None)


class Predicate(CmModel, tag="Predicate"):
    field: str | None = element(tag="field", default=None)
    operator: OpenEnum[PredicateOperator] | None = element(tag="operator", default=None)
    values: list[str] = element(tag="values", default=[])


class OrderBy(CmModel, tag="OrderBy"):
    field: str | None = element(tag="field", default=None)
    sort_order: OpenEnum[SortOrder] | None = element(tag="sortOrder", default=None)


class Paging(CmModel, tag="Paging"):
    start_index: int | None = element(tag="startIndex", default=None)
    number_results: int | None = element(tag="numberResults", default=None)


class Selector(CmModel, tag="Selector"):
    """Generic query selector: fields to return, filters, ordering and paging."""

    fields: list[str] = element(tag="fields", default=[])
    predicates: list[Predicate] = element(tag="predicates", default=[])
    date_range: DateRange | None = element(tag="dateRange", default=None)
    ordering: list[OrderBy] = element(tag="ordering", default=[])
    paging: Paging | None = element(tag="paging", default=None)


# --- Criteria ---


class Criterion(CmModel, tag="Criterion", discriminator="Criterion.Type"):
    id: int | None = element(tag="id", default=None)
    type: OpenEnum[CriterionType] | None = element(tag="type", default=None)
    criterion_type: str | None = element(tag="Criterion.Type", default=None)


class Keyword(Criterion, tag="Keyword"):
    text: str | None = element(tag="text", default=None)
    match_type: OpenEnum[KeywordMatchType] | None = element(tag="matchType", default=None)


class Location(Criterion, tag="Location"):
    location_name: str | None = element(tag="locationName", default=None)
    display_type: str | None = element(tag="displayType", default=None)
    targeting_status: OpenEnum[LocationTargetingStatus] | None = element(tag="targetingStatus", default=None)
    parent_locations: list["Location"] = element(tag="parentLocations", default=[])


class Placement(Criterion, tag="Placement"):
    url: str | None = element(tag="url", default=None)


class MobileApplication(Criterion, tag="MobileApplication"):
    app_id: str | None = element(tag="appId", default=None)
    display_name: str | None = element(tag="displayName", default=None)


class MobileAppCategory(Criterion, tag="MobileAppCategory"):
    mobile_app_category_id: int | None = element(tag="mobileAppCategoryId", default=None)
    display_name: str | None = element(tag="displayName", default=None)


class CriterionUserInterest(Criterion, tag="CriterionUserInterest"):
    user_interest_id: int | None = element(tag="userInterestId", default=None)
    user_interest_parent_id: int | None = element(tag="userInterestParentId", default=None)
    user_interest_name: str | None = element(tag="userInterestName", default=None)


class CriterionUserList(Criterion, tag="CriterionUserList"):
    user_list_id: int | None = element(tag="userListId", default=None)
    user_list_name: str | None = element(tag="userListName", default=None)
    user_list_membership_status: OpenEnum[CriterionUserListMembershipStatus] | None = element(
        tag="userListMembershipStatus", default=None
    )
    user_list_eligible_for_search: bool | None = element(tag="userListEligibleForSearch", default=None)
    user_list_eligible_for_display: bool | None = element(tag="userListEligibleForDisplay", default=None)


class Vertical(Criterion, tag="Vertical"):
    vertical_id: int | None = element(tag="verticalId", default=None)
    vertical_parent_id: int | None = element(tag="verticalParentId", default=None)
    path: list[str] = element(tag="path", default=[])


class Language(Criterion, tag="Language"):
    code: str | None = element(tag="code", default=None)
    name: str | None = element(tag="name", default=None)


class Platform(Criterion, tag="Platform"):
    platform_name: str | None = element(tag="platformName", default=None)


# --- Mutate bases ---


class Operation(CmModel, tag="Operation", discriminator="Operation.Type"):
    operator: OpenEnum[Operator] | None = element(tag="operator", default=None)
    operation_type: str | None = element(tag="Operation.Type", default=None)


class ListReturnValue(CmModel, tag="ListReturnValue", discriminator="ListReturnValue.Type"):
    list_return_value_type: str | None = element(tag="ListReturnValue.Type", default=None)


# --- Comparable values ---


class ComparableValue(CmModel, tag="ComparableValue", discriminator="ComparableValue.Type"):
    comparable_value_type: str | None = element(tag="ComparableValue.Type", default=None)


class Money(ComparableValue, tag="Money"):
    """An amount in micros of the account currency (1 unit = 1,000,000)."""

    micro_amount: int | None = element(tag="microAmount", default=None)


class NumberValue(ComparableValue, tag="NumberValue"):
    pass


class DoubleValue(NumberValue, tag="DoubleValue"):
    number: float | None = element(tag="number", default=None)


class LongValue(NumberValue, tag="LongValue"):
    number: int | None = element(tag="number", default=None)
