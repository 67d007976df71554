"""
Records for TrafficEstimatorService.

Namespace: https://adwords.google.com/api/adwords/o/v201802

The estimator's own records live in the ``o`` namespace; the criteria,
money and network settings they carry are ``cm`` records.
"""

from enum import StrEnum

from pydantic_xml import element

from adwords.soap.binding import OpenEnum, XmlRecord
from adwords.v201802.models.common import (
    CM_NS,
    ApiError,
    CmModel,
    Criterion,
    CurrencyCodeErrorReason,
    Keyword,
    Money,
    Platform,
)

O_NS = "https://adwords.google.com/api/adwords/o/v201802"
O_NSMAP = {"": O_NS, "o": O_NS, "cm": CM_NS}


class OModel(XmlRecord, nsmap=O_NSMAP):
    """
    Base of every record in the o namespace.

    Fields holding cm records name the element namespace with ``ns="o"``;
    otherwise the element would take the cm record's own namespace.
    """


class TrafficEstimatorErrorReason(StrEnum):
    NO_CAMPAIGN_FOR_AD_GROUP_ESTIMATE_REQUEST = "NO_CAMPAIGN_FOR_AD_GROUP_ESTIMATE_REQUEST"
    NO_AD_GROUP_FOR_KEYWORD_ESTIMATE_REQUEST = "NO_AD_GROUP_FOR_KEYWORD_ESTIMATE_REQUEST"
    NO_MAX_CPC_FOR_KEYWORD_ESTIMATE_REQUEST = "NO_MAX_CPC_FOR_KEYWORD_ESTIMATE_REQUEST"
    TOO_MANY_KEYWORD_ESTIMATE_REQUESTS = "TOO_MANY_KEYWORD_ESTIMATE_REQUESTS"
    TOO_MANY_CAMPAIGN_ESTIMATE_REQUESTS = "TOO_MANY_CAMPAIGN_ESTIMATE_REQUESTS"
    TOO_MANY_ADGROUP_ESTIMATE_REQUESTS = "TOO_MANY_ADGROUP_ESTIMATE_REQUESTS"
    TOO_MANY_TARGETS = "TOO_MANY_TARGETS"
    KEYWORD_TOO_LONG = "KEYWORD_TOO_LONG"
    KEYWORD_CONTAINS_BROAD_MATCH_MODIFIERS = "KEYWORD_CONTAINS_BROAD_MATCH_MODIFIERS"
    INVALID_INPUT = "INVALID_INPUT"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


# --- Errors ---


class TrafficEstimatorError(ApiError, tag="TrafficEstimatorError", type_ns=O_NS, nsmap={"o": O_NS}):
    reason: OpenEnum[TrafficEstimatorErrorReason] | None = element(ns="o", default=None)


class EstimatorCurrencyCodeError(ApiError, tag="CurrencyCodeError", type_ns=O_NS, nsmap={"o": O_NS}):
    """The o namespace declares its own CurrencyCodeError next to the cm one."""

    reason: OpenEnum[CurrencyCodeErrorReason] | None = element(ns="o", default=None)


# --- cm records used by estimate requests ---


class NetworkSetting(CmModel, tag="NetworkSetting"):
    target_google_search: bool | None = element(tag="targetGoogleSearch", default=None)
    target_search_network: bool | None = element(tag="targetSearchNetwork", default=None)
    target_content_network: bool | None = element(tag="targetContentNetwork", default=None)
    target_partner_search_network: bool | None = element(tag="targetPartnerSearchNetwork", default=None)


# --- Estimates ---


class StatsEstimate(OModel, tag="StatsEstimate"):
    """Traffic estimate for one bound (min or max) of a keyword, ad group or campaign."""

    average_cpc: Money | None = element(tag="averageCpc", ns="o", default=None)
    average_position: float | None = element(tag="averagePosition", default=None)
    click_through_rate: float | None = element(tag="clickThroughRate", default=None)
    clicks_per_day: float | None = element(tag="clicksPerDay", default=None)
    impressions_per_day: float | None = element(tag="impressionsPerDay", default=None)
    total_cost: Money | None = element(tag="totalCost", ns="o", default=None)


class Estimate(OModel, tag="Estimate", discriminator="Estimate.Type"):
    estimate_type: str | None = element(tag="Estimate.Type", default=None)


class KeywordEstimate(Estimate, tag="KeywordEstimate"):
    criterion_id: int | None = element(tag="criterionId", default=None)
    min: StatsEstimate | None = element(tag="min", default=None)
    max: StatsEstimate | None = element(tag="max", default=None)


class AdGroupEstimate(Estimate, tag="AdGroupEstimate"):
    ad_group_id: int | None = element(tag="adGroupId", default=None)
    keyword_estimates: list[KeywordEstimate] = element(tag="keywordEstimates", default=[])


class PlatformCampaignEstimate(OModel, tag="PlatformCampaignEstimate"):
    platform: Platform | None = element(tag="platform", ns="o", default=None)
    min_estimate: StatsEstimate | None = element(tag="minEstimate", default=None)
    max_estimate: StatsEstimate | None = element(tag="maxEstimate", default=None)


class CampaignEstimate(Estimate, tag="CampaignEstimate"):
    campaign_id: int | None = element(tag="campaignId", default=None)
    ad_group_estimates: list[AdGroupEstimate] = element(tag="adGroupEstimates", default=[])
    platform_estimates: list[PlatformCampaignEstimate] = element(tag="platformEstimates", default=[])


# --- Estimate requests ---


class EstimateRequest(OModel, tag="EstimateRequest", discriminator="EstimateRequest.Type"):
    estimate_request_type: str | None = element(tag="EstimateRequest.Type", default=None)


class KeywordEstimateRequest(EstimateRequest, tag="KeywordEstimateRequest"):
    keyword: Keyword | None = element(tag="keyword", ns="o", default=None)
    max_cpc: Money | None = element(tag="maxCpc", ns="o", default=None)
    is_negative: bool | None = element(tag="isNegative", default=None)


class AdGroupEstimateRequest(EstimateRequest, tag="AdGroupEstimateRequest"):
    ad_group_id: int | None = element(tag="adGroupId", default=None)
    keyword_estimate_requests: list[KeywordEstimateRequest] = element(
        tag="keywordEstimateRequests", default=[]
    )
    max_cpc: Money | None = element(tag="maxCpc", ns="o", default=None)


class CampaignEstimateRequest(EstimateRequest, tag="CampaignEstimateRequest"):
    """
    Estimate request for one campaign.

    ``criteria`` takes Location, Language or other Criterion subclasses and is
    written with xsi:type.
    """

    campaign_id: int | None = element(tag="campaignId", default=None)
    ad_group_estimate_requests: list[AdGroupEstimateRequest] = element(
        tag="adGroupEstimateRequests", default=[]
    )
    criteria: list[Criterion] = element(tag="criteria", ns="o", default=[])
    network_setting: NetworkSetting | None = element(tag="networkSetting", ns="o", default=None)
    daily_budget: Money | None = element(tag="dailyBudget", ns="o", default=None)


class TrafficEstimatorSelector(OModel, tag="TrafficEstimatorSelector"):
    campaign_estimate_requests: list[CampaignEstimateRequest] = element(
        tag="campaignEstimateRequests", default=[]
    )
    platform_estimate_requested: bool | None = element(tag="platformEstimateRequested", default=None)


class TrafficEstimatorResult(OModel, tag="TrafficEstimatorResult"):
    campaign_estimates: list[CampaignEstimate] = element(tag="campaignEstimates", default=[])


# --- get ---


class Get(OModel, tag="get"):
    selector: TrafficEstimatorSelector | None = element(tag="selector", default=None)


class GetResponse(OModel, tag="getResponse"):
    rval: TrafficEstimatorResult | None = element(tag="rval", default=None)
