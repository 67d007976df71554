"""
Common base of the v201802 service facades.

Adds the AdWords RequestHeader to facades built from settings.
"""

from typing import Any

from adwords.config.app_settings import AppSettings
from adwords.soap.service import ServiceInterface
from adwords.v201802.models.common import SoapHeader


def request_header_from_settings(settings: AppSettings) -> SoapHeader | None:
    """Build the RequestHeader described by ``settings.adwords``, or None without a developer token."""
    values = settings.adwords
    if not values.developer_token:
        return None
    return SoapHeader(
        client_customer_id=values.client_customer_id,
        developer_token=values.developer_token,
        user_agent=values.user_agent,
        validate_only=values.validate_only,
        partial_failure=values.partial_failure,
    )


class AdWordsService(ServiceInterface):
    def _settings_headers(self, settings: AppSettings) -> list[Any]:
        header = request_header_from_settings(settings)
        return [header] if header is not None else []
