"""
OfflineConversionFeedService facade.

Endpoint: https://adwords.google.com/api/adwords/cm/v201802/OfflineConversionFeedService
"""

from adwords.v201802.adwords_service import AdWordsService
from adwords.v201802.models.offline_conversion_feed import Mutate, MutateResponse


class OfflineConversionFeedService(AdWordsService):
    def mutate(self, request: Mutate) -> MutateResponse:
        """
        Report offline conversions.

        With partialFailure set in the RequestHeader, failed operations come
        back in ``rval.partial_failure_errors`` instead of a fault.
        """
        return self._invoke(request, MutateResponse)
