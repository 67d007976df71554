"""
TrafficEstimatorService facade.

Endpoint: https://adwords.google.com/api/adwords/o/v201802/TrafficEstimatorService
"""

from adwords.v201802.adwords_service import AdWordsService
from adwords.v201802.models.traffic_estimator import Get, GetResponse


class TrafficEstimatorService(AdWordsService):
    def get(self, request: Get) -> GetResponse:
        """Estimate clicks, cost and position for the requested keywords and campaigns."""
        return self._invoke(request, GetResponse)
