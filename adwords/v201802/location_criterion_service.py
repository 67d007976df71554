"""
LocationCriterionService facade.

Endpoint: https://adwords.google.com/api/adwords/cm/v201802/LocationCriterionService
"""

from adwords.v201802.adwords_service import AdWordsService
from adwords.v201802.models.location_criterion import Get, GetResponse, Query, QueryResponse


class LocationCriterionService(AdWordsService):
    def get(self, request: Get) -> GetResponse:
        """Look up locations matching a selector (by id, name or parent)."""
        return self._invoke(request, GetResponse)

    def query(self, request: Query) -> QueryResponse:
        """Look up locations with an AWQL query."""
        return self._invoke(request, QueryResponse)
