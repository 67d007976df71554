"""
MediaService facade.

Endpoint: https://adwords.google.com/api/adwords/cm/v201802/MediaService
"""

from adwords.v201802.adwords_service import AdWordsService
from adwords.v201802.models.media import (
    Get,
    GetResponse,
    Query,
    QueryResponse,
    Upload,
    UploadResponse,
)


class MediaService(AdWordsService):
    def get(self, request: Get) -> GetResponse:
        return self._invoke(request, GetResponse)

    def query(self, request: Query) -> QueryResponse:
        return self._invoke(request, QueryResponse)

    def upload(self, request: Upload) -> UploadResponse:
        """Upload new media; the reply carries the stored entries with their ids."""
        return self._invoke(request, UploadResponse)
