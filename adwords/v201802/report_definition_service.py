"""
ReportDefinitionService facade.

Endpoint: https://adwords.google.com/api/adwords/cm/v201802/ReportDefinitionService
"""

from adwords.v201802.adwords_service import AdWordsService
from adwords.v201802.models.report_definition import GetReportFields, GetReportFieldsResponse


class ReportDefinitionService(AdWordsService):
    def get_report_fields(self, request: GetReportFields) -> GetReportFieldsResponse:
        """
        Return the fields available in a report type.

        Raises:
            SoapError: On any transport failure; a SoapFault when the server
                rejects the request.
        """
        return self._invoke(request, GetReportFieldsResponse)
