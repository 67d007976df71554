"""
Tests for SOAP envelope construction and reply decoding.

Tests the wire shape of outgoing envelopes and the body rules applied to
replies:
- Header omitted when empty, header records kept in order
- Exactly one body element, empty body, Fault bodies
- Root and payload name checks, response headers
"""

import pytest
from lxml import etree

from adwords.soap.envelope import (
    BODY_TAG,
    ENVELOPE_TAG,
    FAULT_TAG,
    HEADER_TAG,
    MULTIPLE_ELEMENTS,
    SOAP_NS,
    Body,
    Envelope,
    Fault,
    create_soap_fault,
    decode_envelope,
    wrap_soap_envelope,
)
from adwords.soap.errors import DeserializationError, MisuseError, ProtocolError, SerializationError, SoapFault
from adwords.v201802.models.common import (
    CM_NS,
    ApiException,
    QuotaCheckError,
    RateExceededError,
    RateExceededErrorReason,
    SoapHeader,
    SoapResponseHeader,
)
from adwords.v201802.models.location_criterion import Query
from adwords.v201802.models.report_definition import (
    GetReportFields,
    GetReportFieldsResponse,
    ReportDefinitionField,
    ReportDefinitionReportType,
)


def soap(body: str, header: str = "") -> bytes:
    """Wrap raw XML in a SOAP envelope string."""
    header_xml = f"<soap:Header>{header}</soap:Header>" if header else ""
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>'
        f'<soap:Envelope xmlns:soap="{SOAP_NS}">{header_xml}<soap:Body>{body}</soap:Body></soap:Envelope>'
    ).encode("utf-8")


def q(ns: str, local: str) -> str:
    return f"{{{ns}}}{local}"


class TestWrapSoapEnvelope:
    """Tests for outgoing envelopes."""

    def test_body_holds_the_request(self):
        """Test the request record is the single Body child."""
        raw = wrap_soap_envelope(GetReportFields(report_type=ReportDefinitionReportType.KEYWORDS_PERFORMANCE_REPORT))
        root = etree.fromstring(raw)

        assert raw.startswith(b"<?xml")
        assert root.tag == ENVELOPE_TAG
        body = root.find(BODY_TAG)
        assert len(body) == 1
        assert body[0].tag == q(CM_NS, "getReportFields")
        assert body[0].findtext(q(CM_NS, "reportType")) == "KEYWORDS_PERFORMANCE_REPORT"

    def test_no_header_element_without_headers(self):
        """Test the Header element is omitted when no header is attached."""
        root = etree.fromstring(wrap_soap_envelope(Query(query="SELECT Id")))

        assert root.find(HEADER_TAG) is None
        assert root[0].tag == BODY_TAG

    def test_headers_keep_attach_order_and_duplicates(self):
        """Test every header record is written, in order, duplicates included."""
        first = SoapHeader(developer_token="a")
        second = SoapHeader(developer_token="b")
        raw = wrap_soap_envelope(Query(query="SELECT Id"), [first, second, first])
        header = etree.fromstring(raw).find(HEADER_TAG)

        assert [el.findtext(q(CM_NS, "developerToken")) for el in header] == ["a", "b", "a"]
        assert etree.fromstring(raw)[0].tag == HEADER_TAG

    def test_raw_element_header(self):
        """Test pre-built lxml elements are accepted as headers."""
        custom = etree.Element("{urn:custom}Trace")
        custom.text = "abc"
        header = etree.fromstring(wrap_soap_envelope(Query(query="q"), [custom])).find(HEADER_TAG)

        assert header[0].tag == "{urn:custom}Trace"
        assert header[0].text == "abc"

    def test_unserializable_header(self):
        """Test a header that is neither a record nor an element is rejected."""
        with pytest.raises(SerializationError):
            wrap_soap_envelope(Query(query="q"), [object()])

    def test_invalid_characters(self):
        """Test values that are not XML compatible raise SerializationError."""
        with pytest.raises(SerializationError):
            wrap_soap_envelope(Query(query="bad\x00value"))

    def test_envelope_dataclass_with_fault(self):
        """Test an Envelope carrying a fault renders soap:Fault."""
        envelope = Envelope(body=Body(fault=Fault(faultcode="soap:Client", faultstring="nope")))
        fault = etree.fromstring(envelope.to_xml()).find(BODY_TAG)[0]

        assert fault.tag == FAULT_TAG
        assert fault.findtext("faultstring") == "nope"
        assert envelope.header is None


class TestCreateSoapFault:
    """Tests for fault envelopes."""

    def test_fault_fields(self):
        """Test faultcode, faultstring, faultactor and detail are unqualified children."""
        root = etree.fromstring(create_soap_fault("boom", "soap:Client", actor="urn:actor", detail="more"))
        fault = root.find(BODY_TAG).find(FAULT_TAG)

        assert fault.findtext("faultcode") == "soap:Client"
        assert fault.findtext("faultstring") == "boom"
        assert fault.findtext("faultactor") == "urn:actor"
        assert fault.findtext("detail") == "more"

    def test_default_code(self):
        """Test the fault code defaults to soap:Server."""
        root = etree.fromstring(create_soap_fault("boom"))

        assert root.find(BODY_TAG).find(FAULT_TAG).findtext("faultcode") == "soap:Server"

    def test_record_detail(self):
        """Test a record detail is nested inside <detail>."""
        detail = ApiException(message="quota", errors=[RateExceededError(retry_after_seconds=10)])
        fault = etree.fromstring(create_soap_fault("quota", detail=detail)).find(BODY_TAG).find(FAULT_TAG)
        nested = fault.find("detail")[0]

        assert nested.tag == q(CM_NS, "ApiException")
        assert nested.findtext(q(CM_NS, "message")) == "quota"


class TestDecodeEnvelope:
    """Tests for reply decoding."""

    def test_success_populates_response_in_place(self):
        """Test the payload is bound into the caller's response record."""
        raw = soap(
            f'<getReportFieldsResponse xmlns="{CM_NS}">'
            "<rval><fieldName>Clicks</fieldName><fieldType>Long</fieldType><canSelect>true</canSelect></rval>"
            "<rval><fieldName>Date</fieldName></rval>"
            "</getReportFieldsResponse>"
        )
        response = GetReportFieldsResponse()
        envelope = decode_envelope(raw, response)

        assert [field.field_name for field in response.rval] == ["Clicks", "Date"]
        assert response.rval[0].can_select is True
        assert envelope.body.content is response
        assert envelope.body.fault is None

    def test_round_trip_of_encoded_response(self):
        """Test a reply rendered by wrap_soap_envelope decodes to the same values."""
        sent = GetReportFieldsResponse(rval=[ReportDefinitionField(field_name="Cost", enum_values=["A", "B"])])
        response = GetReportFieldsResponse()
        decode_envelope(wrap_soap_envelope(sent), response)

        assert response.model_dump() == sent.model_dump()

    def test_multiple_body_elements(self):
        """Test two Body children raise ProtocolError."""
        raw = soap(f'<a xmlns="{CM_NS}"/><b xmlns="{CM_NS}"/>')

        with pytest.raises(ProtocolError) as exc_info:
            decode_envelope(raw, GetReportFieldsResponse())
        assert str(exc_info.value) == MULTIPLE_ELEMENTS

    def test_multiple_matching_body_elements(self):
        """Test two copies of the expected payload are still a protocol error."""
        payload = f'<getReportFieldsResponse xmlns="{CM_NS}"/>'
        with pytest.raises(ProtocolError):
            decode_envelope(soap(payload + payload), GetReportFieldsResponse())

    def test_empty_body_is_success(self):
        """Test an empty Body leaves the response untouched."""
        response = GetReportFieldsResponse(rval=[ReportDefinitionField(field_name="Kept")])
        envelope = decode_envelope(soap(""), response)

        assert envelope.body.fault is None
        assert response.rval[0].field_name == "Kept"

    def test_whitespace_and_comments_are_not_elements(self):
        """Test whitespace and comments do not count as body elements."""
        raw = soap(f' <!-- note --> <getReportFieldsResponse xmlns="{CM_NS}"/> ')
        decode_envelope(raw, GetReportFieldsResponse())

    def test_fault_body(self):
        """Test a Fault is returned in body.fault and content is cleared."""
        response = GetReportFieldsResponse()
        envelope = decode_envelope(create_soap_fault("boom", "soap:Client"), response)

        assert envelope.body.content is None
        assert envelope.body.fault.faultcode == "soap:Client"
        assert envelope.body.fault.faultstring == "boom"
        assert envelope.body.fault_detail is None
        assert response.rval == []

    def test_fault_detail_element_is_kept(self):
        """Test the raw <detail> element is available for typed decoding."""
        detail = ApiException(message="quota", errors=[RateExceededError(retry_after_seconds=10)])
        envelope = decode_envelope(create_soap_fault("quota", detail=detail), GetReportFieldsResponse())

        assert envelope.body.fault_detail is not None
        assert envelope.body.fault_detail[0].tag == q(CM_NS, "ApiException")

    def test_wrong_root(self):
        """Test a non-Envelope root raises DeserializationError."""
        with pytest.raises(DeserializationError):
            decode_envelope(b"<html><body>502 Bad Gateway</body></html>", GetReportFieldsResponse())

    def test_malformed_xml(self):
        """Test unparsable bytes raise DeserializationError."""
        with pytest.raises(DeserializationError):
            decode_envelope(b"<soap:Envelope", GetReportFieldsResponse())

    def test_unexpected_payload_element(self):
        """Test a payload of another type raises DeserializationError."""
        raw = soap(f'<queryResponse xmlns="{CM_NS}"/>')

        with pytest.raises(DeserializationError):
            decode_envelope(raw, GetReportFieldsResponse())

    def test_invalid_payload_value(self):
        """Test a value that does not validate raises DeserializationError."""
        raw = soap(f'<getReportFieldsResponse xmlns="{CM_NS}"><rval><canSelect>maybe</canSelect></rval></getReportFieldsResponse>')

        with pytest.raises(DeserializationError):
            decode_envelope(raw, GetReportFieldsResponse())

    def test_response_must_be_a_record(self):
        """Test a non-record response target raises MisuseError."""
        with pytest.raises(MisuseError):
            decode_envelope(soap(""), {"rval": []})

    def test_response_header_is_decoded(self):
        """Test the AdWords ResponseHeader binds to SoapResponseHeader."""
        raw = soap(
            f'<getReportFieldsResponse xmlns="{CM_NS}"/>',
            header=(
                f'<ResponseHeader xmlns="{CM_NS}"><requestId>abc</requestId>'
                "<serviceName>ReportDefinitionService</serviceName><operations>1</operations>"
                "<responseTime>42</responseTime></ResponseHeader>"
                '<Other xmlns="urn:other">x</Other>'
            ),
        )
        envelope = decode_envelope(raw, GetReportFieldsResponse())
        first, second = envelope.header.items

        assert isinstance(first, SoapResponseHeader)
        assert first.request_id == "abc"
        assert first.response_time == 42
        assert second.tag == "{urn:other}Other"

    def test_api_exception_from_fault_detail(self):
        """Test ApiException.from_fault picks error subclasses from the detail."""
        detail = etree.fromstring(
            f'<detail><ApiExceptionFault xmlns="{CM_NS}" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">'
            "<message>[RateExceededError &lt;rateName=RequestsPerMinute&gt;]</message>"
            "<ApplicationException.Type>ApiException</ApplicationException.Type>"
            '<errors xsi:type="RateExceededError">'
            "<fieldPath></fieldPath><trigger></trigger>"
            "<errorString>RateExceededError.RATE_EXCEEDED</errorString>"
            "<ApiError.Type>RateExceededError</ApiError.Type>"
            "<reason>RATE_EXCEEDED</reason><rateName>RequestsPerMinute</rateName>"
            "<rateScope>ACCOUNT</rateScope><retryAfterSeconds>30</retryAfterSeconds>"
            "</errors></ApiExceptionFault></detail>"
        )
        fault = SoapFault("soap:Server", "[RateExceededError]", detail_element=detail)
        exception = ApiException.from_fault(fault)

        assert exception.application_exception_type == "ApiException"
        assert isinstance(exception.errors[0], RateExceededError)
        assert exception.errors[0].retry_after_seconds == 30
        assert exception.errors[0].rate_scope == "ACCOUNT"

    def test_api_exception_with_unlisted_reason(self):
        """Test an error reason this version does not list keeps the whole errors list."""
        detail = etree.fromstring(
            f'<detail><ApiExceptionFault xmlns="{CM_NS}">'
            "<ApplicationException.Type>ApiException</ApplicationException.Type>"
            "<errors><ApiError.Type>QuotaCheckError</ApiError.Type><reason>QUOTA_RENAMED</reason></errors>"
            "<errors><ApiError.Type>RateExceededError</ApiError.Type><reason>RATE_EXCEEDED</reason></errors>"
            "</ApiExceptionFault></detail>"
        )
        exception = ApiException.from_fault(SoapFault("soap:Server", "quota", detail_element=detail))

        quota, rate = exception.errors
        assert isinstance(quota, QuotaCheckError)
        assert quota.reason == "QUOTA_RENAMED"
        assert isinstance(rate, RateExceededError)
        assert rate.reason is RateExceededErrorReason.RATE_EXCEEDED
