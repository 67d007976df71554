"""
Tests for the SOAP client.

Every test swaps the network for httpx.MockTransport through the client's
transport_factory and checks what goes over the wire and how replies come
back:
- HTTP headers, Basic auth, timeouts
- header records, deprecation alias, snapshots
- faults, protocol violations, empty replies, network failures
"""

import base64
import logging
import ssl

import httpx
import pytest
from lxml import etree

from adwords.soap.client import CONTENT_TYPE, BasicAuth, SoapClient
from adwords.soap.envelope import BODY_TAG, HEADER_TAG, MULTIPLE_ELEMENTS, SOAP_NS, create_soap_fault, wrap_soap_envelope
from adwords.soap.errors import MisuseError, NetworkError, ProtocolError, SoapError, SoapFault
from adwords.util.logging_helper import CLIENT_LOGGER
from adwords.v201802.models.common import CM_NS, SoapHeader, SoapResponseHeader
from adwords.v201802.models.report_definition import (
    GetReportFields,
    GetReportFieldsResponse,
    ReportDefinitionField,
    ReportDefinitionReportType,
)

URL = "https://adwords.example.test/api/adwords/cm/v201802/ReportDefinitionService"


class Recorder:
    """Mock endpoint that records requests and replays a canned reply."""

    def __init__(self, reply: bytes = b"", status_code: int = 200):
        self.reply = reply
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.reply)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def envelope(self) -> etree._Element:
        return etree.fromstring(self.last.content)


def make_client(handler, **kwargs) -> SoapClient:
    return SoapClient(URL, transport_factory=lambda: httpx.MockTransport(handler), **kwargs)


def report_fields_reply(*names: str) -> bytes:
    return wrap_soap_envelope(GetReportFieldsResponse(rval=[ReportDefinitionField(field_name=n) for n in names]))


def request() -> GetReportFields:
    return GetReportFields(report_type=ReportDefinitionReportType.CAMPAIGN_PERFORMANCE_REPORT)


class TestSoapClientCall:
    """Tests for SoapClient.call()."""

    def test_success_populates_response(self):
        """Test a reply is decoded into the response record."""
        endpoint = Recorder(report_fields_reply("CampaignId", "Clicks"))
        client = make_client(endpoint)
        response = GetReportFieldsResponse()

        envelope = client.call("", request(), response)

        assert [f.field_name for f in response.rval] == ["CampaignId", "Clicks"]
        assert envelope.body.content is response

    def test_request_is_posted_as_soap(self):
        """Test method, URL, body and HTTP headers of the outgoing request."""
        endpoint = Recorder(report_fields_reply())
        make_client(endpoint).call("", request(), GetReportFieldsResponse())

        sent = endpoint.last
        assert sent.method == "POST"
        assert str(sent.url) == URL
        assert sent.headers["Content-Type"] == CONTENT_TYPE
        assert sent.headers["SOAPAction"] == ""
        assert sent.headers["User-Agent"] == "gowsdl/0.1"
        assert sent.headers["Connection"] == "close"
        assert "Authorization" not in sent.headers
        body = endpoint.envelope().find(BODY_TAG)
        assert body[0].tag == f"{{{CM_NS}}}getReportFields"

    def test_soap_action_and_user_agent(self):
        """Test the action argument and user_agent option reach the wire."""
        endpoint = Recorder(report_fields_reply())
        make_client(endpoint, user_agent="reporting/2.0").call("urn:action", request(), GetReportFieldsResponse())

        assert endpoint.last.headers["SOAPAction"] == "urn:action"
        assert endpoint.last.headers["User-Agent"] == "reporting/2.0"

    def test_basic_auth(self):
        """Test Basic credentials are sent when configured."""
        endpoint = Recorder(report_fields_reply())
        make_client(endpoint, auth=BasicAuth("L", "P")).call("", request(), GetReportFieldsResponse())

        expected = "Basic " + base64.b64encode(b"L:P").decode("ascii")
        assert endpoint.last.headers["Authorization"] == expected

    def test_connect_timeout_only(self):
        """Test the dial timeout bounds connecting and nothing else."""
        endpoint = Recorder(report_fields_reply())
        make_client(endpoint, dial_timeout=5.0).call("", request(), GetReportFieldsResponse())

        assert endpoint.last.extensions["timeout"] == {"connect": 5.0, "read": None, "write": None, "pool": None}

    def test_default_dial_timeout(self):
        """Test the dial timeout defaults to thirty seconds."""
        assert make_client(Recorder()).dial_timeout == 30.0

    def test_fault_raises_soap_fault(self):
        """Test a Fault reply raises SoapFault whose message is the fault string."""
        endpoint = Recorder(create_soap_fault("bad input", "soap:Client", actor="urn:x"), status_code=500)
        client = make_client(endpoint)

        with pytest.raises(SoapFault) as exc_info:
            client.call("", request(), GetReportFieldsResponse())

        fault = exc_info.value
        assert str(fault) == "bad input"
        assert fault.code == "soap:Client"
        assert fault.actor == "urn:x"
        assert fault.kind == "remote-fault"
        assert isinstance(fault, SoapError)

    def test_fault_keeps_detail_element(self):
        """Test the raw fault detail travels on the exception."""
        endpoint = Recorder(create_soap_fault("boom", detail=SoapResponseHeader(request_id="r1")))

        with pytest.raises(SoapFault) as exc_info:
            make_client(endpoint).call("", request(), GetReportFieldsResponse())

        assert exc_info.value.detail_element[0].findtext(f"{{{CM_NS}}}requestId") == "r1"

    def test_multiple_body_elements(self):
        """Test a reply with two body elements raises ProtocolError."""
        reply = (
            f'<soap:Envelope xmlns:soap="{SOAP_NS}"><soap:Body>'
            "<a/><b/>"
            "</soap:Body></soap:Envelope>"
        ).encode()

        with pytest.raises(ProtocolError) as exc_info:
            make_client(Recorder(reply)).call("", request(), GetReportFieldsResponse())
        assert str(exc_info.value) == MULTIPLE_ELEMENTS
        assert exc_info.value.kind == "protocol"

    def test_empty_reply(self, caplog):
        """Test an empty HTTP body returns None and leaves the response untouched."""
        caplog.set_level(logging.INFO, logger=CLIENT_LOGGER)
        response = GetReportFieldsResponse(rval=[ReportDefinitionField(field_name="Kept")])

        result = make_client(Recorder(b"")).call("", request(), response)

        assert result is None
        assert response.rval[0].field_name == "Kept"
        assert "empty response" in caplog.messages

    def test_request_and_response_are_logged(self, caplog):
        """Test both payloads are logged at INFO."""
        caplog.set_level(logging.INFO, logger=CLIENT_LOGGER)
        make_client(Recorder(report_fields_reply("Clicks"))).call("", request(), GetReportFieldsResponse())

        assert any(m.startswith(f"SOAP request to {URL}") and "getReportFields" in m for m in caplog.messages)
        assert any(m.startswith(f"SOAP response from {URL}") and "Clicks" in m for m in caplog.messages)

    def test_network_failure(self):
        """Test transport errors surface as NetworkError."""

        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkError) as exc_info:
            make_client(refuse).call("", request(), GetReportFieldsResponse())

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert exc_info.value.kind == "network"

    def test_response_must_be_a_record(self):
        """Test a non-record response raises MisuseError before any request."""
        endpoint = Recorder(report_fields_reply())

        with pytest.raises(MisuseError):
            make_client(endpoint).call("", request(), GetReportFieldsResponse)

        assert endpoint.requests == []

    def test_response_headers_are_returned(self):
        """Test response headers come back on the returned envelope."""
        reply = (
            f'<soap:Envelope xmlns:soap="{SOAP_NS}"><soap:Header>'
            f'<ResponseHeader xmlns="{CM_NS}"><requestId>req-9</requestId><operations>1</operations></ResponseHeader>'
            f'</soap:Header><soap:Body><getReportFieldsResponse xmlns="{CM_NS}"/></soap:Body></soap:Envelope>'
        ).encode()

        envelope = make_client(Recorder(reply)).call("", request(), GetReportFieldsResponse())

        (header,) = envelope.header.items
        assert isinstance(header, SoapResponseHeader)
        assert header.request_id == "req-9"


class TestSoapClientHeaders:
    """Tests for header records on the client."""

    def test_no_headers_no_header_element(self):
        """Test an unadorned client sends no soap:Header."""
        endpoint = Recorder(report_fields_reply())
        make_client(endpoint).call("", request(), GetReportFieldsResponse())

        assert endpoint.envelope().find(HEADER_TAG) is None

    def test_headers_sent_in_order_with_duplicates(self):
        """Test attached headers are all sent, in attach order."""
        endpoint = Recorder(report_fields_reply())
        client = make_client(endpoint)
        first = SoapHeader(developer_token="one")
        client.attach_header(first)
        client.attach_header(SoapHeader(developer_token="two"))
        client.attach_header(first)

        client.call("", request(), GetReportFieldsResponse())

        header = endpoint.envelope().find(HEADER_TAG)
        assert [el.findtext(f"{{{CM_NS}}}developerToken") for el in header] == ["one", "two", "one"]

    def test_headers_persist_across_calls(self):
        """Test every call sends the attached headers."""
        endpoint = Recorder(report_fields_reply())
        client = make_client(endpoint)
        client.attach_header(SoapHeader(developer_token="tok"))

        client.call("", request(), GetReportFieldsResponse())
        client.call("", request(), GetReportFieldsResponse())

        for sent in endpoint.requests:
            assert len(etree.fromstring(sent.content).find(HEADER_TAG)) == 1

    def test_set_header_is_deprecated_and_appends(self):
        """Test set_header() warns and appends rather than replaces."""
        client = make_client(Recorder())
        client.attach_header(SoapHeader(developer_token="a"))

        with pytest.warns(DeprecationWarning):
            client.set_header(SoapHeader(developer_token="b"))

        assert [h.developer_token for h in client.headers] == ["a", "b"]

    def test_headers_property_is_a_snapshot(self):
        """Test mutating the returned headers does not change the client."""
        client = make_client(Recorder())
        client.attach_header(SoapHeader(developer_token="a"))

        snapshot = client.headers
        client.attach_header(SoapHeader(developer_token="b"))

        assert len(snapshot) == 1
        assert len(client.headers) == 2


class TestSoapClientConstruction:
    """Tests for the constructors and read-only properties."""

    def test_url_is_read_only(self):
        """Test the endpoint URL cannot be reassigned."""
        client = SoapClient.new(URL)

        assert client.url == URL
        with pytest.raises(AttributeError):
            client.url = "https://elsewhere.test/"

    def test_default_tls(self):
        """Test the default client verifies certificates."""
        assert SoapClient.new(URL).tls_config is None

    def test_insecure_shortcut(self):
        """Test insecure_skip_verify builds a context that skips verification."""
        tls = SoapClient.new(URL, insecure_skip_verify=True).tls_config

        assert tls.verify_mode == ssl.CERT_NONE
        assert tls.check_hostname is False

    def test_with_tls_config(self):
        """Test a caller supplied TLS context is kept as is."""
        context = ssl.create_default_context()
        client = SoapClient.with_tls_config(URL, context, BasicAuth("u", "p"))

        assert client.tls_config is context

    def test_explicit_tls_wins_over_insecure_flag(self):
        """Test an explicit TLS context is not replaced by the insecure shortcut."""
        context = ssl.create_default_context()
        client = SoapClient(URL, tls_config=context, insecure_skip_verify=True)

        assert client.tls_config is context
