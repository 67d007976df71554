"""Tests for the WS-Security UsernameToken header."""

import re

from lxml import etree

from adwords.soap.envelope import HEADER_TAG, SOAP_NS, wrap_soap_envelope
from adwords.soap.wsse import (
    PASSWORD_TEXT,
    WSSE_NS,
    WSU_NS,
    WSSSecurityHeader,
    new_token_id,
    new_wss_security_header,
)
from adwords.v201802.models.location_criterion import Query

TOKEN_ID = re.compile(r"^UsernameToken-[A-Za-z0-9]{9}$")


def q(ns: str, local: str) -> str:
    return f"{{{ns}}}{local}"


class TestTokenId:
    """Tests for UsernameToken ids."""

    def test_format(self):
        """Test the id is the prefix plus nine letters or digits."""
        for _ in range(100):
            assert TOKEN_ID.match(new_token_id())

    def test_ids_are_distinct(self):
        """Test consecutive headers carry different token ids."""
        ids = {new_wss_security_header("user", "pw").token.id for _ in range(50)}

        assert len(ids) == 50


class TestSecurityHeader:
    """Tests for the Security header record."""

    def test_structure(self):
        """Test Security > UsernameToken > Username/Password."""
        el = new_wss_security_header("alice", "s3cret").to_xml_tree()

        assert el.tag == q(WSSE_NS, "Security")
        token = el.find(q(WSSE_NS, "UsernameToken"))
        assert TOKEN_ID.match(token.get(q(WSU_NS, "Id")))
        assert token.findtext(q(WSSE_NS, "Username")) == "alice"
        password = token.find(q(WSSE_NS, "Password"))
        assert password.text == "s3cret"
        assert password.get("Type") == PASSWORD_TEXT

    def test_must_understand_omitted_when_empty(self):
        """Test no mustUnderstand attribute is written by default."""
        el = new_wss_security_header("alice", "pw").to_xml_tree()

        assert el.get("mustUnderstand") is None
        assert not any(etree.QName(name).localname == "mustUnderstand" for name in el.attrib)

    def test_must_understand_written_verbatim(self):
        """Test a non-empty mustUnderstand value is written as an unqualified attribute."""
        el = new_wss_security_header("alice", "pw", must_understand="1").to_xml_tree()

        assert el.get("mustUnderstand") == "1"
        assert el.get(q(SOAP_NS, "mustUnderstand")) is None

    def test_credentials_are_sent_as_is(self):
        """Test special characters survive escaping."""
        el = new_wss_security_header("a&b", "<pw>").to_xml_tree()
        parsed = etree.fromstring(etree.tostring(el))

        assert parsed.findtext(f"{q(WSSE_NS, 'UsernameToken')}/{q(WSSE_NS, 'Username')}") == "a&b"
        assert parsed.findtext(f"{q(WSSE_NS, 'UsernameToken')}/{q(WSSE_NS, 'Password')}") == "<pw>"

    def test_in_envelope_header(self):
        """Test the header lands inside soap:Header."""
        header = new_wss_security_header("alice", "pw", must_understand="1")
        root = etree.fromstring(wrap_soap_envelope(Query(query="SELECT Id"), [header]))
        security = root.find(HEADER_TAG)[0]

        assert security.tag == q(WSSE_NS, "Security")
        assert security.get("mustUnderstand") == "1"

    def test_decodes_back(self):
        """Test the header record reads back from its own XML."""
        header = new_wss_security_header("alice", "pw", must_understand="1")
        decoded = WSSSecurityHeader.from_xml(header.to_xml())

        assert decoded.must_understand == "1"
        assert decoded.token.id == header.token.id
        assert decoded.token.username.value == "alice"
        assert decoded.token.password.type == PASSWORD_TEXT
