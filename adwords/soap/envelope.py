"""
SOAP 1.1 envelope model, helpers and the response body decoder.

This module wraps pydantic-xml records in SOAP envelopes for sending and
decodes server replies, enforcing that the body carries exactly one payload
element.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from lxml import etree
from pydantic_xml import ParsingError, element

from adwords.soap.binding import XmlRecord, lookup_record, make_parser
from adwords.soap.errors import (
    DeserializationError,
    MisuseError,
    ProtocolError,
    SerializationError,
)

# Namespace definitions
SOAP_NS = "http://schemas.xmlsoap.org/soap/envelope/"
XSD_NS = "http://www.w3.org/2001/XMLSchema"

ENVELOPE_TAG = f"{{{SOAP_NS}}}Envelope"
HEADER_TAG = f"{{{SOAP_NS}}}Header"
BODY_TAG = f"{{{SOAP_NS}}}Body"
FAULT_TAG = f"{{{SOAP_NS}}}Fault"

MULTIPLE_ELEMENTS = "multiple elements inside SOAP body; not wrapped-document/literal WS-I compliant"


class Fault(XmlRecord, tag="Fault"):
    """SOAP 1.1 Fault; its children are unqualified."""

    faultcode: str = element(default="")
    faultstring: str = element(default="")
    faultactor: Optional[str] = element(default=None)
    detail: Optional[str] = element(default=None)


class FaultBody(XmlRecord, tag="Body", ns="soap", nsmap={"soap": SOAP_NS}):
    """A soap:Body holding a Fault, used to place the Fault in the envelope namespace."""

    fault: Optional[Fault] = element(tag="Fault", ns="soap", default=None)


@dataclass
class Header:
    """Ordered header records; duplicates allowed."""

    items: list[Any] = field(default_factory=list)


@dataclass
class Body:
    """
    Body payload: either a content record or a fault, never both.

    ``fault_detail`` keeps the raw ``<detail>`` element of a fault so typed
    vendor details can be decoded later.
    """

    content: Optional[XmlRecord] = None
    fault: Optional[Fault] = None
    fault_detail: Optional[etree._Element] = None


@dataclass
class Envelope:
    body: Body = field(default_factory=Body)
    header: Optional[Header] = None

    def to_element(self) -> etree._Element:
        root = etree.Element(ENVELOPE_TAG, nsmap={"soap": SOAP_NS})
        if self.header is not None and self.header.items:
            header_el = etree.SubElement(root, HEADER_TAG)
            for item in self.header.items:
                header_el.append(_header_element(item))

        body_el = etree.SubElement(root, BODY_TAG)
        if self.body.fault is not None:
            fault_el = FaultBody(fault=self.body.fault).to_xml_tree()[0]
            if self.body.fault.detail is None and self.body.fault_detail is not None:
                fault_el.append(copy.deepcopy(self.body.fault_detail))
            body_el.append(fault_el)
        elif isinstance(self.body.content, XmlRecord):
            body_el.append(self.body.content.to_xml_tree())
        elif self.body.content is not None:
            raise SerializationError(
                f"cannot serialize body content of type {type(self.body.content).__name__}"
            )
        return root

    def to_xml(self) -> bytes:
        """
        Serialize the envelope, XML declaration included.

        Raises:
            SerializationError: If a header item is not serializable or a
                value is not XML compatible.
        """
        try:
            return etree.tostring(self.to_element(), xml_declaration=True, encoding="utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"failed to serialize SOAP envelope: {exc}") from exc


def _header_element(item: Any) -> etree._Element:
    if isinstance(item, XmlRecord):
        return item.to_xml_tree()
    if isinstance(item, etree._Element):
        return copy.deepcopy(item)
    raise SerializationError(f"cannot serialize header item of type {type(item).__name__}")


def wrap_soap_envelope(body_content: XmlRecord, headers: Optional[list[Any]] = None) -> bytes:
    """
    Wrap a record in a SOAP envelope.

    Args:
        body_content: The payload record.
        headers: Header records, in order. The Header element is omitted when
            this is empty.

    Returns:
        Complete SOAP envelope as UTF-8 XML bytes.
    """
    header = Header(list(headers)) if headers else None
    return Envelope(body=Body(content=body_content), header=header).to_xml()


def create_soap_fault(
    fault_string: str,
    fault_code: str = "soap:Server",
    actor: Optional[str] = None,
    detail: Optional[str | XmlRecord] = None,
) -> bytes:
    """
    Create a SOAP fault envelope.

    Args:
        fault_string: The error message.
        fault_code: The fault code (default: soap:Server).
        actor: Optional faultactor.
        detail: Plain text detail, or a record placed inside ``<detail>``.

    Returns:
        Complete SOAP fault envelope as UTF-8 XML bytes.
    """
    fault = Fault(faultcode=fault_code, faultstring=fault_string, faultactor=actor)
    detail_el = None
    if isinstance(detail, XmlRecord):
        detail_el = etree.Element("detail")
        detail_el.append(detail.to_xml_tree())
    else:
        fault.detail = detail
    return Envelope(body=Body(fault=fault, fault_detail=detail_el)).to_xml()


def decode_envelope(raw: bytes, response: Any) -> Envelope:
    """
    Decode a SOAP reply, binding the body payload into ``response`` in place.

    An empty Body (or none at all) leaves ``response`` untouched. A Fault
    payload is returned in ``Envelope.body.fault`` with ``content`` cleared.
    Header elements are decoded into their registered records when one
    exists and kept as raw elements otherwise.

    Raises:
        MisuseError: If ``response`` is not an XmlRecord instance.
        ProtocolError: If the Body holds more than one element.
        DeserializationError: If the reply is not a SOAP envelope or the
            payload does not bind to ``response``.
    """
    if not isinstance(response, XmlRecord):
        raise MisuseError(f"response must be an XmlRecord instance, not {type(response).__name__}")

    try:
        root = etree.fromstring(raw, make_parser())
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise DeserializationError(f"failed to parse SOAP envelope: {exc}") from exc

    if root.tag != ENVELOPE_TAG:
        raise DeserializationError(f"expected element type <Envelope> but have <{etree.QName(root).localname}>")

    envelope = Envelope(body=Body(content=response))
    header_el = root.find(HEADER_TAG)
    body_el = root.find(BODY_TAG)

    try:
        if header_el is not None:
            envelope.header = Header(
                [_decode_header_item(child) for child in header_el if isinstance(child.tag, str)]
            )

        if body_el is None:
            return envelope
        payload = [child for child in body_el if isinstance(child.tag, str)]
        if len(payload) > 1:
            raise ProtocolError(MULTIPLE_ELEMENTS)
        if not payload:
            return envelope

        child = payload[0]
        if child.tag == FAULT_TAG:
            envelope.body = Body(fault=FaultBody.from_element(body_el).fault, fault_detail=child.find("detail"))
            return envelope

        if child.tag != type(response).__xml_serializer__.element_name:
            raise DeserializationError(
                f"expected element type <{response.__xml_tag__}> but have <{etree.QName(child).localname}>"
            )
        decoded = type(response).from_element(child)
    except (ValueError, ParsingError) as exc:
        raise DeserializationError(f"failed to decode SOAP body: {exc}") from exc

    for name in decoded.model_fields_set:
        setattr(response, name, getattr(decoded, name))
    return envelope


def _decode_header_item(el: etree._Element) -> Any:
    record = lookup_record(el.tag)
    if record is None:
        return el
    return record.from_element(el)
