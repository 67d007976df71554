"""
Errors raised by the SOAP transport.

Every failure of SoapClient.call is one of the classes below. Each carries a
short ``kind`` label so callers can branch on the failure class without
importing every type.
"""

from typing import Any, ClassVar, Optional


class SoapError(Exception):
    """Base class for all transport errors."""

    kind: ClassVar[str] = "soap"


class MisuseError(SoapError):
    """The response target handed to the decoder is not an XML record instance."""

    kind = "misuse"


class SerializationError(SoapError):
    """The request envelope could not be rendered to XML."""

    kind = "serialize"


class NetworkError(SoapError):
    """Building, sending or reading the HTTP exchange failed."""

    kind = "network"


class DeserializationError(SoapError):
    """The reply could not be parsed or bound to the response record."""

    kind = "deserialize"


class ProtocolError(SoapError):
    """The reply body is not wrapped-document/literal (more than one element)."""

    kind = "protocol"


class SoapFault(SoapError):
    """
    A SOAP Fault returned by the remote server.

    The fault string doubles as the exception message.
    """

    kind = "remote-fault"

    def __init__(
        self,
        code: str = "",
        string: str = "",
        actor: str = "",
        detail: str = "",
        detail_element: Optional[Any] = None,
    ):
        super().__init__(string)
        self.code = code
        self.string = string
        self.actor = actor
        self.detail = detail
        # Raw lxml <detail> element, kept for typed decoding of vendor faults
        self.detail_element = detail_element

    def __str__(self) -> str:
        return self.string

    def __repr__(self) -> str:
        return f"SoapFault(code={self.code!r}, string={self.string!r}, actor={self.actor!r})"
