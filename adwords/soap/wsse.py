"""
WS-Security UsernameToken header.

Builds the ``wsse:Security`` header carrying a plain-text UsernameToken, as
sent in the SOAP Header of authenticated calls.
"""

import random
import string
import time

from pydantic_xml import attr, element

from adwords.soap.binding import XmlRecord

WSSE_NS = "http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-wssecurity-secext-1.0.xsd"
WSU_NS = "http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-wssecurity-utility-1.0.xsd"
PASSWORD_TEXT = (
    "http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-username-token-profile-1.0#PasswordText"
)

WSSE_NSMAP = {"wsse": WSSE_NS, "wsu": WSU_NS}

TOKEN_ID_PREFIX = "UsernameToken-"
TOKEN_ID_LENGTH = 9
_ID_ALPHABET = string.ascii_letters + string.digits

# Token ids only need to be distinct, not unpredictable
_rng = random.Random(time.time_ns())


class WSSUsername(XmlRecord, tag="Username", ns="wsse", nsmap=WSSE_NSMAP):
    value: str = ""


class WSSPassword(XmlRecord, tag="Password", ns="wsse", nsmap=WSSE_NSMAP):
    type: str = attr(name="Type", default=PASSWORD_TEXT)
    value: str = ""


class WSSUsernameToken(XmlRecord, tag="UsernameToken", ns="wsse", nsmap=WSSE_NSMAP):
    id: str = attr(name="Id", ns="wsu", default="")
    username: WSSUsername | None = element(tag="Username", default=None)
    password: WSSPassword | None = element(tag="Password", default=None)


class WSSSecurityHeader(XmlRecord, tag="Security", ns="wsse", nsmap=WSSE_NSMAP):
    """
    The Security header element.

    ``mustUnderstand`` is an unqualified attribute written verbatim, and
    omitted entirely when empty.
    """

    must_understand: str | None = attr(name="mustUnderstand", default=None)
    token: WSSUsernameToken | None = element(tag="UsernameToken", default=None)


def new_token_id() -> str:
    """Return ``UsernameToken-`` followed by nine random letters or digits."""
    return TOKEN_ID_PREFIX + "".join(_rng.choice(_ID_ALPHABET) for _ in range(TOKEN_ID_LENGTH))


def new_wss_security_header(user: str, password: str, must_understand: str = "") -> WSSSecurityHeader:
    """
    Build a Security header with a fresh UsernameToken.

    Args:
        user: Username, sent as-is.
        password: Password, sent as PasswordText.
        must_understand: Value of the ``mustUnderstand`` attribute (e.g. "1"); empty
            omits the attribute.

    Returns:
        A header record ready for attach_header().
    """
    return WSSSecurityHeader(
        must_understand=must_understand or None,
        token=WSSUsernameToken(
            id=new_token_id(),
            username=WSSUsername(value=user),
            password=WSSPassword(value=password),
        ),
    )
