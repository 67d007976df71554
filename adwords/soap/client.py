"""
SOAP 1.1 transport shared by every service facade.

One SoapClient holds an endpoint URL, TLS settings, optional HTTP Basic
credentials and an ordered list of SOAP header records. Each call() posts a
fresh envelope over a fresh connection and decodes the reply in place.
"""

import ssl
import warnings
from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx

from adwords.config.app_settings import app_config
from adwords.soap.binding import XmlRecord
from adwords.soap.envelope import Body, Envelope, Header, decode_envelope
from adwords.soap.errors import MisuseError, NetworkError, SoapFault
from adwords.util.logging_helper import format_payload, get_logger

logger = get_logger(__name__)

DEFAULT_DIAL_TIMEOUT = 30.0
CONTENT_TYPE = 'text/xml; charset="utf-8"'


@dataclass(frozen=True)
class BasicAuth:
    login: str
    password: str


def insecure_tls_config() -> ssl.SSLContext:
    """A TLS context that accepts any server certificate."""
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


class SoapClient:
    """
    Blocking SOAP client for one endpoint.

    Headers are meant to be attached while setting the client up. call()
    copies the header list, so the envelope of a call in flight never
    changes, but attach_header() itself takes no lock.

    Args:
        url: Endpoint URL, fixed for the client's lifetime.
        tls_config: TLS context used for https endpoints. None verifies
            certificates with the system defaults.
        auth: HTTP Basic credentials, or None.
        insecure_skip_verify: Skip certificate checks when no tls_config
            is given.
        dial_timeout: Connect timeout in seconds. Reads are unbounded.
        user_agent: User-Agent header value.
        transport_factory: Builds the httpx transport for each call. Tests
            use it to inject httpx.MockTransport.
    """

    def __init__(
        self,
        url: str,
        tls_config: Optional[ssl.SSLContext] = None,
        auth: Optional[BasicAuth] = None,
        *,
        insecure_skip_verify: bool = False,
        dial_timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport_factory: Optional[Callable[[], httpx.BaseTransport]] = None,
    ):
        if tls_config is None and insecure_skip_verify:
            tls_config = insecure_tls_config()
        self._url = url
        self._tls_config = tls_config
        self._auth = auth
        self._headers: list[Any] = []
        self.dial_timeout = dial_timeout if dial_timeout is not None else app_config.transport.dial_timeout
        self.user_agent = user_agent or app_config.transport.user_agent
        self._transport_factory = transport_factory

    @classmethod
    def new(
        cls,
        url: str,
        insecure_skip_verify: bool = False,
        auth: Optional[BasicAuth] = None,
        **options: Any,
    ) -> "SoapClient":
        return cls(url, auth=auth, insecure_skip_verify=insecure_skip_verify, **options)

    @classmethod
    def with_tls_config(
        cls,
        url: str,
        tls_config: ssl.SSLContext,
        auth: Optional[BasicAuth] = None,
        **options: Any,
    ) -> "SoapClient":
        return cls(url, tls_config=tls_config, auth=auth, **options)

    @property
    def url(self) -> str:
        return self._url

    @property
    def tls_config(self) -> Optional[ssl.SSLContext]:
        return self._tls_config

    @property
    def headers(self) -> tuple[Any, ...]:
        return tuple(self._headers)

    def attach_header(self, header: Any) -> None:
        """Append a header record; every later call sends it, in attach order."""
        self._headers.append(header)

    def set_header(self, header: Any) -> None:
        """Deprecated alias of attach_header(); it appends, it does not replace."""
        warnings.warn(
            "set_header() is deprecated, use attach_header()",
            DeprecationWarning,
            stacklevel=2,
        )
        self._headers.append(header)

    def call(self, action: str, request: XmlRecord, response: XmlRecord) -> Optional[Envelope]:
        """
        Post ``request`` and decode the reply into ``response`` in place.

        Args:
            action: SOAPAction header value ("" for every AdWords operation).
            request: The request payload record.
            response: A response record instance; fields present in the reply
                overwrite its fields.

        Returns:
            The decoded reply envelope (its header carries any response
            headers), or None when the server sent an empty body.

        Raises:
            MisuseError: ``response`` is not a record instance.
            SerializationError: The request could not be rendered.
            NetworkError: The HTTP exchange failed.
            DeserializationError: The reply could not be decoded.
            ProtocolError: The reply body held more than one element.
            SoapFault: The server answered with a SOAP Fault.
        """
        if not isinstance(response, XmlRecord):
            raise MisuseError(f"response must be an XmlRecord instance, not {type(response).__name__}")

        headers = list(self._headers)
        envelope = Envelope(body=Body(content=request), header=Header(headers) if headers else None)
        payload = envelope.to_xml()
        logger.info("SOAP request to %s: %s", self._url, format_payload(payload))

        raw = self._post(action, payload)
        if not raw:
            logger.info("empty response")
            return None
        logger.info("SOAP response from %s: %s", self._url, format_payload(raw))

        reply = decode_envelope(raw, response)
        fault = reply.body.fault
        if fault is not None:
            raise SoapFault(
                fault.faultcode,
                fault.faultstring,
                fault.faultactor or "",
                fault.detail or "",
                reply.body.fault_detail,
            )
        return reply

    def _post(self, action: str, payload: bytes) -> bytes:
        http_headers = {
            "Content-Type": CONTENT_TYPE,
            "SOAPAction": action,
            "User-Agent": self.user_agent,
            "Connection": "close",
        }
        auth = httpx.BasicAuth(self._auth.login, self._auth.password) if self._auth is not None else None
        try:
            with httpx.Client(
                transport=self._new_transport(),
                timeout=httpx.Timeout(None, connect=self.dial_timeout),
                auth=auth,
            ) as http:
                return http.post(self._url, content=payload, headers=http_headers).content
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(f"SOAP request to {self._url} failed: {exc}") from exc

    def _new_transport(self) -> httpx.BaseTransport:
        if self._transport_factory is not None:
            return self._transport_factory()
        verify = self._tls_config if self._tls_config is not None else True
        return httpx.HTTPTransport(verify=verify)
