"""
Base class of the per-service facades.

A facade owns one SoapClient and exposes one method per remote operation.
Each method allocates a zero-valued response record, calls the endpoint with
an empty SOAPAction and returns the populated record.
"""

import ssl
import warnings
from typing import Any, Optional, TypeVar

from adwords.config.app_settings import AppSettings, app_config
from adwords.soap.binding import XmlRecord
from adwords.soap.client import BasicAuth, SoapClient
from adwords.soap.wsse import new_wss_security_header

R = TypeVar("R", bound=XmlRecord)


class ServiceInterface:
    def __init__(self, client: SoapClient):
        self.client = client

    @classmethod
    def new(
        cls,
        url: str,
        insecure_skip_verify: bool = False,
        auth: Optional[BasicAuth] = None,
        **options: Any,
    ):
        """Build a facade over a default client (system TLS or the insecure shortcut)."""
        return cls(SoapClient.new(url, insecure_skip_verify, auth, **options))

    @classmethod
    def with_tls_config(
        cls,
        url: str,
        tls_config: ssl.SSLContext,
        auth: Optional[BasicAuth] = None,
        **options: Any,
    ):
        """Build a facade over a client using a caller supplied TLS context."""
        return cls(SoapClient.with_tls_config(url, tls_config, auth, **options))

    @classmethod
    def from_settings(cls, url: str, settings: Optional[AppSettings] = None, **options: Any):
        """
        Build a facade from application settings.

        Transport options and Basic auth come from ``settings.transport`` and
        ``settings.auth``; a WS-Security header is attached when
        ``settings.wsse.username`` is set. Subclasses add their own headers
        in _settings_headers().

        Args:
            url: Endpoint URL.
            settings: Settings to use; the loaded app_config by default.
            **options: Extra SoapClient keyword arguments (overriding settings).
        """
        settings = settings or app_config
        auth = None
        if settings.auth.login:
            auth = BasicAuth(settings.auth.login, settings.auth.password)

        client_options = {
            "dial_timeout": settings.transport.dial_timeout,
            "user_agent": settings.transport.user_agent,
        }
        client_options.update(options)
        service = cls.new(url, settings.transport.insecure_skip_verify, auth, **client_options)

        if settings.wsse.username:
            service.attach_header(
                new_wss_security_header(
                    settings.wsse.username,
                    settings.wsse.password,
                    settings.wsse.must_understand,
                )
            )
        for header in service._settings_headers(settings):
            service.attach_header(header)
        return service

    def _settings_headers(self, settings: AppSettings) -> list[Any]:
        return []

    def attach_header(self, header: Any) -> None:
        self.client.attach_header(header)

    def set_header(self, header: Any) -> None:
        """Deprecated alias of attach_header(); it appends, it does not replace."""
        warnings.warn(
            "set_header() is deprecated, use attach_header()",
            DeprecationWarning,
            stacklevel=2,
        )
        self.client.attach_header(header)

    def _invoke(self, request: XmlRecord, response_type: type[R]) -> R:
        response = response_type()
        self.client.call("", request, response)
        return response
