"""Stripe Terminal API client

Overview
--------
Thin, typed HTTP client for the Terminal Readers surface of the Stripe API.
Endpoints are grouped into namespaces that follow the REST paths:

- ``client.terminal.readers``: create/retrieve/update/delete/list readers and
  drive reader actions (process payment, refund, display, cancel)
- ``client.test_helpers.terminal.readers``: simulated-reader helpers

Authentication
--------------
Provide ``api_key`` directly, or build the client from environment settings
with :meth:`StripeClient.from_settings` (``STRIPE_API_KEY``). Any call may
override the key, account or API version through ``RequestOptions``.

Usage
-----
>>> client = StripeClient("sk_test_...")
>>> reader = client.terminal.readers.create({"registration_code": "simulated-wpe", "label": "Front desk"})
>>> client.terminal.readers.process_payment_intent(reader, {"payment_intent": "pi_123"})
>>> client.test_helpers.terminal.readers.present_payment_method(reader)
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .core.config import DEFAULT_API_BASE, StripeSettings, configure_logging
from .core.request import ApiRequestor
from .terminal.readers import _TerminalNamespace, _TestHelpersNamespace


class StripeClient:
    """Entry point holding the shared requestor and resource namespaces.

    Args:
        api_key: Secret key (``sk_...``) sent as Bearer credential.
        api_base: Base URL of the API.
        api_version: Pinned ``Stripe-Version``; the account default applies when omitted.
        stripe_account: Connected account id sent as ``Stripe-Account``.
        timeout: Default HTTP timeout for the internal client.
        client: Optional preconfigured ``httpx.Client`` to use.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        api_base: str = DEFAULT_API_BASE,
        api_version: Optional[str] = None,
        stripe_account: Optional[str] = None,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._requestor = ApiRequestor(
            api_key,
            api_base=api_base,
            api_version=api_version,
            stripe_account=stripe_account,
            timeout=timeout,
            client=client,
        )
        self._logger = logging.getLogger(__name__)
        self._terminal = _TerminalNamespace(self)
        self._test_helpers = _TestHelpersNamespace(self)

    @classmethod
    def from_settings(cls, settings: Optional[StripeSettings] = None, *, client: Optional[httpx.Client] = None) -> "StripeClient":
        """Build a client from :class:`StripeSettings` (environment / ``.env`` when omitted)."""
        settings = settings or StripeSettings()
        configure_logging(settings.log_level)
        return cls(
            settings.api_key,
            api_base=settings.api_base,
            api_version=settings.api_version,
            stripe_account=settings.stripe_account,
            timeout=settings.timeout,
            client=client,
        )

    @property
    def requestor(self) -> ApiRequestor:
        return self._requestor

    @property
    def terminal(self) -> _TerminalNamespace:
        """Namespaced Terminal API access: ``readers``."""
        return self._terminal

    @property
    def test_helpers(self) -> _TestHelpersNamespace:
        """Namespaced test-helper access: ``terminal.readers``."""
        return self._test_helpers

    def close(self) -> None:
        self._requestor.close()

    def __enter__(self) -> "StripeClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
