"""Terminal Readers resource

Every method maps one-to-one onto a REST endpoint under
``/v1/terminal/readers``, builds its path and parameters, and hands off to
:class:`~stripe_terminal.core.request.ApiRequestor`. Responses are returned as
typed models; failures raise :mod:`stripe_terminal.errors` exceptions.

Reader ids may be given as a string (``tmr_...``) or as a :class:`Reader`.
Parameters may be a plain dict or one of the DTOs from
:mod:`stripe_terminal.terminal.params`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, Mapping, Optional, Union

from ..core.request import RequestOptions, cast_to_id, get_id, prefix_expansions
from ..errors import InvalidRequestError, ReaderNotFoundError
from ..schemas.base import BaseSchema
from ..schemas.list_object import ListObject
from .models import DeletedReader, Reader
from .params import _Params

if TYPE_CHECKING:
    from ..client import StripeClient

ReaderRef = Union[str, Reader]
ParamsLike = Union[Mapping[str, Any], _Params, None]

PLURAL_ENDPOINT = "terminal/readers"
TEST_HELPERS_ENDPOINT = "test_helpers/terminal/readers"

_logger = logging.getLogger(__name__)


def _to_params(params: ParamsLike) -> Dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, _Params):
        return params.to_params()
    if isinstance(params, BaseSchema):
        return params.model_dump(exclude_none=True, mode="json")
    return dict(params)


class _ReadersNamespace:
    """Operations on ``/v1/terminal/readers``."""

    def __init__(self, client: "StripeClient") -> None:
        self._client = client

    def _request(self, method: str, path: str, params: ParamsLike = None, options: Optional[RequestOptions] = None) -> Dict[str, Any]:
        return self._client.requestor.request(method, path, _to_params(params), options)

    def _reader_request(
        self,
        method: str,
        reader: ReaderRef,
        suffix: str = "",
        params: ParamsLike = None,
        options: Optional[RequestOptions] = None,
        *,
        base: str = PLURAL_ENDPOINT,
    ) -> Reader:
        return Reader.model_validate(self._reader_send(method, reader, suffix, params, options, base=base))

    def _reader_send(
        self,
        method: str,
        reader: ReaderRef,
        suffix: str = "",
        params: ParamsLike = None,
        options: Optional[RequestOptions] = None,
        *,
        base: str = PLURAL_ENDPOINT,
    ) -> Dict[str, Any]:
        """Send a request under a reader path, turning a reader 404 into ``ReaderNotFoundError``."""
        reader_id = get_id(reader)
        path = f"{base}/{reader_id}{suffix}"
        try:
            data = self._request(method, path, params, options)
        except InvalidRequestError as e:
            if e.status_code == 404 and e.param in (None, "id", "reader"):
                raise ReaderNotFoundError(
                    reader_id,
                    code=e.code,
                    param=e.param,
                    error_type=e.error_type,
                    doc_url=e.doc_url,
                    request_id=e.request_id,
                    details=e.details,
                ) from e
            raise
        return data

    def create(self, params: ParamsLike, options: Optional[RequestOptions] = None) -> Reader:
        """Register a new reader.

        API
        ---
        - Method/Path: ``POST /v1/terminal/readers``
        - Body: ``registration_code`` (required), ``label``, ``location``, ``metadata``

        Returns:
            ``Reader``
        """
        data = self._request("POST", PLURAL_ENDPOINT, params, options)
        reader = Reader.model_validate(data)
        _logger.debug("readers.create: created id=%s device_type=%s", reader.id, reader.device_type)
        return reader

    def retrieve(self, reader: ReaderRef, options: Optional[RequestOptions] = None) -> Reader:
        """Retrieve a reader.

        API
        ---
        - Method/Path: ``GET /v1/terminal/readers/{id}``

        Raises:
            ReaderNotFoundError: When the reader does not exist.
        """
        return self._reader_request("GET", reader, options=options)

    def update(self, reader: ReaderRef, params: ParamsLike, options: Optional[RequestOptions] = None) -> Reader:
        """Update a reader's ``label`` and/or ``metadata``.

        API
        ---
        - Method/Path: ``POST /v1/terminal/readers/{id}``
        """
        return self._reader_request("POST", reader, params=params, options=options)

    def delete(self, reader: ReaderRef, options: Optional[RequestOptions] = None) -> DeletedReader:
        """Delete a reader.

        API
        ---
        - Method/Path: ``DELETE /v1/terminal/readers/{id}``

        Returns:
            ``DeletedReader`` with ``deleted=True``.
        """
        return DeletedReader.model_validate(self._reader_send("DELETE", reader, options=options))

    def list(self, params: ParamsLike = None, options: Optional[RequestOptions] = None) -> ListObject[Reader]:
        """List readers, one page at a time.

        API
        ---
        - Method/Path: ``GET /v1/terminal/readers``
        - Query: ``device_type``, ``location``, ``serial_number``, ``status``,
          ``limit`` (1..100), ``starting_after``, ``ending_before``.

        Notes
        -----
        ``location`` and the cursor params accept an object and are sent as its id. Expansions in
        ``options.expand`` are prefixed with ``data.`` since the readers live
        under the list's ``data`` field.

        Returns:
            ``ListObject[Reader]``; call ``auto_paging_iter()`` to walk all pages.
        """
        query = cast_to_id(_to_params(params), ("location", "starting_after", "ending_before"))
        if options is not None and options.expand:
            options = options.model_copy(update={"expand": prefix_expansions(options.expand)})

        def fetch(page_params: Dict[str, Any]) -> ListObject[Reader]:
            data = self._request("GET", PLURAL_ENDPOINT, page_params, options)
            page = ListObject[Reader].model_validate(data)
            _logger.debug("readers.list: got %d readers has_more=%s", len(page.data), page.has_more)
            return page.bind(page_params, fetch)

        return fetch(query)

    def list_auto_paging(self, params: ParamsLike = None, options: Optional[RequestOptions] = None) -> Iterator[Reader]:
        """Iterate every reader matching ``params`` across all pages."""
        return self.list(params, options).auto_paging_iter()

    def process_payment_intent(
        self, reader: ReaderRef, params: ParamsLike = None, options: Optional[RequestOptions] = None
    ) -> Reader:
        """Hand a PaymentIntent to the reader and start collecting the payment.

        API
        ---
        - Method/Path: ``POST /v1/terminal/readers/{id}/process_payment_intent``
        - Body: ``payment_intent``, ``process_config``

        Returns:
            ``Reader`` whose ``action`` reflects the started payment.
        """
        return self._reader_request("POST", reader, "/process_payment_intent", params, options)

    def process_setup_intent(
        self, reader: ReaderRef, params: ParamsLike = None, options: Optional[RequestOptions] = None
    ) -> Reader:
        """Collect a payment method on the reader for later use.

        API
        ---
        - Method/Path: ``POST /v1/terminal/readers/{id}/process_setup_intent``
        - Body: ``setup_intent``, ``customer_consent_collected``
        """
        return self._reader_request("POST", reader, "/process_setup_intent", params, options)

    def refund_payment(
        self, reader: ReaderRef, params: ParamsLike = None, options: Optional[RequestOptions] = None
    ) -> Reader:
        """Start an in-person refund on the reader.

        API
        ---
        - Method/Path: ``POST /v1/terminal/readers/{id}/refund_payment``
        - Body: ``amount``, ``charge`` or ``payment_intent``, ``metadata``,
          ``refund_application_fee``, ``reverse_transfer``
        """
        return self._reader_request("POST", reader, "/refund_payment", params, options)

    def set_reader_display(
        self, reader: ReaderRef, params: ParamsLike = None, options: Optional[RequestOptions] = None
    ) -> Reader:
        """Show a cart on the reader's screen.

        API
        ---
        - Method/Path: ``POST /v1/terminal/readers/{id}/set_reader_display``
        - Body: ``type="cart"``, ``cart[currency]``, ``cart[line_items]``, ``cart[tax]``, ``cart[total]``
        """
        return self._reader_request("POST", reader, "/set_reader_display", params, options)

    def cancel_action(
        self, reader: ReaderRef, params: ParamsLike = None, options: Optional[RequestOptions] = None
    ) -> Reader:
        """Cancel the action currently running on the reader.

        API
        ---
        - Method/Path: ``POST /v1/terminal/readers/{id}/cancel_action``
        """
        return self._reader_request("POST", reader, "/cancel_action", params, options)

    def present_payment_method(
        self, reader: ReaderRef, params: ParamsLike = None, options: Optional[RequestOptions] = None
    ) -> Reader:
        """Shortcut for ``client.test_helpers.terminal.readers.present_payment_method``."""
        return self._client.test_helpers.terminal.readers.present_payment_method(reader, params, options)


class _TestHelperReadersNamespace:
    """Operations on ``/v1/test_helpers/terminal/readers``; simulated readers only."""

    def __init__(self, client: "StripeClient") -> None:
        self._client = client

    def present_payment_method(
        self, reader: ReaderRef, params: ParamsLike = None, options: Optional[RequestOptions] = None
    ) -> Reader:
        """Present a payment method on a simulated reader.

        Can be used to simulate accepting a payment, saving a card or
        refunding a transaction.

        API
        ---
        - Method/Path: ``POST /v1/test_helpers/terminal/readers/{id}/present_payment_method``
        - Body: ``type`` (``card_present``/``interac_present``), ``card_present[number]``,
          ``interac_present[number]``, ``amount_tip``
        """
        return self._client.terminal.readers._reader_request(
            "POST", reader, "/present_payment_method", params, options, base=TEST_HELPERS_ENDPOINT
        )


class _TerminalNamespace:
    def __init__(self, client: "StripeClient") -> None:
        self._readers = _ReadersNamespace(client)

    @property
    def readers(self) -> _ReadersNamespace:
        return self._readers


class _TestHelperTerminalNamespace:
    def __init__(self, client: "StripeClient") -> None:
        self._readers = _TestHelperReadersNamespace(client)

    @property
    def readers(self) -> _TestHelperReadersNamespace:
        return self._readers


class _TestHelpersNamespace:
    def __init__(self, client: "StripeClient") -> None:
        self._terminal = _TestHelperTerminalNamespace(client)

    @property
    def terminal(self) -> _TestHelperTerminalNamespace:
        return self._terminal
