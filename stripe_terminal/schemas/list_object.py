"""List and deletion envelopes shared by every Stripe resource."""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Iterator, List, Literal, Optional, TypeVar

from pydantic import Field, PrivateAttr

from .base import BaseSchema

T = TypeVar("T", bound=BaseSchema)


class ListObject(BaseSchema, Generic[T]):
    """A single page of a cursor-paginated list endpoint.

    The resource that produced the page binds the parameters and a page
    fetcher via :meth:`bind`, which lets :meth:`auto_paging_iter` walk the
    remaining pages lazily.

    Examples:
        >>> for reader in client.terminal.readers.list({"limit": 100}).auto_paging_iter():
        ...     print(reader.id)
    """

    object: Literal["list"] = "list"
    data: List[T] = Field(default_factory=list, description="Objects on this page.")
    has_more: bool = Field(default=False, description="Whether more objects exist after this page.")
    url: Optional[str] = Field(default=None, description="Endpoint path that produced this list.")

    _params: Dict[str, Any] = PrivateAttr(default_factory=dict)
    _fetch_page: Optional[Callable[[Dict[str, Any]], "ListObject[T]"]] = PrivateAttr(default=None)

    def bind(self, params: Dict[str, Any], fetch_page: Callable[[Dict[str, Any]], "ListObject[T]"]) -> "ListObject[T]":
        self._params = dict(params)
        self._fetch_page = fetch_page
        return self

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def auto_paging_iter(self) -> Iterator[T]:
        """Yield every object across this page and all following pages.

        Pages forward with ``starting_after=<last id>``. When the first page was
        requested with ``ending_before``, pages backward with
        ``ending_before=<first id>`` and yields each page in reverse order.
        """
        page: ListObject[T] = self
        backwards = self._params.get("ending_before") is not None and self._params.get("starting_after") is None
        while True:
            yield from (reversed(page.data) if backwards else page.data)
            if not page.has_more or not page.data or page._fetch_page is None:
                return
            params = dict(page._params)
            if backwards:
                params["ending_before"] = page.data[0].id  # type: ignore[attr-defined]
            else:
                params["starting_after"] = page.data[-1].id  # type: ignore[attr-defined]
            page = page._fetch_page(params)


class DeletedObject(BaseSchema):
    """Response of a DELETE endpoint."""

    id: str
    object: str
    deleted: bool = True
