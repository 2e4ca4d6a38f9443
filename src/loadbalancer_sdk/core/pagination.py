# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""
Lazy, link-following traversal of paginated collections.

A :class:`Pager` is seeded with a start URL (query string included) and a page
constructor. Each step fetches one page, asks it whether it is empty and where
the next page lives, then hands it to the consumer. The next request is only
issued once the consumer asks for more, so nothing is fetched ahead of use.

States::

    READY(url) -> FETCHING -> READY(next_url) | EXHAUSTED | FAILED(error)

``EXHAUSTED`` and ``FAILED`` are terminal. A pager is owned by one logical
iteration; build a new one (i.e. call ``list()`` again) to restart.

Example::

    pager = client.flavors.list(FlavorListOpts(enabled=True, limit=50))
    for flavor in pager:
        print(flavor.id, flavor.name)

    # or page by page
    for page in client.flavors.list().pages():
        print(len(page.extract()), page.next_page_url())
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar
from urllib.parse import urljoin

from ._error_codes import DECODE_SHAPE_MISMATCH
from .errors import CancelledError, DecodeError, LinkMalformedError, LoadBalancerError, TransportError
from .results import RawResponse

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)

NO_CONTENT = 204


def extract_next_url(links: Any) -> Optional[str]:
    """
    Return the ``href`` of the ``rel == "next"`` entry of a link array.

    :param links: Decoded link container, e.g. ``[{"href": "...", "rel": "next"}]``.
    :return: The next URL, or ``None`` when there is no usable next link.
    :raises LinkMalformedError: If the container or the ``next`` entry is malformed.
    """
    if links is None:
        return None
    if not isinstance(links, list):
        raise LinkMalformedError(
            f"Pagination links must be a list, got {type(links).__name__}",
            details={"links": links},
        )
    for link in links:
        if not isinstance(link, dict):
            raise LinkMalformedError(
                f"Pagination link must be an object, got {type(link).__name__}",
                details={"link": link},
            )
        if link.get("rel") != "next":
            continue
        href = link.get("href")
        if not isinstance(href, str):
            raise LinkMalformedError("Next pagination link has no usable href", details={"link": link})
        return href or None
    return None


class Page(Generic[T]):
    """
    One fetched chunk of a collection.

    The base page has no continuation; subclasses decide emptiness, where the
    next page is and how records are extracted.

    :param response: Captured response for this page.
    :type response: :class:`~loadbalancer_sdk.core.results.RawResponse`
    """

    def __init__(self, response: RawResponse) -> None:
        self._response = response

    @property
    def response(self) -> RawResponse:
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def url(self) -> str:
        return self._response.url

    @property
    def body(self) -> Any:
        """Decoded JSON body. Decoded on every access; raises :class:`DecodeError`."""
        return self._response.json()

    def is_empty(self) -> bool:
        return self.status_code == NO_CONTENT or not self.extract()

    def next_page_url(self) -> Optional[str]:
        return None

    def extract(self) -> List[T]:
        raise NotImplementedError


class LinkedPage(Page[T]):
    """
    Page whose continuation is a ``rel="next"`` link in the body.

    Bodies look like::

        {"flavors": [{...}, {...}],
         "flavor_links": [{"href": "https://.../flavors?marker=x", "rel": "next"}]}

    :param response: Captured response for this page.
    :param records_key: Key of the record array, e.g. ``"flavors"``.
    :type records_key: :class:`str`
    :param links_key: Key of the link array, e.g. ``"flavor_links"``.
    :type links_key: :class:`str`
    :param decode: Converts one JSON object into a typed record.
    """

    def __init__(
        self,
        response: RawResponse,
        *,
        records_key: str,
        links_key: str,
        decode: Callable[[Any], T],
    ) -> None:
        super().__init__(response)
        self.records_key = records_key
        self.links_key = links_key
        self._decode = decode

    def _object_body(self) -> dict:
        body = self.body
        if not isinstance(body, dict):
            raise DecodeError(
                f"Expected a JSON object for a '{self.records_key}' page, got {type(body).__name__}",
                subcode=DECODE_SHAPE_MISMATCH,
            )
        return body

    def is_empty(self) -> bool:
        # 204 carries no body to decode
        if self.status_code == NO_CONTENT:
            return True
        return len(self.extract()) == 0

    def next_page_url(self) -> Optional[str]:
        if self.status_code == NO_CONTENT:
            return None
        href = extract_next_url(self._object_body().get(self.links_key))
        if href is None:
            return None
        return urljoin(self.url, href) if self.url else href

    def extract(self) -> List[T]:
        """
        Decode the records of this page.

        :raises DecodeError: If the records value is not an array or an entry
            does not match the record shape.
        """
        if self.status_code == NO_CONTENT:
            return []
        items = self._object_body().get(self.records_key)
        if items is None:
            return []
        if not isinstance(items, list):
            raise DecodeError(
                f"'{self.records_key}' must be an array, got {type(items).__name__}",
                subcode=DECODE_SHAPE_MISMATCH,
            )
        return [self._decode(item) for item in items]


class PagerState(str, Enum):
    READY = "ready"
    FETCHING = "fetching"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class Pager(Generic[T]):
    """
    Stateful lazy iterator over the pages of a collection.

    :param fetch: Issues a GET against a URL and returns the captured response.
        Raises :class:`~loadbalancer_sdk.core.errors.LoadBalancerError` on failure.
    :param url: Start URL, including any query string.
    :type url: :class:`str`
    :param create_page: Builds a :class:`Page` from a captured response.
    :param error: Pre-existing failure (e.g. query encoding); the pager starts
        in ``FAILED`` and raises it on first use.
    """

    def __init__(
        self,
        fetch: Callable[[str], RawResponse],
        url: str,
        create_page: Callable[[RawResponse], Page[T]],
        *,
        error: Optional[LoadBalancerError] = None,
    ) -> None:
        self._fetch = fetch
        self._url = url
        self._create_page = create_page
        self._error: Optional[LoadBalancerError] = error
        self._state = PagerState.FAILED if error is not None else PagerState.READY
        self._fetch_count = 0

    @property
    def state(self) -> PagerState:
        return self._state

    @property
    def url(self) -> str:
        """URL of the next page to fetch (the last fetched URL once terminal)."""
        return self._url

    @property
    def error(self) -> Optional[LoadBalancerError]:
        return self._error

    @property
    def fetch_count(self) -> int:
        return self._fetch_count

    def _fail(self, error: LoadBalancerError) -> LoadBalancerError:
        self._state = PagerState.FAILED
        self._error = error
        return error

    def cancel(self) -> None:
        """Stop traversal; the next advancement raises :class:`CancelledError`."""
        if self._state in (PagerState.EXHAUSTED, PagerState.FAILED):
            return
        self._fail(CancelledError(f"Pagination cancelled before fetching {self._url}", details={"url": self._url}))

    def _advance(self) -> Optional[Page[T]]:
        self._state = PagerState.FETCHING
        try:
            raw = self._fetch(self._url)
        except LoadBalancerError as exc:
            self._fail(exc)
            raise
        except KeyboardInterrupt:
            self._fail(CancelledError(f"Fetch of {self._url} was interrupted", details={"url": self._url}))
            raise
        except Exception as exc:
            error = TransportError(f"Fetch of {self._url} failed: {exc}", details={"url": self._url})
            error.__cause__ = exc
            self._fail(error)
            raise
        self._fetch_count += 1

        page = self._create_page(raw)
        try:
            if page.is_empty():
                self._state = PagerState.EXHAUSTED
                return None
            next_url = page.next_page_url()
        except LoadBalancerError as exc:
            self._fail(exc)
            raise

        if not next_url:
            self._state = PagerState.EXHAUSTED
        elif next_url == self._url:
            _LOGGER.warning("Next page link repeats the current URL %s; stopping pagination", self._url)
            self._state = PagerState.EXHAUSTED
        else:
            self._url = next_url
            self._state = PagerState.READY
        return page

    def pages(self) -> Iterator[Page[T]]:
        """
        Yield pages in server link order until exhaustion.

        :raises LoadBalancerError: The first transport, status or decode failure.
            Pages already yielded remain usable.
        """
        while True:
            if self._state is PagerState.FAILED:
                raise self._error
            if self._state is PagerState.EXHAUSTED:
                return
            if self._state is PagerState.FETCHING:
                raise RuntimeError("Pager is already being advanced; pagers are single-owner")
            page = self._advance()
            if page is None:
                return
            yield page

    def __iter__(self) -> Iterator[T]:
        for page in self.pages():
            yield from page.extract()

    def each_page(self, handler: Callable[[Page[T]], bool]) -> None:
        """
        Call ``handler`` for every page; a falsy return value stops traversal.

        Stopping early leaves the pager ``READY`` at the next URL.
        """
        for page in self.pages():
            if not handler(page):
                return

    def all_records(self) -> List[T]:
        """Drain the pager and return every record in order."""
        return list(self)

    def __repr__(self) -> str:
        return f"Pager(state={self._state.value!r}, url={self._url!r}, fetch_count={self._fetch_count})"


__all__ = [
    "extract_next_url",
    "Page",
    "LinkedPage",
    "PagerState",
    "Pager",
]
