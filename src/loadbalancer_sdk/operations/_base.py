# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""Generic list/create/get/update/delete over one load balancer resource collection."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, Tuple, TypeVar

from ..common.constants import LBAAS_PATH, UPDATE_OK_CODES
from ..core.encoding import (
    CreateOptsBuilder,
    ListOptsBuilder,
    UpdateOptsBuilder,
    build_query_string,
    build_request_body,
)
from ..core.errors import HttpStatusError, LoadBalancerError
from ..core.pagination import LinkedPage, Pager
from ..core.results import CreateResult, DeleteResult, GetResult, RawResponse, RequestMetadata, UpdateResult

if TYPE_CHECKING:
    from ..client import LoadBalancerClient

T = TypeVar("T")


@dataclass(frozen=True)
class ResourceDefinition(Generic[T]):
    """
    Where a resource lives and how its documents are shaped.

    :param name: Operation prefix for telemetry, e.g. ``"flavors"``.
    :param path: Collection path segment under ``lbaas``.
    :param request_key: Envelope key of create/update bodies.
    :param response_key: Envelope key of single-resource responses.
    :param collection_key: Key of the record array in list pages.
    :param links_key: Key of the pagination link array in list pages.
    :param decode: Builds a typed record from a JSON object.
    """

    name: str
    path: str
    request_key: str
    response_key: str
    collection_key: str
    links_key: str
    decode: Callable[[Any], T]


def _error_metadata(error: LoadBalancerError) -> RequestMetadata:
    return RequestMetadata(
        global_request_id=error.details.get("global_request_id"),
        service_request_id=error.details.get("request_id"),
        http_status_code=error.status_code,
    )


class _ResourceOperations(Generic[T]):
    """
    Resource operations shared by every load balancer namespace.

    Nothing here raises for request failures: encoding, transport and status
    errors are stored in the returned envelope (or pager) and surface when the
    caller extracts.

    :param client: Parent client.
    :type client: ~loadbalancer_sdk.client.LoadBalancerClient
    """

    definition: ResourceDefinition[T]

    def __init__(self, client: "LoadBalancerClient") -> None:
        self._client = client

    def _root_url(self, od) -> str:
        return od.service_url(LBAAS_PATH, self.definition.path)

    def _resource_url(self, od, resource_id: str) -> str:
        return od.service_url(LBAAS_PATH, self.definition.path, resource_id)

    def _operation(self, verb: str) -> str:
        return f"{self.definition.name}.{verb}"

    def _request_body(self, opts: Any, builder: type) -> Any:
        if isinstance(opts, builder):
            return opts.to_request_body()
        return build_request_body(opts, self.definition.request_key)

    def _send(
        self, verb: str, method: str, url_for: Callable[[Any], str], body: Any = None, ok_codes=None
    ) -> Tuple[Optional[RawResponse], Optional[LoadBalancerError], Optional[RequestMetadata]]:
        with self._client._scoped_service() as od:
            try:
                raw, metadata = od._request(
                    method,
                    url_for(od),
                    json=body,
                    ok_codes=ok_codes,
                    operation=self._operation(verb),
                    resource=self.definition.path,
                )
            except HttpStatusError as exc:
                return exc.response, exc, _error_metadata(exc)
            except LoadBalancerError as exc:
                return None, exc, _error_metadata(exc)
        return raw, None, metadata

    def list(self, opts: Optional[ListOptsBuilder] = None) -> Pager[T]:
        """
        Lazily list the collection.

        No request is made until the pager is iterated. A query that cannot be
        encoded produces a pager that raises the encoding error on first use.

        :param opts: Filtering, sorting and paging options.
        :return: Pager over typed records.
        :rtype: ~loadbalancer_sdk.core.pagination.Pager
        """
        d = self.definition
        od = self._client._get_service()
        url = self._root_url(od)
        create_page = partial(LinkedPage, records_key=d.collection_key, links_key=d.links_key, decode=d.decode)
        operation = self._operation("list")

        def fetch(page_url: str) -> RawResponse:
            with od._call_scope():
                return od._get_page(page_url, operation=operation, resource=d.path)

        if opts is not None:
            try:
                url += opts.to_query_string() if isinstance(opts, ListOptsBuilder) else build_query_string(opts)
            except LoadBalancerError as exc:
                return Pager(fetch, url, create_page, error=exc)
        return Pager(fetch, url, create_page)

    def create(self, opts: CreateOptsBuilder) -> CreateResult[T]:
        """
        Create a resource (``POST`` to the collection).

        :param opts: Create options.
        :return: Envelope; call ``.extract()`` for the created record.
        """
        d = self.definition
        try:
            body = self._request_body(opts, CreateOptsBuilder)
        except LoadBalancerError as exc:
            return CreateResult(d.decode, d.response_key, error=exc)
        raw, error, metadata = self._send("create", "post", self._root_url, body)
        return CreateResult(d.decode, d.response_key, response=raw, error=error, metadata=metadata)

    def get(self, resource_id: str) -> GetResult[T]:
        """
        Fetch one resource.

        :param resource_id: Resource identifier.
        :return: Envelope; call ``.extract()`` for the record.
        """
        d = self.definition
        raw, error, metadata = self._send("get", "get", lambda od: self._resource_url(od, resource_id))
        return GetResult(d.decode, d.response_key, response=raw, error=error, metadata=metadata)

    def update(self, resource_id: str, opts: UpdateOptsBuilder) -> UpdateResult[T]:
        """
        Replace the mutable fields of a resource (``PUT``).

        :param resource_id: Resource identifier.
        :param opts: Update options; every field is sent.
        :return: Envelope; call ``.extract()`` for the updated record.
        """
        d = self.definition
        try:
            body = self._request_body(opts, UpdateOptsBuilder)
        except LoadBalancerError as exc:
            return UpdateResult(d.decode, d.response_key, error=exc)
        raw, error, metadata = self._send(
            "update", "put", lambda od: self._resource_url(od, resource_id), body, UPDATE_OK_CODES
        )
        return UpdateResult(d.decode, d.response_key, response=raw, error=error, metadata=metadata)

    def delete(self, resource_id: str) -> DeleteResult:
        """
        Delete a resource.

        :param resource_id: Resource identifier.
        :return: Envelope; call ``.extract_err()`` to check for failure.
        """
        raw, error, metadata = self._send("delete", "delete", lambda od: self._resource_url(od, resource_id))
        return DeleteResult(response=raw, error=error, metadata=metadata)


__all__ = ["ResourceDefinition"]
