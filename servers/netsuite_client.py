from functools import partial
from typing import Any, Dict, Optional

import anyio
import requests

from servers.config import DEFAULT_API_HOST
from servers.errors import InvalidResponseError, NetSuiteAPIError
from servers.logger import logger
from servers.netsuite_auth import Credentials, OAuthSigner
from servers.netsuite_models import (
    METADATA_PATH,
    RawRequest,
    RecordRef,
    RecordSearch,
    RecordType,
    SuiteQLQuery,
    path_segment,
    validated,
)


class NetSuiteClient:
    """Maps record, query and metadata operations onto signed REST calls."""

    def __init__(self, credentials: Credentials, api_host: str = DEFAULT_API_HOST,
                 timeout: Optional[float] = None):
        self.credentials = credentials
        self.signer = OAuthSigner(credentials)
        self.base_url = f"https://{credentials.account_id}.{api_host}"
        self.timeout = timeout

    async def _send(self, req: RawRequest, extra_headers: Optional[Dict[str, str]] = None,
                    error_prefix: str = "NetSuite API error") -> Any:
        url = f"{self.base_url}{req.endpoint}"
        headers = {
            "Authorization": self.signer.authorization_header(req.method, url),
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if extra_headers:
            headers.update(extra_headers)

        logger.info("NetSuite %s %s", req.method, req.endpoint)
        kwargs: Dict[str, Any] = {"headers": headers}
        if req.body is not None:
            kwargs["json"] = req.body
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        # requests blocks; run it off the event loop
        response = await anyio.to_thread.run_sync(partial(requests.request, req.method, url, **kwargs))

        if not 200 <= response.status_code < 300:
            logger.warning("NetSuite %s %s failed with %s", req.method, req.endpoint, response.status_code)
            raise NetSuiteAPIError(response.status_code, response.text, prefix=error_prefix)

        if not response.content:
            # create/update answer 204 with the new record URL in Location
            return {"status_code": response.status_code, "location": response.headers.get("Location")}
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(response.status_code, response.text, cause=e) from e

    async def request(self, method: str, endpoint: str, body: Optional[Dict[str, Any]] = None) -> Any:
        return await self._send(validated(RawRequest, method=method, endpoint=endpoint, body=body))

    async def suiteql(self, query: str, limit: int = 100, offset: int = 0) -> Any:
        """
        Runs a SuiteQL query. Always a POST with 'Prefer: transient'.

        Args:
            query: SuiteQL text.
            limit: Page size, passed through unchanged.
            offset: Row offset, passed through unchanged.

        Returns:
            The parsed NetSuite response (items, count, hasMore, ...).
        """
        q = validated(SuiteQLQuery, query=query, limit=limit, offset=offset)
        req = RawRequest(method="POST", endpoint=q.endpoint(), body={"q": q.query})
        return await self._send(req, extra_headers={"Prefer": "transient"}, error_prefix="SuiteQL error")

    async def get_record(self, record_type: str, record_id: str, expand_sub_resources: bool = False) -> Any:
        endpoint = validated(RecordRef, record_type=record_type, record_id=record_id).endpoint
        if expand_sub_resources:
            endpoint += "?expandSubResources=true"
        return await self._send(RawRequest(method="GET", endpoint=endpoint))

    async def search_records(self, record_type: str, fields: str = "*", condition: Optional[str] = None,
                             order_by: Optional[str] = None, limit: int = 50) -> Any:
        search = validated(
            RecordSearch,
            record_type=record_type,
            fields=fields,
            condition=condition,
            order_by=order_by,
            limit=limit,
        )
        q = search.to_query()
        return await self.suiteql(q.query, limit=q.limit, offset=q.offset)

    async def create_record(self, record_type: str, body: Dict[str, Any]) -> Any:
        endpoint = validated(RecordType, record_type=record_type).endpoint
        return await self._send(validated(RawRequest, method="POST", endpoint=endpoint, body=body))

    async def update_record(self, record_type: str, record_id: str, body: Dict[str, Any]) -> Any:
        endpoint = validated(RecordRef, record_type=record_type, record_id=record_id).endpoint
        return await self._send(validated(RawRequest, method="PATCH", endpoint=endpoint, body=body))

    async def list_metadata(self, record_type: Optional[str] = None) -> Any:
        endpoint = f"{METADATA_PATH}{path_segment(record_type)}" if record_type else METADATA_PATH
        return await self._send(RawRequest(method="GET", endpoint=endpoint))
