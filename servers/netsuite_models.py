import json
from typing import Any, Dict, Literal, Optional
from urllib.parse import quote

from pydantic import BaseModel, Field, ValidationError

from servers.errors import InvalidInputError
from servers.logger import logger

RECORD_PATH = "/services/rest/record/v1"
SUITEQL_PATH = "/services/rest/query/v1/suiteql"
METADATA_PATH = f"{RECORD_PATH}/metadata-catalog/"


def path_segment(value: str) -> str:
    """Percent-encodes one URL path segment so the signed URL is the one sent."""
    return quote(value, safe="")


class RawRequest(BaseModel):
    method: Literal["GET", "POST", "PATCH"] = Field(..., description="HTTP method")
    endpoint: str = Field(..., min_length=1, description="Path below the account base URL")
    body: Optional[Dict[str, Any]] = Field(None, description="JSON body, if any")


class RecordType(BaseModel):
    record_type: str = Field(..., min_length=1, description="Record type, e.g. 'customer'")

    @property
    def endpoint(self) -> str:
        return f"{RECORD_PATH}/{path_segment(self.record_type)}"


class RecordRef(RecordType):
    record_id: str = Field(..., min_length=1, description="Internal ID of the record")

    @property
    def endpoint(self) -> str:
        return f"{RECORD_PATH}/{path_segment(self.record_type)}/{path_segment(self.record_id)}"


class SuiteQLQuery(BaseModel):
    query: str = Field(..., min_length=1, description="SuiteQL query text")
    limit: int = Field(100, description="Page size, passed through to NetSuite")
    offset: int = Field(0, description="Row offset, passed through to NetSuite")

    def endpoint(self) -> str:
        return f"{SUITEQL_PATH}?limit={self.limit}&offset={self.offset}"


class RecordSearch(BaseModel):
    record_type: str = Field(..., min_length=1, description="Record type to select from")
    fields: str = Field("*", description="Comma separated column list")
    condition: Optional[str] = Field(None, description="WHERE clause without the keyword")
    order_by: Optional[str] = Field(None, description="ORDER BY clause without the keyword")
    limit: int = Field(50, description="Page size, passed through to NetSuite")

    def to_query(self) -> SuiteQLQuery:
        q = f"SELECT {self.fields or '*'} FROM {self.record_type}"
        if self.condition:
            q += f" WHERE {self.condition}"
        if self.order_by:
            q += f" ORDER BY {self.order_by}"
        return SuiteQLQuery(query=q, limit=self.limit)


def validated(model, **kwargs):
    """Builds a descriptor, reporting schema violations as InvalidInputError."""
    try:
        return model(**kwargs)
    except ValidationError as e:
        logger.warning("Rejected %s arguments: %s", model.__name__, e.error_count())
        raise InvalidInputError(f"Invalid arguments for {model.__name__}: {e}") from e


def parse_record_data(data: str) -> Dict[str, Any]:
    """
    Parses the JSON text a caller supplies as a record body.

    Args:
        data: JSON object as text, e.g. '{"companyName": "Acme"}'.

    Returns:
        The decoded object.

    Raises:
        InvalidInputError: If the text is not valid JSON or not a JSON object.
    """
    try:
        body = json.loads(data)
    except (TypeError, ValueError) as e:
        logger.warning("Rejected record data: %s", e)
        raise InvalidInputError(f"Malformed input: 'data' is not valid JSON ({e})") from e
    if not isinstance(body, dict):
        raise InvalidInputError(
            f"Malformed input: 'data' must be a JSON object, got {type(body).__name__}"
        )
    return body
