import json
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from servers.config import settings
from servers.logger import logger
from servers.netsuite_client import NetSuiteClient
from servers.netsuite_models import parse_record_data

mcp = FastMCP("netsuite", log_level=settings.log_level)

client = NetSuiteClient(settings.credentials(), api_host=settings.api_host, timeout=settings.timeout)


def to_text(result: Any) -> str:
    return json.dumps(result, indent=2)


@mcp.tool()
async def suiteql_query(query: str, limit: int = 100, offset: int = 0) -> str:
    """
    Execute a SuiteQL query against NetSuite.

    Args:
        query (str): The SuiteQL query (e.g., "SELECT id, companyname FROM customer WHERE isinactive = 'F'").
        limit (int): Maximum number of rows to return. Defaults to 100.
        offset (int): Number of rows to skip. Defaults to 0.

    Returns:
        str: The NetSuite response as JSON text, with the rows under 'items' and
             paging fields such as 'count', 'hasMore' and 'totalResults'.
    """
    return to_text(await client.suiteql(query, limit=limit, offset=offset))


@mcp.tool()
async def get_record(recordType: str, id: str, expandSubResources: bool = False) -> str:
    """
    Get a NetSuite record by type and ID.

    Args:
        recordType (str): Record type (e.g., 'customer', 'salesOrder', 'invoice').
        id (str): Internal ID of the record.
        expandSubResources (bool): Inline sublists and subrecords. Defaults to False.

    Returns:
        str: The record as JSON text.
    """
    return to_text(await client.get_record(recordType, id, expand_sub_resources=expandSubResources))


@mcp.tool()
async def search_records(
    recordType: str,
    fields: str = "*",
    condition: Optional[str] = None,
    orderBy: Optional[str] = None,
    limit: int = 50,
) -> str:
    """
    Search NetSuite records via SuiteQL.

    Args:
        recordType (str): Record type to select from (e.g., 'customer').
        fields (str): Comma separated columns to return. Defaults to '*'.
        condition (Optional[str]): WHERE clause without the keyword (e.g., "email LIKE '%@acme.com'").
        orderBy (Optional[str]): ORDER BY clause without the keyword (e.g., 'id DESC').
        limit (int): Maximum number of rows to return. Defaults to 50.

    Returns:
        str: The SuiteQL response as JSON text.
    """
    result = await client.search_records(recordType, fields=fields, condition=condition, order_by=orderBy, limit=limit)
    return to_text(result)


@mcp.tool()
async def create_record(recordType: str, data: str) -> str:
    """
    Create a new NetSuite record.

    Args:
        recordType (str): Record type to create (e.g., 'customer').
        data (str): The record body as a JSON object string (e.g., '{"companyName": "Acme", "subsidiary": {"id": "1"}}').

    Returns:
        str: JSON text. NetSuite answers with no body, so this holds the status code
             and the 'location' URL of the new record.
    """
    return to_text(await client.create_record(recordType, parse_record_data(data)))


@mcp.tool()
async def update_record(recordType: str, id: str, data: str) -> str:
    """
    Update a NetSuite record.

    Args:
        recordType (str): Record type (e.g., 'customer').
        id (str): Internal ID of the record to update.
        data (str): The fields to change as a JSON object string.

    Returns:
        str: JSON text with the status code and 'location' of the updated record.
    """
    return to_text(await client.update_record(recordType, id, parse_record_data(data)))


@mcp.tool()
async def list_metadata(recordType: Optional[str] = None) -> str:
    """
    Get NetSuite REST API metadata.

    Args:
        recordType (Optional[str]): Record type to describe. Lists the whole catalog when omitted.

    Returns:
        str: The metadata catalog, or the metadata of one record type, as JSON text.
    """
    return to_text(await client.list_metadata(recordType))


def main():
    logger.info("NetSuite MCP Server running on stdio")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
