from typing import Any

from ...client import ApiClient
from ...models.entity_query import EntityQuery
from ...models.transaction import Transaction
from ...types import ApiResponse


def _get_kwargs(
    space_id: int,
    *,
    body: EntityQuery,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}
    headers["Accept"] = ApiClient.select_header_accept(["application/json;charset=utf-8"])
    headers["Content-Type"] = ApiClient.select_header_content_type(["application/json;charset=utf-8"])

    params: dict[str, Any] = {}
    params["spaceId"] = space_id

    _kwargs: dict[str, Any] = {
        "method": "POST",
        "resource_path": "/transaction/search",
        "query_params": params,
        "body": body,
        "header_params": headers,
        "response_type": list[Transaction],
        "endpoint_path": "/transaction/search",
    }

    return _kwargs


def sync_detailed(
    space_id: int,
    *,
    client: ApiClient,
    body: EntityQuery,
) -> ApiResponse[list[Transaction]]:
    """Search

     Searches for the entities as specified by the given query.

    Args:
        space_id (int):
        body (EntityQuery): The query restricts the transactions which are returned by the search.

    Raises:
        errors.ApiError: If the server answers with an error status.
        errors.ApiConnectionError: If the request could not be sent or timed out.

    Returns:
        ApiResponse[list[Transaction]]
    """

    kwargs = _get_kwargs(
        space_id=space_id,
        body=body,
    )

    return client.call_api(**kwargs)


def sync(
    space_id: int,
    *,
    client: ApiClient,
    body: EntityQuery,
) -> list[Transaction]:
    """Search

     Searches for the entities as specified by the given query.

    Returns:
        list[Transaction]
    """

    return sync_detailed(
        space_id=space_id,
        client=client,
        body=body,
    ).data
