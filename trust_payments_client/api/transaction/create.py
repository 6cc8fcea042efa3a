from typing import Any

from ...client import ApiClient
from ...models.transaction import Transaction
from ...models.transaction_create import TransactionCreate
from ...types import ApiResponse


def _get_kwargs(
    space_id: int,
    *,
    body: TransactionCreate,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}
    headers["Accept"] = ApiClient.select_header_accept(["application/json;charset=utf-8"])
    headers["Content-Type"] = ApiClient.select_header_content_type(["application/json;charset=utf-8"])

    params: dict[str, Any] = {}
    params["spaceId"] = space_id

    _kwargs: dict[str, Any] = {
        "method": "POST",
        "resource_path": "/transaction/create",
        "query_params": params,
        "body": body,
        "header_params": headers,
        "response_type": Transaction,
        "endpoint_path": "/transaction/create",
    }

    return _kwargs


def sync_detailed(
    space_id: int,
    *,
    client: ApiClient,
    body: TransactionCreate,
) -> ApiResponse[Transaction]:
    """Create

     Creates the entity with the given properties.

    Args:
        space_id (int):
        body (TransactionCreate): The transaction object which should be created.

    Raises:
        errors.ApiError: If the server answers with an error status.
        errors.ApiConnectionError: If the request could not be sent or timed out.

    Returns:
        ApiResponse[Transaction]
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
    body: TransactionCreate,
) -> Transaction:
    """Create

     Creates the entity with the given properties.

    Returns:
        Transaction
    """

    return sync_detailed(
        space_id=space_id,
        client=client,
        body=body,
    ).data
