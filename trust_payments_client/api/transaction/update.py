from typing import Any

from ...client import ApiClient
from ...models.transaction import Transaction
from ...models.transaction_pending import TransactionPending
from ...types import ApiResponse


def _get_kwargs(
    space_id: int,
    *,
    body: TransactionPending,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}
    headers["Accept"] = ApiClient.select_header_accept(["application/json;charset=utf-8"])
    headers["Content-Type"] = ApiClient.select_header_content_type(["application/json;charset=utf-8"])

    params: dict[str, Any] = {}
    params["spaceId"] = space_id

    _kwargs: dict[str, Any] = {
        "method": "POST",
        "resource_path": "/transaction/update",
        "query_params": params,
        "body": body,
        "header_params": headers,
        "response_type": Transaction,
        "endpoint_path": "/transaction/update",
    }

    return _kwargs


def sync_detailed(
    space_id: int,
    *,
    client: ApiClient,
    body: TransactionPending,
) -> ApiResponse[Transaction]:
    """Update

     This updates the entity with the given properties. Only those properties which should be updated can be
    provided. The 'id' and 'version' are required to identify the entity.

    Args:
        space_id (int):
        body (TransactionPending): The transaction object with the properties which should be updated.

    Raises:
        errors.VersioningError: If the transaction was changed since ``body.version`` was read.
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
    body: TransactionPending,
) -> Transaction:
    """Update

     This updates the entity with the given properties.

    Returns:
        Transaction
    """

    return sync_detailed(
        space_id=space_id,
        client=client,
        body=body,
    ).data
