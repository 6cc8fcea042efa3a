from typing import Any

from ...client import ApiClient
from ...models.refund import Refund
from ...models.refund_create import RefundCreate
from ...types import ApiResponse


def _get_kwargs(
    space_id: int,
    *,
    body: RefundCreate,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}
    headers["Accept"] = ApiClient.select_header_accept(["application/json;charset=utf-8"])
    headers["Content-Type"] = ApiClient.select_header_content_type(["application/json;charset=utf-8"])

    params: dict[str, Any] = {}
    params["spaceId"] = space_id

    _kwargs: dict[str, Any] = {
        "method": "POST",
        "resource_path": "/refund/refund",
        "query_params": params,
        "body": body,
        "header_params": headers,
        "response_type": Refund,
        "endpoint_path": "/refund/refund",
    }

    return _kwargs


def sync_detailed(
    space_id: int,
    *,
    client: ApiClient,
    body: RefundCreate,
) -> ApiResponse[Refund]:
    """Create

     This operation creates and executes a refund of a particular transaction.

    Args:
        space_id (int):
        body (RefundCreate): The refund object which should be created.

    Raises:
        errors.ApiError: If the server answers with an error status.
        errors.ApiConnectionError: If the request could not be sent or timed out.

    Returns:
        ApiResponse[Refund]
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
    body: RefundCreate,
) -> Refund:
    """Create

     This operation creates and executes a refund of a particular transaction.

    Returns:
        Refund
    """

    return sync_detailed(
        space_id=space_id,
        client=client,
        body=body,
    ).data
