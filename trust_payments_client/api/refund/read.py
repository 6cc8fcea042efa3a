from typing import Any

from ...client import ApiClient
from ...models.refund import Refund
from ...types import ApiResponse


def _get_kwargs(
    space_id: int,
    id: int,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}
    headers["Accept"] = ApiClient.select_header_accept(["application/json;charset=utf-8"])

    params: dict[str, Any] = {}
    params["spaceId"] = space_id
    params["id"] = id

    _kwargs: dict[str, Any] = {
        "method": "GET",
        "resource_path": "/refund/read",
        "query_params": params,
        "header_params": headers,
        "response_type": Refund,
        "endpoint_path": "/refund/read",
    }

    return _kwargs


def sync_detailed(
    space_id: int,
    id: int,
    *,
    client: ApiClient,
) -> ApiResponse[Refund]:
    """Read

     Reads the entity with the given 'id' and returns it.

    Args:
        space_id (int):
        id (int): The id of the refund which should be returned.

    Raises:
        errors.ApiError: If the server answers with an error status.
        errors.ApiConnectionError: If the request could not be sent or timed out.

    Returns:
        ApiResponse[Refund]
    """

    kwargs = _get_kwargs(
        space_id=space_id,
        id=id,
    )

    return client.call_api(**kwargs)


def sync(
    space_id: int,
    id: int,
    *,
    client: ApiClient,
) -> Refund:
    """Read

     Reads the entity with the given 'id' and returns it.

    Args:
        space_id (int):
        id (int): The id of the refund which should be returned.

    Raises:
        errors.ApiError: If the server answers with an error status.
        errors.ApiConnectionError: If the request could not be sent or timed out.

    Returns:
        Refund
    """

    return sync_detailed(
        space_id=space_id,
        id=id,
        client=client,
    ).data
