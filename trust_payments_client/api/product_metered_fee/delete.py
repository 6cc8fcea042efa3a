from typing import Any

from ...client import ApiClient
from ...types import ApiResponse


def _get_kwargs(
    space_id: int,
    *,
    id: int,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}
    headers["Content-Type"] = ApiClient.select_header_content_type(["application/json;charset=utf-8"])

    params: dict[str, Any] = {}
    params["spaceId"] = space_id

    _kwargs: dict[str, Any] = {
        "method": "POST",
        "resource_path": "/product-metered-fee/delete",
        "query_params": params,
        "body": id,
        "header_params": headers,
        "endpoint_path": "/product-metered-fee/delete",
    }

    return _kwargs


def sync_detailed(
    space_id: int,
    *,
    client: ApiClient,
    id: int,
) -> ApiResponse[Any]:
    """Delete

     Deletes the entity with the given id.

    Args:
        space_id (int):
        id (int):

    Raises:
        errors.ApiError: If the server answers with an error status.
        errors.ApiConnectionError: If the request could not be sent or timed out.

    Returns:
        ApiResponse[Any]
    """

    kwargs = _get_kwargs(
        space_id=space_id,
        id=id,
    )

    return client.call_api(**kwargs)
