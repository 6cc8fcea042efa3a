from typing import Any, Union

from ...client import ApiClient
from ...models.entity_query_filter import EntityQueryFilter
from ...types import UNSET, ApiResponse, Unset


def _get_kwargs(
    space_id: int,
    *,
    filter_: Union[Unset, EntityQueryFilter] = UNSET,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}
    headers["Accept"] = ApiClient.select_header_accept(["application/json;charset=utf-8"])
    headers["Content-Type"] = ApiClient.select_header_content_type(["application/json;charset=utf-8"])

    params: dict[str, Any] = {}
    params["spaceId"] = space_id

    _kwargs: dict[str, Any] = {
        "method": "POST",
        "resource_path": "/product-metered-fee/count",
        "query_params": params,
        "header_params": headers,
        "response_type": int,
        "endpoint_path": "/product-metered-fee/count",
    }

    if not isinstance(filter_, Unset):
        _kwargs["body"] = filter_

    return _kwargs


def sync_detailed(
    space_id: int,
    *,
    client: ApiClient,
    filter_: Union[Unset, EntityQueryFilter] = UNSET,
) -> ApiResponse[int]:
    """Count

     Counts the number of items in the database as restricted by the given filter.

    Args:
        space_id (int):
        filter_ (Union[Unset, EntityQueryFilter]): The filter which restricts the entities which are used to calculate
            the count.

    Raises:
        errors.ApiError: If the server answers with an error status.
        errors.ApiConnectionError: If the request could not be sent or timed out.

    Returns:
        ApiResponse[int]
    """

    kwargs = _get_kwargs(
        space_id=space_id,
        filter_=filter_,
    )

    return client.call_api(**kwargs)


def sync(
    space_id: int,
    *,
    client: ApiClient,
    filter_: Union[Unset, EntityQueryFilter] = UNSET,
) -> int:
    """Count

     Counts the number of items in the database as restricted by the given filter.

    Returns:
        int
    """

    return sync_detailed(
        space_id=space_id,
        client=client,
        filter_=filter_,
    ).data
