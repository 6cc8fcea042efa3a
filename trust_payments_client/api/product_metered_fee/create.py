from typing import Any

from ...client import ApiClient
from ...models.product_metered_fee import ProductMeteredFee
from ...models.product_metered_fee_update import ProductMeteredFeeUpdate
from ...types import ApiResponse


def _get_kwargs(
    space_id: int,
    *,
    body: ProductMeteredFeeUpdate,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}
    headers["Accept"] = ApiClient.select_header_accept(["application/json;charset=utf-8"])
    headers["Content-Type"] = ApiClient.select_header_content_type(["application/json;charset=utf-8"])

    params: dict[str, Any] = {}
    params["spaceId"] = space_id

    _kwargs: dict[str, Any] = {
        "method": "POST",
        "resource_path": "/product-metered-fee/create",
        "query_params": params,
        "body": body,
        "header_params": headers,
        "response_type": ProductMeteredFee,
        "endpoint_path": "/product-metered-fee/create",
    }

    return _kwargs


def sync_detailed(
    space_id: int,
    *,
    client: ApiClient,
    body: ProductMeteredFeeUpdate,
) -> ApiResponse[ProductMeteredFee]:
    """Create

     Creates the entity with the given properties.

    Args:
        space_id (int):
        body (ProductMeteredFeeUpdate): The metered fee object with the properties which should be created.

    Raises:
        errors.ApiError: If the server answers with an error status.
        errors.ApiConnectionError: If the request could not be sent or timed out.

    Returns:
        ApiResponse[ProductMeteredFee]
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
    body: ProductMeteredFeeUpdate,
) -> ProductMeteredFee:
    """Create

     Creates the entity with the given properties.

    Returns:
        ProductMeteredFee
    """

    return sync_detailed(
        space_id=space_id,
        client=client,
        body=body,
    ).data
