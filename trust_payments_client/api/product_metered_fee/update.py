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
        "resource_path": "/product-metered-fee/update",
        "query_params": params,
        "body": body,
        "header_params": headers,
        "response_type": ProductMeteredFee,
        "endpoint_path": "/product-metered-fee/update",
    }

    return _kwargs


def sync_detailed(
    space_id: int,
    *,
    client: ApiClient,
    body: ProductMeteredFeeUpdate,
) -> ApiResponse[ProductMeteredFee]:
    """Update

     This updates the entity with the given properties. Only those properties which should be updated can be
    provided. The 'id' and 'version' are required to identify the entity.

    Args:
        space_id (int):
        body (ProductMeteredFeeUpdate): The metered fee object with all the properties which should be updated.

    Raises:
        errors.VersioningError: If the fee was changed since ``body.version`` was read.
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
    """Update

     This updates the entity with the given properties.

    Returns:
        ProductMeteredFee
    """

    return sync_detailed(
        space_id=space_id,
        client=client,
        body=body,
    ).data
