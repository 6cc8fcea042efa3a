"""Contains methods for accessing the API"""

from typing import Any, Union

from ..client import ApiClient
from ..models.entity_query import EntityQuery
from ..models.entity_query_filter import EntityQueryFilter
from ..models.product_metered_fee_update import ProductMeteredFeeUpdate
from ..models.refund_create import RefundCreate
from ..models.transaction_create import TransactionCreate
from ..models.transaction_pending import TransactionPending
from ..types import UNSET, Unset


class API:
    """All services of one client. Services are plain wrappers, build as many as needed."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.product_metered_fee = ProductMeteredFeeService(client)
        self.transaction = TransactionService(client)
        self.refund = RefundService(client)


class ProductMeteredFeeService:
    def __init__(self, client: ApiClient):
        self.client = client

    def count(self, space_id: int, filter_: Union[Unset, EntityQueryFilter] = UNSET) -> int:
        from .product_metered_fee import count

        return count.sync(space_id, client=self.client, filter_=filter_)

    def create(self, space_id: int, body: ProductMeteredFeeUpdate):
        from .product_metered_fee import create

        return create.sync(space_id, client=self.client, body=body)

    def delete(self, space_id: int, id: int) -> Any:
        from .product_metered_fee import delete

        return delete.sync_detailed(space_id, client=self.client, id=id)

    def read(self, space_id: int, id: int):
        from .product_metered_fee import read

        return read.sync(space_id, id, client=self.client)

    def search(self, space_id: int, query: EntityQuery):
        from .product_metered_fee import search

        return search.sync(space_id, client=self.client, body=query)

    def update(self, space_id: int, body: ProductMeteredFeeUpdate):
        from .product_metered_fee import update

        return update.sync(space_id, client=self.client, body=body)


class TransactionService:
    def __init__(self, client: ApiClient):
        self.client = client

    def count(self, space_id: int, filter_: Union[Unset, EntityQueryFilter] = UNSET) -> int:
        from .transaction import count

        return count.sync(space_id, client=self.client, filter_=filter_)

    def create(self, space_id: int, body: TransactionCreate):
        from .transaction import create

        return create.sync(space_id, client=self.client, body=body)

    def read(self, space_id: int, id: int):
        from .transaction import read

        return read.sync(space_id, id, client=self.client)

    def search(self, space_id: int, query: EntityQuery):
        from .transaction import search

        return search.sync(space_id, client=self.client, body=query)

    # raises VersioningError when body.version is stale
    def update(self, space_id: int, body: TransactionPending):
        from .transaction import update

        return update.sync(space_id, client=self.client, body=body)


class RefundService:
    def __init__(self, client: ApiClient):
        self.client = client

    def count(self, space_id: int, filter_: Union[Unset, EntityQueryFilter] = UNSET) -> int:
        from .refund import count

        return count.sync(space_id, client=self.client, filter_=filter_)

    def read(self, space_id: int, id: int):
        from .refund import read

        return read.sync(space_id, id, client=self.client)

    def refund(self, space_id: int, body: RefundCreate):
        from .refund import refund

        return refund.sync(space_id, client=self.client, body=body)

    def search(self, space_id: int, query: EntityQuery):
        from .refund import search

        return search.sync(space_id, client=self.client, body=query)


__all__ = ["API", "ProductMeteredFeeService", "RefundService", "TransactionService"]
