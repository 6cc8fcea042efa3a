"""Contains all the data models used in inputs/outputs"""

from ._base import Model, model_field
from .creation_entity_state import CreationEntityState
from .criteria_operator import CriteriaOperator
from .database_translated_string import DatabaseTranslatedString
from .database_translated_string_item import DatabaseTranslatedStringItem
from .entity_query import EntityQuery
from .entity_query_filter import EntityQueryFilter
from .entity_query_filter_type import EntityQueryFilterType
from .entity_query_order_by import EntityQueryOrderBy
from .entity_query_order_by_type import EntityQueryOrderByType
from .line_item import LineItem
from .line_item_type import LineItemType
from .product_fee_type import ProductFeeType
from .product_metered_fee import ProductMeteredFee
from .product_metered_fee_update import ProductMeteredFeeUpdate
from .product_metered_tier_pricing import ProductMeteredTierPricing
from .refund import Refund
from .refund_create import RefundCreate
from .refund_state import RefundState
from .refund_type import RefundType
from .subscription_metric import SubscriptionMetric
from .subscription_product_component import SubscriptionProductComponent
from .transaction import Transaction
from .transaction_create import TransactionCreate
from .transaction_pending import TransactionPending
from .transaction_state import TransactionState

__all__ = (
    "CreationEntityState",
    "CriteriaOperator",
    "DatabaseTranslatedString",
    "DatabaseTranslatedStringItem",
    "EntityQuery",
    "EntityQueryFilter",
    "EntityQueryFilterType",
    "EntityQueryOrderBy",
    "EntityQueryOrderByType",
    "LineItem",
    "LineItemType",
    "Model",
    "ProductFeeType",
    "ProductMeteredFee",
    "ProductMeteredFeeUpdate",
    "ProductMeteredTierPricing",
    "Refund",
    "RefundCreate",
    "RefundState",
    "RefundType",
    "SubscriptionMetric",
    "SubscriptionProductComponent",
    "Transaction",
    "TransactionCreate",
    "TransactionPending",
    "TransactionState",
    "model_field",
)
