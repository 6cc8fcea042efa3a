from enum import Enum


class ProductMeteredTierPricing(str, Enum):
    CHEAPEST_TIER_PRICING = "CHEAPEST_TIER_PRICING"
    INCREMENTAL_DISCOUNT_PRICING = "INCREMENTAL_DISCOUNT_PRICING"

    def __str__(self) -> str:
        return str(self.value)
