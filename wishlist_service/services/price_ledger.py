"""
Price Ledger
Records webhook price observations and compares prices
against a product's recorded history.
"""

import logging
import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from wishlist_service.errors import ValidationError
from wishlist_service.models import ProductPriceHistory, utcnow

logger = logging.getLogger(__name__)


def parse_price(value):
    """Parse an externally supplied price (number or numeric string) into a Decimal."""
    if isinstance(value, bool):
        raise ValidationError('Price must be a non-negative number')
    try:
        price = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError('Price must be a non-negative number')
    # Prices are rendered as JSON numbers, so they must also fit a float
    if not price.is_finite() or price < 0 or not math.isfinite(float(price)):
        raise ValidationError('Price must be a non-negative number')
    return price


def _require(product_id, price):
    if product_id is None or str(product_id).strip() == '' or price is None:
        raise ValidationError('Product ID and price are required')
    return str(product_id), parse_price(price)


@dataclass
class PriceComparison:
    product_id: str
    current_price: Decimal = None
    lowest_price: Decimal = None
    is_all_time_low: bool = False
    history: list = field(default_factory=list)

    def to_dict(self):
        return {
            'productId': self.product_id,
            'currentPrice': float(self.current_price) if self.current_price is not None else None,
            'lowestPrice': float(self.lowest_price) if self.lowest_price is not None else None,
            'isAllTimeLow': self.is_all_time_low,
            'priceHistory': self.history,
        }


class PriceLedger:

    def __init__(self, storage):
        self.storage = storage

    def record(self, product_id, price):
        product_id, price = _require(product_id, price)

        def append(store):
            observation = ProductPriceHistory(
                product_id=product_id,
                price=price,
                timestamp=utcnow(),
            )
            return store.add_price(observation)

        observation = self.storage.run('record price', append)
        logger.info("Recorded price %s for product %s", price, product_id)
        return observation

    def history(self, product_id):
        return self.storage.run('price history', lambda store: store.price_history(product_id))

    def compare_by_history(self, product_id):
        """Compare the most recently recorded price against the product's all-time low."""
        history = self.history(product_id)
        comparison = PriceComparison(
            product_id=product_id,
            history=[entry.to_dict() for entry in history],
        )
        if history:
            comparison.current_price = history[0].price
            comparison.lowest_price = min(entry.price for entry in history)
            comparison.is_all_time_low = comparison.current_price <= comparison.lowest_price
        return comparison

    def compare_given_price(self, product_id, price):
        """
        Compare a live price supplied by the caller against recorded history.
        The supplied price is only displayed, never stored.
        """
        product_id, price = _require(product_id, price)
        history = self.history(product_id)

        if history:
            lowest_price = min(entry.price for entry in history)
            is_all_time_low = price <= lowest_price
        else:
            lowest_price = price
            is_all_time_low = True

        current_entry = {
            'price': float(price),
            'timestamp': utcnow().isoformat(),
            'isCurrent': True,
        }
        recorded = [dict(entry.to_dict(), isCurrent=False) for entry in history]

        return PriceComparison(
            product_id=product_id,
            current_price=price,
            lowest_price=lowest_price,
            is_all_time_low=is_all_time_low,
            history=[current_entry] + recorded,
        )
