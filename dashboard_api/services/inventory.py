"""
Restocking of products when an order is returned or deleted.

Restocks run after the HTTP response has been sent (FastAPI background
tasks). They are best effort: each cart line is applied on its own, a
failing line does not stop the others, and nothing is reported back to the
caller. Every failure is written to the reconciliation logger so stock can
be corrected by hand.
"""
import logging
from typing import Any, Dict, Iterable

from pymongo.errors import PyMongoError

from dashboard_api.db.mongo import MongoStore
from dashboard_api.utils.documents import coerce_reference

logger = logging.getLogger(__name__)
reconciliation_log = logging.getLogger("dashboard_api.inventory.reconciliation")


def restock_line(store: MongoStore, item: Dict[str, Any]) -> bool:
    """
    Add ``item.quantity`` back to the matching (product, size) stock.
    Returns False when no product has that size; that is not an error.
    """
    result = store.products.update_one(
        {"_id": coerce_reference(item.get("productId")), "sizes.size": item.get("selectedSize")},
        {"$inc": {"sizes.$.stock": item.get("quantity", 0)}},
    )
    return result.matched_count > 0


def restock_cart(store: MongoStore, order_id: Any, cart: Iterable[Dict[str, Any]], reason: str) -> Dict[str, int]:
    summary = {"applied": 0, "skipped": 0, "failed": 0}

    for item in cart or []:
        try:
            if restock_line(store, item):
                summary["applied"] += 1
            else:
                summary["skipped"] += 1
                logger.debug(f"Order {order_id}: no product/size for {item.get('productId')}/{item.get('selectedSize')}")
        except PyMongoError as e:
            summary["failed"] += 1
            logger.error(f"Order {order_id}: restock failed for product {item.get('productId')}: {e}")
            reconciliation_log.warning(
                f"restock_failed order={order_id} product={item.get('productId')} "
                f"size={item.get('selectedSize')} quantity={item.get('quantity')} reason={reason}"
            )

    logger.info(
        f"Order {order_id} restock ({reason}): applied={summary['applied']} "
        f"skipped={summary['skipped']} failed={summary['failed']}"
    )
    return summary
