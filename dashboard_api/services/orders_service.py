from typing import Any, Dict, Tuple

from bson import ObjectId
from fastapi.concurrency import run_in_threadpool
from pymongo import ReturnDocument

from dashboard_api.core.errors import NotFoundError
from dashboard_api.db.mongo import MongoStore

RETURN_STATUS = "return"


def _order_not_found() -> NotFoundError:
    return NotFoundError("Order not found.")


async def set_order_status(store: MongoStore, order_id: ObjectId, status: str) -> Tuple[Dict[str, Any], bool]:
    """
    Writes the new status and returns ``(updated_order, needs_restock)``.

    ``needs_restock`` is only true on the transition into "return", so a
    repeated "return" update does not put the same items back twice.
    """
    previous = await run_in_threadpool(
        store.orders.find_one_and_update,
        {"_id": order_id},
        {"$set": {"status": status}},
        return_document=ReturnDocument.BEFORE,
    )
    if not previous:
        raise _order_not_found()

    updated = {**previous, "status": status}
    needs_restock = status == RETURN_STATUS and previous.get("status") != RETURN_STATUS
    return updated, needs_restock


async def update_order(store: MongoStore, order_id: ObjectId, fields: Dict[str, Any]) -> Dict[str, Any]:
    fields = {k: v for k, v in fields.items() if k not in ("_id", "id")}
    if not fields:
        order = await run_in_threadpool(store.orders.find_one, {"_id": order_id})
    else:
        order = await run_in_threadpool(
            store.orders.find_one_and_update,
            {"_id": order_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
    if not order:
        raise _order_not_found()
    return order


async def delete_order(store: MongoStore, order_id: ObjectId) -> Dict[str, Any]:
    """Removes the order and returns the deleted document (its cart drives the restock)."""
    order = await run_in_threadpool(store.orders.find_one_and_delete, {"_id": order_id})
    if not order:
        raise _order_not_found()
    return order
