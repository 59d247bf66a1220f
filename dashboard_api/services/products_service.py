from datetime import datetime, timezone
from typing import Any, Dict

from bson import ObjectId
from fastapi.concurrency import run_in_threadpool

from dashboard_api.core.errors import InvalidInputError, NotFoundError
from dashboard_api.models.schemas import ProductCreate


async def create_product(store, product: ProductCreate) -> ObjectId:
    new_product = product.model_dump()
    new_product.update({
        "type": product.type or None,
        "createdAt": datetime.now(timezone.utc),
    })
    result = await run_in_threadpool(store.products.insert_one, new_product)
    return result.inserted_id


async def update_product(store, product_id: ObjectId, fields: Dict[str, Any]) -> None:
    # only the fields that were sent are written
    fields = {k: v for k, v in fields.items() if k not in ("_id", "id")}
    if not fields:
        raise InvalidInputError("No fields to update")

    result = await run_in_threadpool(store.products.update_one, {"_id": product_id}, {"$set": fields})
    if result.matched_count == 0:
        raise NotFoundError("Product not found")


async def delete_product(store, product_id: ObjectId) -> Dict[str, Any]:
    result = await run_in_threadpool(store.products.delete_one, {"_id": product_id})
    if result.deleted_count == 0:
        raise NotFoundError("Product not found")
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
