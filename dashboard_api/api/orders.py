from typing import Optional

from bson import ObjectId
from fastapi import APIRouter, BackgroundTasks, Depends

from dashboard_api.api.deps import get_store, order_object_id
from dashboard_api.db.mongo import MongoStore
from dashboard_api.models.schemas import OrderPage, OrderStatusUpdate, OrderUpdate
from dashboard_api.services import listing, orders_service
from dashboard_api.services.inventory import restock_cart
from dashboard_api.utils.documents import serialize_doc

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=OrderPage)
async def list_orders(
    search: Optional[str] = None,
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    after: Optional[str] = None,
    store: MongoStore = Depends(get_store),
):
    return await listing.list_orders(store, search=search, start_date=startDate, end_date=endDate, after=after)


@router.put("/{orderId}/status")
async def set_order_status(
    body: OrderStatusUpdate,
    background_tasks: BackgroundTasks,
    order_id: ObjectId = Depends(order_object_id),
    store: MongoStore = Depends(get_store),
):
    """
    Set the order status. Moving an order into "return" puts its cart back
    into stock once; setting "return" on an order that is already returned
    changes nothing in stock.
    """
    order, needs_restock = await orders_service.set_order_status(store, order_id, body.status)

    # runs after the response is sent; the caller never waits on stock updates
    if needs_restock:
        background_tasks.add_task(restock_cart, store, order_id, order.get("cart", []), "return")

    return {"message": "Order status updated successfully.", "order": serialize_doc(order)}


@router.put("/{orderId}")
async def update_order(
    changes: OrderUpdate,
    order_id: ObjectId = Depends(order_object_id),
    store: MongoStore = Depends(get_store),
):
    order = await orders_service.update_order(store, order_id, changes.model_dump(exclude_unset=True))
    return serialize_doc(order)


@router.delete("/{orderId}")
async def delete_order(
    background_tasks: BackgroundTasks,
    order_id: ObjectId = Depends(order_object_id),
    store: MongoStore = Depends(get_store),
):
    order = await orders_service.delete_order(store, order_id)
    background_tasks.add_task(restock_cart, store, order_id, order.get("cart", []), "delete")
    return {"message": "Order deleted successfully."}
