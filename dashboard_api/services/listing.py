import math
from typing import Any, Dict, Optional

from fastapi.concurrency import run_in_threadpool
from pymongo import DESCENDING

from dashboard_api.core.config import settings
from dashboard_api.db.mongo import MongoStore
from dashboard_api.services.filters import apply_cursor, build_order_filter, build_product_filter
from dashboard_api.utils.documents import serialize_doc


def _find_page(collection, query, sort, skip: int, limit: int):
    return list(collection.find(query).sort(sort).skip(skip).limit(limit))


async def list_products(
    store: MongoStore,
    search: Optional[str] = None,
    category: Optional[str] = None,
    page: int = 1,
    limit: int = 10,
) -> Dict[str, Any]:
    query = build_product_filter(search, category)
    skip = (page - 1) * limit

    # newest first: ObjectIds grow with insertion time
    products = await run_in_threadpool(_find_page, store.products, query, [("_id", DESCENDING)], skip, limit)
    total_count = await run_in_threadpool(store.products.count_documents, query)

    return {
        "products": [serialize_doc(p) for p in products],
        "totalCount": total_count,
        "currentPage": page,
        "totalPages": math.ceil(total_count / limit),
    }


async def list_orders(
    store: MongoStore,
    search: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    after: Optional[str] = None,
) -> Dict[str, Any]:
    query = build_order_filter(search, start_date, end_date)

    # the total ignores the cursor so the dashboard can show the full match count
    total_orders = await run_in_threadpool(store.orders.count_documents, query)
    orders = await run_in_threadpool(
        _find_page,
        store.orders,
        apply_cursor(query, after),
        [("orderDate", DESCENDING), ("_id", DESCENDING)],
        0,
        settings.ORDER_PAGE_SIZE,
    )

    return {"orders": [serialize_doc(o) for o in orders], "totalOrders": total_orders}
