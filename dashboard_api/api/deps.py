import threading

from bson import ObjectId
from fastapi import Request

from dashboard_api.core.config import settings
from dashboard_api.db.mongo import MongoStore
from dashboard_api.utils.documents import parse_object_id

_connect_lock = threading.Lock()


def get_store(request: Request) -> MongoStore:
    """
    The shared store. When the cluster was unreachable at startup the
    connection is retried here; a failure surfaces as a store error (500).
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        with _connect_lock:
            store = getattr(request.app.state, "store", None)
            if store is None:
                store = MongoStore.from_settings(settings)
                request.app.state.store = store
    return store


def product_object_id(id: str) -> ObjectId:
    return parse_object_id(id)


def order_object_id(orderId: str) -> ObjectId:
    return parse_object_id(orderId)
