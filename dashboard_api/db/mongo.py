# dashboard_api/db/mongo.py
import logging
from typing import Optional
from urllib.parse import quote_plus

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from dashboard_api.core.config import Settings

logger = logging.getLogger(__name__)


def build_mongo_uri(settings: Settings) -> str:
    if settings.MONGO_URI:
        return settings.MONGO_URI
    if not settings.DB_USER or not settings.DB_PASS:
        raise RuntimeError("MongoDB credentials not configured. Set MONGO_URI or DB_USER/DB_PASS (see .env)")

    # Escape the username and password
    escaped_user = quote_plus(settings.DB_USER)
    escaped_password = quote_plus(settings.DB_PASS)
    return (
        f"mongodb+srv://{escaped_user}:{escaped_password}@{settings.MONGO_CLUSTER_URL}"
        "/?retryWrites=true&w=majority&appName=Cluster0"
    )


class MongoStore:
    """
    Shared handle on the two collections the dashboard works with.

    One instance lives for the whole process and is handed to request
    handlers through ``Depends(get_store)``.
    """

    def __init__(self, products: Collection, orders: Collection, client: MongoClient = None):
        self.client = client
        self.products = products
        self.orders = orders

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        client = MongoClient(build_mongo_uri(settings), server_api=ServerApi("1"))
        db = client[settings.DB_NAME]
        return cls(
            products=db[settings.PRODUCTS_COLLECTION],
            orders=db[settings.ORDERS_COLLECTION],
            client=client,
        )

    def ping(self) -> bool:
        if self.client is None:
            return True
        try:
            self.client.admin.command("ping")
            logger.info("Pinged your deployment. Connected to MongoDB successfully!")
            return True
        except PyMongoError as e:
            logger.error(f"Could not connect to MongoDB: {e}")
            return False

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


def connect_store(settings: Settings) -> Optional[MongoStore]:
    """
    Store for app startup, or None when the cluster cannot be reached
    (e.g. the SRV lookup of a mongodb+srv URI fails).
    """
    try:
        return MongoStore.from_settings(settings)
    except PyMongoError as e:
        logger.error(f"Could not connect to MongoDB: {e}")
        return None
