# dashboard_api/core/config.py
import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "Dashboard API")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # --- MongoDB ---
    MONGO_URI: str = os.getenv("MONGO_URI")  # full URI, overrides the parts below
    DB_USER: str = os.getenv("DB_USER")
    DB_PASS: str = os.getenv("DB_PASS")
    MONGO_CLUSTER_URL: str = os.getenv("MONGO_CLUSTER_URL", "cluster0.kaoye.mongodb.net")
    DB_NAME: str = os.getenv("DB_NAME", "bossbaby")
    PRODUCTS_COLLECTION: str = os.getenv("PRODUCTS_COLLECTION", "allProduct")
    ORDERS_COLLECTION: str = os.getenv("ORDERS_COLLECTION", "allOrders")

    # --- HTTP ---
    CORS_ORIGINS: List[str] = _split_origins(os.getenv("CORS_ORIGINS", "http://localhost:5174"))
    MAX_PAGE_SIZE: int = int(os.getenv("MAX_PAGE_SIZE", "100"))
    ORDER_PAGE_SIZE: int = 10


settings = Settings()
