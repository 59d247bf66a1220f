from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Products ---

class SizeStock(BaseModel):
    size: str
    stock: int = 0


class ProductCreate(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    color: Optional[str] = None
    sizes: List[SizeStock] = []
    images: List[str] = []


class ProductUpdate(BaseModel):
    """Partial update: only the fields present in the body are written."""
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    color: Optional[str] = None
    sizes: Optional[List[SizeStock]] = None
    images: Optional[List[str]] = None


class ProductCreated(BaseModel):
    message: str
    productId: str


class ProductPage(BaseModel):
    products: List[Dict[str, Any]]
    totalCount: int
    currentPage: int
    totalPages: int


# --- Orders ---

class CartItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    productId: Any
    selectedSize: str
    quantity: int = Field(..., ge=0)


class OrderStatusUpdate(BaseModel):
    status: str = Field(..., min_length=1)


class OrderUpdate(BaseModel):
    """Replacement fields for an order; unknown fields are stored as sent."""
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    phone: Optional[str] = None
    orderDate: Optional[datetime] = None
    status: Optional[str] = None
    cart: Optional[List[CartItem]] = None


class OrderPage(BaseModel):
    orders: List[Dict[str, Any]]
    totalOrders: int
