from fastapi import APIRouter, Depends, Query, status
from bson import ObjectId

from dashboard_api.api.deps import get_store, product_object_id
from dashboard_api.core.config import settings
from dashboard_api.db.mongo import MongoStore
from dashboard_api.models.schemas import ProductCreate, ProductCreated, ProductPage, ProductUpdate
from dashboard_api.services import listing, products_service

router = APIRouter(prefix="/products", tags=["products"])

# keeps (page - 1) * limit inside the int64 range MongoDB accepts for skip
MAX_PAGE = (2 ** 63 - 1) // settings.MAX_PAGE_SIZE


@router.get("", response_model=ProductPage)
async def list_products(
    search: str = "",
    category: str = "",
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=settings.MAX_PAGE_SIZE),
    store: MongoStore = Depends(get_store),
):
    return await listing.list_products(store, search=search, category=category, page=page, limit=limit)


@router.post("", response_model=ProductCreated, status_code=status.HTTP_201_CREATED)
async def create_product(product: ProductCreate, store: MongoStore = Depends(get_store)):
    product_id = await products_service.create_product(store, product)
    return {"message": "Product added successfully", "productId": str(product_id)}


@router.patch("/{id}")
async def update_product(
    changes: ProductUpdate,
    product_id: ObjectId = Depends(product_object_id),
    store: MongoStore = Depends(get_store),
):
    await products_service.update_product(store, product_id, changes.model_dump(exclude_unset=True))
    return {"message": "Product updated successfully"}


@router.delete("/{id}")
async def delete_product(product_id: ObjectId = Depends(product_object_id), store: MongoStore = Depends(get_store)):
    return await products_service.delete_product(store, product_id)
