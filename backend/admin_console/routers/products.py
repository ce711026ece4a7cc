"""Products page API."""

from fastapi import Depends, HTTPException, status

from .. import models, schemas
from ..deps import get_products
from ..exceptions import RecordNotFoundError
from ..services.controllers import ProductsController
from .pages import page_router

router = page_router("products", models.Product, "Products", get_products)


@router.post("/", response_model=models.Product, status_code=status.HTTP_201_CREATED)
def create_product(payload: schemas.ProductDraft, products: ProductsController = Depends(get_products)):
    product, errors = products.save(payload)
    if errors:
        raise HTTPException(status_code=422, detail={"errors": errors})
    return product


@router.put("/{product_id}", response_model=models.Product)
def update_product(
    product_id: str,
    payload: schemas.ProductDraft,
    products: ProductsController = Depends(get_products),
):
    try:
        product, errors = products.save(payload, editing_id=product_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found") from exc
    if errors:
        raise HTTPException(status_code=422, detail={"errors": errors})
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: str, products: ProductsController = Depends(get_products)):
    if not products.delete(product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")


@router.get("/{product_id}", response_model=models.Product)
def get_product(product_id: str, products: ProductsController = Depends(get_products)):
    try:
        return products.get(product_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found") from exc
