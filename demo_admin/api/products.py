from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response, status

from demo_admin.api.dependencies import get_product_service
from demo_admin.models.schemas import Product
from demo_admin.services.entity_service import EntityService

router = APIRouter(prefix="/products", tags=["Products"])

_NOT_FOUND = {404: {"description": "Product not found"}}


@router.get(
    "",
    response_model=list[Product],
    summary="List products",
    description="Returns every product currently in the catalog.",
    responses={200: {"description": "Products listed"}},
)
def list_products(service: EntityService[Product] = Depends(get_product_service)) -> list[Product]:
    return service.list_all()


@router.get(
    "/{product_id}",
    response_model=Product,
    summary="Get product by ID",
    description="Returns the product with the given ID.",
    responses={200: {"description": "Product found"}, **_NOT_FOUND},
)
def get_product(
    product_id: int = Path(description="Product ID"),
    service: EntityService[Product] = Depends(get_product_service),
):
    product = service.get_by_id(product_id)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return product


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
    description="Creates a product. Any client-supplied ID is ignored.",
    responses={201: {"description": "Product created"}},
)
def create_product(payload: Product, service: EntityService[Product] = Depends(get_product_service)) -> Product:
    return service.create(payload)


@router.put(
    "/{product_id}",
    response_model=Product,
    summary="Update product",
    description="Replaces an existing product, keeping its ID.",
    responses={200: {"description": "Product updated"}, **_NOT_FOUND},
)
def update_product(
    payload: Product,
    product_id: int = Path(description="Product ID"),
    service: EntityService[Product] = Depends(get_product_service),
):
    product = service.update(product_id, payload)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return product


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete product",
    description="Deletes the product with the given ID.",
    responses={204: {"description": "Product deleted"}, **_NOT_FOUND},
)
def delete_product(
    product_id: int = Path(description="Product ID"),
    service: EntityService[Product] = Depends(get_product_service),
) -> Response:
    if service.delete(product_id):
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return Response(status_code=status.HTTP_404_NOT_FOUND)
