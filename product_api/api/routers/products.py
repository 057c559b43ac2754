# product_api/api/routers/products.py
from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from product_api.data.database import get_db
from product_api.domain.errors import NotFoundError, ValidationError
from product_api.domain.schemas import DeleteOut, ProductIn, ProductOut
from product_api.services.product_service import ProductService
from product_api.utils.settings import LIST_MAX_COUNT

router = APIRouter(tags=["products"])

# ASCII digits only; "+1", " 1", "1.0" and "1_0" are answered with "Invalid product ID"
ProductId = Annotated[str, Path(pattern=r"^[0-9]+$")]


def get_service(db: Session):
    return ProductService(db)


@router.get("/products", response_model=List[ProductOut])
def list_products(
    start: int = Query(0),
    count: int = Query(LIST_MAX_COUNT),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    return svc.list_products(start, count)


@router.post("/product", response_model=ProductOut, status_code=201)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    return svc.create_product(payload)


@router.get("/product/{product_id}", response_model=ProductOut)
def get_product(product_id: ProductId, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.get_product(product_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/product/{product_id}", response_model=ProductOut)
def update_product(
    payload: ProductIn,
    product_id: ProductId,
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.update_product(product_id, payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/product/{product_id}", response_model=DeleteOut)
def delete_product(product_id: ProductId, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.delete_product(product_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return DeleteOut(result="success")
