# product_api/services/product_service.py
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from sqlalchemy.orm import Session

from product_api.domain.errors import NotFoundError, ValidationError
from product_api.domain.schemas import ProductIn, ProductOut
from product_api.repos.product_repo import ProductRepo
from product_api.utils.settings import LIST_MAX_COUNT
from product_api.utils.logging import get_logger

logger = get_logger(__name__)

# products.id is a 4 byte serial
MAX_PRODUCT_ID = 2**31 - 1
CENT = Decimal("0.01")
_DIGITS = re.compile(r"[0-9]{1,10}")


class ProductService:
    """
    Use cases for the product resource.
    Queries (get, list) only read, commands (create, update, delete) write one row.
    """

    def __init__(self, db: Session, max_count: int = LIST_MAX_COUNT):
        self.repo = ProductRepo(db)
        self.max_count = max_count

    @staticmethod
    def _parse_id(product_id: int | str) -> int:
        if isinstance(product_id, str):
            if not _DIGITS.fullmatch(product_id):
                raise ValidationError("Invalid product ID")
            product_id = int(product_id)
        if product_id < 0 or product_id > MAX_PRODUCT_ID:
            raise ValidationError("Invalid product ID")
        return product_id

    @staticmethod
    def _price(payload: ProductIn) -> Decimal:
        return payload.price.quantize(CENT, rounding=ROUND_HALF_UP)

    # queries
    def get_product(self, product_id: int | str) -> ProductOut:
        product_id = self._parse_id(product_id)
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return ProductOut.model_validate(product)

    def list_products(self, start: int = 0, count: int | None = None) -> List[ProductOut]:
        if count is None or count < 1 or count > self.max_count:
            count = self.max_count
        if start < 0:
            start = 0

        products = self.repo.list_products(start, count)
        return [ProductOut.model_validate(p) for p in products]

    # commands
    def create_product(self, payload: ProductIn) -> ProductOut:
        created = self.repo.create_product(payload.name, self._price(payload))
        logger.info(f"Created product {created.id}")
        return ProductOut.model_validate(created)

    def update_product(self, product_id: int | str, payload: ProductIn) -> ProductOut:
        product_id = self._parse_id(product_id)
        price = self._price(payload)

        rowcount = self.repo.update_product(product_id, payload.name, price)
        if rowcount == 0:
            raise NotFoundError("Product not found")

        logger.info(f"Updated product {product_id}")
        return ProductOut(id=product_id, name=payload.name, price=price)

    def delete_product(self, product_id: int | str) -> None:
        product_id = self._parse_id(product_id)

        rowcount = self.repo.delete_product(product_id)
        if rowcount == 0:
            raise NotFoundError("Product not found")

        logger.info(f"Deleted product {product_id}")
