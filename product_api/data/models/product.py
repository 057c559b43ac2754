# product_api/data/models/product.py
from sqlalchemy import Column, Integer, String, Numeric, text

from product_api.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False, server_default=text("0.00"))
