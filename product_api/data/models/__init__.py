# import all models so SQLAlchemy registers them in Base.metadata

from product_api.data.models.product import ProductModel

__all__ = ["ProductModel"]
