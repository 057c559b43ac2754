# product_api/domain/errors.py


class ProductError(Exception):
    """Base for everything the product layer raises on purpose."""


class ValidationError(ProductError):
    """Malformed client input (bad id, bad payload)."""


class NotFoundError(ProductError):
    """No product row matched the requested id."""


class StorageError(ProductError):
    """
    Database failure that is not a business outcome.
    The message is for logs only, clients get a generic one.
    """


class StorageUnavailableError(StorageError):
    """Could not reach the database (pool exhausted, connection dropped)."""


class StorageTimeoutError(StorageError):
    """The database cancelled the statement after the configured deadline."""
