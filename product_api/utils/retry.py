# product_api/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from product_api.domain.errors import StorageUnavailableError
from product_api.utils.settings import DB_RETRY_ATTEMPTS


def db_retry(attempts: int = DB_RETRY_ATTEMPTS):
    # connectivity only, a not-found or bad request is never retried
    return retry(
        reraise=True,
        stop=stop_after_attempt(max(attempts, 1)),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(StorageUnavailableError),
    )
