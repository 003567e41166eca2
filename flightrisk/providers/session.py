# flightrisk/providers/session.py
import logging

import requests
import requests_cache
from retry_requests import retry

from ..constants.providers import ProviderConstants


def build_session(cache_name: str, expire_after: int, cache_enabled: bool = True) -> requests.Session:
    """
    Creates an HTTP session with retries on transient server errors and,
    when enabled, a local sqlite response cache.
    """
    if cache_enabled:
        session = requests_cache.CachedSession(cache_name, backend='sqlite', expire_after=expire_after)
    else:
        session = requests.Session()
    logging.debug(f"HTTP session '{cache_name}' created. Cache enabled: {cache_enabled}")
    return retry(
        session,
        retries=ProviderConstants.SESSION_RETRIES,
        backoff_factor=ProviderConstants.SESSION_BACKOFF_FACTOR,
    )
