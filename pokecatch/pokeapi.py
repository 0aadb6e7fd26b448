import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from .errors import SpeciesNotFound, UpstreamError

logger = logging.getLogger(__name__)


class SpeciesLookup:
    """Thin proxy in front of PokeAPI's ``/pokemon/<name>`` resource.

    No caching and no retries. Every call is bounded by `timeout` seconds.
    """

    def __init__(self, base_url: str = 'https://pokeapi.co/api/v2', timeout: float = 10,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def lookup(self, name: str) -> Dict[str, Any]:
        url = f'{self.base_url}/pokemon/{quote(name, safe="")}'
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning('PokeAPI request for %r failed: %s', name, e)
            raise UpstreamError() from e

        if resp.status_code == 404:
            raise SpeciesNotFound()
        if not 200 <= resp.status_code < 300:
            logger.warning('PokeAPI returned %s for %r', resp.status_code, name)
            raise UpstreamError()
        try:
            return resp.json()
        except ValueError as e:
            logger.warning('PokeAPI returned a non-JSON body for %r', name)
            raise UpstreamError() from e

    def close(self) -> None:
        self.session.close()
