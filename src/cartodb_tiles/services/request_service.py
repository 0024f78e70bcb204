import logging
import time
from typing import Any, Dict, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter

from cartodb_tiles.exceptions.cartodb_exceptions import (
    RemoteRejectedError, RemoteUnavailableError, TransportError, UnexpectedResponseError
)


class RequestService:
    """Issues single Maps API calls and classifies their responses"""
    
    def __init__(self, timeout: float = 30):
        self.timeout = timeout
        self.logger = logging.getLogger('RequestService')
    
    def create_session(self) -> requests.Session:
        """Create a session for one call; no transport retries are mounted"""
        session = requests.Session()
        session.headers.update({'User-Agent': 'cartodb-tiles'})
        
        adapter = HTTPAdapter(pool_connections=1, pool_maxsize=1, max_retries=0)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        
        return session
    
    def execute(self, method: str, uri: str, query_params: Optional[Dict[str, Any]] = None,
                json_body: Any = None) -> Tuple[int, Any]:
        """Send one request and return (status_code, body) for a 200 response.

        4xx raises RemoteRejectedError, 5xx RemoteUnavailableError, anything
        else that is not 200 UnexpectedResponseError. Failures below HTTP raise
        TransportError.
        """
        method = method.upper()
        self.logger.info(f"{method} {uri}")
        
        started = time.perf_counter()
        session = self.create_session()
        try:
            response = session.request(method, uri, params=query_params or {},
                                       json=json_body, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(method, uri, str(e)) from e
        finally:
            session.close()
        elapsed_ms = (time.perf_counter() - started) * 1000
        
        status_code = response.status_code
        body = self._decode_body(response)
        self.logger.info(f"{method} {uri} -> {status_code} ({elapsed_ms:.0f} ms)")
        
        if status_code == 200:
            self.logger.debug(f"{status_code} {body}")
            return status_code, body
        
        if 400 <= status_code < 500:
            self.logger.debug(f"we did something wrong ({status_code}): {body}")
            raise RemoteRejectedError(status_code, body)
        
        if status_code >= 500:
            self.logger.debug(f"CartoDB did something wrong ({status_code}): {body}")
            raise RemoteUnavailableError(status_code, body)
        
        self.logger.debug(f"something unexpected happened ({status_code}): {body}")
        raise UnexpectedResponseError(status_code, body)
    
    @staticmethod
    def _decode_body(response: requests.Response) -> Any:
        """JSON document if the body parses, raw text otherwise"""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text
