"""
HTTP transport for the football adapter service
"""
import json
import logging
from typing import Any, Optional
from urllib.parse import urlparse

import requests
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from football_adapter.config import (
    API_KEY_HEADER,
    FOOTBALL_ADAPTER_API_KEY,
    REQUEST_TIMEOUT,
)
from football_adapter.errors import ConfigurationError, SerializationError, TransportError

logger = logging.getLogger(__name__)

# Unfiltered fixture catalogue kept by the adapter
FIXTURE_CATALOGUE_ENDPOINT = '/fixture/get'

JSON_CONTENT_TYPE = 'application/json'

# Marks a request that carries no body (GET)
NO_PAYLOAD = object()


class Transport:
    """Sends requests to the adapter and hands back the raw responses"""

    def __init__(self, base_url: str, api_key: Optional[str] = FOOTBALL_ADAPTER_API_KEY,
                 timeout: Optional[float] = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None,
                 api_key_header: str = API_KEY_HEADER):
        """
        Args:
            base_url: Adapter root, e.g. http://localhost:4343
            api_key: Sent on every request in the api_key_header header (skipped if empty)
            timeout: Seconds to wait for the adapter; None leaves requests' default
            session: Optional pre-built requests.Session to reuse
            api_key_header: Header name used for the API key
        """
        if not base_url:
            raise ConfigurationError("url is empty")
        parsed = urlparse(base_url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ConfigurationError(f"invalid base url: {base_url!r}")

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        if api_key:
            self.session.headers[api_key_header] = api_key

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        """Release pooled connections"""
        self.session.close()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def encode(self, payload: Any) -> bytes:
        """
        Serialize a request payload to a JSON body

        Accepts pydantic models and plain mappings of string keys to
        str/int/bool values (the free-form fixture query).

        Raises:
            SerializationError: payload can't be represented as JSON
        """
        data = payload
        try:
            if isinstance(payload, BaseModel):
                data = payload.model_dump(mode='json')
            elif isinstance(payload, dict):
                for key, value in payload.items():
                    if not isinstance(key, str):
                        raise TypeError(f"parameter names must be strings, got {key!r}")
                    if not isinstance(value, (str, int, bool)):
                        raise TypeError(
                            f"unsupported value for parameter {key!r}: {type(value).__name__}"
                        )
            return json.dumps(data, allow_nan=False).encode('utf-8')
        except (TypeError, ValueError, PydanticSerializationError) as e:
            raise SerializationError("error serializing request payload", cause=e) from e

    def send(self, method: str, path: str, payload: Any = NO_PAYLOAD) -> requests.Response:
        """
        Issue one request against base_url + path

        The payload, when given, is JSON-encoded before anything goes on
        the wire. Any HTTP status is returned as-is.

        Raises:
            SerializationError: payload could not be encoded
            TransportError: request could not be sent or body not read
        """
        url = self.url_for(path)
        body = None
        headers = None
        if payload is not NO_PAYLOAD:
            body = self.encode(payload)
            headers = {'Content-Type': JSON_CONTENT_TYPE}

        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, data=body, headers=headers,
                                            timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed", cause=e) from e

        logger.debug("%s %s -> %s (%d bytes)", method, url, response.status_code,
                     len(response.content))
        return response

    def get(self, path: str) -> bytes:
        """GET base_url + path and return the body, whatever the status"""
        return self.send('GET', path).content

    def post(self, path: str, payload: Any) -> bytes:
        """POST payload as JSON to base_url + path and return the body, whatever the status"""
        return self.send('POST', path, payload).content
