"""
Generic request/response plumbing shared by every endpoint method.

An Endpoint describes one remote operation (HTTP method, path template,
response model). ``call`` runs it: interpolate the path, send, check the
status, decode the body, and wrap any failure with the operation it
belongs to.
"""
from dataclasses import dataclass
from typing import Any, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from football_adapter.errors import DecodeError, FootballAdapterError, HTTPStatusError
from football_adapter.transport import NO_PAYLOAD, Transport


@dataclass(frozen=True)
class Endpoint:
    name: str
    method: str
    path_template: str
    response_model: Optional[Type[BaseModel]]
    description: str
    decode_description: str = 'response data'

    def path(self, *params) -> str:
        """Substitute params into the template in order, as given"""
        return self.path_template.format(*params)


def check_status(response):
    """Raise HTTPStatusError for anything outside 2xx"""
    if 200 <= response.status_code < 300:
        return
    raise HTTPStatusError(
        f"unexpected status {response.status_code} from {response.url}",
        status_code=response.status_code,
        body=response.content,
    )


def decode(body: bytes, model: Type[BaseModel], endpoint: Endpoint) -> BaseModel:
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(
            f"error unmarshalling {endpoint.decode_description}",
            operation=endpoint.name,
            cause=e,
            body=body,
        ) from e


def call(transport: Transport, endpoint: Endpoint, *path_params,
         payload: Any = NO_PAYLOAD) -> Union[BaseModel, bytes]:
    """
    Run one endpoint round trip

    Args:
        transport: Transport the request goes through
        endpoint: Operation to run
        *path_params: Values substituted into the path template, in order
        payload: Request body for POST endpoints

    Returns:
        The decoded response model, or the raw body when the endpoint
        has no response model

    Raises:
        SerializationError: payload could not be encoded; nothing was sent
        TransportError: request failed or the adapter returned a non-2xx status
        DecodeError: body is not valid JSON of the expected shape
    """
    path = endpoint.path(*path_params)
    try:
        response = transport.send(endpoint.method, path, payload)
        check_status(response)
    except FootballAdapterError as e:
        raise e.wrap(f"error {endpoint.description}", endpoint.name) from e

    if endpoint.response_model is None:
        return response.content
    return decode(response.content, endpoint.response_model, endpoint)
