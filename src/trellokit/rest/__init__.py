"""REST layer - request records, endpoint catalogue, HTTP client, queue and repository."""

from trellokit.rest.client import TrelloRestClient
from trellokit.rest.endpoints import Endpoint, EndpointFactory, EntityRequestType
from trellokit.rest.processor import (
    RestRequestProcessor,
    get_request_processor,
    set_request_processor,
    shut_down_request_processor,
)
from trellokit.rest.repository import JsonRepository
from trellokit.rest.request import RestFile, RestRequest, RestResponse

__all__ = [
    "Endpoint",
    "EndpointFactory",
    "EntityRequestType",
    "JsonRepository",
    "RestFile",
    "RestRequest",
    "RestRequestProcessor",
    "RestResponse",
    "TrelloRestClient",
    "get_request_processor",
    "set_request_processor",
    "shut_down_request_processor",
]
