"""
REST pipeline components.

Clean separation of concerns:
- request_builder.py: URL, headers, query params
- body.py: JSON and multipart encoding
- transport.py: HTTP requests
- response_parser.py: Ok / Error normalization
- client.py: orchestration
"""

from .client import Client, default_client
from .request_builder import RequestDescriptor, build_request
from .response_parser import Ok, Error, Result, ResponsePayload, handle_response
from .transport import Transport, HTTPResponse, TransportFailure

__all__ = [
    'Client',
    'default_client',
    'RequestDescriptor',
    'build_request',
    'Ok',
    'Error',
    'Result',
    'ResponsePayload',
    'handle_response',
    'Transport',
    'HTTPResponse',
    'TransportFailure',
]
