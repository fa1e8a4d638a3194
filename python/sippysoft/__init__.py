# -*- coding: utf-8 -*-
# vi:ts=4:et

"""Client for the SippySoft XML-RPC API (XML-API)."""

from .client import SippySoftClient
from .codec import decode_value, dumps_request, encode_value, loads_response
from .errors import (SippySoftAPIError, SippySoftConnectionError,
                     SippySoftError, SippySoftFault, SippySoftValidationError)
from .outcome import Fault, ProtocolFailure, Success, TransportFailure
from .transport import Endpoint, HTTPSDigestAuthTransport, parse_endpoint

version = '1.0.0'
