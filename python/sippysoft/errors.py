# -*- coding: utf-8 -*-
# vi:ts=4:et

"""Exceptions raised by the SippySoft XML-API client.

SippySoftError
 +-- SippySoftConnectionError   no HTTP response could be obtained
 +-- SippySoftAPIError          the server answered, but not with a result
 |    +-- SippySoftFault        the server answered with an XML-RPC fault
 +-- SippySoftValidationError   arguments rejected locally, nothing was sent
"""


class SippySoftError(Exception):
    "Base class for all client errors."


class SippySoftConnectionError(SippySoftError):
    def __init__(self, message, curl_code=None):
        SippySoftError.__init__(self, message)
        self.curl_code = curl_code


class SippySoftAPIError(SippySoftError):
    def __init__(self, message, status=None):
        SippySoftError.__init__(self, message)
        self.status = status


class SippySoftFault(SippySoftAPIError):
    "An XML-RPC fault returned by the server."

    def __init__(self, fault_code, fault_string):
        SippySoftAPIError.__init__(
            self, 'API Fault %s: %s' % (fault_code, fault_string), status=200)
        self.fault_code = fault_code
        self.fault_string = fault_string


class SippySoftValidationError(SippySoftError, ValueError):
    pass
