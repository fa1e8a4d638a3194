# -*- coding: utf-8 -*-
# vi:ts=4:et

"""Call outcomes for callers that prefer values over exceptions.

SippySoftClient.try_call returns exactly one of these.  They are plain
named tuples, so they can be unpacked or matched on:

    match client.try_call('getDictionary', {'name': 'timezones'}):
        case Success(value):
            ...
        case Fault(code, message):
            ...
"""

import collections

Success = collections.namedtuple('Success', 'value')
Fault = collections.namedtuple('Fault', 'code message')
TransportFailure = collections.namedtuple('TransportFailure', 'cause')
ProtocolFailure = collections.namedtuple('ProtocolFailure', 'reason')
