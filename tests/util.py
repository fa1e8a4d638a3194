# -*- coding: utf-8 -*-
# vi:ts=4:et

import socket
import time as _time
import urllib.parse as urllib_parse
import xml.etree.ElementTree as ET

from sippysoft.transport import HTTPSDigestAuthTransport


class PlainDigestTransport(HTTPSDigestAuthTransport):
    '''The production transport, minus TLS.

    The test app is served over plain HTTP on a local port.
    '''

    scheme = 'http'
    default_port = 80


def api_url(host, username, password, path='/xmlapi/xmlapi'):
    return 'https://%s:%s@%s%s' % (
        urllib_parse.quote(username, safe=''),
        urllib_parse.quote(password, safe=''),
        host, path)


def parse(xml_bytes):
    return ET.fromstring(xml_bytes)


def value_node(inner):
    "Build a <value> element from an XML fragment."
    return ET.fromstring('<value>%s</value>' % inner)


def wait_listening(host, port, timeout=5.0):
    deadline = _time.monotonic() + timeout

    while _time.monotonic() < deadline:
        try:
            socket.create_connection((host, port), timeout=0.2).close()
            return True
        except OSError:
            _time.sleep(0.05)

    return False
