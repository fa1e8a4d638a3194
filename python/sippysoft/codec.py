# -*- coding: utf-8 -*-
# vi:ts=4:et

"""XML-RPC value marshalling for the SippySoft XML-API.

Only the subset of XML-RPC the API speaks is handled: nil, boolean, int
(and its i4 alias), double, string, array and struct.  Requests always
carry a single struct parameter.

Empty containers are sent as an empty <struct>, which is what the server
expects for an empty parameter set.  An empty list therefore comes back
as {}.
"""

import logging
from collections.abc import Mapping
import xml.etree.ElementTree as ET

from .errors import SippySoftAPIError, SippySoftFault

logger = logging.getLogger(__name__)

XML_DECLARATION = b'<?xml version="1.0"?>'


def _is_struct(value):
    # A mapping keyed exactly 0..n-1, in order, is really a list.
    if not value:
        return True
    return list(value.keys()) != list(range(len(value)))


def encode_value(value, parent=None):
    '''Return a <value> element for a Python value.

    If parent is given the element is appended to it.
    '''
    if parent is None:
        node = ET.Element('value')
    else:
        node = ET.SubElement(parent, 'value')

    if value is None:
        ET.SubElement(node, 'nil')
    # bool first: it is a subclass of int
    elif isinstance(value, bool):
        ET.SubElement(node, 'boolean').text = value and '1' or '0'
    elif isinstance(value, int):
        ET.SubElement(node, 'int').text = str(value)
    elif isinstance(value, float):
        ET.SubElement(node, 'double').text = repr(value)
    elif isinstance(value, str):
        ET.SubElement(node, 'string').text = value
    elif isinstance(value, Mapping):
        if _is_struct(value):
            _encode_struct(node, value.items())
        else:
            _encode_array(node, value.values())
    elif isinstance(value, (list, tuple)):
        if value:
            _encode_array(node, value)
        else:
            _encode_struct(node, ())
    else:
        ET.SubElement(node, 'string').text = str(value)
    return node


def _encode_struct(node, items):
    struct = ET.SubElement(node, 'struct')
    for key, item in items:
        member = ET.SubElement(struct, 'member')
        ET.SubElement(member, 'name').text = str(key)
        encode_value(item, member)


def _encode_array(node, items):
    data = ET.SubElement(ET.SubElement(node, 'array'), 'data')
    for item in items:
        encode_value(item, data)


def _text(node):
    return node.text or ''


def _number(convert, node, tag):
    try:
        return convert(_text(node).strip())
    except ValueError:
        raise SippySoftAPIError(
            'Invalid XML-RPC value: bad %s %r' % (tag, node.text))


def decode_value(node):
    "Convert a <value> element into a Python value."
    if node.find('nil') is not None:
        return None

    child = node.find('struct')
    if child is not None:
        result = {}
        for member in child.findall('member'):
            name = member.find('name')
            value = member.find('value')
            if name is None or value is None:
                raise SippySoftAPIError(
                    'Invalid XML-RPC value: struct member without name or value')
            result[_text(name)] = decode_value(value)
        return result

    child = node.find('array')
    if child is not None:
        return [decode_value(item) for item in child.findall('data/value')]

    child = node.find('string')
    if child is not None:
        return _text(child)

    for tag in ('int', 'i4'):
        child = node.find(tag)
        if child is not None:
            return _number(int, child, tag)

    child = node.find('double')
    if child is not None:
        return _number(float, child, 'double')

    child = node.find('boolean')
    if child is not None:
        return _text(child) == '1'

    # untyped values are strings
    return _text(node)


def dumps_request(method, params=None):
    '''Serialize a methodCall carrying a single parameter.

    params defaults to an empty struct.
    '''
    if params is None:
        params = {}
    call = ET.Element('methodCall')
    ET.SubElement(call, 'methodName').text = method
    param = ET.SubElement(ET.SubElement(call, 'params'), 'param')
    encode_value(params, param)
    return XML_DECLARATION + ET.tostring(call, encoding='utf-8',
                                         xml_declaration=False)


def loads_response(data):
    "Parse a methodResponse document and return its result."
    if isinstance(data, str):
        data = data.encode('utf-8')
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        logger.debug('Unparseable response: %s', e)
        raise SippySoftAPIError('Failed to parse XML-RPC response')
    return decode_response(root)


def _response_node(root, path):
    # root is usually <methodResponse> itself, but accept it nested too
    if root.tag == 'methodResponse':
        return root.find(path)
    return root.find('.//methodResponse/' + path)


def decode_response(root):
    '''Return the first param of a methodResponse element.

    A fault is raised as SippySoftFault even if params are present too.
    '''
    fault = _response_node(root, 'fault/value')
    if fault is not None:
        data = decode_value(fault)
        if not isinstance(data, dict):
            data = {}
        raise SippySoftFault(data.get('faultCode', 'Unknown'),
                             data.get('faultString', 'Unknown error'))

    value = _response_node(root, 'params/param/value')
    if value is None:
        raise SippySoftAPIError(
            'Invalid XML-RPC response: no params or fault found')
    return decode_value(value)
