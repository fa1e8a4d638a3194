# -*- coding: utf-8 -*-
# vi:ts=4:et

# Settings shared by the example scripts.
#
# Credentials come from the environment:
#
#   SIPPYSOFT_USERNAME    API user
#   SIPPYSOFT_PASSWORD    API password
#   SIPPYSOFT_HOST        switch host name, optionally with :port
#   SIPPYSOFT_VERIFY_SSL  set to 0 to skip certificate checks

import json
import logging
import os
import sys
import urllib.parse as urllib_parse

from sippysoft import SippySoftClient, SippySoftError


def api_url():
    try:
        username = os.environ['SIPPYSOFT_USERNAME']
        password = os.environ['SIPPYSOFT_PASSWORD']
        host = os.environ['SIPPYSOFT_HOST']
    except KeyError as e:
        sys.stderr.write('Please set %s in the environment\n' % e.args[0])
        raise SystemExit(2)
    return 'https://%s:%s@%s/xmlapi/xmlapi' % (
        urllib_parse.quote(username, safe=''),
        urllib_parse.quote(password, safe=''), host)


def verify_ssl():
    return os.environ.get('SIPPYSOFT_VERIFY_SSL', '1').lower() not in ('0', 'no', 'false')


def connect():
    "Return a client for the configured switch, exiting on bad settings."
    logging.basicConfig(level=os.environ.get('SIPPYSOFT_LOG_LEVEL', 'INFO'),
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')
    try:
        client = SippySoftClient(api_url(), verify_ssl())
    except SippySoftError as e:
        sys.stderr.write('SippySoft Error: %s\n' % e)
        raise SystemExit(1)
    print('SippySoft Client initialized successfully!')
    return client


def show(label, value):
    print('%s: %s' % (label, json.dumps(value, indent=4, sort_keys=True)))


def arg(index, default):
    "Return sys.argv[index] converted like default, or default itself."
    if len(sys.argv) > index:
        return type(default)(sys.argv[index])
    return default
