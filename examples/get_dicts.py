#! /usr/bin/env python
# -*- coding: utf-8 -*-
# vi:ts=4:et

# Fetch the dictionaries listing valid values for account parameters.

from sippysoft import SippySoftError

import config

client = config.connect()

try:
    config.show('Available timezones', client.get_dictionary('timezones'))
    config.show('Available currencies', client.get_dictionary('currencies'))
    config.show('Available export types', client.get_dictionary('export_types'))
    config.show('Available web languages',
                client.get_dictionary('languages', {'type': 'web'}))
    config.show('Available media relay types',
                client.get_dictionary('media_relay_types'))
except SippySoftError as e:
    print('Error getting dictionaries: %s' % e)
