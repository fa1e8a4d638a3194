#! /usr/bin/env python
# -*- coding: utf-8 -*-
# vi:ts=4:et

from sippysoft import SippySoftError

import config

client = config.connect()

try:
    config.show('DIDs List', client.get_dids_list())
except SippySoftError as e:
    print('Error getting did list: %s' % e)
