#! /usr/bin/env python
# -*- coding: utf-8 -*-
# vi:ts=4:et

# Usage: manage_account_auth_rules.py [i_account] [remote_ip]

from sippysoft import SippySoftError

import config

client = config.connect()
i_account = config.arg(1, 2130)
remote_ip = config.arg(2, '8.8.8.8')

try:
    config.show('Rules', client.list_auth_rules(i_account))
except SippySoftError as e:
    print('Error loading authrules: %s' % e)

try:
    response = client.add_auth_rule(i_account, 1, remote_ip=remote_ip)
except SippySoftError as e:
    print('Error adding authrule: %s' % e)
else:
    config.show('Added', response)
    i_authentication = response['i_authentication']
    print('Added authrule ID: %s' % i_authentication)
    try:
        config.show('Removed', client.del_auth_rule(i_authentication))
    except SippySoftError as e:
        print('Error removing authrule: %s' % e)
