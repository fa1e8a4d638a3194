#! /usr/bin/env python
# -*- coding: utf-8 -*-
# vi:ts=4:et

# Usage: block_account.py [i_account]

from sippysoft import SippySoftError

import config

client = config.connect()
i_account = config.arg(1, 2130)

try:
    config.show('Block', client.block_account(i_account))
except SippySoftError as e:
    print('Error blocking account: %s' % e)

try:
    config.show('Unblock', client.unblock_account(i_account))
except SippySoftError as e:
    print('Error unblocking account: %s' % e)
