#! /usr/bin/env python
# -*- coding: utf-8 -*-
# vi:ts=4:et

# Usage: manage_account_credits.py [i_account] [amount] [currency]

from sippysoft import SippySoftError

import config

client = config.connect()
i_account = config.arg(1, 2130)
amount = config.arg(2, 10.0)
currency = config.arg(3, 'ZAR')

try:
    config.show('Added', client.account_add_funds(
        i_account, amount, currency, payment_notes='Adding funds via API'))
except SippySoftError as e:
    print('Error adding funds: %s' % e)

try:
    config.show('Debited', client.account_debit(
        i_account, amount, currency, payment_notes='Removing funds via API'))
except SippySoftError as e:
    print('Error removing funds: %s' % e)
