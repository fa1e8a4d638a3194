#! /usr/bin/env python
# -*- coding: utf-8 -*-
# vi:ts=4:et

# Usage: manage_customer_credits.py [i_customer] [amount] [currency]

from sippysoft import SippySoftError

import config

client = config.connect()
i_customer = config.arg(1, 190)
amount = config.arg(2, 10.0)
currency = config.arg(3, 'ZAR')

try:
    config.show('Added', client.customer_add_funds(
        i_customer, amount, currency, payment_notes='Adding funds via API'))
except SippySoftError as e:
    print('Error adding funds: %s' % e)

try:
    config.show('Debited', client.customer_debit(
        i_customer, amount, currency, payment_notes='Removing funds via API'))
except SippySoftError as e:
    print('Error removing funds: %s' % e)
