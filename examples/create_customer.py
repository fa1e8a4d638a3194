#! /usr/bin/env python
# -*- coding: utf-8 -*-
# vi:ts=4:et

# Usage: create_customer.py [name] [i_tariff]
#
# Only name, web_password and i_tariff are mandatory.  Management rights
# (accounts_mgmt, customers_mgmt, tariffs_mgmt, vouchers_mgmt) are bit
# masks: 1 = add, 2 = edit, 4 = delete.  For max_sessions and
# max_calls_per_second None means unlimited.

from sippysoft import SippySoftError

import config

client = config.connect()
name = config.arg(1, 'testcustomer123')
i_tariff = config.arg(2, 736)

optional = {
    'web_login': name,
    'payment_currency': 'ZAR',
    'credit_limit': 1000.0,
    'accounts_mgmt': 7,
    'customers_mgmt': 7,
    'tariffs_mgmt': 0,
    'vouchers_mgmt': 0,
    'i_time_zone': 367,
    'i_lang': 'en',
    'max_sessions': None,
    'max_calls_per_second': None,
    'callshop_enabled': False,
    'i_password_policy': 1,
    'description': '',
}

try:
    result = client.create_customer(name, 'SecureWebPass123!', i_tariff, optional)
    config.show('Customer created', result)
except SippySoftError as e:
    print('Error creating customer: %s' % e)
