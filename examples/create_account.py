#! /usr/bin/env python
# -*- coding: utf-8 -*-
# vi:ts=4:et

# Usage: create_account.py [username] [i_billing_plan]
#
# createAccount wants the full attribute set.  None is sent as nil:
# for preferred_codec it means "disabled", for on_payment_action
# "no action".  Run get_dicts.py to find valid time zones, languages
# and export types.

from sippysoft import SippySoftError

import config

client = config.connect()
username = config.arg(1, 'testuser123')
i_billing_plan = config.arg(2, 816)

account = {
    'username': username,
    'web_password': 'SecureWebPass123!',
    'authname': username,
    'voip_password': 'SecureVoIPPass123!',
    'max_sessions': 10,
    'max_credit_time': 3600,
    'translation_rule': '',
    'cli_translation_rule': '',
    'credit_limit': 1000.0,
    'i_billing_plan': i_billing_plan,
    'i_time_zone': 367,
    'balance': 0.0,
    'cpe_number': '',
    'vm_enabled': 0,
    'vm_password': '1234',
    'blocked': 0,
    'i_lang': 'en',
    'payment_currency': 'ZAR',
    'payment_method': 1,
    'i_export_type': 1,
    'lifetime': -1,
    'preferred_codec': None,
    'use_preferred_codec_only': False,
    'reg_allowed': 0,
    'welcome_call_ivr': 0,
    'on_payment_action': None,
    'min_payment_amount': 0.0,
    'trust_cli': True,
    'disallow_loops': False,
    'vm_notify_emails': '',
    'vm_forward_emails': '',
    'vm_del_after_fwd': False,
    'company_name': '',
    'salutation': '',
    'first_name': '',
    'last_name': '',
    'mid_init': '',
    'street_addr': '',
    'state': '',
    'postal_code': '',
    'city': '',
    'country': '',
    'contact': '',
    'phone': '',
    'fax': '',
    'alt_phone': '',
    'alt_contact': '',
    'email': '',
    'cc': '',
    'bcc': '',
    'i_password_policy': 1,
    'i_media_relay_type': 2,
}

try:
    config.show('Account created', client.create_account(account))
except SippySoftError as e:
    print('Error creating account: %s' % e)
