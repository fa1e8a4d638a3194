#! /usr/bin/env python
# -*- coding: utf-8 -*-
# vi:ts=4:et

# Usage: assign_did.py [i_did] [did] [i_account]
#
# Looks a DID up both ways, assigns it to an account and removes the
# assignment again.

from sippysoft import SippySoftError

import config

client = config.connect()
i_did = config.arg(1, 155800)
did = config.arg(2, '27100146474')
i_account = config.arg(3, 2130)

try:
    config.show('DID Details', client.get_did_info(i_did))
    config.show('DID Details', client.get_did_info(did=did))
except SippySoftError as e:
    print('Error getting DID: %s' % e)

try:
    config.show('Assigned', client.update_did({'did': did, 'i_account': i_account}))
except SippySoftError as e:
    print('Error assigning: %s' % e)

# i_ivr_application has to be cleared too when the DID is given by i_did
try:
    config.show('Removed', client.update_did({'i_did': i_did, 'i_account': None,
                                              'i_ivr_application': None}))
except SippySoftError as e:
    print('Error removing: %s' % e)
