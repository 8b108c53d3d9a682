#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
"""
Package containing all ldapdn unit tests.
"""
