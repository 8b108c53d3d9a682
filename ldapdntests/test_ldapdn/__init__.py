#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
"""
Sub-package containing unit tests for `ldapdn` package.
"""
