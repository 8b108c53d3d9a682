#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
"""
All constants centralised in one file.
"""

# Characters which are always written as a backslash escape inside a value
RESERVED_CHARS = frozenset(',+"\\<>;#=')

# Characters which may follow a backslash and stand for themselves
ESCAPABLE_CHARS = RESERVED_CHARS | frozenset(' ')

# Code points below this one are written as a 2 digit hex escape
CONTROL_LIMIT = 0x20

HEX_DIGITS = frozenset('0123456789abcdefABCDEF')

# Separators in the string representation
AVA_SEPARATOR = '+'
RDN_SEPARATOR = ','
# RFC 2253 allowed ';' between RDN's, still accepted when parsing
LEGACY_RDN_SEPARATOR = ';'
RDN_SEPARATORS = frozenset((RDN_SEPARATOR, LEGACY_RDN_SEPARATOR))

# Characters which must not appear unescaped in an unquoted value
FORBIDDEN_UNQUOTED = frozenset('"<>\x00')

# Used between the values by DN.pretty_path() when no separator is given
DEFAULT_PATH_SEPARATOR = '/'

# The default flags of a new DN.
# This is a tuple instead of a dict so that it is immutable.
# To create a dict with this config, just "d = dict(DEFAULT_CONFIG)".
DEFAULT_CONFIG = (
    # value comparisons ignore case
    ('case_fold', False),
    # str() of the DN is lower cased
    ('string_fold', False),
)

# Standard format for TypeError message:
TYPE_ERROR = '%s: need a %r; got %r (a %r)'
