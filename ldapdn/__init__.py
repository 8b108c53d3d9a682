#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
"""Parsing, comparison and tree operations on LDAP Distinguished Names
"""

from ldapdn.dn import (
    AVA, RDN, DN, build_rdn, canonical_dn, new_rdn, parse_dn, rdn_less)
from ldapdn.errors import (
    ArgumentError, DNError, HexDecodeError, NotSubordinateError, ParseError)
from ldapdn.escape import escape, unescape
from ldapdn.tree import cmp_tree_order, sort_dns, title_case, tree_sort_key

__version__ = '1.0.0'

__all__ = (
    'AVA', 'RDN', 'DN', 'build_rdn', 'canonical_dn', 'new_rdn', 'parse_dn',
    'rdn_less', 'ArgumentError', 'DNError', 'HexDecodeError',
    'NotSubordinateError', 'ParseError', 'escape', 'unescape',
    'cmp_tree_order', 'sort_dns', 'title_case', 'tree_sort_key',
)
