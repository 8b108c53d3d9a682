#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
"""
Ordering of DN's for operations on whole subtrees.

The usual task is to search a subtree, sort the result and then delete
the entries in that order. An entry can only be removed after all of its
children are gone, so every DN sorts before each of its ancestors and the
base of the subtree comes last:

>>> from ldapdn.dn import DN
>>> dns = [DN('dc=example,dc=org'), DN('cn=b,ou=users,dc=example,dc=org'),
...        DN('ou=users,dc=example,dc=org'), DN('cn=a,ou=users,dc=example,dc=org')]
>>> [str(dn) for dn in sort_dns(dns)]
['cn=b,ou=users,dc=example,dc=org', 'cn=a,ou=users,dc=example,dc=org', 'ou=users,dc=example,dc=org', 'dc=example,dc=org']

DN's which are not in an ancestor relationship are ordered by their root
first string form, greatest first.
"""

import functools
import re

from ldapdn.parser import dn2str

__all__ = ('cmp_tree_order', 'tree_sort_key', 'sort_dns', 'title_case')

_WORD_START_RE = re.compile(r'(?<!\w)(\w)')


def title_case(value):
    """
    Upper case the first letter of every word, leave the rest alone.

    >>> title_case('eu-central-1a')
    'Eu-Central-1a'
    """
    return _WORD_START_RE.sub(lambda m: m.group(1).upper(), value)


def _root_first_text(dn):
    text = dn2str(reversed(dn.to_pairs()))
    if dn.case_fold:
        text = text.lower()
    return text


def cmp_tree_order(a, b):
    """
    Compare two DN's in tree order, returns -1, 0 or 1.

    a sorts before b if a is subordinate to b, after b if b is subordinate
    to a. Otherwise the root first string forms are compared, the greater
    one sorts first.
    """
    if a.is_subordinate(b):
        return -1
    if b.is_subordinate(a):
        return 1

    key_a = _root_first_text(a)
    key_b = _root_first_text(b)
    if key_a == key_b:
        return 0
    elif key_a > key_b:
        return -1
    else:
        return 1


tree_sort_key = functools.cmp_to_key(cmp_tree_order)


def sort_dns(dns):
    """Return a new list with dns in tree order, leaves first"""
    return sorted(dns, key=tree_sort_key)
