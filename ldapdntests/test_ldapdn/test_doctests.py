#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
"""
Run the examples in the docstrings of the `ldapdn` modules.
"""

import doctest
import importlib

import pytest

pytestmark = pytest.mark.tier0


@pytest.mark.parametrize('name', [
    'ldapdn.errors', 'ldapdn.escape', 'ldapdn.parser', 'ldapdn.tree',
    'ldapdn.dn',
])
def test_docstring_examples(name):
    # ldapdn.escape is shadowed by the function in the package namespace
    module = importlib.import_module(name)
    failed, attempted = doctest.testmod(module)
    assert attempted > 0
    assert failed == 0
