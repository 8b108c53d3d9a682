#!/usr/bin/python3
#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
"""ldapdn - LDAP Distinguished Names as structured values

Parse, escape, compare and edit LDAP Distinguished Names (RFC 4514) and
order them for subtree operations.
"""

import os

from setuptools import setup

DOCLINES = __doc__.split("\n")

CLASSIFIERS = """\
Development Status :: 4 - Beta
Intended Audience :: Developers
Intended Audience :: System Administrators
License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)
Programming Language :: Python
Programming Language :: Python :: 3
Operating System :: POSIX
Operating System :: Unix
Topic :: System :: Systems Administration :: Authentication/Directory :: LDAP
"""


def get_version():
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                        'ldapdn', '__init__.py')
    with open(path) as f:
        for line in f:
            if line.startswith('__version__'):
                return line.split('=', 1)[1].strip().strip("'\"")
    raise RuntimeError('__version__ not found in %s' % path)


if __name__ == '__main__':
    setup(
        name="ldapdn",
        version=get_version(),
        license="GPLv3+",
        description=DOCLINES[0],
        long_description="\n".join(DOCLINES[2:]),
        classifiers=[c for c in CLASSIFIERS.split('\n') if c],
        platforms=["Linux", "Unix"],
        python_requires=">=3.8",
        packages=[
            "ldapdn",
            "ldapdntests",
            "ldapdntests.test_ldapdn",
        ],
        install_requires=[
            "cryptography",
        ],
        extras_require={
            "test": ["pytest"],
        },
    )
