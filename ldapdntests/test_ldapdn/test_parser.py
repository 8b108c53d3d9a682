#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
"""
Test the `ldapdn.parser` module.
"""

import pytest

from ldapdn.errors import HexDecodeError, ParseError
from ldapdn.parser import dn2str, normalize_attr, str2dn

pytestmark = pytest.mark.tier0


@pytest.mark.parametrize(
    'dnstring,expected',
    [
        ('', []),
        ('   ', []),
        ('cn=bob', [[('cn', 'bob')]]),
        ('cn=Bob', [[('cn', 'Bob')]]),
        (u'cn=b\xf6b', [[('cn', u'b\xf6b')]]),
        ('cn=bob,sn=builder', [[('cn', 'bob')], [('sn', 'builder')]]),
        ('cn=bob+sn=builder', [[('cn', 'bob'), ('sn', 'builder')]]),
        ('dc=idm,dc=example', [[('dc', 'idm')], [('dc', 'example')]]),
        ('cn=R\\,W privilege', [[('cn', 'R,W privilege')]]),
        ('cn=R\\2cW privilege', [[('cn', 'R,W privilege')]]),
        # whitespace around separators and "=" is dropped
        ('ou=Sales+CN=J. Smith,  DC=example, DC=net',
         [[('ou', 'Sales'), ('CN', 'J. Smith')],
          [('DC', 'example')], [('DC', 'net')]]),
        (' cn = Bob , dc = example ', [[('cn', 'Bob')], [('dc', 'example')]]),
        # inner whitespace is kept, escaped edge whitespace too
        ('cn=Bob  Smith', [[('cn', 'Bob  Smith')]]),
        ('cn=\\ Bob\\ ', [[('cn', ' Bob ')]]),
        ('cn=Bob\\20', [[('cn', 'Bob ')]]),
        # empty values
        ('cn=', [[('cn', '')]]),
        ('cn=,dc=example', [[('cn', '')], [('dc', 'example')]]),
        # hex string
        ('cn=#722c77', [[('cn', 'r,w')]]),
        ('cn=#426F62 , dc=example', [[('cn', 'Bob')], [('dc', 'example')]]),
        ('cn=#c48d', [[('cn', u'č')]]),
        # quoted string
        ('cn="r,w"', [[('cn', 'r,w')]]),
        ('cn="a+b;c" ,dc=example', [[('cn', 'a+b;c')], [('dc', 'example')]]),
        ('cn="say \\"hi\\""', [[('cn', 'say "hi"')]]),
        ('cn=""', [[('cn', '')]]),
        # numeric OID's, the OID. prefix is dropped
        ('2.5.4.3=Bob', [[('2.5.4.3', 'Bob')]]),
        ('OID.2.5.4.3=Bob', [[('2.5.4.3', 'Bob')]]),
        ('oid.0.9.2342.19200300.100.1.25=org', [[('0.9.2342.19200300.100.1.25', 'org')]]),
        # legacy ";" RDN separator
        ('cn=Bob;dc=example', [[('cn', 'Bob')], [('dc', 'example')]]),
        # "=" and "#" are allowed inside an unquoted value
        ('cn=a=b#c', [[('cn', 'a=b#c')]]),
        ('cn=Lu\\c4\\8di\\c4\\87\\+Ma\\=\\>\\<foo', [[('cn', u'Lučić+Ma=><foo')]]),
        ('x-attr-1=v', [[('x-attr-1', 'v')]]),
    ]
)
def test_str2dn(dnstring, expected):
    assert str2dn(dnstring) == expected


@pytest.mark.parametrize(
    'dnstring,position',
    [
        ('cn', 2),
        ('cn=foo,', 6),
        ('cn=foo+', 6),
        ('cn=foo+bar', 10),
        ('uid=foo,bar,dc=example,dc=org', 11),
        ('=foo', 0),
        ('1cn=foo', 1),
        ('cn=foo,,dc=example', 7),
        ('cn="unterminated', 3),
        ('cn="done" trailing', 10),
        ('cn=a"b', 4),
        ('cn=a<b', 4),
        ('cn=a>b', 4),
        ('cn=a\\', 4),
        ('cn=a\\qb', 4),
        ('oid.cn=foo', 3),
        ('1.2.=x', 3),
        ('cn=foo,-ou=x', 7),
    ]
)
def test_str2dn_errors(dnstring, position):
    with pytest.raises(ParseError) as e:
        str2dn(dnstring)
    assert e.value.position == position
    assert dnstring[position:].startswith(e.value.fragment)


@pytest.mark.parametrize(
    'dnstring',
    [
        'cn=#',
        'cn=#123',
        'cn=#12zz',
        'cn=#ff',
        'cn=a\\2',
        'cn=a\\2x',
        'cn=\\c4',
    ]
)
def test_str2dn_hex_errors(dnstring):
    with pytest.raises(HexDecodeError):
        str2dn(dnstring)


def test_str2dn_hex_then_garbage():
    # a valid hex value followed by more text is a plain syntax error
    with pytest.raises(ParseError) as e:
        str2dn('cn=#41 x')
    assert not isinstance(e.value, HexDecodeError)
    assert e.value.position == 7


def test_str2dn_bytes():
    with pytest.raises(TypeError):
        str2dn(b'cn=bob')


def test_str2dn_long_escape_run():
    value = u'č,' * 20000
    dnstring = 'cn=' + '\\c4\\8d\\,' * 20000 + ',dc=example'
    assert str2dn(dnstring) == [[('cn', value)], [('dc', 'example')]]


@pytest.mark.parametrize(
    'rdns,expected',
    [
        ([], ''),
        ([[('CN', 'Bob')]], 'cn=Bob'),
        ([[('cn', 'Bob'), ('ou', 'people')], [('dc', 'example')]],
         'cn=Bob+ou=people,dc=example'),
        ([[('cn', 'R,W privilege')]], 'cn=R\\,W privilege'),
        ([[('cn', ' Bob ')]], 'cn=\\ Bob\\ '),
        ([[('cn', ' ')]], 'cn=\\ '),
        ([[('cn', 'a\\ ')]], 'cn=a\\\\\\ '),
        ([[('cn', 'bell\x07')]], 'cn=bell\\07'),
    ]
)
def test_dn2str(rdns, expected):
    assert dn2str(rdns) == expected
    if rdns:
        lowered = [[(attr.lower(), value) for attr, value in rdn]
                   for rdn in rdns]
        assert str2dn(expected) == lowered


@pytest.mark.parametrize(
    'attr,expected',
    [
        ('cn', 'cn'),
        (' cn ', 'cn'),
        ('OID.2.5.4.3', '2.5.4.3'),
        ('2.5.4.3', '2.5.4.3'),
        ('x-attr', 'x-attr'),
        ('', None),
        ('1cn', None),
        ('c n', None),
        ('cn=', None),
    ]
)
def test_normalize_attr(attr, expected):
    assert normalize_attr(attr) == expected
