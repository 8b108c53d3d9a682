#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
"""Conversion between DN strings and lists of RDN's

str2dn() decodes a DN string into a list of RDN's, each RDN being a list
of (attr, value) tuples in the order they appear in the string. dn2str()
is the reverse operation and always produces the canonical form.

>>> str2dn('cn=R\\\\2cW privilege,dc=example')
[[('cn', 'R,W privilege')], [('dc', 'example')]]
>>> dn2str([[('CN', 'R,W privilege')], [('dc', 'example')]])
'cn=R\\\\,W privilege,dc=example'

The decoder is a single left to right scan over the string. It never
backtracks, the whole string has to be consumed and any leftover text
is reported as an error.
"""

import re

from ldapdn.constants import (
    AVA_SEPARATOR, FORBIDDEN_UNQUOTED, HEX_DIGITS, RDN_SEPARATOR,
    RDN_SEPARATORS)
from ldapdn.errors import HexDecodeError, ParseError
from ldapdn.escape import escape, unescape

__all__ = ("str2dn", "dn2str", "rdn2str", "normalize_attr")

WHITESPACE = frozenset(' \t\r\n')

# descriptor (cn, ou-name) or numericoid (2.5.4.3), the latter may carry
# an "OID." prefix which is dropped
_ATTR_TYPE_RE = re.compile(
    r'(?:oid\.(?=[0-9]))?(?P<type>[0-9]+(?:\.[0-9]+)*|[a-z][-a-z0-9]*)',
    re.IGNORECASE)

# longest piece of the input quoted in an error message
_FRAGMENT_LEN = 20

_VALUE_END = frozenset((AVA_SEPARATOR,)) | RDN_SEPARATORS


class _Scanner:
    """State of decoding one DN string"""

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.end = len(text)

    def fail(self, reason, start=None, error=ParseError):
        if start is None:
            start = self.pos
        raise error(fragment=self.text[start:start + _FRAGMENT_LEN],
                    position=start, reason=reason)

    def skip_whitespace(self):
        while self.pos < self.end and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def at_end(self):
        return self.pos >= self.end

    def dn(self):
        rdns = []
        self.skip_whitespace()
        if self.at_end():
            return rdns

        rdn = []
        while True:
            rdn.append(self.ava())
            self.skip_whitespace()
            if self.at_end():
                rdns.append(rdn)
                return rdns

            sep = self.text[self.pos]
            if sep in RDN_SEPARATORS:
                rdns.append(rdn)
                rdn = []
            elif sep != AVA_SEPARATOR:
                self.fail('unexpected text after value')
            self.pos += 1
            self.skip_whitespace()
            if self.at_end():
                self.fail('separator %r not followed by an attribute' % sep,
                          start=self.pos - 1)

    def ava(self):
        m = _ATTR_TYPE_RE.match(self.text, self.pos)
        if m is None:
            self.fail('missing or malformed attribute type')
        attr = m.group('type')
        self.pos = m.end()

        self.skip_whitespace()
        if self.at_end() or self.text[self.pos] != '=':
            self.fail('expected "=" after attribute type %r' % attr)
        self.pos += 1
        self.skip_whitespace()

        return attr, self.value()

    def value(self):
        if self.at_end():
            return ''
        c = self.text[self.pos]
        if c == '#':
            return self.hexstring()
        elif c == '"':
            return self.quoted()
        return self.string()

    def hexstring(self):
        start = self.pos
        self.pos += 1
        while (not self.at_end() and
               self.text[self.pos] not in _VALUE_END and
               self.text[self.pos] not in WHITESPACE):
            self.pos += 1

        digits = self.text[start + 1:self.pos]
        if not digits:
            self.fail('no hex digits after "#"', start=start,
                      error=HexDecodeError)
        if any(d not in HEX_DIGITS for d in digits):
            self.fail('non hex character in "#" value', start=start,
                      error=HexDecodeError)
        if len(digits) % 2:
            self.fail('odd number of hex digits', start=start,
                      error=HexDecodeError)
        try:
            return bytes.fromhex(digits).decode('utf-8')
        except UnicodeDecodeError:
            self.fail('"#" value is not valid UTF-8', start=start,
                      error=HexDecodeError)

    def quoted(self):
        start = self.pos
        self.pos += 1
        while not self.at_end():
            c = self.text[self.pos]
            if c == '\\':
                self.pos += 2
            elif c == '"':
                break
            else:
                self.pos += 1
        if self.at_end():
            self.fail('unterminated quoted value', start=start)

        value = unescape(self.text[start + 1:self.pos], offset=start + 1)
        self.pos += 1
        return value

    def string(self):
        start = self.pos
        # end of the value without unescaped trailing whitespace
        last = start
        while not self.at_end():
            c = self.text[self.pos]
            if c == '\\':
                self.pos = min(self.pos + 2, self.end)
                last = self.pos
                continue
            if c in _VALUE_END:
                break
            if c in FORBIDDEN_UNQUOTED:
                self.fail('character %r must be escaped' % c)
            self.pos += 1
            if c not in WHITESPACE:
                last = self.pos

        return unescape(self.text[start:last], offset=start)


def normalize_attr(attr):
    """
    Trim attr and drop an OID. prefix, return None when attr is not an
    attribute type.
    """
    m = _ATTR_TYPE_RE.fullmatch(attr.strip())
    if m is None:
        return None
    return m.group('type')


def str2dn(text):
    """Decode a DN string

    Returns a list of RDN's, each a list of (attr, value) tuples. The
    empty string is the empty DN. Raises ParseError (or HexDecodeError)
    when text is not a valid DN.
    """
    if text is None:
        return []
    if isinstance(text, bytes):
        raise TypeError('expected str, got bytes: %r' % text)
    return _Scanner(text).dn()


def _escape_value(value):
    # the decoder drops unescaped whitespace around a value
    head = tail = ''
    if value.startswith(' '):
        head = '\\ '
        value = value[1:]
    if value.endswith(' '):
        tail = '\\ '
        value = value[:-1]
    return head + escape(value) + tail


def rdn2str(avas):
    return AVA_SEPARATOR.join(
        '='.join((attr.lower(), _escape_value(value)))
        for attr, value in avas
    )


def dn2str(rdns):
    """Encode a list of RDN's in the canonical form

    Attribute types are lower cased, values escaped, the order of RDN's
    and AVA's is kept as given.
    """
    return RDN_SEPARATOR.join(rdn2str(rdn) for rdn in rdns)
