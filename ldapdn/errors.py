#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
"""
Custom exception classes.

Every exception raised by this package derives from `DNError`. The
exceptions are built from keyword arguments only; each keyword is
interpolated into the class ``format`` string and is also available as
an attribute of the same name, for example:

>>> e = ParseError(fragment='bar', position=7, reason='expected "="')
>>> e.position
7
>>> print(e)
invalid DN syntax at position 7 near 'bar': expected "="

`ParseError`, `HexDecodeError` and `NotSubordinateError` are also
``ValueError`` subclasses and `ArgumentError` is a ``TypeError``, so callers
catching the builtin exceptions keep working.
"""


class DNError(Exception):
    """
    Base class for all exceptions raised by ldapdn.
    """

    format = ''

    def __init__(self, **kw):
        self.msg = self.format % kw
        self.kw = kw
        for (key, value) in kw.items():
            assert not hasattr(self, key), 'conflicting kwarg %s.%s = %r' % (
                self.__class__.__name__, key, value,
            )
            setattr(self, key, value)
        Exception.__init__(self, self.msg)

    @property
    def message(self):
        return str(self)


class ParseError(DNError, ValueError):
    """
    Raised when a DN string cannot be decoded.

    For example:

    >>> raise ParseError(fragment='cn', position=0, reason='expected "="')
    Traceback (most recent call last):
      ...
    ldapdn.errors.ParseError: invalid DN syntax at position 0 near 'cn': expected "="
    """

    format = 'invalid DN syntax at position %(position)d near %(fragment)r: %(reason)s'


class HexDecodeError(ParseError):
    """
    Raised when a ``#`` hex value or a ``\\XX`` escape is malformed.

    For example:

    >>> raise HexDecodeError(fragment='#4', position=3, reason='odd number of hex digits')
    Traceback (most recent call last):
      ...
    ldapdn.errors.HexDecodeError: invalid DN syntax at position 3 near '#4': odd number of hex digits
    """


class NotSubordinateError(DNError, ValueError):
    """
    Raised when a DN is stripped of a base it is not subordinate to.

    For example:

    >>> raise NotSubordinateError(dn='cn=a,dc=org', base='dc=com')
    Traceback (most recent call last):
      ...
    ldapdn.errors.NotSubordinateError: 'cn=a,dc=org' is not subordinate to 'dc=com'
    """

    format = '%(dn)r is not subordinate to %(base)r'


class ArgumentError(DNError, TypeError):
    """
    Raised when an RDN is built from unusable arguments.

    For example:

    >>> raise ArgumentError(reason='odd number of arguments: 3')
    Traceback (most recent call last):
      ...
    ldapdn.errors.ArgumentError: odd number of arguments: 3
    """

    format = '%(reason)s'
