#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
"""Backslash escaping of attribute values (RFC 4514, 2.4 and 3)
"""

from ldapdn.constants import (
    CONTROL_LIMIT, ESCAPABLE_CHARS, HEX_DIGITS, RESERVED_CHARS)
from ldapdn.errors import HexDecodeError, ParseError

__all__ = ("escape", "unescape")


def escape(raw):
    """Escape the reserved and control characters of a raw value

    >>> escape('R,W privilege')
    'R\\\\,W privilege'
    >>> escape('test\\x07test')
    'test\\\\07test'
    """
    result = []
    for c in raw:
        if c in RESERVED_CHARS:
            result.append("\\")
            result.append(c)
        elif ord(c) < CONTROL_LIMIT:
            result.append("\\%02x" % ord(c))
        else:
            result.append(c)
    return "".join(result)


def unescape(token, offset=0):
    """Decode the backslash escapes of an encoded value

    ``\\`` followed by a reserved character or a space stands for that
    character, ``\\`` followed by two hex digits for one byte. Runs of
    escaped bytes are decoded as UTF-8, so ``\\c3\\a4`` yields one
    character.

    offset is added to the positions reported in exceptions, it is the
    position of token within the DN string it was taken from.
    """
    result = []
    pending = bytearray()
    pending_start = 0
    i = 0
    end = len(token)
    while i < end:
        c = token[i]
        if c != "\\":
            if pending:
                result.append(_decode_bytes(token, pending, pending_start,
                                            i, offset))
                pending = bytearray()
            result.append(c)
            i += 1
            continue

        if i + 1 >= end:
            raise ParseError(fragment=token[i:], position=offset + i,
                             reason='dangling backslash')
        nxt = token[i + 1]
        if nxt in HEX_DIGITS:
            pair = token[i + 1:i + 3]
            if len(pair) != 2 or pair[1] not in HEX_DIGITS:
                raise HexDecodeError(fragment=token[i:i + 3],
                                     position=offset + i,
                                     reason='escape needs two hex digits')
            if not pending:
                pending_start = i
            pending.append(int(pair, 16))
            i += 3
        elif nxt in ESCAPABLE_CHARS:
            if pending:
                result.append(_decode_bytes(token, pending, pending_start,
                                            i, offset))
                pending = bytearray()
            result.append(nxt)
            i += 2
        else:
            raise ParseError(fragment=token[i:i + 2], position=offset + i,
                             reason='invalid escape sequence')

    if pending:
        result.append(_decode_bytes(token, pending, pending_start, end,
                                    offset))
    return "".join(result)


def _decode_bytes(token, pending, start, stop, offset):
    try:
        return bytes(pending).decode('utf-8')
    except UnicodeDecodeError:
        raise HexDecodeError(fragment=token[start:stop],
                             position=offset + start,
                             reason='escaped bytes are not valid UTF-8')
