#
# Copyright (C) 2026  ldapdn Contributors see COPYING for license
#
'''

Goal
----

Operate on DN's (Distinguished Names) as structured values instead of
strings. A DN string is ENCODED: the same DN can be written in many
different ways, for example the value "r,w" may appear as

'r\\,w'         # backslash escape
'r\\2cw'        # hexadecimal escape
'#722c77'      # hex string
'"r,w"'        # quoted string

Comparing such strings, or building DN's with string formatting, breaks
as soon as a value contains a reserved character. The classes here parse
the string once, keep the decoded attr and value of every component and
always produce the same (canonical) string form.

Anatomy of a DN
---------------

AVA
    An Attribute Value Assertion, an attr=value pair (e.g. cn=Bob).

RDN
    A Relative Distinguished Name, a non-empty set of AVA's joined with
    the plus sign (e.g. cn=Bob+ou=people). The AVA's are kept sorted by
    attr, so cn=Bob+ou=people and ou=people+cn=Bob are the same RDN.

DN
    An ordered sequence of RDN's joined with commas. The first RDN (index
    0) is the leaf, the last one is closest to the root of the tree. The
    empty DN has no RDN's.

Examples
--------

>>> dn = DN('OU=Sales+CN=J. Smith,DC=example,DC=net')
>>> str(dn)
'cn=J. Smith+ou=Sales,dc=example,dc=net'
>>> str(dn.parent())
'dc=example,dc=net'
>>> dn.is_subordinate(DN('dc=example,dc=net'))
True
>>> dn.move(DN('ou=People,dc=example,dc=net'))
>>> str(dn)
'cn=J. Smith+ou=Sales,ou=People,dc=example,dc=net'
>>> dn.rename(RDN(('cn', 'J. Smith')))
>>> str(dn)
'cn=J. Smith,ou=People,dc=example,dc=net'

Mutability
----------

append(), strip(), move() and rename() change the DN in place and return
None. parent(), clone(), reverse(), slicing and "+" return new DN's. A DN
never shares its RDN's with another DN, every value taken from another DN
is copied.

Comparison of values is case sensitive unless the DN was created with
case_fold=True, attrs always compare case insensitive. With
string_fold=True str() returns the canonical form lower cased.
'''

import functools
import logging

import cryptography.x509

from ldapdn.constants import DEFAULT_CONFIG, DEFAULT_PATH_SEPARATOR, TYPE_ERROR
from ldapdn.errors import ArgumentError, NotSubordinateError, ParseError
from ldapdn.parser import dn2str, normalize_attr, rdn2str, str2dn
from ldapdn.tree import title_case

__all__ = ('AVA', 'RDN', 'DN', 'parse_dn', 'canonical_dn', 'build_rdn',
           'new_rdn', 'rdn_less')

logger = logging.getLogger(__name__)


def _normalize_attr(attr):
    if isinstance(attr, bytes):
        raise TypeError('expected str, got bytes: %r' % attr)
    normalized = normalize_attr(str(attr))
    if normalized is None:
        raise ArgumentError(reason='invalid attribute type %r' % attr)
    return normalized


def _normalize_value(val):
    if isinstance(val, bytes):
        raise TypeError('expected str, got bytes: %r' % val)
    elif not isinstance(val, str):
        val = str(val)
    return val


def str2rdn(value):
    rdns = str2dn(value)
    if len(rdns) != 1:
        raise ValueError("expected exactly one RDN, got %d in \"%s\"" % (len(rdns), value))
    return rdns[0]


def get_ava(*args):
    """
    Get an (attr, value) tuple from args.

    Allowed formats of argument list:
    1) two args:
        a) ['attr', 'value']
    2) one arg:
        a) [('attr', 'value')]
        b) [['attr', 'value']]
        c) [AVA(..)]
        d) ['attr=value']
    """
    l = len(args)
    if l == 2:
        return _normalize_attr(args[0]), _normalize_value(args[1])
    elif l == 1:
        arg = args[0]
        if isinstance(arg, AVA):
            return arg.to_pair()
        elif isinstance(arg, (tuple, list)):
            if len(arg) != 2:
                raise ValueError("tuple or list must be 2-valued, not \"%s\"" % (arg,))
            return _normalize_attr(arg[0]), _normalize_value(arg[1])
        elif isinstance(arg, str):
            rdn = str2rdn(arg)
            if len(rdn) > 1:
                raise TypeError("multiple AVA's specified by \"%s\"" % (arg))
            return rdn[0]
        else:
            raise TypeError("with 1 argument, argument must be str, tuple or list, got %s instead" %
                            arg.__class__.__name__)
    else:
        raise TypeError("invalid number of arguments. 1-2 allowed")


def sort_avas(avas):
    # stable, AVA's with the same attr keep their order
    avas.sort(key=lambda ava: ava[0].lower())


def ava_key(ava, fold=False):
    if fold:
        return ava[0].lower(), ava[1].lower()
    return ava[0].lower(), ava[1]


def rdn_key(rdn, fold=False):
    return (len(rdn),) + tuple(ava_key(ava, fold) for ava in rdn)


def cmp_rdns(a, b, fold=False):
    key_a = rdn_key(a, fold)
    key_b = rdn_key(b, fold)
    if key_a == key_b:
        return 0
    elif key_a < key_b:
        return -1
    else:
        return 1


def rdn_less(a, b, fold=False):
    """
    True if RDN a sorts before RDN b.

    The RDN with fewer AVA's is less, otherwise the AVA's are compared
    pair-wise by lower cased attr and by value (lower cased if fold).
    """
    return cmp_rdns(RDN(a).to_pairs(), RDN(b).to_pairs(), fold) < 0


@functools.total_ordering
class AVA:
    '''
    AVA(arg0, ...)

    An AVA is an LDAP Attribute Value Assertion, an <attr,value> pair.

    The arg sequence may be:

    1) With 2 arguments, the first argument will be the attr, the 2nd
    the value.

    2) With a single list or tuple argument containing exactly 2 items.

    3) With a single string argument in DN syntax.

    For example:

    ava = AVA('cn', 'Bob')      # case 1: two strings
    ava = AVA(('cn', 'Bob'))    # case 2: 2-valued tuple
    ava = AVA('cn=Bob')         # case 3: DN syntax

    The attr must be a descriptor (letters, digits, hyphens) or a numeric
    OID; it is trimmed and an "OID." prefix is removed. The value is any
    string. Non string values are converted with str(), bytes are
    rejected.

    AVA's are immutable. The attr compares case insensitive, the value
    compares exactly.
    '''

    def __init__(self, *args):
        self._attr, self._value = get_ava(*args)

    @property
    def attr(self):
        return self._attr

    type = attr

    @property
    def value(self):
        return self._value

    def to_pair(self):
        return (self._attr, self._value)

    def __str__(self):
        return rdn2str([self.to_pair()])

    def __repr__(self):
        return "%s.%s('%s')" % (self.__module__, self.__class__.__name__, self.__str__())

    def __getitem__(self, key):
        if key == 0:
            return self.attr
        elif key == 1:
            return self.value
        elif isinstance(key, str) and key.lower() == self.attr.lower():
            return self.value
        else:
            raise KeyError("\"%s\" not found in %s" % (key, self.__str__()))

    def __hash__(self):
        # Values which differ only in case must hash alike for folded
        # comparisons.
        return hash(ava_key(self.to_pair(), fold=True))

    def __eq__(self, other):
        if isinstance(other, str):
            try:
                other = AVA(other)
            except (ValueError, TypeError):
                return False

        if not isinstance(other, AVA):
            return NotImplemented

        return ava_key(self.to_pair()) == ava_key(other.to_pair())

    def __lt__(self, other):
        if not isinstance(other, AVA):
            raise TypeError("expected AVA but got %s" % (other.__class__.__name__))

        return ava_key(self.to_pair()) < ava_key(other.to_pair())


@functools.total_ordering
class RDN:
    '''
    RDN(arg0, ...)

    An RDN is a LDAP Relative Distinguished Name, a non-empty set of AVA's.
    The AVA's are stored sorted by attr (attrs which compare equal keep the
    order they were given in), which makes the string form and comparison
    independent of the order the AVA's were supplied in.

    The arg sequence may be:

    * 2-valued tuples or lists, each adds one AVA.

    * A single string in DN syntax, it must hold exactly one RDN.

    * AVA objects, each adds one AVA.

    * A single RDN object, its AVA's are copied.

    Examples:

    RDN(('cn', 'Bob'))                  # 1 AVA
    RDN('cn=Bob+ou=people')             # 2 AVA's
    RDN(('cn', 'Bob'), ('ou', 'people')) # 2 AVA's
    RDN(AVA('cn', 'Bob'), 'ou=people')  # 2 AVA's

    RDN's support len(), iteration over AVA's and indexing:

    rdn[0]              # the first AVA
    rdn['cn']           # the value of the first AVA whose attr is cn
    rdn[:]              # list of the AVA's

    attr and value return the attr and value of the first AVA.

    RDN's are immutable, rdn1 + rdn2 and rdn + ava return a new RDN.
    '''

    AVA_type = AVA

    def __init__(self, *args):
        self._avas = self._avas_from_sequence(args)
        if not self._avas:
            raise ArgumentError(reason="an RDN needs at least one AVA")

    def _avas_from_sequence(self, args):
        if len(args) == 1 and isinstance(args[0], RDN):
            return args[0].to_pairs()

        if len(args) == 1 and isinstance(args[0], str):
            avas = list(str2rdn(args[0]))
        else:
            avas = [get_ava(arg) for arg in args]
        sort_avas(avas)
        return avas

    @classmethod
    def _from_pairs(cls, avas):
        rdn = cls.__new__(cls)
        rdn._avas = list(avas)
        return rdn

    def to_pairs(self):
        return list(self._avas)

    def copy(self):
        return self._from_pairs(self._avas)

    def __str__(self):
        return rdn2str(self._avas)

    def __repr__(self):
        return "%s.%s('%s')" % (self.__module__, self.__class__.__name__, self.__str__())

    def __iter__(self):
        for ava in self._avas:
            yield self.AVA_type(ava)

    def __len__(self):
        return len(self._avas)

    def __getitem__(self, key):
        if isinstance(key, int):
            return self.AVA_type(self._avas[key])
        if isinstance(key, slice):
            return [self.AVA_type(ava) for ava in self._avas[key]]
        elif isinstance(key, str):
            for attr, value in self._avas:
                if key.lower() == attr.lower():
                    return value
            raise KeyError("\"%s\" not found in %s" % (key, self.__str__()))
        else:
            raise TypeError("unsupported type for RDN indexing, must be int, str or slice; not %s" %
                            (key.__class__.__name__))

    @property
    def attr(self):
        return self._avas[0][0]

    @property
    def value(self):
        return self._avas[0][1]

    def equal(self, other, fold=False):
        """Compare with another RDN, values case insensitive if fold"""
        return cmp_rdns(self._avas, other._avas, fold) == 0

    def __hash__(self):
        return hash(rdn_key(self._avas, fold=True))

    def __eq__(self, other):
        if isinstance(other, str):
            try:
                other = RDN(other)
            except (ValueError, TypeError):
                return False

        if not isinstance(other, RDN):
            return NotImplemented

        return self.equal(other)

    def __lt__(self, other):
        if not isinstance(other, RDN):
            raise TypeError("expected RDN but got %s" % (other.__class__.__name__))

        return cmp_rdns(self._avas, other._avas) < 0

    def __add__(self, other):
        if isinstance(other, RDN):
            avas = other.to_pairs()
        elif isinstance(other, AVA):
            avas = [other.to_pair()]
        elif isinstance(other, str):
            avas = RDN(other).to_pairs()
        else:
            raise TypeError("expected RDN, AVA or str but got %s" % (other.__class__.__name__))

        avas = self.to_pairs() + avas
        sort_avas(avas)
        return self._from_pairs(avas)

    def append(self, base):
        """
        Return a new DN with this RDN as the leaf and the RDN's of base
        after it.

        >>> str(RDN('cn=group').append(DN('dc=example,dc=org')))
        'cn=group,dc=example,dc=org'
        """
        if isinstance(base, DN):
            return DN(self, base, case_fold=base.case_fold,
                      string_fold=base.string_fold)
        return DN(self, base)


@functools.total_ordering
class DN:
    '''
    DN(arg0, ..., case_fold=False, string_fold=False)

    A DN is a LDAP Distinguished Name, an ordered sequence of RDN's.

    The constructor iterates through the args and appends the RDN's it
    finds. Each item may be:

    * A 2-valued tuple or list, which forms one RDN with one AVA.

    * A string in DN syntax, which yields zero or more RDN's.

    * A ``cryptography.x509.name.Name`` object. Attribute names are taken
      from cryptography (short name like CN, or the dotted OID).

    * A RDN object, copied as one RDN.

    * A DN object, its RDN's are copied.

    Examples:

    DN(('cn', 'Bob'), ('ou', 'people'))  # 2 RDN's
    DN('cn=Bob,ou=people')               # 2 RDN's
    base_dn = DN('dc=example,dc=org')
    DN(('cn', 'Bob'), 'cn=sudorules,cn=sudo', base_dn)  # 5 RDN's

    case_fold makes value comparisons case insensitive, string_fold lower
    cases the result of str(). When the first arg is a DN its flags are
    used unless given.

    DN's support len(), iteration over RDN's and indexing:

    dn[0]               # copy of the first (leaf) RDN
    dn['cn']            # value of the first AVA whose attr is cn
    dn[1:]              # new DN without the leaf, same as dn.parent()

    dn1 + dn2 returns a new DN, dn.startswith(rdn), dn.endswith(base_dn)
    and "container_dn in dn" test for runs of RDN's.
    '''

    AVA_type = AVA
    RDN_type = RDN

    def __init__(self, *args, **kwds):
        config = dict(DEFAULT_CONFIG)
        if args and isinstance(args[0], DN):
            config.update(case_fold=args[0].case_fold,
                          string_fold=args[0].string_fold)
        for key in kwds:
            if key not in config:
                raise TypeError("unexpected keyword argument %r" % key)
        config.update(kwds)

        self.rdns = self._rdns_from_sequence(args)
        self.case_fold = bool(config['case_fold'])
        self.string_fold = bool(config['string_fold'])

    def _copy_rdns(self, rdns=None):
        if rdns is None:
            rdns = self.rdns
        return [list(rdn) for rdn in rdns]

    def _rdns_from_value(self, value):
        if isinstance(value, str):
            rdns = str2dn(value)
            for rdn in rdns:
                sort_avas(rdn)
        elif isinstance(value, DN):
            rdns = value._copy_rdns()
        elif isinstance(value, (tuple, list, AVA)):
            rdns = [[get_ava(value)]]
        elif isinstance(value, RDN):
            rdns = [value.to_pairs()]
        elif isinstance(value, cryptography.x509.name.Name):
            rdns = list(reversed([
                [get_ava(ava.rfc4514_attribute_name, ava.value) for ava in rdn]
                for rdn in value.rdns
            ]))
            for rdn in rdns:
                sort_avas(rdn)
        else:
            raise TypeError(TYPE_ERROR % (
                'DN', 'str, tuple, Name, RDN or DN', value, type(value)))
        return rdns

    def _rdns_from_sequence(self, seq):
        rdns = []

        for item in seq:
            rdns.extend(self._rdns_from_value(item))
        return rdns

    def _derive(self, rdns):
        cls = self.__class__
        new_dn = cls.__new__(cls)
        new_dn.rdns = self._copy_rdns(rdns)
        new_dn.case_fold = self.case_fold
        new_dn.string_fold = self.string_fold
        return new_dn

    def to_pairs(self):
        """Copy of the RDN's as lists of (attr, value) tuples"""
        return self._copy_rdns()

    def clone(self):
        return self._derive(self.rdns)

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    def ldap_text(self):
        text = dn2str(self.rdns)
        if self.string_fold:
            text = text.lower()
        return text

    def x500_text(self):
        text = dn2str(reversed(self.rdns))
        if self.string_fold:
            text = text.lower()
        return text

    def __str__(self):
        return self.ldap_text()

    def __repr__(self):
        return "%s.%s('%s')" % (self.__module__, self.__class__.__name__, self.__str__())

    def __iter__(self):
        for rdn in self.rdns:
            yield self.RDN_type._from_pairs(rdn)

    def __len__(self):
        return len(self.rdns)

    def __getitem__(self, key):
        if isinstance(key, int):
            return self.RDN_type._from_pairs(self.rdns[key])
        if isinstance(key, slice):
            return self._derive(self.rdns[key])
        elif isinstance(key, str):
            for rdn in self.rdns:
                for attr, value in rdn:
                    if key.lower() == attr.lower():
                        return value
            raise KeyError("\"%s\" not found in %s" % (key, self.__str__()))
        else:
            raise TypeError("unsupported type for DN indexing, must be int, str or slice; not %s" %
                            (key.__class__.__name__))

    def __hash__(self):
        # Hash folds the values so it is the same for DN's which only
        # compare equal with case_fold. Do not mutate a DN used as a key.
        return hash(tuple(rdn_key(rdn, fold=True) for rdn in self.rdns))

    def equal(self, other):
        """
        True if both DN's have the same RDN's.

        Values are compared case insensitive if this DN has case_fold set.
        """
        if other is None:
            return False
        other = self._as_dn(other)
        if len(self) != len(other):
            return False
        return self._cmp_sequence(other, 0, len(other)) == 0

    def __eq__(self, other):
        # Try coercing to DN, if successful compare to coerced object
        if isinstance(other, (str, RDN, AVA)):
            try:
                other = DN(other)
            except (ValueError, TypeError):
                return False

        if not isinstance(other, DN):
            return NotImplemented

        return self.equal(other)

    def __lt__(self, other):
        if not isinstance(other, DN):
            raise TypeError("expected DN but got %s" % (other.__class__.__name__))

        if len(self) != len(other):
            return len(self) < len(other)

        return self._cmp_sequence(other, 0, len(self)) < 0

    def _cmp_sequence(self, pattern, self_start, pat_len):
        self_idx = self_start
        pat_idx = 0
        while pat_idx < pat_len:
            r = cmp_rdns(self.rdns[self_idx], pattern.rdns[pat_idx],
                         self.case_fold)
            if r != 0:
                return r
            self_idx += 1
            pat_idx += 1
        return 0

    def __add__(self, other):
        new_dn = self.clone()
        new_dn.append(other)
        return new_dn

    def _as_dn(self, value):
        if isinstance(value, DN):
            return value
        return DN(value)

    def startswith(self, prefix):
        '''
        Return True if the dn starts with the specified prefix (either a DN or
        RDN object), False otherwise. prefix can also be a tuple of dn's or
        rdn's to try.
        '''
        if isinstance(prefix, tuple):
            return any(self.startswith(pat) for pat in prefix)

        prefix = self._as_dn(prefix)
        if len(prefix) > len(self):
            return False
        return self._cmp_sequence(prefix, 0, len(prefix)) == 0

    def endswith(self, suffix):
        '''
        Return True if dn ends with the specified suffix (either a DN or RDN
        object), False otherwise. suffix can also be a tuple of dn's or
        rdn's to try.
        '''
        if isinstance(suffix, tuple):
            return any(self.endswith(pat) for pat in suffix)

        suffix = self._as_dn(suffix)
        offset = len(self) - len(suffix)
        if offset < 0:
            return False
        return self._cmp_sequence(suffix, offset, len(suffix)) == 0

    def __contains__(self, other):
        """Return the outcome of the test other in self.

        Note the reversed operands.
        """

        if isinstance(other, RDN):
            other = DN(other)
        if isinstance(other, DN):
            return self.find(other) != -1
        raise TypeError(
            "expected DN or RDN but got %s" % other.__class__.__name__
        )

    def _match_positions(self, pattern, start, end):
        pattern = self._as_dn(pattern)
        pat_len = len(pattern)
        start, end, _step = slice(start, end).indices(len(self))
        return pattern, pat_len, range(start, end - pat_len + 1)

    def find(self, pattern, start=None, end=None):
        '''
        Return the lowest index in the DN where pattern DN is found,
        such that pattern is contained in the range [start, end]. Optional
        arguments start and end are interpreted as in slice notation. Return
        -1 if pattern is not found.
        '''
        pattern, pat_len, positions = self._match_positions(
            pattern, start, end)
        for i in positions:
            if self._cmp_sequence(pattern, i, pat_len) == 0:
                return i
        return -1

    def index(self, pattern, start=None, end=None):
        '''
        Like find() but raise ValueError when the pattern is not found.
        '''
        i = self.find(pattern, start, end)
        if i == -1:
            raise ValueError("pattern not found")
        return i

    def rfind(self, pattern, start=None, end=None):
        '''
        Return the highest index in the DN where pattern DN is found,
        -1 if pattern is not found.
        '''
        pattern, pat_len, positions = self._match_positions(
            pattern, start, end)
        for i in reversed(positions):
            if self._cmp_sequence(pattern, i, pat_len) == 0:
                return i
        return -1

    def rindex(self, pattern, start=None, end=None):
        '''
        Like rfind() but raise ValueError when the pattern is not found.
        '''
        i = self.rfind(pattern, start, end)
        if i == -1:
            raise ValueError("pattern not found")
        return i

    def is_subordinate(self, other):
        """
        True if this DN lies below other in the tree.

        other must be non-empty and strictly shorter, and the trailing
        RDN's of this DN must equal the RDN's of other.
        """
        if other is None:
            return False
        other = self._as_dn(other)
        offset = len(self) - len(other)
        if len(other) == 0 or offset <= 0:
            return False
        return self._cmp_sequence(other, offset, len(other)) == 0

    def parent(self):
        """Return a new DN without the leaf RDN; the empty DN for the empty DN"""
        return self._derive(self.rdns[1:])

    def append(self, other):
        """Append the RDN's of other (anything DN() accepts) in place"""
        self.rdns.extend(self._rdns_from_value(other))

    def strip(self, base):
        """
        Remove the RDN's of base from the end of this DN in place.

        Raises NotSubordinateError and leaves the DN unchanged if this DN
        is not subordinate to base.
        """
        base = self._as_dn(base)
        if not self.is_subordinate(base):
            raise NotSubordinateError(dn=str(self), base=str(base))
        del self.rdns[len(self) - len(base):]

    def move(self, new_base):
        """Keep only the leaf RDN and append the RDN's of new_base, in place"""
        rdns = self._rdns_from_value(new_base)
        del self.rdns[1:]
        self.rdns.extend(rdns)

    def rename(self, rdn):
        """Replace the leaf RDN, in place"""
        if not self.rdns:
            raise IndexError("cannot rename the empty DN")
        self.rdns[0] = self.RDN_type(rdn).to_pairs()

    def reverse(self):
        """Return a new DN with the RDN's in root first order"""
        return self._derive(self.rdns[::-1])

    def leaf_value(self):
        """The value of the first AVA of the leaf RDN, '' for the empty DN"""
        if not self.rdns:
            return ''
        return self.rdns[0][0][1]

    def first_rdn(self):
        """Copy of the leaf RDN, None for the empty DN"""
        if not self.rdns:
            return None
        return self.RDN_type._from_pairs(self.rdns[0])

    def pretty_path(self, base=None, separator=DEFAULT_PATH_SEPARATOR,
                    value_transform=title_case):
        """
        Join the values of the RDN's below base, root first.

        If the DN is not subordinate to base the whole DN is used. Each
        value is passed through value_transform. An empty separator means
        the default one.

        >>> dn = DN('cn=group,ou=some,ou=apps,dc=example,dc=org')
        >>> dn.pretty_path(DN('dc=example,dc=org'))
        'Apps/Some/Group'
        >>> dn.pretty_path('dc=example,dc=org', ' > ', str.upper)
        'APPS > SOME > GROUP'
        """
        dn = self.clone()
        if base is not None:
            try:
                dn.strip(base)
            except NotSubordinateError as e:
                logger.debug("%s, using the whole DN for the path", e)

        if not separator:
            separator = DEFAULT_PATH_SEPARATOR
        if value_transform is None:
            value_transform = title_case

        values = []
        while len(dn):
            values.append(dn.leaf_value())
            dn = dn.parent()
        values.reverse()
        return separator.join(value_transform(value) for value in values)


def parse_dn(text, case_fold=False, string_fold=False):
    """
    Parse a DN string.

    Raises ParseError (HexDecodeError for bad hex) if text is malformed.
    """
    if not isinstance(text, str):
        raise TypeError(TYPE_ERROR % ('text', str, text, type(text)))
    try:
        return DN(text, case_fold=case_fold, string_fold=string_fold)
    except ParseError as e:
        logger.debug("failed to parse DN %r: %s", text, e)
        raise


def canonical_dn(text, fold=False):
    """
    Return the canonical form of a DN string, lower cased if fold.

    >>> canonical_dn('ou=Sales+CN=J. Smith,  DC=example, DC=net')
    'cn=J. Smith+ou=Sales,dc=example,dc=net'
    >>> canonical_dn('ou=Sales+CN=J. Smith,  DC=example, DC=net', True)
    'cn=j. smith+ou=sales,dc=example,dc=net'
    """
    return str(parse_dn(text, string_fold=fold))


def build_rdn(pairs):
    """
    Build an RDN from an ordered sequence of (attr, value) pairs.

    >>> str(build_rdn([('ou', 'Sales'), ('cn', 'J. Smith')]))
    'cn=J. Smith+ou=Sales'
    """
    pairs = list(pairs)
    if not pairs:
        raise ArgumentError(reason='no (attr, value) pairs given')
    for pair in pairs:
        if not isinstance(pair, (tuple, list)) or len(pair) != 2:
            raise ArgumentError(
                reason='expected an (attr, value) pair, got %r' % (pair,))
    return RDN(*pairs)


def new_rdn(*args):
    """
    Build an RDN from a flat attr, value, attr, value, ... argument list.

    >>> str(new_rdn('ou', 'Sales', 'cn', 'J. Smith'))
    'cn=J. Smith+ou=Sales'
    """
    if len(args) % 2:
        raise ArgumentError(reason='odd number of arguments: %d' % len(args))
    return build_rdn(zip(args[::2], args[1::2]))
