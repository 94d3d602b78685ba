"""Token readers for RFC 4512 schema definitions

Each reader takes a :class:`.SubstringReader`, skips any leading whitespace, consumes exactly one grammatical
element, and returns its value. Failures are raised as :class:`.DefinitionDecodeError` subclasses citing the offset
where the problem was detected.
"""

from . import rfc4512
from .exceptions import (
    ExpectedQuote,
    IllegalCharacter,
    InvalidUsage,
    MalformedList,
    MalformedOid,
    OutOfInput,
    UnterminatedQuote,
)
from .reader import WHITESPACE
from .utils import CaseIgnoreDict
import string

_DELIMITERS = WHITESPACE + "()'${}"
_DIGITS = frozenset(string.digits)
_KEYCHARS = frozenset(string.ascii_letters + string.digits + '-')

_usages = CaseIgnoreDict(dict((usage, usage) for usage in rfc4512.usages))


def _is_word_char(c):
    return c not in _DELIMITERS


def _read_word(reader, exc_cls):
    """Read a run of non-delimiter characters, which must not be empty"""
    reader.skip_whitespace()
    c = reader.peek()
    if c is None:
        raise OutOfInput(reader.definition, '', reader.position())
    word = reader.read_while(_is_word_char)
    if not word:
        raise exc_cls(reader.definition, c, reader.position())
    return word


def _bad_oid_index(token):
    """Locate the first character keeping token from being a numericoid or descr"""
    if token[0] in string.ascii_letters:
        for i, c in enumerate(token):
            if c not in _KEYCHARS:
                return i
        return 0
    prev = '.'
    for i, c in enumerate(token):
        if c == '.':
            if prev == '.':
                return i
        elif c not in _DIGITS:
            return i
        prev = c
    # trailing dot, or a single arc
    return len(token) - 1


def _is_descr(token, allow_malformed):
    if rfc4512.re_descr.match(token):
        return True
    return allow_malformed and bool(rfc4512.re_lenient_descr.match(token))


def _unescape(value):
    return rfc4512.re_escape.sub(lambda m: "'" if m.group(0) == r'\27' else '\\', value)


def read_token_name(reader):
    """Read the next keyword.

    :return: The keyword with its original casing, or None if the closing parenthesis of the definition was read
    :rtype: str or None
    :raises OutOfInput: if the definition ends before the closing parenthesis
    :raises IllegalCharacter: if the next character cannot begin a keyword
    """
    reader.skip_whitespace()
    c = reader.peek()
    if c is None:
        raise OutOfInput(reader.definition, '', reader.position())
    if c == ')':
        reader.read()
        return None
    return _read_word(reader, IllegalCharacter)


def read_numeric_oid(reader, allow_descr=False):
    """Read a numericoid, or also a descr if ``allow_descr`` is set"""
    reader.skip_whitespace()
    pos = reader.position()
    token = _read_word(reader, MalformedOid)
    if rfc4512.re_numericoid.match(token):
        return token
    if allow_descr and _is_descr(token, True):
        return token
    raise MalformedOid(reader.definition, token, pos + _bad_oid_index(token))


def read_oid(reader, allow_malformed=False):
    """Read an oid: either a numericoid or a descr"""
    reader.skip_whitespace()
    pos = reader.position()
    token = _read_word(reader, MalformedOid)
    if rfc4512.re_numericoid.match(token) or _is_descr(token, allow_malformed):
        return token
    raise MalformedOid(reader.definition, token, pos + _bad_oid_index(token))


def read_quoted_string(reader):
    """Read a qdstring and return its unescaped content"""
    reader.skip_whitespace()
    start = reader.position()
    c = reader.peek()
    if c is None:
        raise OutOfInput(reader.definition, '', start)
    if c != "'":
        raise ExpectedQuote(reader.definition, c, start)
    reader.read()
    value = reader.read_while(lambda ch: ch != "'")
    if reader.peek() is None:
        raise UnterminatedQuote(reader.definition, "'" + value, start)
    reader.read()
    return _unescape(value)


def read_quoted_descriptor(reader, allow_malformed=False):
    """Read a qdescr and return the descr"""
    reader.skip_whitespace()
    start = reader.position()
    name = read_quoted_string(reader)
    if not name:
        raise MalformedOid(reader.definition, "''", start)
    if not _is_descr(name, allow_malformed):
        raise MalformedOid(reader.definition, name, start + 1 + _bad_oid_index(name))
    return name


def _read_list(reader, read_element, separator=None):
    """Read the elements of a parenthesized list whose open paren was just consumed"""
    start = reader.position() - 1
    values = []
    while True:
        reader.skip_whitespace()
        c = reader.peek()
        if c is None:
            raise OutOfInput(reader.definition, '', reader.position())
        if c == ')':
            if not values:
                raise MalformedList(reader.definition, c, start)
            reader.read()
            return values
        if separator:
            if values:
                if c != separator:
                    raise MalformedList(reader.definition, c, reader.position())
                sep_pos = reader.position()
                reader.read()
                reader.skip_whitespace()
                c = reader.peek()
                if c == ')':
                    raise MalformedList(reader.definition, separator, sep_pos)
                if c == separator:
                    raise MalformedList(reader.definition, c, reader.position())
            elif c == separator:
                raise MalformedList(reader.definition, c, reader.position())
        values.append(read_element(reader))


def _read_one_or_list(reader, read_element, separator=None):
    reader.skip_whitespace()
    if reader.peek() == '(':
        reader.read()
        return _read_list(reader, read_element, separator)
    return [read_element(reader)]


def _require_value(reader):
    """Reject a closing paren where a value or list is required"""
    reader.skip_whitespace()
    if reader.peek() == ')':
        raise MalformedList(reader.definition, ')', reader.position())


def read_name_descriptors(reader, allow_malformed=False):
    """Read qdescrs: a single quoted name or a parenthesized list of quoted names

    :rtype: list[str]
    """
    return _read_one_or_list(reader, lambda r: read_quoted_descriptor(r, allow_malformed))


def read_oids(reader, allow_malformed=False):
    """Read oids: a single oid or a parenthesized ``$``-separated list

    :rtype: set[str]
    """
    _require_value(reader)
    return set(_read_one_or_list(reader, lambda r: read_oid(r, allow_malformed), '$'))


def read_extension_values(reader):
    """Read qdstrings: a single quoted string or a parenthesized list of quoted strings

    :rtype: list[str]
    """
    return _read_one_or_list(reader, read_quoted_string)


def read_noidlen(reader, allow_malformed=False):
    """Read a syntax OID with an optional ``{len}`` suggested maximum length

    :return: A tuple of the OID and the length, or None if no length was given
    :rtype: tuple
    """
    syntax_oid = read_numeric_oid(reader, allow_malformed)
    if reader.peek() != '{':
        return syntax_oid, None
    start = reader.position()
    reader.read()
    length = reader.read_while(lambda c: c in _DIGITS)
    c = reader.peek()
    if c is None:
        raise OutOfInput(reader.definition, '', reader.position())
    if c != '}' or not rfc4512.re_len.match(length):
        raise MalformedOid(reader.definition, '{' + length + c, start)
    reader.read()
    return syntax_oid, int(length)


def read_rule_id(reader):
    """Read a DIT structure rule ID"""
    reader.skip_whitespace()
    pos = reader.position()
    token = _read_word(reader, MalformedOid)
    if not rfc4512.re_ruleid.match(token):
        raise MalformedOid(reader.definition, token, pos)
    return int(token)


def read_rule_ids(reader):
    """Read ruleids: a single rule ID or a parenthesized space-separated list

    :rtype: set[int]
    """
    _require_value(reader)
    return set(_read_one_or_list(reader, read_rule_id))


def read_usage(reader):
    """Read an attribute type usage and return its canonical casing"""
    reader.skip_whitespace()
    pos = reader.position()
    token = _read_word(reader, InvalidUsage)
    try:
        return _usages[token]
    except KeyError:
        raise InvalidUsage(reader.definition, token, pos)
