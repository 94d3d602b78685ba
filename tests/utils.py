from ldapdefs import rules
from ldapdefs.exceptions import DefinitionDecodeError
from ldapdefs.parser import DefinitionParser
from ldapdefs.reader import SubstringReader

_parser_defaults = dict((key, getattr(DefinitionParser, key)) for key in dir(DefinitionParser)
                        if key.startswith('DEFAULT_'))


def reset_parser_defaults():
    for key, val in _parser_defaults.items():
        setattr(DefinitionParser, key, val)


def clear_syntax_rule_objects():
    rules._oid_syntax_rule_objects.clear()


def decode_error(syntax, value):
    """Decode a value that is expected to be invalid and return the exception"""
    try:
        syntax.decode(value)
    except DefinitionDecodeError as e:
        return e
    raise AssertionError('{0!r} was accepted'.format(value))


def read_all(read, text, *args):
    """Run a token reader over text and return its result and the reader"""
    reader = SubstringReader(text)
    return read(reader, *args), reader
