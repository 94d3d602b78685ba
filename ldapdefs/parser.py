"""The generic schema definition driver"""

from .definitions import EXTENSION_POLICIES
from .exceptions import (
    EmptyValue,
    ExpectedOpenParen,
    IllegalCharacter,
    LDAPSchemaWarning,
    LDAPWarning,
)
from .reader import SubstringReader
from .tokens import read_token_name

import logging
import warnings
from warnings import warn

logger = logging.getLogger('ldapdefs')
logger.addHandler(logging.NullHandler())
logger.setLevel(logging.DEBUG)  # set to DEBUG to allow handler levels full discretion


_showwarning_default = warnings.showwarning


def _showwarning_disabled(message, category, filename, lineno, file=None, line=None):
    if not issubclass(category, LDAPWarning):
        _showwarning_default(message, category, filename, lineno, file, line)


def _showwarning_log(message, category, filename, lineno, file=None, line=None):
    if issubclass(category, LDAPWarning):
        logger.warning('{0}: {1}'.format(category.__name__, message))
    else:
        _showwarning_default(message, category, filename, lineno, file, line)


class DefinitionParser(object):
    """Decodes definition strings according to a :class:`.DefinitionGrammar`.

    A parser holds only options; every call to :meth:`parse` works on its own reader and definition, so one parser
    may be shared freely.

    :param bool allow_malformed_names: Accept a descriptor as the identifying OID and tolerate underscores, dots and
                                       semicolons in names
    :param str extension_duplicates: ``accumulate`` to collect values of repeated extension keywords, ``replace`` to
                                     keep only the last occurrence
    :param bool warn_obsolete: Issue an :class:`.LDAPSchemaWarning` when an OBSOLETE definition is decoded
    """

    # global defaults
    DEFAULT_ALLOW_MALFORMED_NAMES = False
    DEFAULT_EXTENSION_DUPLICATES = 'accumulate'
    DEFAULT_WARN_OBSOLETE = False

    # logging config
    LOG_FORMAT = '[%(asctime)s] %(name)s %(levelname)s : %(message)s'

    ## logging and warning controls

    @staticmethod
    def enable_logging(level=logging.DEBUG):
        """Enable logging output to stderr"""
        stderr_handler = logging.StreamHandler()
        stderr_handler.setFormatter(logging.Formatter(DefinitionParser.LOG_FORMAT))
        stderr_handler.setLevel(level)
        logger.addHandler(stderr_handler)
        return stderr_handler

    @staticmethod
    def disable_warnings():
        """Prevent all LDAP warnings from being shown - default action for others"""
        warnings.showwarning = _showwarning_disabled

    @staticmethod
    def log_warnings():
        """Log all LDAP warnings rather than showing them - default action for others"""
        warnings.showwarning = _showwarning_log

    @staticmethod
    def default_warnings():
        """Always take the default action for warnings"""
        warnings.showwarning = _showwarning_default

    def __init__(self, allow_malformed_names=None, extension_duplicates=None, warn_obsolete=None):
        if allow_malformed_names is None:
            allow_malformed_names = DefinitionParser.DEFAULT_ALLOW_MALFORMED_NAMES
        if extension_duplicates is None:
            extension_duplicates = DefinitionParser.DEFAULT_EXTENSION_DUPLICATES
        if warn_obsolete is None:
            warn_obsolete = DefinitionParser.DEFAULT_WARN_OBSOLETE

        if extension_duplicates not in EXTENSION_POLICIES:
            raise ValueError('extension_duplicates must be one of {0}'.format(', '.join(EXTENSION_POLICIES)))

        self.allow_malformed_names = allow_malformed_names
        self.extension_duplicates = extension_duplicates
        self.warn_obsolete = warn_obsolete

    def parse(self, grammar, value):
        """Decode a definition string.

        :param DefinitionGrammar grammar: The grammar for the kind of definition
        :param value: The definition. Bytes-like values are decoded as UTF-8.
        :type value: str or bytes-like
        :return: A new definition record created by the grammar's factory
        :rtype: SchemaDefinition
        :raises DefinitionDecodeError: if the definition is invalid in any way
        """
        if isinstance(value, (bytes, bytearray, memoryview)):
            value = bytes(value).decode('utf-8')
        reader = SubstringReader(value)

        reader.skip_whitespace()
        if reader.remaining() <= 0:
            raise EmptyValue(value, value, 0)

        pos = reader.position()
        c = reader.read()
        if c != '(':
            raise ExpectedOpenParen(value, c, pos)

        definition = grammar.factory(value)
        definition.oid = grammar.read_ident(reader, self.allow_malformed_names)

        # fields may come in any order; read keywords until the closing paren
        while True:
            token = read_token_name(reader)
            if token is None:
                break
            handler = grammar.handlers.get(token.lower(), grammar.default_handler)
            handler(self, reader, definition, token)

        reader.skip_whitespace()
        if reader.remaining() > 0:
            raise IllegalCharacter(value, reader.peek(), reader.position())

        if grammar.check is not None:
            grammar.check(definition)

        if definition.obsolete and self.warn_obsolete:
            warn('{0} {1} is obsolete'.format(definition.KIND, definition.name), LDAPSchemaWarning)

        logger.debug('Decoded {0} {1}'.format(definition.KIND, definition.oid))
        return definition
