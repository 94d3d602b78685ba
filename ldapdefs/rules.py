"""Base classes for syntax rules and the validation facade for schema definitions"""

from .exceptions import DefinitionDecodeError, InvalidSyntaxError, LDAPSchemaError, LDAPWarning
from .parser import DefinitionParser
from .utils import CaseIgnoreDict, get_obj_module

import logging

logger = logging.getLogger(__name__)

_oid_syntax_rules = {}
_name_syntax_rules = CaseIgnoreDict()
_oid_syntax_rule_objects = {}


def get_syntax_rule(ident):
    """Obtains the syntax rule instance for an OID or DESC"""
    if ident[0].isdigit():
        cls = _oid_syntax_rules[ident]
    else:
        cls = _name_syntax_rules[ident]
    obj = _oid_syntax_rule_objects.get(cls.OID)
    if not obj:
        obj = cls()
        _oid_syntax_rule_objects[cls.OID] = obj
    return obj


class SyntaxRule(object):
    """Base class for all syntax rules"""

    OID = ''
    """The globally unique numeric OID of the syntax rule. Must be defined by subclasses."""

    DESC = ''
    """Short text description of the rule. Must be defined by subclasses."""

    @classmethod
    def register(cls):
        if cls.OID in _oid_syntax_rules:
            cur_class = _oid_syntax_rules[cls.OID]
            raise LDAPSchemaError('Duplicate OID {0} in syntax rule declaration (original class {1}.{2}, '
                                  'new class {3}.{4})'.format(cls.OID, get_obj_module(cur_class), cur_class.__name__,
                                                              get_obj_module(cls), cls.__name__))
        if cls.DESC in _name_syntax_rules:
            raise LDAPSchemaError('Duplicate DESC {0} in syntax rule declaration'.format(cls.DESC))
        _oid_syntax_rules[cls.OID] = cls
        _name_syntax_rules[cls.DESC] = cls

    def validate(self, s):
        """Validate a string. Must be implemented by subclasses.

        :param s: Candidate string
        :return: Any useful value for the rule
        :raises InvalidSyntaxError: if the string is invalid
        """
        raise NotImplementedError()


class DefinitionSyntax(SyntaxRule):
    """For syntaxes whose values are RFC 4512 schema definitions. Subclasses define ``GRAMMAR``.

    :param DefinitionParser parser: The parser to use. By default a new parser is created for each value so that
                                    changes to the global defaults take effect immediately.
    """

    GRAMMAR = None
    """The :class:`.DefinitionGrammar` for the kind of definition. Subclasses must define this attribute."""

    def __init__(self, parser=None):
        self.parser = parser

    def _get_parser(self):
        if self.parser is not None:
            return self.parser
        return DefinitionParser()

    def decode(self, value):
        """Decode a definition into its record.

        :param value: The definition string
        :type value: str or bytes
        :return: The decoded definition
        :rtype: SchemaDefinition
        :raises DefinitionDecodeError: if the definition is invalid
        """
        return self._get_parser().parse(self.GRAMMAR, value)

    def is_acceptable(self, value, invalid_reason, schema=None):
        """Indicates whether the value is acceptable for this syntax. If not, the reason is appended to
        ``invalid_reason``.

        :param value: The definition string
        :type value: str or bytes
        :param list invalid_reason: Any object with an ``append`` method. Left untouched when the value is acceptable.
        :param schema: Schema lookup surface; accepted for callers that extend validation to reference checking
        :return: True if the value is acceptable
        :rtype: bool
        """
        try:
            self.decode(value)
            return True
        except UnicodeDecodeError as e:
            logger.debug('Value for {0} is not valid UTF-8: {1}'.format(self.DESC, e))
            invalid_reason.append('The provided value could not be parsed as a valid {0} because it is not valid '
                                  'UTF-8'.format(self.GRAMMAR.element))
            return False
        except DefinitionDecodeError as e:
            logger.debug('Caught {0} at offset {1} decoding {2}'.format(e.kind, e.offset, self.DESC))
            invalid_reason.append(e.message(self.GRAMMAR.element))
            return False
        except LDAPWarning as e:
            # raised when the caller's warnings filter turns schema warnings into errors
            logger.debug('Warning raised as an error decoding {0}: {1}'.format(self.DESC, e))
            invalid_reason.append('The provided value was rejected as a valid {0} because a warning was raised as an '
                                  'error: {1}'.format(self.GRAMMAR.element, e))
            return False

    def validate(self, s):
        """Validate a definition string.

        :param str s: Candidate definition
        :rtype: None
        :raises InvalidSyntaxError: if the definition is invalid
        """
        reasons = []
        if not self.is_acceptable(s, reasons):
            raise InvalidSyntaxError(reasons[0])
