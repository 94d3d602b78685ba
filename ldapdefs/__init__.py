"""Imports and defines the core of the public API"""

from .definitions import (
    SchemaDefinition,
    AttributeType,
    ObjectClass,
    DITContentRule,
    DITStructureRule,
    NameForm,
    MatchingRule,
    MatchingRuleUse,
    LDAPSyntax,
)
from .exceptions import (
    LDAPError,
    LDAPSchemaError,
    LDAPWarning,
    LDAPSchemaWarning,
    InvalidSyntaxError,
    DefinitionDecodeError,
)
from .grammar import DefinitionGrammar, GRAMMARS
from .parser import DefinitionParser
from .reader import SubstringReader
from .rfc4517 import (
    AttributeTypeDescription,
    DITContentRuleDescription,
    DITStructureRuleDescription,
    MatchingRuleDescription,
    MatchingRuleUseDescription,
    NameFormDescription,
    ObjectClassDescription,
    LDAPSyntaxDescription,
    get_definition_syntax,
)
from .rules import SyntaxRule, DefinitionSyntax, get_syntax_rule


def is_acceptable(attr, value, invalid_reason, schema=None):
    """Check a definition held in a subschema attribute, e.g. ``matchingRuleUse``

    :param str attr: The subschema attribute name
    :param value: The definition string
    :param list invalid_reason: The reason is appended here if the value is rejected
    :param schema: Schema lookup surface, unused by the grammar
    :rtype: bool
    """
    return get_definition_syntax(attr).is_acceptable(value, invalid_reason, schema)


__all__ = [
    'SchemaDefinition',
    'AttributeType',
    'ObjectClass',
    'DITContentRule',
    'DITStructureRule',
    'NameForm',
    'MatchingRule',
    'MatchingRuleUse',
    'LDAPSyntax',
    'LDAPError',
    'LDAPSchemaError',
    'LDAPWarning',
    'LDAPSchemaWarning',
    'InvalidSyntaxError',
    'DefinitionDecodeError',
    'DefinitionGrammar',
    'GRAMMARS',
    'DefinitionParser',
    'SubstringReader',
    'AttributeTypeDescription',
    'DITContentRuleDescription',
    'DITStructureRuleDescription',
    'MatchingRuleDescription',
    'MatchingRuleUseDescription',
    'NameFormDescription',
    'ObjectClassDescription',
    'LDAPSyntaxDescription',
    'get_definition_syntax',
    'SyntaxRule',
    'DefinitionSyntax',
    'get_syntax_rule',
    'is_acceptable',
]
