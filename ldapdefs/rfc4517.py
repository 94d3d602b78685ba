"""Schema definition syntaxes from RFC 4517

https://tools.ietf.org/html/rfc4517
"""

from . import grammar
from .rules import DefinitionSyntax, get_syntax_rule
from .utils import CaseIgnoreDict


class AttributeTypeDescription(DefinitionSyntax):
    OID = '1.3.6.1.4.1.1466.115.121.1.3'
    DESC = 'Attribute Type Description'
    GRAMMAR = grammar.ATTRIBUTE_TYPE


class DITContentRuleDescription(DefinitionSyntax):
    OID = '1.3.6.1.4.1.1466.115.121.1.16'
    DESC = 'DIT Content Rule Description'
    GRAMMAR = grammar.DIT_CONTENT_RULE


class DITStructureRuleDescription(DefinitionSyntax):
    OID = '1.3.6.1.4.1.1466.115.121.1.17'
    DESC = 'DIT Structure Rule Description'
    GRAMMAR = grammar.DIT_STRUCTURE_RULE


class MatchingRuleDescription(DefinitionSyntax):
    OID = '1.3.6.1.4.1.1466.115.121.1.30'
    DESC = 'Matching Rule Description'
    GRAMMAR = grammar.MATCHING_RULE


class MatchingRuleUseDescription(DefinitionSyntax):
    OID = '1.3.6.1.4.1.1466.115.121.1.31'
    DESC = 'Matching Rule Use Description'
    GRAMMAR = grammar.MATCHING_RULE_USE


class NameFormDescription(DefinitionSyntax):
    OID = '1.3.6.1.4.1.1466.115.121.1.35'
    DESC = 'Name Form Description'
    GRAMMAR = grammar.NAME_FORM


class ObjectClassDescription(DefinitionSyntax):
    OID = '1.3.6.1.4.1.1466.115.121.1.37'
    DESC = 'Object Class Description'
    GRAMMAR = grammar.OBJECT_CLASS


class LDAPSyntaxDescription(DefinitionSyntax):
    OID = '1.3.6.1.4.1.1466.115.121.1.54'
    DESC = 'LDAP Syntax Description'
    GRAMMAR = grammar.LDAP_SYNTAX


definition_syntaxes = (
    AttributeTypeDescription,
    DITContentRuleDescription,
    DITStructureRuleDescription,
    MatchingRuleDescription,
    MatchingRuleUseDescription,
    NameFormDescription,
    ObjectClassDescription,
    LDAPSyntaxDescription,
)

for _cls in definition_syntaxes:
    _cls.register()

_syntax_oids_by_attribute = CaseIgnoreDict(dict(
    (attr, cls.OID)
    for attr, g in grammar.GRAMMARS.items()
    for cls in definition_syntaxes
    if cls.GRAMMAR is g
))


def get_definition_syntax(attr):
    """Get the syntax rule for values of a subschema attribute such as ``matchingRuleUse`` or ``attributeTypes``.

    :param str attr: The subschema attribute name
    :rtype: DefinitionSyntax
    :raises KeyError: if the attribute does not hold schema definitions
    """
    return get_syntax_rule(_syntax_oids_by_attribute[attr])
