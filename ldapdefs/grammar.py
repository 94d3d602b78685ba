"""Keyword tables and required-field checks for each kind of RFC 4512 schema definition

A :class:`DefinitionGrammar` plugs into :meth:`.DefinitionParser.parse`. Handlers are called with the parser, the
reader, the definition being built and the keyword exactly as it was written, and are looked up by lower-cased
keyword. Any keyword without a handler is read as an extension.
"""

from . import definitions
from . import rfc4512
from . import tokens
from .exceptions import InvalidCombination, MissingRequiredField


class DefinitionGrammar(object):
    """Describes one kind of schema definition.

    :param str element: Human-readable name of the kind
    :param factory: Callable taking the definition string and returning an empty record
    :param dict handlers: Maps keyword to field handler; keys are case-insensitive
    :param check: Optional callable run on the completed record; raises to reject it
    :param read_ident: Callable taking the reader and the malformed-names option, returning the identifier
    """
    def __init__(self, element, factory, handlers, check=None, read_ident=tokens.read_numeric_oid):
        self.element = element
        self.factory = factory
        self.handlers = dict((keyword.lower(), handler) for keyword, handler in handlers.items())
        self.check = check
        self.read_ident = read_ident

    @staticmethod
    def default_handler(parser, reader, definition, token):
        """Read a vendor extension or any other unrecognized keyword"""
        values = tokens.read_extension_values(reader)
        definition.add_extension(token, values, parser.extension_duplicates)

    def keywords(self):
        """All recognized keywords, upper-cased"""
        return sorted(keyword.upper() for keyword in self.handlers)

    def __repr__(self):
        return '<{0} "{1}">'.format(self.__class__.__name__, self.element)


## field handlers


def store(attr, read):
    """Store the value read under attr. Repeated keywords keep the last value."""
    def handler(parser, reader, definition, token):
        setattr(definition, attr, read(reader, parser.allow_malformed_names))
    return handler


def flag(attr):
    """Set a boolean attribute; nothing follows the keyword"""
    def handler(parser, reader, definition, token):
        setattr(definition, attr, True)
    return handler


def _read_names(parser, reader, definition, token):
    definition.names.extend(tokens.read_name_descriptors(reader, parser.allow_malformed_names))


def _read_description(reader, allow_malformed):
    return tokens.read_quoted_string(reader)


def _read_usage(reader, allow_malformed):
    return tokens.read_usage(reader)


def _read_rule_ids(reader, allow_malformed):
    return tokens.read_rule_ids(reader)


def _read_rule_ident(reader, allow_malformed):
    return str(tokens.read_rule_id(reader))


def _read_syntax(parser, reader, definition, token):
    definition.syntax, definition.syntax_length = tokens.read_noidlen(reader, parser.allow_malformed_names)


def _object_class_kind(parser, reader, definition, token):
    kind = token.upper()
    if definition.kind == kind:
        raise InvalidCombination(definition.definition, 'it specifies {0} more than once'.format(kind),
                                 reader.position() - len(token))
    if definition.kind is not None:
        raise InvalidCombination(definition.definition,
                                 'it specifies both {0} and {1}'.format(definition.kind, kind),
                                 reader.position() - len(token))
    definition.kind = kind


def common_handlers(**kind_handlers):
    """Handlers for NAME, DESC and OBSOLETE plus the given keyword handlers"""
    handlers = {
        'NAME': _read_names,
        'DESC': store('description', _read_description),
        'OBSOLETE': flag('obsolete'),
    }
    handlers.update(kind_handlers)
    return handlers


## required field checks


def require(attr, keyword):
    """Build a check rejecting definitions where attr is unset or empty"""
    def check(definition):
        if not getattr(definition, attr):
            raise MissingRequiredField(definition.definition, keyword)
    return check


def require_all(*checks):
    def check(definition):
        for c in checks:
            c(definition)
    return check


def _check_attribute_type(definition):
    if not definition.supertype and not definition.syntax:
        raise MissingRequiredField(definition.definition, 'SUP or SYNTAX')
    if definition.collective and definition.usage != 'userApplications':
        raise InvalidCombination(definition.definition,
                                 'COLLECTIVE attribute types must have userApplications usage')
    if definition.no_user_mod and definition.usage == 'userApplications':
        raise InvalidCombination(definition.definition,
                                 'NO-USER-MODIFICATION requires an operational usage')


def _check_object_class(definition):
    if definition.kind is None:
        definition.kind = 'STRUCTURAL'
    if not definition.superclasses:
        is_root = (definition.oid == rfc4512.ROOT_OBJECT_CLASS_OID or
                   rfc4512.ROOT_OBJECT_CLASS in [name.lower() for name in definition.names])
        if not is_root:
            definition.superclasses = set([rfc4512.ROOT_OBJECT_CLASS])


## grammars


MATCHING_RULE_USE = DefinitionGrammar(
    'matching rule use description',
    definitions.MatchingRuleUse,
    common_handlers(
        APPLIES=store('applies', tokens.read_oids),
    ),
    check=require('applies', 'APPLIES'),
)

ATTRIBUTE_TYPE = DefinitionGrammar(
    'attribute type description',
    definitions.AttributeType,
    common_handlers(**{
        'SUP': store('supertype', tokens.read_oid),
        'EQUALITY': store('equality', tokens.read_oid),
        'ORDERING': store('ordering', tokens.read_oid),
        'SUBSTR': store('substr', tokens.read_oid),
        'SYNTAX': _read_syntax,
        'SINGLE-VALUE': flag('single_value'),
        'COLLECTIVE': flag('collective'),
        'NO-USER-MODIFICATION': flag('no_user_mod'),
        'USAGE': store('usage', _read_usage),
    }),
    check=_check_attribute_type,
)

OBJECT_CLASS = DefinitionGrammar(
    'object class description',
    definitions.ObjectClass,
    common_handlers(
        SUP=store('superclasses', tokens.read_oids),
        ABSTRACT=_object_class_kind,
        STRUCTURAL=_object_class_kind,
        AUXILIARY=_object_class_kind,
        MUST=store('must', tokens.read_oids),
        MAY=store('may', tokens.read_oids),
    ),
    check=_check_object_class,
)

DIT_CONTENT_RULE = DefinitionGrammar(
    'DIT content rule description',
    definitions.DITContentRule,
    common_handlers(
        AUX=store('aux', tokens.read_oids),
        MUST=store('must', tokens.read_oids),
        MAY=store('may', tokens.read_oids),
        NOT=store('not_', tokens.read_oids),
    ),
)

NAME_FORM = DefinitionGrammar(
    'name form description',
    definitions.NameForm,
    common_handlers(
        OC=store('object_class', tokens.read_oid),
        MUST=store('must', tokens.read_oids),
        MAY=store('may', tokens.read_oids),
    ),
    check=require_all(require('object_class', 'OC'), require('must', 'MUST')),
)

MATCHING_RULE = DefinitionGrammar(
    'matching rule description',
    definitions.MatchingRule,
    common_handlers(
        SYNTAX=store('syntax', tokens.read_numeric_oid),
    ),
    check=require('syntax', 'SYNTAX'),
)

LDAP_SYNTAX = DefinitionGrammar(
    'LDAP syntax description',
    definitions.LDAPSyntax,
    {'DESC': store('description', _read_description)},
)

DIT_STRUCTURE_RULE = DefinitionGrammar(
    'DIT structure rule description',
    definitions.DITStructureRule,
    common_handlers(
        FORM=store('form', tokens.read_oid),
        SUP=store('superior_rules', _read_rule_ids),
    ),
    check=require('form', 'FORM'),
    read_ident=_read_rule_ident,
)

GRAMMARS = {
    'attributeTypes': ATTRIBUTE_TYPE,
    'objectClasses': OBJECT_CLASS,
    'dITContentRules': DIT_CONTENT_RULE,
    'nameForms': NAME_FORM,
    'matchingRules': MATCHING_RULE,
    'matchingRuleUse': MATCHING_RULE_USE,
    'ldapSyntaxes': LDAP_SYNTAX,
    'dITStructureRules': DIT_STRUCTURE_RULE,
}
