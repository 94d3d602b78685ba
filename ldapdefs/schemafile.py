"""Validate every definition in an OpenLDAP-style ``.schema`` file"""

from .exceptions import LDAPSchemaWarning
from .rfc4517 import get_definition_syntax
from .utils import CaseIgnoreDict, collapse_whitespace, find_closing_paren

import logging
import re
from warnings import warn

logger = logging.getLogger(__name__)

_element_keywords = CaseIgnoreDict({
    'attributetype': 'attributeTypes',
    'objectclass': 'objectClasses',
    'ditcontentrule': 'dITContentRules',
    'nameform': 'nameForms',
    'matchingrule': 'matchingRules',
    'matchingruleuse': 'matchingRuleUse',
    'ldapsyntax': 'ldapSyntaxes',
    'ditstructurerule': 'dITStructureRules',
})

_re_element_start = re.compile(r'(?:^|\s)([A-Za-z][A-Za-z-]*)\s*(?=\()')


def prepare_input_schema(schema):
    """Drop comment lines and collapse whitespace"""
    lines = [line for line in schema.splitlines() if not line.lstrip().startswith('#')]
    return collapse_whitespace(' '.join(lines))


def split_schema_elements(schema):
    """Divide a schema file into definitions by finding keywords followed by top-level matching parens

    :param str schema: The file contents
    :return: A list of ``(subschema attribute name, definition)`` tuples. A definition missing its closing paren runs
             to the end of the input.
    :rtype: list[tuple]
    """
    schema = prepare_input_schema(schema)
    elements = []

    i = 0
    while i < len(schema):
        m = _re_element_start.search(schema, i)
        if not m:
            break
        keyword = m.group(1)
        start = m.end()
        try:
            end = start + find_closing_paren(schema[start:]) + 1
        except ValueError:
            end = len(schema)
        definition = schema[start:end]
        i = end

        try:
            attr = _element_keywords[keyword]
        except KeyError:
            warn('Unhandled schema element keyword {0}'.format(keyword), LDAPSchemaWarning)
            continue
        elements.append((attr, definition))

    return elements


def validate_schema_text(schema, parser=None):
    """Validate every definition in a schema file's contents

    :param str schema: The file contents
    :param DefinitionParser parser: Optional parser to use instead of one built from the global defaults
    :return: A list of ``(subschema attribute name, definition, reason)`` tuples for each rejected definition
    :rtype: list[tuple]
    """
    rejected = []
    elements = split_schema_elements(schema)
    for attr, definition in elements:
        syntax = get_definition_syntax(attr)
        if parser is not None:
            syntax = syntax.__class__(parser)
        reasons = []
        if not syntax.is_acceptable(definition, reasons):
            rejected.append((attr, definition, reasons[0]))
    logger.debug('Validated {0} schema definitions, {1} rejected'.format(len(elements), len(rejected)))
    return rejected


def validate_schema_file(path, parser=None):
    """Validate every definition in a schema file. See :func:`validate_schema_text`."""
    with open(path) as f:
        schema = f.read()
    return validate_schema_text(schema, parser)
