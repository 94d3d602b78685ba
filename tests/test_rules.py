from ldapdefs import messages, rfc4517, rules
from ldapdefs.exceptions import (
    ERROR_KINDS,
    InvalidSyntaxError,
    LDAPSchemaError,
    LDAPSchemaWarning,
    MalformedOid,
)
from ldapdefs.parser import DefinitionParser
from ldapdefs.rfc4517 import get_definition_syntax
from ldapdefs.rules import DefinitionSyntax, get_syntax_rule
from .utils import clear_syntax_rule_objects
import unittest
import warnings


class TestSyntaxRules(unittest.TestCase):
    def setUp(self):
        clear_syntax_rule_objects()

    def tearDown(self):
        clear_syntax_rule_objects()

    def test_registered(self):
        """Ensure every definition syntax is registered by OID and by DESC"""
        for cls in rfc4517.definition_syntaxes:
            self.assertIsInstance(get_syntax_rule(cls.OID), cls)
            self.assertIsInstance(get_syntax_rule(cls.DESC.lower()), cls)

    def test_cached(self):
        self.assertIs(get_syntax_rule('1.3.6.1.4.1.1466.115.121.1.31'),
                      get_syntax_rule('Matching Rule Use Description'))

    def test_unknown(self):
        with self.assertRaises(KeyError):
            get_syntax_rule('1.2.3.4.5.6')
        with self.assertRaises(KeyError):
            get_definition_syntax('cn')

    def test_get_definition_syntax(self):
        tests = (
            ('attributeTypes', rfc4517.AttributeTypeDescription),
            ('objectclasses', rfc4517.ObjectClassDescription),
            ('dITContentRules', rfc4517.DITContentRuleDescription),
            ('nameForms', rfc4517.NameFormDescription),
            ('matchingRules', rfc4517.MatchingRuleDescription),
            ('matchingRuleUse', rfc4517.MatchingRuleUseDescription),
            ('ldapSyntaxes', rfc4517.LDAPSyntaxDescription),
            ('dITStructureRules', rfc4517.DITStructureRuleDescription),
        )
        for attr, cls in tests:
            self.assertIsInstance(get_definition_syntax(attr), cls)

    def test_duplicate_registration(self):
        class DuplicateOID(DefinitionSyntax):
            OID = rfc4517.MatchingRuleUseDescription.OID
            DESC = 'Duplicate OID'

        class DuplicateDesc(DefinitionSyntax):
            OID = '1.2.3.4.5.6.7'
            DESC = 'matching rule use description'

        with self.assertRaises(LDAPSchemaError):
            DuplicateOID.register()
        with self.assertRaises(LDAPSchemaError):
            DuplicateDesc.register()
        self.assertNotIn('1.2.3.4.5.6.7', rules._oid_syntax_rules)

    def test_validate(self):
        syntax = get_definition_syntax('matchingRuleUse')
        self.assertIsNone(syntax.validate('( 2.5.13.1 APPLIES cn )'))
        with self.assertRaises(InvalidSyntaxError) as cm:
            syntax.validate('( 2.5.13.1 )')
        self.assertIn('APPLIES', str(cm.exception))

    def test_decode_error_str(self):
        """Ensure decode failures describe themselves when raised outside the facade"""
        syntax = get_definition_syntax('attributeTypes')
        with self.assertRaises(MalformedOid) as cm:
            syntax.decode('( 2.5.4. SUP name )')
        err = cm.exception
        self.assertEqual(err.kind, 'MalformedOid')
        self.assertEqual(err.offset, 7)
        self.assertIn('position 7', str(err))
        self.assertIn('attribute type description', err.message(syntax.GRAMMAR.element))

    def test_warning_as_error(self):
        """Ensure a schema warning escalated to an error rejects the value instead of escaping"""
        syntax = rfc4517.MatchingRuleUseDescription(DefinitionParser(warn_obsolete=True))
        reasons = []
        with warnings.catch_warnings():
            warnings.simplefilter('error', LDAPSchemaWarning)
            self.assertFalse(syntax.is_acceptable("( 2.5.13.1 NAME 'old' OBSOLETE APPLIES cn )", reasons))
        self.assertEqual(len(reasons), 1)
        self.assertIn('old is obsolete', reasons[0])

    def test_message_templates(self):
        """Ensure every error kind has its own message template"""
        for kind in ERROR_KINDS:
            self.assertNotEqual(messages.get_template(kind), messages._fallback_template, kind)


if __name__ == '__main__':
    unittest.main()
