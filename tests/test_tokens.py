from ldapdefs import tokens
from ldapdefs.exceptions import (
    ExpectedQuote,
    IllegalCharacter,
    InvalidUsage,
    MalformedList,
    MalformedOid,
    OutOfInput,
    UnterminatedQuote,
)
from ldapdefs.reader import SubstringReader
from .utils import read_all
import unittest


class TestReadNumericOid(unittest.TestCase):
    def test_good(self):
        """Ensure valid numeric OIDs are read up to the next delimiter"""
        tests = (
            ('2.5.13.1', '2.5.13.1'),
            ('  1.3.6.1.4.1.1466.115.121.1.15 ', '1.3.6.1.4.1.1466.115.121.1.15'),
            ('2.5.4.3)', '2.5.4.3'),
            ('1.2{32}', '1.2'),
        )
        for test, expected in tests:
            actual, reader = read_all(tokens.read_numeric_oid, test)
            self.assertEqual(actual, expected)

    def test_bad(self):
        """Ensure malformed numeric OIDs cite the offending position"""
        tests = (
            ('2.5..13', 4),
            ('2.5.13.', 6),
            ('2.5.1x', 5),
            ('2', 0),
            ('cn', 0),
            (' -1.2', 1),
            (')', 0),
        )
        for test, offset in tests:
            with self.assertRaises(MalformedOid) as cm:
                read_all(tokens.read_numeric_oid, test)
            self.assertEqual(cm.exception.offset, offset, test)

    def test_descr_allowed(self):
        """Ensure a descriptor is accepted when permitted"""
        actual, reader = read_all(tokens.read_numeric_oid, 'cn-oid', True)
        self.assertEqual(actual, 'cn-oid')

    def test_end_of_input(self):
        """Ensure running out of input is reported as such"""
        with self.assertRaises(OutOfInput):
            read_all(tokens.read_numeric_oid, '   ')


class TestReadOid(unittest.TestCase):
    def test_good(self):
        for test in ('cn', 'commonName', 'x-my-attr', '2.5.4.3'):
            actual, reader = read_all(tokens.read_oid, test)
            self.assertEqual(actual, test)

    def test_bad(self):
        for test in ('c_n', '3cn', '-cn'):
            with self.assertRaises(MalformedOid):
                read_all(tokens.read_oid, test)

    def test_malformed_allowed(self):
        actual, reader = read_all(tokens.read_oid, 'c_n', True)
        self.assertEqual(actual, 'c_n')


class TestReadQuotedString(unittest.TestCase):
    def test_good(self):
        """Ensure quoted strings are read and unescaped"""
        tests = (
            ("'test'", 'test'),
            ("  'with spaces (and parens)' rest", 'with spaces (and parens)'),
            ("''", ''),
            (r"'it\27s'", "it's"),
            (r"'back\5cslash \5C'", 'back\\slash \\'),
        )
        for test, expected in tests:
            actual, reader = read_all(tokens.read_quoted_string, test)
            self.assertEqual(actual, expected)

    def test_unterminated(self):
        with self.assertRaises(UnterminatedQuote) as cm:
            read_all(tokens.read_quoted_string, " 'never closed")
        self.assertEqual(cm.exception.offset, 1)

    def test_expected_quote(self):
        with self.assertRaises(ExpectedQuote) as cm:
            read_all(tokens.read_quoted_string, ' test')
        self.assertEqual(cm.exception.offset, 1)
        self.assertEqual(cm.exception.text, 't')


class TestReadNameDescriptors(unittest.TestCase):
    def test_good(self):
        tests = (
            ("'cn'", ['cn']),
            ("( 'cn' 'commonName' )", ['cn', 'commonName']),
            ("('cn')", ['cn']),
        )
        for test, expected in tests:
            actual, reader = read_all(tokens.read_name_descriptors, test)
            self.assertEqual(actual, expected)

    def test_bad(self):
        tests = (
            ('cn', ExpectedQuote),
            ("( cn )", ExpectedQuote),
            ("( )", MalformedList),
            ("( 'cn'", OutOfInput),
            ("'1cn'", MalformedOid),
            ("''", MalformedOid),
        )
        for test, exc_cls in tests:
            with self.assertRaises(exc_cls):
                read_all(tokens.read_name_descriptors, test)

    def test_malformed_allowed(self):
        actual, reader = read_all(tokens.read_name_descriptors, "'my_attr'", True)
        self.assertEqual(actual, ['my_attr'])


class TestReadOids(unittest.TestCase):
    def test_good(self):
        tests = (
            ('cn', set(['cn'])),
            ('( cn $ sn )', set(['cn', 'sn'])),
            ('(cn$sn$cn)', set(['cn', 'sn'])),
            ('( 2.5.4.3 )', set(['2.5.4.3'])),
        )
        for test, expected in tests:
            actual, reader = read_all(tokens.read_oids, test)
            self.assertEqual(actual, expected)

    def test_bad(self):
        """Ensure empty lists and misplaced separators are rejected"""
        tests = (
            ('( )', MalformedList, 0),
            (' )', MalformedList, 1),
            ('( cn $ )', MalformedList, 5),
            ('( $ cn )', MalformedList, 2),
            ('( cn sn )', MalformedList, 5),
            ('( cn $$ sn )', MalformedList, 6),
            ('( cn $ $ sn )', MalformedList, 7),
            ('( cn $ sn', OutOfInput, 9),
        )
        for test, exc_cls, offset in tests:
            with self.assertRaises(exc_cls) as cm:
                read_all(tokens.read_oids, test)
            self.assertEqual(cm.exception.offset, offset, test)


class TestReadExtensionValues(unittest.TestCase):
    def test_good(self):
        tests = (
            ("'RFC 4512'", ['RFC 4512']),
            ("( 'a' 'b' )", ['a', 'b']),
        )
        for test, expected in tests:
            actual, reader = read_all(tokens.read_extension_values, test)
            self.assertEqual(actual, expected)

    def test_bad(self):
        tests = (
            ('bare', ExpectedQuote),
            (')', ExpectedQuote),
            ('()', MalformedList),
            ("'open", UnterminatedQuote),
        )
        for test, exc_cls in tests:
            with self.assertRaises(exc_cls):
                read_all(tokens.read_extension_values, test)


class TestReadTokenName(unittest.TestCase):
    def test_keywords(self):
        """Ensure keywords are read with their casing and the closing paren ends the sequence"""
        reader = SubstringReader(" NAME x-Origin SINGLE-VALUE\t)")
        self.assertEqual(tokens.read_token_name(reader), 'NAME')
        self.assertEqual(tokens.read_token_name(reader), 'x-Origin')
        self.assertEqual(tokens.read_token_name(reader), 'SINGLE-VALUE')
        self.assertIsNone(tokens.read_token_name(reader))
        self.assertEqual(reader.remaining(), 0)

    def test_bad(self):
        with self.assertRaises(OutOfInput):
            tokens.read_token_name(SubstringReader('   '))
        with self.assertRaises(IllegalCharacter) as cm:
            tokens.read_token_name(SubstringReader(" 'quoted'"))
        self.assertEqual(cm.exception.text, "'")
        self.assertEqual(cm.exception.offset, 1)


class TestReadNoidlen(unittest.TestCase):
    def test_good(self):
        tests = (
            ('1.3.6.1.4.1.1466.115.121.1.15', ('1.3.6.1.4.1.1466.115.121.1.15', None)),
            ('1.3.6.1.4.1.1466.115.121.1.15{32768}', ('1.3.6.1.4.1.1466.115.121.1.15', 32768)),
        )
        for test, expected in tests:
            actual, reader = read_all(tokens.read_noidlen, test)
            self.assertEqual(actual, expected)

    def test_bad(self):
        tests = (
            ('1.2{}', MalformedOid),
            ('1.2{12', OutOfInput),
            ('1.2{1a}', MalformedOid),
            ('1.2{01}', MalformedOid),
        )
        for test, exc_cls in tests:
            with self.assertRaises(exc_cls):
                read_all(tokens.read_noidlen, test)


class TestReadRuleIds(unittest.TestCase):
    def test_good(self):
        self.assertEqual(read_all(tokens.read_rule_id, ' 12')[0], 12)
        self.assertEqual(read_all(tokens.read_rule_ids, '( 1 2 3 )')[0], set([1, 2, 3]))
        self.assertEqual(read_all(tokens.read_rule_ids, '0')[0], set([0]))

    def test_bad(self):
        for test in ('01', 'a', '1.2'):
            with self.assertRaises(MalformedOid):
                read_all(tokens.read_rule_id, test)
        with self.assertRaises(MalformedList):
            read_all(tokens.read_rule_ids, '()')


class TestReadUsage(unittest.TestCase):
    def test_good(self):
        self.assertEqual(read_all(tokens.read_usage, 'dsaoperation')[0], 'dSAOperation')
        self.assertEqual(read_all(tokens.read_usage, 'userApplications')[0], 'userApplications')

    def test_bad(self):
        with self.assertRaises(InvalidUsage) as cm:
            read_all(tokens.read_usage, ' bogus')
        self.assertEqual(cm.exception.text, 'bogus')
        self.assertEqual(cm.exception.offset, 1)
