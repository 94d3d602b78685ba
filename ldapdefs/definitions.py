"""Records holding the fields decoded from schema definitions"""

from .utils import CaseIgnoreDict

EXTENSION_ACCUMULATE = 'accumulate'
EXTENSION_REPLACE = 'replace'
EXTENSION_POLICIES = (EXTENSION_ACCUMULATE, EXTENSION_REPLACE)


class SchemaDefinition(object):
    """Fields common to every kind of schema definition.

    :var str definition: The definition string this was decoded from
    :var str oid: The identifying OID
    :var list[str] names: All specified names, in order
    :var str description: The DESC value, or None
    :var bool obsolete: True if the definition was marked OBSOLETE
    :var CaseIgnoreDict extensions: Maps extension keyword to a list of values
    """
    KIND = 'schema definition'

    def __init__(self, definition):
        self.definition = definition
        self.oid = None
        self.names = []
        self.description = None
        self.obsolete = False
        self.extensions = CaseIgnoreDict()

    @property
    def name(self):
        """The first name, or the OID when no names were given"""
        if self.names:
            return self.names[0]
        return self.oid

    def add_extension(self, keyword, values, policy=EXTENSION_ACCUMULATE):
        """Store extension values under a case-insensitive keyword.

        With the ``accumulate`` policy, repeated keywords extend the existing list. With ``replace``, the last
        occurrence wins.
        """
        if policy == EXTENSION_ACCUMULATE and keyword in self.extensions:
            self.extensions[keyword] = self.extensions[keyword] + list(values)
        else:
            self.extensions[keyword] = list(values)

    def __repr__(self):
        return '<{0} "{1}">'.format(self.__class__.__name__, self.name)


class MatchingRuleUse(SchemaDefinition):
    """:var set[str] applies: OIDs or names of the attribute types the matching rule applies to"""
    KIND = 'matching rule use'

    def __init__(self, definition):
        SchemaDefinition.__init__(self, definition)
        self.applies = set()


class AttributeType(SchemaDefinition):
    """:var str supertype: The SUP oid, or None
    :var str equality: EQUALITY matching rule oid
    :var str ordering: ORDERING matching rule oid
    :var str substr: SUBSTR matching rule oid
    :var str syntax: The numeric OID of the syntax
    :var syntax_length: The suggested maximum length, or None
    :var bool single_value:
    :var bool collective:
    :var bool no_user_mod:
    :var str usage: Defaults to ``userApplications``
    """
    KIND = 'attribute type'

    def __init__(self, definition):
        SchemaDefinition.__init__(self, definition)
        self.supertype = None
        self.equality = None
        self.ordering = None
        self.substr = None
        self.syntax = None
        self.syntax_length = None
        self.single_value = False
        self.collective = False
        self.no_user_mod = False
        self.usage = 'userApplications'


class ObjectClass(SchemaDefinition):
    KIND = 'object class'

    def __init__(self, definition):
        SchemaDefinition.__init__(self, definition)
        self.superclasses = set()
        self.kind = None
        self.must = set()
        self.may = set()


class DITContentRule(SchemaDefinition):
    KIND = 'DIT content rule'

    def __init__(self, definition):
        SchemaDefinition.__init__(self, definition)
        self.aux = set()
        self.must = set()
        self.may = set()
        self.not_ = set()


class NameForm(SchemaDefinition):
    KIND = 'name form'

    def __init__(self, definition):
        SchemaDefinition.__init__(self, definition)
        self.object_class = None
        self.must = set()
        self.may = set()


class MatchingRule(SchemaDefinition):
    KIND = 'matching rule'

    def __init__(self, definition):
        SchemaDefinition.__init__(self, definition)
        self.syntax = None


class LDAPSyntax(SchemaDefinition):
    KIND = 'LDAP syntax'


class DITStructureRule(SchemaDefinition):
    """The ``oid`` of a DIT structure rule holds its integer rule ID as a string."""
    KIND = 'DIT structure rule'

    def __init__(self, definition):
        SchemaDefinition.__init__(self, definition)
        self.form = None
        self.superior_rules = set()

    @property
    def rule_id(self):
        return int(self.oid)
