from .messages import format_reason


class LDAPError(Exception):
    """Base class for all exceptions raised by ldapdefs"""
    pass


class LDAPWarning(Warning):
    """Generic LDAP warning category"""
    pass


class LDAPSchemaWarning(LDAPWarning):
    """Warning category for schema definitions that decode but deserve attention"""
    pass


class LDAPSchemaError(LDAPError):
    """Error relating to setting up the LDAP schema"""
    pass


class LDAPValidationError(LDAPError):
    """Raised when validation fails"""
    pass


class InvalidSyntaxError(LDAPValidationError):
    """Raised when syntax validation fails"""
    pass


class DefinitionDecodeError(LDAPSchemaError):
    """Base class for failures to decode a schema definition string.

    Instances are raised at the point the problem is detected and carry everything needed to report it.

    :var str kind: The error kind, one of the names in :data:`ERROR_KINDS`
    :var str definition: The complete definition string being decoded
    :var str text: The offending substring, or the keyword of a missing field
    :var offset: Zero-based character offset where the problem was detected, or None when the problem concerns the
                 definition as a whole
    :vartype offset: int or None
    """
    kind = 'DecodeError'

    def __init__(self, definition, text='', offset=None):
        self.definition = definition
        self.text = text
        self.offset = offset
        LDAPSchemaError.__init__(self, definition, text, offset)

    def message(self, element=None):
        """Format the localized message for this failure.

        :param str element: The human-readable name of the kind of element being decoded
        :rtype: str
        """
        return format_reason(self, element)

    def __str__(self):
        return self.message()


class EmptyValue(DefinitionDecodeError):
    """The value was empty or contained only whitespace"""
    kind = 'EmptyValue'


class ExpectedOpenParen(DefinitionDecodeError):
    """The first non-whitespace character was not an open parenthesis"""
    kind = 'ExpectedOpenParen'


class MalformedOid(DefinitionDecodeError):
    """An OID, descriptor, or rule ID violates its grammar"""
    kind = 'MalformedOid'


class UnterminatedQuote(DefinitionDecodeError):
    """A quoted string was never closed"""
    kind = 'UnterminatedQuote'


class ExpectedQuote(DefinitionDecodeError):
    """A quote character was required but something else was found"""
    kind = 'ExpectedQuote'


class MalformedList(DefinitionDecodeError):
    """A parenthesized list is empty or has misplaced separators"""
    kind = 'MalformedList'


class MissingRequiredField(DefinitionDecodeError):
    """The definition ended without a field its kind requires"""
    kind = 'MissingRequiredField'


class OutOfInput(DefinitionDecodeError):
    """The definition ended in the middle of a token or before the closing parenthesis"""
    kind = 'OutOfInput'


class IllegalCharacter(DefinitionDecodeError):
    """A character was found where a keyword or the end of the definition was expected"""
    kind = 'IllegalCharacter'


class InvalidUsage(DefinitionDecodeError):
    """An attribute type USAGE value is not one of the defined usages"""
    kind = 'InvalidUsage'


class InvalidCombination(DefinitionDecodeError):
    """Fields were given that may not appear together"""
    kind = 'InvalidCombination'


ERROR_KINDS = dict((cls.kind, cls) for cls in (
    EmptyValue,
    ExpectedOpenParen,
    MalformedOid,
    UnterminatedQuote,
    ExpectedQuote,
    MalformedList,
    MissingRequiredField,
    OutOfInput,
    IllegalCharacter,
    InvalidUsage,
    InvalidCombination,
))
