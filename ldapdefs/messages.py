"""Message catalog for schema definition diagnostics

Every template may use the following fields:

* ``element``: human-readable name of the kind of definition being decoded
* ``definition``: the complete definition string
* ``text``: the offending substring, or the keyword of a missing field
* ``offset``: zero-based character offset of the problem
"""

DEFAULT_ELEMENT = 'schema definition'

_templates = {
    'EmptyValue': (
        'The provided value could not be parsed as a valid {element} because it was empty or contained only '
        'whitespace'
    ),
    'ExpectedOpenParen': (
        'The provided value "{definition}" could not be parsed as a valid {element} because an open parenthesis was '
        'expected at position {offset} but instead a "{text}" character was found'
    ),
    'MalformedOid': (
        'The provided value "{definition}" could not be parsed as a valid {element} because "{text}" at position '
        '{offset} is not a valid numeric OID or descriptor'
    ),
    'UnterminatedQuote': (
        'The provided value "{definition}" could not be parsed as a valid {element} because the quoted string starting '
        'at position {offset} is not terminated'
    ),
    'ExpectedQuote': (
        'The provided value "{definition}" could not be parsed as a valid {element} because a single quote was expected '
        'at position {offset} but instead "{text}" was found'
    ),
    'MalformedList': (
        'The provided value "{definition}" could not be parsed as a valid {element} because the list at position '
        '{offset} is malformed near "{text}"'
    ),
    'MissingRequiredField': (
        'The provided value "{definition}" could not be parsed as a valid {element} because it does not contain the '
        'required {text} field'
    ),
    'OutOfInput': (
        'The provided value "{definition}" could not be parsed as a valid {element} because the end of the value was '
        'reached at position {offset} while more input was expected'
    ),
    'IllegalCharacter': (
        'The provided value "{definition}" could not be parsed as a valid {element} because the character "{text}" at '
        'position {offset} is not allowed there'
    ),
    'InvalidUsage': (
        'The provided value "{definition}" could not be parsed as a valid {element} because "{text}" at position '
        '{offset} is not a valid attribute usage'
    ),
    'InvalidCombination': (
        'The provided value "{definition}" could not be parsed as a valid {element} because {text}'
    ),
}

_fallback_template = 'The provided value "{definition}" could not be parsed as a valid {element}'


def get_template(kind):
    """Get the message template for an error kind"""
    return _templates.get(kind, _fallback_template)


def format_reason(err, element=None):
    """Format the diagnostic message for a decode failure.

    :param DefinitionDecodeError err: The failure to describe
    :param str element: The human-readable name of the kind of definition, e.g. "matching rule use description"
    :return: The message text, including the offending substring and offset where applicable
    :rtype: str
    """
    if not element:
        element = DEFAULT_ELEMENT
    return get_template(err.kind).format(
        element=element,
        definition=err.definition,
        text=err.text,
        offset=err.offset,
    )
