"""Cursor over a schema definition string"""

from .exceptions import OutOfInput

WHITESPACE = ' \t\n\r'


class SubstringReader(object):
    """Reads characters from an immutable definition string, tracking a single read position.

    This is the only object that indexes into the definition string. Token readers are handed a reader for the
    duration of one call and do not keep it.

    :param str definition: The complete definition string
    """
    def __init__(self, definition):
        self._definition = definition
        self._pos = 0

    @property
    def definition(self):
        """The complete, unmodified definition string"""
        return self._definition

    def position(self):
        """Zero-based offset of the next character to be read"""
        return self._pos

    def remaining(self):
        """Number of unread characters"""
        return len(self._definition) - self._pos

    def peek(self):
        """Return the next character without consuming it, or None at the end of the string"""
        if self._pos < len(self._definition):
            return self._definition[self._pos]
        return None

    def read(self):
        """Consume and return the next character.

        :raises OutOfInput: if there are no characters left
        """
        if self._pos >= len(self._definition):
            raise OutOfInput(self._definition, '', self._pos)
        c = self._definition[self._pos]
        self._pos += 1
        return c

    def read_while(self, predicate):
        """Consume characters as long as ``predicate(char)`` is true and return them. Never fails at the end of the
        string; the result may be empty.
        """
        start = self._pos
        end = len(self._definition)
        while self._pos < end and predicate(self._definition[self._pos]):
            self._pos += 1
        return self._definition[start:self._pos]

    def skip_whitespace(self):
        """Advance past any whitespace"""
        self.read_while(lambda c: c in WHITESPACE)

    def __repr__(self):
        return '<{0} pos={1} remaining={2}>'.format(self.__class__.__name__, self._pos, self.remaining())
