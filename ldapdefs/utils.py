from .exceptions import LDAPError
import re


def re_anchor(r):
    return r'^' + r + r'$'


def find_closing_paren(text):
    if text[0] != '(':
        raise ValueError('missing opening paren')
    parens = 1
    i = 0
    in_quote = False
    try:
        while parens > 0:
            i += 1
            c = text[i]
            if c == "'":
                in_quote = not in_quote
            elif in_quote:
                continue
            elif c == '(':
                parens += 1
            elif c == ')':
                parens -= 1
    except IndexError:
        raise ValueError('missing closing paren')
    return i


def collapse_whitespace(s):
    """Collapse all whitespace sequences down to a single space"""
    return re.sub(r'\s+', ' ', s).strip()


class CaseIgnoreDict(dict):
    """A dictionary with case-insensitive keys and storage of last actual key casing"""
    def __init__(self, plaindict=None):
        self._keys = {}
        if plaindict is not None:
            self.update(plaindict)

    def __setitem__(self, key, value):
        lkey = key.lower()
        if lkey in self._keys:
            dict.__delitem__(self, self._keys[lkey])
        self._keys[lkey] = key
        dict.__setitem__(self, key, value)

    def setdefault(self, key, default=None):
        try:
            return self[key]
        except KeyError:
            self[key] = default
            return default

    def __getitem__(self, key):
        key = self._keys[key.lower()]
        return dict.__getitem__(self, key)

    def get(self, key, default=None):
        try:
            return self[key]
        except KeyError:
            return default

    def __contains__(self, key):
        try:
            self[key]
            return True
        except KeyError:
            return False

    def update(self, other):
        for key in other:
            self[key] = other[key]

    def __delitem__(self, key):
        lkey = key.lower()
        key = self._keys[lkey]
        dict.__delitem__(self, key)
        del self._keys[lkey]

    def clear(self):
        dict.clear(self)
        self._keys.clear()


_get_class_module_err_msg = ('Could not identify the source module for object {0}. This may indicate an incompatability'
                             ' between your Python version or implementation and ldapdefs.')


def get_obj_module(obj):
    """Identify the name of the module where the given object was defined."""
    try:
        modname = obj.__module__
        if not modname:
            raise LDAPError(_get_class_module_err_msg.format(obj.__name__))
        return modname
    except AttributeError:
        raise LDAPError(_get_class_module_err_msg.format(obj.__name__))
