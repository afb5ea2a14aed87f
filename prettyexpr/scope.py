"""
Look up symbol names in a caller supplied scope.

A lookup gives one of three bindings:

  Unbound          - the name is free; render the name itself
  NumericValue(v)  - a real number; render it at the requested precision
  OpaqueText(s)    - anything else; render str(s) untouched

Strings are always opaque, even "3.5": callers use them for quantities they
have already formatted, like "(12 +/- 2.321)".
"""

import re

from .numfmt import is_number

UNCERTAINTY_RE = re.compile(r'^\s*\(?\s*(?P<value>.+?)\s*(?:\+/-|±)\s*(?P<error>.+?)\s*\)?\s*$')


class Unbound(object):
    """
    The name has no binding in scope.
    """
    numeric = False

    def __repr__(self):
        return "Unbound()"

    def __eq__(self, other):
        return isinstance(other, Unbound)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(Unbound)


UNBOUND = Unbound()


class NumericValue(object):
    """
    The name is bound to a real number.
    """
    numeric = True

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return "NumericValue(%r)" % (self.value,)

    def __eq__(self, other):
        return isinstance(other, NumericValue) and other.value == self.value

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.value)


class OpaqueText(object):
    """
    The name is bound to text which is passed through verbatim.
    """
    numeric = False

    def __init__(self, text):
        self.text = text

    def uncertainty(self):
        """
        Split '(12 +/- 2.321)' into ('12', '2.321'); None if the text has no +/-.
        """
        match = UNCERTAINTY_RE.match(self.text)
        if match is None:
            return None
        return match.group('value'), match.group('error')

    def __repr__(self):
        return "OpaqueText(%r)" % (self.text,)

    def __eq__(self, other):
        return isinstance(other, OpaqueText) and other.text == self.text

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.text)


def resolve(name, scope):
    """
    Resolve `name` against the mapping `scope` (None means empty).
    """
    if not scope or name not in scope:
        return UNBOUND
    value = scope[name]
    if is_number(value):
        return NumericValue(value)
    if isinstance(value, str):
        return OpaqueText(value)
    return OpaqueText(str(value))
