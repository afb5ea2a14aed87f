"""
Expression tree handed to the renderers.

Three node types: constants, symbols and operators. An operator whose
symbol has no precedence rank is a function call, so cos(x) is
OperatorNode('cos', [SymbolNode('x')]).

Nodes are never modified by rendering.
"""

from .numfmt import number_to_string


class Node(object):
    """
    Base class for expression nodes.
    """
    __slots__ = ()


class ConstantNode(Node):
    """
    A literal number or string.

    `text` keeps the literal as it was written ('2.30'), so constants are
    rendered as typed rather than reformatted.
    """
    __slots__ = ('value', 'text')

    def __init__(self, value, text=None):
        if text is None:
            text = value if isinstance(value, str) else number_to_string(value)
        self.value = value
        self.text = text

    def __eq__(self, other):
        return isinstance(other, ConstantNode) and (self.value, self.text) == (other.value, other.text)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(('constant', self.text))

    def __repr__(self):
        return "ConstantNode(%r, %r)" % (self.value, self.text)


class SymbolNode(Node):
    """
    A variable name, possibly bound in scope.
    """
    __slots__ = ('name',)

    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        return isinstance(other, SymbolNode) and self.name == other.name

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(('symbol', self.name))

    def __repr__(self):
        return "SymbolNode(%r)" % self.name


class OperatorNode(Node):
    """
    An operator (or function) applied to one or more child nodes.
    """
    __slots__ = ('op', 'params')

    def __init__(self, op, params):
        if not params:
            raise ValueError("operator %r needs at least one operand" % op)
        self.op = op
        self.params = tuple(params)

    def __eq__(self, other):
        return isinstance(other, OperatorNode) and (self.op, self.params) == (other.op, other.params)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(('operator', self.op, self.params))

    def __repr__(self):
        return "OperatorNode(%r, %r)" % (self.op, list(self.params))
