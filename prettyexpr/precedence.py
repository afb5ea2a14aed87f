"""
Operator precedence used when deciding where parentheses go.

A lower rank binds tighter. Operators missing from the table have no rank
and are rendered as function calls.
"""

PRECEDENCE = {
    '^': 1,     # power
    '!': 2,     # factorial
    "'": 3,     # transpose
    ':': 4,     # range (a guess; override with RenderConfig.ranks)
    '/': 5,     # divide
    './': 5,    # element-wise divide
    '*': 6,     # multiply
    '.*': 6,    # element-wise multiply
    '%': 7,     # mod
    '+': 8,     # add
    '-': 8,     # subtract
    'in': 9,    # unit conversion
    '<': 10,    # smaller
    '>': 10,    # larger
    '<=': 10,   # smaller or equal to
    '>=': 10,   # larger or equal to
    '==': 11,   # equal to
    '!=': 11,   # unequal
    '=': 12,    # assignment
}

POWER_RANK = PRECEDENCE['^']
MULTIPLY_RANK = PRECEDENCE['*']
ADD_RANK = PRECEDENCE['+']

# a op (b op c) differs from (a op b) op c
NON_ASSOCIATIVE = frozenset(['-', '/', './', '%', ':', 'in',
                             '<', '>', '<=', '>=', '==', '!='])

# (a op b) op c needs the parentheses
RIGHT_ASSOCIATIVE = frozenset(['^', '='])


def rank(op, overrides=None):
    """
    Return the precedence rank of `op`, or None for an unknown operator.

    `overrides` is an optional mapping consulted before the table.
    """
    if overrides and op in overrides:
        return overrides[op]
    return PRECEDENCE.get(op)


def needs_parens(parent_rank, child_rank, op, side):
    """
    Decide whether a child rendering of rank `child_rank` must be wrapped
    when it sits on `side` ('left' or 'right') of operator `op`.
    """
    if child_rank is None or parent_rank is None:
        return False
    if child_rank > parent_rank:
        return True
    if child_rank == parent_rank:
        if side == 'left':
            return op in RIGHT_ASSOCIATIVE
        return op in NON_ASSOCIATIVE
    return False
