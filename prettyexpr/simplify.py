"""
Rewrites applied to a binary operation when simplification is on.

The passes run in a fixed order on a FragmentAssembly:

  eliminate_identity   1 * x -> x, x + 0 -> x, 0 * x -> 0
  compact_product      x * 3 -> 3x, -2 * -x -> 2x
  compact_numerals     2 * 1.32 -> 2(1.32)
  fold_sign            x + -y -> x - y, x - -y -> x + y

A pass either returns a finished Rendered, which ends the sequence, or
returns None after (maybe) rewriting slots. Whatever is left is braced by
the backend.

Decisions are made on the operands' tags (numeric value, sign), never by
reading numbers back out of rendered text.
"""

from .fragments import LEFT, RIGHT
from .precedence import ADD_RANK, MULTIPLY_RANK


def numeral_like(rendered):
    """
    A number, or a product of numbers such as 2(1.32).
    """
    return rendered.numeric or rendered.pair is not None


def eliminate_identity(assembly, ctx):
    """
    Drop multiplicative ones and additive zeros; collapse products with zero.
    """
    op_rank = ctx.rank(assembly.op)
    lhs, rhs = assembly.lhs, assembly.rhs

    if op_rank == MULTIPLY_RANK:
        if lhs.value == 1:
            ctx.log('simplify', "1 * %s -> %s" % (rhs.text, rhs.text))
            return rhs
        if rhs.value == 1:
            ctx.log('simplify', "%s * 1 -> %s" % (lhs.text, lhs.text))
            return lhs
        if lhs.value == 0 or rhs.value == 0:
            ctx.log('simplify', "%s * %s -> 0" % (lhs.text, rhs.text))
            return ctx.backend.zero()

    elif op_rank == ADD_RANK:
        if rhs.value == 0:
            ctx.log('simplify', "%s %s 0 -> %s" % (lhs.text, assembly.op, lhs.text))
            return lhs
        if lhs.value == 0:
            ctx.log('simplify', "0 %s %s -> %s%s" % (assembly.op, rhs.text,
                                                    '-' if assembly.op == '-' else '', rhs.text))
            if assembly.op == '-':
                return ctx.backend.unary('-', rhs, ctx)
            return rhs

    return None


def compact_product(assembly, ctx):
    """
    Exactly one numeric operand: write it first with no operator glyph,
    moving any minus sign onto it.
    """
    if assembly.op != '*' or assembly.lhs.numeric == assembly.rhs.numeric:
        return None
    if assembly.lhs.pair is not None or assembly.rhs.pair is not None:
        # numeral products keep their order: 2(3) * 4 -> 2(3)(4)
        return None
    if assembly.rhs.numeric:
        assembly.swap()

    lhs, rhs = assembly.lhs, assembly.rhs
    if rhs.negative:
        # -2 * -x -> 2x, 2 * -x -> -2x
        assembly.replace_operand(RIGHT, ctx.backend.negated(rhs))
        assembly.replace_operand(LEFT, ctx.backend.negated(lhs))
    result = ctx.backend.implicit_product(assembly, ctx)
    ctx.log('simplify', "implicit product -> %s" % result.text)
    return result


def compact_numerals(assembly, ctx):
    """
    Both operands numeric: keep them apart with parentheses, 2(1.32).
    """
    if assembly.op != '*' or not (numeral_like(assembly.lhs) and numeral_like(assembly.rhs)):
        return None
    result = ctx.backend.numeral_product(assembly, ctx)
    ctx.log('simplify', "numeral product -> %s" % result.text)
    return result


def fold_sign(assembly, ctx):
    """
    Absorb a leading minus of the right operand into + or -.
    """
    if assembly.op not in ('+', '-') or not assembly.rhs.negative:
        return None
    flipped = '-' if assembly.op == '+' else '+'
    ctx.log('simplify', "%s %s -> %s" % (assembly.op, assembly.rhs.text, flipped))
    assembly.set_op(flipped)
    assembly.replace_operand(RIGHT, ctx.backend.negated(assembly.rhs))
    return None


REWRITES = (
    eliminate_identity,
    compact_product,
    compact_numerals,
    fold_sign,
)


def simplify_binary(assembly, ctx):
    """
    Run the rewrites over `assembly`, then let the backend parenthesize
    what is left.
    """
    for rewrite in REWRITES:
        result = rewrite(assembly, ctx)
        if result is not None:
            return result
    return ctx.backend.brace(assembly, ctx)
