"""
Tree to string conversion.

Each node type has a render action; an operator's children are rendered
first and the action combines their `Rendered` results. How pieces are
spelled is left to a backend: `PlainBackend` here, `TexBackend` in
texrender.py. Both make the same decisions; simplify.py holds the rewrites
that run on binary operators when simplification is on.

Default mode mimics a fully parenthesized printout:

    a + b*x, {a: 1.2, b: 2.3}, precision 6  ->  '1.20000 + (2.30000 * x)'

Simplify mode drops what it can:

    a + b*x, {a: 1.2, b: 2.3}               ->  '1.20 + 2.30x'
"""

from .config import RenderConfig
from .fragments import (
    Rendered, assemble_binary,
    NUMBER, SYMBOL, TEXT, STRING, OPERATOR, CALL,
    LEFT, LEFT_SEP, OP, RIGHT_SEP, RIGHT,
)
from .node import ConstantNode, SymbolNode, OperatorNode
from .numfmt import format_number, is_number
from .precedence import rank, needs_parens, MULTIPLY_RANK, ADD_RANK
from .scope import resolve, NumericValue, OpaqueText
from .simplify import simplify_binary


class RenderContext(object):
    """
    Everything one render call needs: scope, config and backend.

    Nothing here is stored on the tree, so a tree can be rendered by several
    contexts at once.
    """
    def __init__(self, scope, config, backend):
        self.scope = scope or {}
        self.config = config
        self.backend = backend

    @property
    def simplify(self):
        return self.config.simplify

    def rank(self, op):
        return rank(op, self.config.ranks)

    def log(self, component, msg, level=1):
        if self.config.verbose >= level:
            print("[prettyexpr.%s] %s" % (component, msg))


def numeral(text, value, backend):
    """
    Rendered for a number whose plain text is `text`.
    """
    negative = value < 0
    head = text[1:] if negative else text
    return Rendered(backend.numeral(text), NUMBER, rank=ADD_RANK if negative else None,
                    value=value, negative=negative, head=head)


class PlainBackend(object):
    """
    Spell renderings as plain infix text.
    """
    name = 'plain'

    def numeral(self, text):
        return text

    def symbol(self, name):
        return name

    def string(self, value):
        return '"%s"' % value

    def opaque(self, binding):
        return binding.text

    def zero(self):
        return Rendered('0', NUMBER, value=0, head='0')

    def negated(self, rendered):
        return rendered.negated()

    def wrap_text(self, text):
        return '(' + text + ')'

    def assemble(self, lhs, op, rhs, ctx):
        return assemble_binary(lhs, op, rhs, ctx.rank(op), spaced=not ctx.simplify)

    def unary(self, op, operand, ctx):
        """
        Prefix '-' and '+'; anything else is postfix, like 5!.
        """
        op_rank = ctx.rank(op)
        if op in ('-', '+'):
            if ctx.simplify:
                if op == '+':
                    return operand
                if operand.negative or operand.kind == NUMBER:
                    # two negatives cancel; a numeral takes the sign itself
                    return self.negated(operand)
                wrap = operand.rank is not None and operand.rank >= ADD_RANK
            else:
                wrap = operand.kind == OPERATOR or operand.negative
            body = self.wrap_text(operand.text) if wrap else operand.text
            return Rendered(op + body, OPERATOR, rank=ADD_RANK, negative=(op == '-'),
                            body_rank=None if wrap else operand.rank,
                            head=None if wrap else operand.head)

        if ctx.simplify:
            wrap = operand.negative or needs_parens(op_rank, operand.rank, op, 'left')
        else:
            wrap = operand.kind == OPERATOR or operand.negative
        body = self.wrap_text(operand.text) if wrap else operand.text
        return Rendered(body + op, OPERATOR, rank=op_rank, head=None if wrap else operand.head)

    def call(self, name, args, ctx):
        text = name + '(' + ', '.join(arg.text for arg in args) + ')'
        return Rendered(text, CALL)

    def spaced(self, assembly, ctx):
        """
        Default mode: every operator operand goes in parentheses, and so does
        a signed operand of anything binding tighter than a sum.
        """
        op_rank = ctx.rank(assembly.op)
        tight = op_rank is not None and op_rank < ADD_RANK
        for slot, operand in ((LEFT, assembly.lhs), (RIGHT, assembly.rhs)):
            if operand.kind == OPERATOR or (tight and operand.negative):
                assembly.wrap(slot)
        return assembly.finish(op_rank)

    def wrap_head(self, assembly):
        """
        Put the numeral the right operand starts with in parentheses, so it
        cannot run into what is on its left: 2 * 1.00^2 -> 2(1.00)^2.
        """
        rhs = assembly.rhs
        if rhs.kind == TEXT:
            if not (rhs.text.startswith('(') and rhs.text.endswith(')')):
                assembly.wrap(RIGHT)
        elif rhs.head:
            assembly[RIGHT] = '(' + rhs.head + ')' + rhs.text[len(rhs.head):]

    def implicit_product(self, assembly, ctx):
        """
        Numeral on the left, expression on the right, no operator between.
        """
        if needs_parens(MULTIPLY_RANK, assembly.rhs.rank, '*', 'right'):
            assembly.wrap(RIGHT)
        else:
            self.wrap_head(assembly)
        assembly.blank(LEFT_SEP, OP, RIGHT_SEP)
        return assembly.finish(MULTIPLY_RANK)

    def numeral_product(self, assembly, ctx):
        """
        2 * 1.32 -> 2(1.32)
        """
        assembly.blank(LEFT_SEP, OP, RIGHT_SEP)
        if assembly.rhs.pair is not None and not assembly.rhs.negative:
            # 2 * 3(4) -> 2(3)(4)
            self.wrap_head(assembly)
        else:
            assembly.wrap(RIGHT)
        return assembly.finish(MULTIPLY_RANK, pair=(assembly.lhs, assembly.rhs))

    def brace(self, assembly, ctx):
        """
        Parenthesize only children that bind more weakly than this operator.
        """
        op = assembly.op
        op_rank = ctx.rank(op)
        if needs_parens(op_rank, assembly.lhs.rank, op, 'left'):
            assembly.wrap(LEFT)
        if needs_parens(op_rank, assembly.rhs.rank, op, 'right'):
            assembly.wrap(RIGHT)
        if op == '*' and assembly[LEFT].endswith(')'):
            # 2(1.32) * x -> 2(1.32)x
            assembly.blank(OP)
            if RIGHT not in assembly.wrapped:
                self.wrap_head(assembly)
        return assembly.finish(op_rank)


def render_constant(node, ctx):
    if is_number(node.value):
        return numeral(node.text, node.value, ctx.backend)
    return Rendered(ctx.backend.string(node.value), STRING)


def render_symbol(node, ctx):
    binding = resolve(node.name, ctx.scope)
    if isinstance(binding, NumericValue):
        config = ctx.config
        text = format_number(binding.value, config.precision, config.trim_zeros)
        ctx.log('scope', "%s = %s" % (node.name, text), level=2)
        return numeral(text, binding.value, ctx.backend)
    if isinstance(binding, OpaqueText):
        ctx.log('scope', "%s = %r (verbatim)" % (node.name, binding.text), level=2)
        negative = binding.text.startswith('-')
        return Rendered(ctx.backend.opaque(binding), TEXT, rank=ADD_RANK if negative else None,
                        negative=negative, binding=binding)
    return Rendered(ctx.backend.symbol(node.name), SYMBOL)


def render_operator(node, ctx):
    params = [render_node(param, ctx) for param in node.params]
    op_rank = ctx.rank(node.op)
    if op_rank is None or len(params) > 2:
        # function call shape
        return ctx.backend.call(node.op, params, ctx)
    if len(params) == 1:
        return ctx.backend.unary(node.op, params[0], ctx)

    lhs, rhs = params
    assembly = ctx.backend.assemble(lhs, node.op, rhs, ctx)
    if not ctx.simplify:
        return ctx.backend.spaced(assembly, ctx)
    return simplify_binary(assembly, ctx)


RENDER_ACTIONS = {
    ConstantNode: render_constant,
    SymbolNode: render_symbol,
    OperatorNode: render_operator,
}


def render_node(node, ctx):
    """
    Render `node` (and its subtree) into a Rendered.
    """
    for node_type, action in RENDER_ACTIONS.items():
        if isinstance(node, node_type):
            return action(node, ctx)
    raise Exception("Unknown node type '{}': coder error".format(type(node).__name__))


def make_backend(config):
    if config.tex:
        from .texrender import TexBackend
        return TexBackend()
    return PlainBackend()


def render(node, scope=None, config=None, **options):
    """
    Render an expression tree to a string.

    `scope` maps symbol names to numbers or preformatted strings.
    `config` is a RenderConfig or a dict of options; keyword options
    override it.
    """
    config = RenderConfig.coerce(config, **options)
    ctx = RenderContext(scope, config, make_backend(config))
    ctx.log('render', "rendering %r with %s backend" % (node, ctx.backend.name), level=3)
    return render_node(node, ctx).text
