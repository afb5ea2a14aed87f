"""
TeX output.

TexBackend makes the same decisions as the plain backend (same scope
lookups, same rewrites when simplifying) but every operand goes in an
explicit brace group:

    a + b*x, {a: 1.2, b: 2.3}      ->  {1.20}+{{2.30} \\, {x}}
    (x - x0)^2, {x0: -212.22}      ->  \\left({{x}-{-212}}\\right)^{2}
    a, {a: '(12 +/- 2.321)'}       ->  {12}\\pm{2.321}

Some simplifications have no sensible TeX spelling; those raise
UnsupportedCombination instead of producing wrong markup.
"""

from .fragments import (
    Rendered, FragmentAssembly,
    NUMBER, SYMBOL, TEXT, OPERATOR, CALL,
    LEFT, LEFT_SEP, OP, RIGHT_SEP, RIGHT,
)
from .numfmt import split_exponent
from .precedence import needs_parens, MULTIPLY_RANK, ADD_RANK
from .render import PlainBackend


class UnsupportedCombination(Exception):
    """
    Simplified TeX output was requested for a construct it cannot spell.
    """
    pass


# op -> (left_sep, glyph, right_sep)
TEX_OPERATORS = {
    '+': ('', '+', ''),
    '-': ('', '-', ''),
    '*': (' ', r'\cdot', ' '),
    '.*': (' ', r'\circ', ' '),
    '%': (' ', r'\bmod', ' '),
    '^': ('', '^', ''),
    ':': ('', ':', ''),
    'in': (' ', r'\rightarrow', ' '),
    '<': ('', '<', ''),
    '>': ('', '>', ''),
    '<=': ('', r'\leq', ''),
    '>=': ('', r'\geq', ''),
    '==': ('', '=', ''),
    '!=': ('', r'\neq', ''),
    '=': ('', '=', ''),
}

FRACTIONS = ('/', './')

# functions TeX knows by name
TEX_FUNCTIONS = set("sin cos tan sec csc cot sinh cosh tanh coth arcsin arccos arctan "
                    "exp log ln lg max min det gcd arg deg dim".split())

LEFT_PAREN = r'\left({'
RIGHT_PAREN = r'}\right)'


def enrich_varname(varname):
    """
    Prepend a backslash if we're given a greek character.
    """
    greek = ("alpha beta gamma delta epsilon varepsilon zeta eta theta "
             "vartheta iota kappa lambda mu nu xi pi rho sigma tau upsilon "
             "phi varphi chi psi omega").split()

    # add capital greek letters
    greek += [x.capitalize() for x in greek]

    # add hbar for QM
    greek.append('hbar')

    # add infinity
    greek.append('infty')

    if varname in greek:
        return r"\{letter}".format(letter=varname)
    else:
        return varname.replace("_", r"\_")


def is_uncertain(rendered):
    return rendered.kind == TEXT and rendered.binding is not None \
        and rendered.binding.uncertainty() is not None


class TexBackend(PlainBackend):
    """
    Spell renderings as TeX markup.
    """
    name = 'tex'

    def numeral(self, text):
        mantissa, exponent = split_exponent(text)
        if exponent is None:
            return text
        return r"{m} \cdot 10^{{{e}}}".format(m=mantissa, e=exponent)

    def symbol(self, name):
        first, _, second = name.partition("_")
        if second:
            # Then 'a_b' must become 'a_{b}'
            return r"{a}_{{{b}}}".format(a=enrich_varname(first), b=enrich_varname(second))
        return enrich_varname(name)

    def string(self, value):
        return r"\text{%s}" % value

    def opaque(self, binding):
        parts = binding.uncertainty()
        if parts is None:
            return binding.text
        return r"{{{v}}}\pm{{{e}}}".format(v=parts[0], e=parts[1])

    def negated(self, rendered):
        if is_uncertain(rendered):
            raise UnsupportedCombination(
                "cannot fold the sign of uncertainty value %r in TeX" % rendered.binding.text)
        return rendered.negated()

    def wrap_text(self, text):
        return LEFT_PAREN + text + RIGHT_PAREN

    def wrap_base(self, rendered):
        """
        Spell `rendered` as the base of a power or postfix operator.
        """
        if rendered.kind == SYMBOL:
            return rendered.text
        if rendered.kind in (OPERATOR, TEXT) or rendered.negative:
            return self.wrap_text(rendered.text)
        return '{' + rendered.text + '}'

    def wrap_factor(self, rendered):
        """
        Spell `rendered` as one side of a product.
        """
        if (rendered.kind == NUMBER and rendered.negative) or \
                (rendered.kind == OPERATOR and needs_parens(MULTIPLY_RANK, rendered.rank, '*', 'right')):
            return self.wrap_text(rendered.text)
        return '{' + rendered.text + '}'

    def product_glyph(self, rhs):
        """
        A thin space before symbols and functions, a dot otherwise.
        """
        if rhs.kind in (SYMBOL, CALL):
            return r'\,'
        return r'\cdot'

    def assemble(self, lhs, op, rhs, ctx):
        left_sep, glyph, right_sep = TEX_OPERATORS.get(op, (' ', op, ' '))
        return FragmentAssembly(lhs, op, rhs, left_sep, right_sep, glyph=glyph)

    def unary(self, op, operand, ctx):
        if op in ('-', '+'):
            if ctx.simplify:
                if op == '+':
                    return operand
                if operand.negative or operand.kind == NUMBER:
                    return self.negated(operand)
            wrap = operand.kind == TEXT or operand.negative or \
                (operand.kind == OPERATOR and operand.rank is not None and operand.rank >= ADD_RANK)
            body = self.wrap_text(operand.text) if wrap else operand.text
            return Rendered(op + body, OPERATOR, rank=ADD_RANK, negative=(op == '-'),
                            body_rank=None if wrap else operand.rank)

        if op == "'":
            text = self.wrap_base(operand) + r'^{\top}'
        else:
            text = self.wrap_base(operand) + op
        return Rendered(text, OPERATOR, rank=ctx.rank(op))

    def call(self, name, args, ctx):
        if name == 'sqrt' and len(args) == 1:
            return Rendered(r"\sqrt{%s}" % args[0].text, CALL)
        if name == 'log10':
            fname = r"\log_{10}"
        elif name == 'log2':
            fname = r"\log_2"
        elif name in TEX_FUNCTIONS:
            fname = '\\' + name
        else:
            fname = r"\text{%s}" % enrich_varname(name)
        inner = ', '.join('{' + arg.text + '}' for arg in args)
        return Rendered(fname + LEFT_PAREN + inner + RIGHT_PAREN, CALL)

    def spaced(self, assembly, ctx):
        # TeX has no separate fully parenthesized mode
        return self.brace(assembly, ctx)

    def implicit_product(self, assembly, ctx):
        lhs, rhs = assembly.lhs, assembly.rhs
        if is_uncertain(rhs):
            raise UnsupportedCombination(
                "no TeX spelling for implicit multiplication by uncertainty value %r" % rhs.binding.text)
        body = self.negated(lhs).text if lhs.negative else lhs.text
        # the sign goes in front of the group so an enclosing sum can fold it
        assembly[LEFT] = ('-' if lhs.negative else '') + '{' + body + '}'
        assembly.wrapped.add(LEFT)
        assembly[LEFT_SEP] = assembly[RIGHT_SEP] = ' '
        assembly[OP] = self.product_glyph(rhs)
        assembly[RIGHT] = self.wrap_factor(rhs)
        assembly.wrapped.add(RIGHT)
        return assembly.finish(MULTIPLY_RANK, negative=lhs.negative)

    def numeral_product(self, assembly, ctx):
        self.brace_product(assembly)
        return assembly.finish(MULTIPLY_RANK, pair=(assembly.lhs, assembly.rhs))

    def brace_product(self, assembly):
        assembly[LEFT] = self.wrap_factor(assembly.lhs)
        assembly[OP] = self.product_glyph(assembly.rhs)
        assembly[RIGHT] = self.wrap_factor(assembly.rhs)
        assembly.wrapped.update((LEFT, RIGHT))

    def brace(self, assembly, ctx):
        op = assembly.op
        lhs, rhs = assembly.lhs, assembly.rhs
        op_rank = ctx.rank(op)

        if op in FRACTIONS:
            assembly.wrap(LEFT, r'\frac{', '}')
            assembly.wrap(RIGHT, '{', '}')
            assembly.blank(LEFT_SEP, OP, RIGHT_SEP)
        elif op == '^':
            assembly[LEFT] = self.wrap_base(lhs)
            assembly.wrapped.add(LEFT)
            assembly.wrap(RIGHT, '{', '}')
        elif op == '*':
            if ctx.simplify and lhs.pair is not None:
                # 2(1.32) * x: x joins the parenthesized numeral
                lead, tail = lhs.pair
                assembly[LEFT] = self.wrap_factor(lead)
                assembly[OP] = r'\cdot'
                assembly[RIGHT] = self.wrap_text(
                    self.wrap_factor(tail) + ' ' + self.product_glyph(rhs) + ' ' + self.wrap_factor(rhs))
                assembly.wrapped.update((LEFT, RIGHT))
            else:
                self.brace_product(assembly)
        else:
            if op not in TEX_OPERATORS:
                raise UnsupportedCombination("no TeX spelling for operator %r" % op)
            for slot, operand, side in ((LEFT, lhs, 'left'), (RIGHT, rhs, 'right')):
                if operand.kind == OPERATOR and needs_parens(op_rank, operand.rank, op, side):
                    assembly.wrap(slot, LEFT_PAREN, RIGHT_PAREN)
                else:
                    assembly.wrap(slot, '{', '}')
        return assembly.finish(op_rank)
