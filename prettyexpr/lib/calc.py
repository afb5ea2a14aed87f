"""
Parser for algebraic expressions.

Uses pyparsing to parse. Main function is parse(), which returns a tree of
ConstantNode / SymbolNode / OperatorNode for the renderers.
"""

from pyparsing import (
    Word, Literal, Keyword, Regex, ZeroOrMore, Optional, Forward,
    StringEnd, Suppress, Combine, QuotedString, alphas, nums, alphanums
)

from ..node import ConstantNode, SymbolNode, OperatorNode


# The following few functions define build actions, which are run on the
# flat token list of each parse component. They turn the strings and
# (previously built) nodes into the node that component represents.

def build_number(parse_result):
    """
    Create a constant out of the numeral, keeping its text.

    e.g. [ '2.30' ] -> ConstantNode(2.3, '2.30')
    """
    text = parse_result[0]
    if '.' in text or 'e' in text or 'E' in text:
        value = float(text)
    else:
        value = int(text)
    return ConstantNode(value, text)


def build_string(parse_result):
    return ConstantNode(parse_result[0])


def build_variable(parse_result):
    return SymbolNode(parse_result[0])


def build_function(parse_result):
    """
    [ 'max', a, b ] -> OperatorNode('max', [a, b])
    """
    return OperatorNode(parse_result[0], list(parse_result[1:]))


def build_postfix(parse_result):
    """
    Apply postfix operators left to right: [ x, '!', "'" ] -> (x!)'
    """
    node = parse_result[0]
    for op in parse_result[1:]:
        node = OperatorNode(op, [node])
    return node


def build_power(parse_result):
    """
    [ base ] or [ base, '^', exponent ]. The exponent was parsed by the
    recursive rule, so 2^3^2 is already 2^(3^2).
    """
    if len(parse_result) == 1:
        return parse_result[0]
    return OperatorNode('^', [parse_result[0], parse_result[2]])


def build_unary(parse_result):
    """
    [ '-', x ] -> OperatorNode('-', [x])
    """
    return OperatorNode(parse_result[0], [parse_result[1]])


def build_left_assoc(parse_result):
    """
    Fold operands left to right, keeping the operators.

    [ a, '+', b, '-', c ] -> (a + b) - c

    Two operands in a row (from implicit multiplication) are joined by '*':
    [ 2, x ] -> 2 * x
    """
    tokens = list(parse_result)
    node = tokens[0]
    i = 1
    while i < len(tokens):
        if isinstance(tokens[i], str):
            op, rhs = tokens[i], tokens[i + 1]
            i += 2
        else:
            op, rhs = '*', tokens[i]
            i += 1
        node = OperatorNode(op, [node, rhs])
    return node


def build_right_assoc(parse_result):
    """
    [ a, '=', b ] where b already holds anything further right.
    """
    if len(parse_result) == 1:
        return parse_result[0]
    return OperatorNode(parse_result[1], [parse_result[0], parse_result[2]])


BUILD_ACTIONS = {
    'number': build_number,
    'string': build_string,
    'variable': build_variable,
    'function': build_function,
    'postfix': build_postfix,
    'power': build_power,
    'unary': build_unary,
    'product': build_left_assoc,
    'sum': build_left_assoc,
    'range': build_left_assoc,
    'conversion': build_left_assoc,
    'relational': build_left_assoc,
    'equality': build_left_assoc,
    'assignment': build_right_assoc,
}


class ParseAugmenter(object):
    """
    Holds the data for a particular parse.

    Retains the `math_expr` so it needn't be passed around method to method.
    Eventually holds the parse tree as well.
    """
    def __init__(self, math_expr, build_actions=None):
        """
        Create the ParseAugmenter for a given math expression string.

        Do the parsing later, when called like `OBJ.parse_algebra()`.
        """
        self.math_expr = math_expr
        self.build_actions = build_actions or BUILD_ACTIONS
        self.tree = None

    def grammar(self):
        """
        Build the pyparsing grammar, lowest precedence last.
        """
        act = self.build_actions

        # 0.33 or 7 or .34 or 16.
        number_part = Word(nums)
        inner_number = (number_part + Optional("." + Optional(number_part))) | ("." + number_part)
        # 2.13e+6; the exponent marker keeps its case so the text survives
        exponent = Word("eE", exact=1) + Optional(Literal('+') | Literal('-')) + number_part
        # pyparsing allows spaces between tokens--`Combine` prevents that.
        number = Combine(inner_number + Optional(exponent))
        number.set_parse_action(act['number'])

        string = QuotedString('"', esc_char='\\')
        string.set_parse_action(act['string'])

        # Predefine recursive variables.
        expr = Forward()
        unary = Forward()
        assignment = Forward()

        # Names start with letters/underscores and may contain numbers
        # afterward; 'in' is the unit conversion operator.
        keyword_in = Keyword("in")
        inner_varname = Word(alphas + "_", alphanums + "_")
        varname = ~keyword_in + inner_varname
        varname.set_parse_action(act['variable'])

        arguments = Optional(expr + ZeroOrMore(Suppress(",") + expr))
        function = inner_varname + Suppress("(") + arguments + Suppress(")")
        function.set_parse_action(act['function'])

        atom = number | string | function | varname | (Suppress("(") + expr + Suppress(")"))

        # 5! or A' -- but not the start of !=
        postfix = atom + ZeroOrMore(Regex(r"!(?!=)") | Literal("'"))
        postfix.set_parse_action(act['postfix'])

        # x^-2 is allowed, and 2^3^2 groups to the right
        power = postfix + Optional(Literal("^") + unary)
        power.set_parse_action(act['power'])

        signed = (Literal('-') | Literal('+')) + unary
        signed.set_parse_action(act['unary'])
        unary <<= signed | power

        # 7 * 5 / 4, or 2x (an implicit factor never starts with a sign)
        mul_op = Literal('.*') | Literal('./') | Literal('*') | Literal('/') | Literal('%')
        product = unary + ZeroOrMore((mul_op + unary) | power)
        product.set_parse_action(act['product'])

        sum_term = product + ZeroOrMore((Literal('+') | Literal('-')) + product)
        sum_term.set_parse_action(act['sum'])

        range_term = sum_term + ZeroOrMore(Literal(':') + sum_term)
        range_term.set_parse_action(act['range'])

        conversion = range_term + ZeroOrMore(keyword_in + range_term)
        conversion.set_parse_action(act['conversion'])

        rel_op = Literal('<=') | Literal('>=') | Literal('<') | Literal('>')
        relational = conversion + ZeroOrMore(rel_op + conversion)
        relational.set_parse_action(act['relational'])

        equality = relational + ZeroOrMore((Literal('==') | Literal('!=')) + relational)
        equality.set_parse_action(act['equality'])

        assignment <<= equality + Optional(Regex(r"=(?!=)") + assignment)
        assignment.set_parse_action(act['assignment'])

        # Finish the recursion.
        expr <<= assignment
        return expr

    def parse_algebra(self):
        """
        Parse an algebraic expression into a tree, stored in `self.tree`.
        """
        expr = self.grammar()
        self.tree = (expr + StringEnd()).parse_string(self.math_expr)[0]
        return self.tree


def parse(math_expr):
    """
    Parse `math_expr` into an expression tree.

    Raises pyparsing.ParseException on bad syntax.
    """
    return ParseAugmenter(math_expr).parse_algebra()
