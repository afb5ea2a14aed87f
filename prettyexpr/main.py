#!/usr/bin/env python

import sys
import argparse

import numpy

from . import __version__
from .config import RenderConfig
from .lib.calc import parse
from .render import render

# -----------------------------------------------------------------------------


class InputTypeError(TypeError):
    """
    prettyprint was given something other than a string or a collection of
    strings.
    """
    pass


def prettyprint_string(expr, scope=None, config=None):
    '''
    Parse and render a single expression string.
    '''
    if not expr.strip():
        return ""
    return render(parse(expr), scope, config)


def prettyprint_element(element):
    '''
    Render one element of a collection: default options, empty scope.
    '''
    if not isinstance(element, str):
        raise InputTypeError("collection elements must be strings, got %s" % type(element).__name__)
    return prettyprint_string(element)


def prettyprint_nested(items):
    return [prettyprint_nested(x) if isinstance(x, (list, tuple)) else prettyprint_element(x)
            for x in items]


def prettyprint(expr, scope=None, config=None, **options):
    '''
    Pretty print an expression.

    expr = (str) expression, or a (nested) list / tuple / numpy array of expression strings
    scope = (dict) symbol name -> number, or -> preformatted string such as "(12 +/- 2.321)"
    config = RenderConfig, or dict of options (precision, simplify, tex, trim_zeros, ...)

    Collections are rendered element by element with default options and an
    empty scope, keeping their shape.
    '''
    if isinstance(expr, str):
        return prettyprint_string(expr, scope, RenderConfig.coerce(config, **options))
    if isinstance(expr, (list, tuple)):
        return prettyprint_nested(expr)
    if isinstance(expr, numpy.ndarray):
        if expr.size == 0:
            return numpy.empty(expr.shape, dtype=object)
        return numpy.frompyfunc(prettyprint_element, 1, 1)(expr)
    raise InputTypeError("Expected a string, list or array, got %s" % type(expr).__name__)

# -----------------------------------------------------------------------------


def scope_value(text):
    '''
    Command line scope values: numbers where they parse as such, otherwise
    kept as preformatted text.
    '''
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def parse_scope(assignments):
    scope = {}
    for assignment in assignments or []:
        name, sep, value = assignment.partition('=')
        if not sep or not name.strip():
            raise ValueError("Bad scope assignment '%s', expected name=value" % assignment)
        scope[name.strip()] = scope_value(value.strip())
    return scope


class VAction(argparse.Action):
    def __call__(self, parser, args, values, option_string=None):
        curval = getattr(args, self.dest, 0) or 0
        values = values.count('v') + 1
        setattr(args, self.dest, values + curval)

# -----------------------------------------------------------------------------


def CommandLine(args=None, arglist=None):
    '''
    Main command line.  Accepts args, to allow for simple unit testing.
    '''
    help_text = """usage: prettyexpr [options] expression

Version: {}

""".format(__version__)

    parser = argparse.ArgumentParser(description=help_text, formatter_class=argparse.RawTextHelpFormatter)

    parser.add_argument("expr", help="expression to pretty print")
    parser.add_argument('-v', "--verbose", nargs=0, help="increase output verbosity (add more -v to increase versbosity)", action=VAction, dest='verbose')
    parser.add_argument("-s", "--scope", help="substitute a value for a symbol, as name=value (may be repeated)", action="append", default=[])
    parser.add_argument("-p", "--precision", help="significant digits for substituted numbers", type=int, default=3)
    parser.add_argument("--simplify", help="simplify the output", action="store_true")
    parser.add_argument("--tex", help="produce TeX instead of plain text", action="store_true")
    parser.add_argument("--trim-zeros", help="drop trailing zeros of substituted numbers", action="store_true")
    parser.add_argument("--version", action="version", version="prettyexpr %s" % __version__)

    if not args:
        args = parser.parse_args(arglist)

    config = RenderConfig(precision=args.precision, simplify=args.simplify, tex=args.tex,
                          trim_zeros=args.trim_zeros, verbose=args.verbose)
    scope = parse_scope(args.scope)
    if args.verbose:
        print("[prettyexpr] scope = %s" % scope)
    output = prettyprint(args.expr, scope, config)
    sys.stdout.write(output + "\n")
    return output
