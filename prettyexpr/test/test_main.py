import numpy
from prettyexpr.main import prettyprint, InputTypeError
from prettyexpr.config import RenderConfig
from prettyexpr.texrender import UnsupportedCombination
from prettyexpr.lib.calc import parse

#-----------------------------------------------------------------------------
# expressions and scopes shared by the tests below

LINE = "a + b*x"
POLY = "a + b*x - c*x^2 + d*x^3 + e*x^4"
GAUSS = "a + h*e^( -(x-x0)^2/(2*w^2) )"
WAVE = "a + b*cos(2*c*x) + c*sin(x)"
GROWTH = "a + b*e^(x+1)"

CASES = [
    (LINE, {'a': 1.2, 'b': 2.3}),
    (LINE, {'a': 0, 'b': 1}),
    (POLY, {'a': 0, 'b': 2132123.21321, 'c': -212.22, 'd': 0, 'e': 1e-19}),
    (GAUSS, {'a': 0, 'h': 1, 'x0': -212.22, 'w': 1}),
    (WAVE, {'a': 0, 'b': 1, 'c': 1.321213}),
    (GROWTH, {'a': 12, 'b': 2}),
]

# re-rendering a simplified rendering changes nothing for these either
STABLE = CASES + [
    ("a*b*c", {'a': 2, 'b': 3, 'c': 4}),
    ("a^2 + b", {'a': -3, 'b': "-3"}),
]

UNCERTAIN = {'a': "(12 +/- 2.321)", 'b': "(1.213 +/- 0.021)"}

#-----------------------------------------------------------------------------
# unit tests

import unittest

class Test_prettyprint(unittest.TestCase):

    def test_default1(self):
        ret = prettyprint(LINE, {'a': 1.2, 'b': 2.3}, precision=6)
        print(ret)
        assert ret == "1.20000 + (2.30000 * x)"

    def test_default_uncertain1(self):
        ret = prettyprint(GROWTH, UNCERTAIN)
        print(ret)
        assert ret == "(12 +/- 2.321) + ((1.213 +/- 0.021) * (e ^ (x + 1)))"

    def test_simplify1(self):
        expected = [
            "1.20 + 2.30x",
            "x",
            "2.13e+6x + 212x^2 + 1.00e-19x^4",
            "e^((-(x + 212)^2) / (2(1.00)^2))",
            "cos(2(1.32)x) + 1.32sin(x)",
            "12.0 + 2.00e^(x + 1)",
        ]
        for (expr, scope), expect in zip(CASES, expected):
            ret = prettyprint(expr, scope, simplify=True)
            print(ret)
            assert ret == expect

    def test_tex1(self):
        expected = [
            "{1.20}+{{2.30} \\, {x}}",
            "{0.00}+{{1.00} \\, {x}}",
            "{{{{0.00}+{{2.13 \\cdot 10^{+6}} \\, {x}}}-{\\left({-212}\\right) \\cdot {x^{2}}}}"
            "+{{0.00} \\cdot {x^{3}}}}+{{1.00 \\cdot 10^{-19}} \\cdot {x^{4}}}",
            "{0.00}+{{1.00} \\cdot {e^{\\frac{-\\left({{x}-{-212}}\\right)^{2}}{{2} \\cdot {{1.00}^{2}}}}}}",
            "{{0.00}+{{1.00} \\, {\\cos\\left({{{{2} \\cdot {1.32}} \\, {x}}}\\right)}}}"
            "+{{1.32} \\, {\\sin\\left({{x}}\\right)}}",
            "{12.0}+{{2.00} \\cdot {e^{{x}+{1}}}}",
        ]
        for (expr, scope), expect in zip(CASES, expected):
            ret = prettyprint(expr, scope, tex=True)
            print(ret)
            assert ret == expect

    def test_tex_simplify1(self):
        expected = [
            "{1.20}+{{2.30} \\, {x}}",
            "x",
            "{{{2.13 \\cdot 10^{+6}} \\, {x}}+{{212} \\cdot {x^{2}}}}+{{1.00 \\cdot 10^{-19}} \\cdot {x^{4}}}",
            "e^{\\frac{-\\left({{x}+{212}}\\right)^{2}}{{2} \\cdot {{1.00}^{2}}}}",
            "{\\cos\\left({{{2} \\cdot \\left({{1.32} \\, {x}}\\right)}}\\right)}+{{1.32} \\, {\\sin\\left({{x}}\\right)}}",
            "{12.0}+{{2.00} \\cdot {e^{{x}+{1}}}}",
        ]
        for (expr, scope), expect in zip(CASES, expected):
            ret = prettyprint(expr, scope, simplify=True, tex=True)
            print(ret)
            assert ret == expect

    def test_tex_uncertain1(self):
        ret = prettyprint(GROWTH, UNCERTAIN, tex=True)
        print(ret)
        assert ret == "{{12}\\pm{2.321}}+{{{1.213}\\pm{0.021}} \\cdot {e^{{x}+{1}}}}"

    def test_simplify_uncertain1(self):
        ret = prettyprint(GROWTH, UNCERTAIN, simplify=True)
        print(ret)
        assert ret == "(12 +/- 2.321) + (1.213 +/- 0.021)e^(x + 1)"

    def test_tex_uncertain_unsupported1(self):
        with self.assertRaises(UnsupportedCombination):
            prettyprint("2*a", UNCERTAIN, simplify=True, tex=True)
        with self.assertRaises(UnsupportedCombination):
            prettyprint("x + a", {'a': "-(1 +/- 2)"}, simplify=True, tex=True)

    def test_plain_uncertain_product1(self):
        ret = prettyprint("2*a", UNCERTAIN, simplify=True)
        assert ret == "2(12 +/- 2.321)"

    def test_idempotent1(self):
        '''
        Re-parsing a simplified rendering and rendering it again changes nothing.
        '''
        for expr, scope in STABLE:
            once = prettyprint(expr, scope, simplify=True)
            twice = prettyprint(once, scope, simplify=True)
            print(once, twice)
            assert once == twice

    def test_config1(self):
        config = RenderConfig(precision=6)
        assert prettyprint(LINE, {'a': 1.2, 'b': 2.3}, config) == "1.20000 + (2.30000 * x)"
        assert prettyprint(LINE, {'a': 1.2, 'b': 2.3}, {'precision': 6}) == "1.20000 + (2.30000 * x)"
        # keyword options override the config
        assert prettyprint(LINE, {'a': 1.2, 'b': 2.3}, config, simplify=True) == "1.20000 + 2.30000x"

    def test_legacy_options1(self):
        ret = prettyprint(LINE, {'a': 0, 'b': 1}, {'doSimplify': True, 'doTex': True})
        assert ret == "x"

    def test_trim_zeros1(self):
        ret = prettyprint(LINE, {'a': 1.2, 'b': 2.3}, simplify=True, trim_zeros=True)
        assert ret == "1.2 + 2.3x"

    def test_empty1(self):
        assert prettyprint("") == ""
        assert prettyprint("   ") == ""

    def test_no_scope1(self):
        assert prettyprint(LINE) == "a + (b * x)"
        assert prettyprint(LINE, simplify=True) == "a + b*x"

    def test_list1(self):
        ret = prettyprint([LINE, ["2*x", "-y"], ("x^2",)])
        print(ret)
        assert ret == ["a + (b * x)", ["2 * x", "-y"], ["x ^ 2"]]

    def test_list_ignores_options1(self):
        ret = prettyprint([LINE], {'a': 1.2}, simplify=True)
        assert ret == ["a + (b * x)"]

    def test_array1(self):
        ret = prettyprint(numpy.array([[LINE, "2*x"], ["x^2", "-y"]]))
        print(ret)
        assert isinstance(ret, numpy.ndarray)
        assert ret.shape == (2, 2)
        assert ret[0, 0] == "a + (b * x)"
        assert ret[1, 1] == "-y"

    def test_bad_input1(self):
        with self.assertRaises(InputTypeError):
            prettyprint(42)
        with self.assertRaises(InputTypeError):
            prettyprint(["x", 3])
        with self.assertRaises(TypeError):
            prettyprint(None)

    def test_negative_base1(self):
        '''
        A signed base keeps its parentheses, so (-3)^2 is not read as -(3^2).
        '''
        ret = prettyprint("a^2", {'a': -3})
        print(ret)
        assert ret == "(-3.00) ^ 2"
        assert parse(ret).op == '^'
        ret = prettyprint("a^2", {'a': -3}, simplify=True)
        assert ret == "(-3.00)^2"
        assert parse(ret).op == '^'
        ret = prettyprint("a^2", {'a': "-3"}, simplify=True)
        print(ret)
        assert ret == "(-3)^2"
        assert parse(ret).op == '^'
        ret = prettyprint("a^2", {'a': "-3"})
        assert ret == "(-3) ^ 2"

    def test_numeral_chain1(self):
        scope = {'a': 2, 'b': 3, 'c': 4}
        ret = prettyprint("a*b*c", scope, simplify=True)
        print(ret)
        assert ret == "2.00(3.00)(4.00)"
        assert prettyprint(ret, scope, simplify=True) == ret
        assert prettyprint("a*(b*c)", scope, simplify=True) == "2.00(3.00)(4.00)"
        assert prettyprint("a*b*c*x", scope, simplify=True) == "2.00(3.00)(4.00)x"
