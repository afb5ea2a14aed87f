import numpy
from prettyexpr.numfmt import format_number, number_to_string, split_exponent, is_number, check_precision

#-----------------------------------------------------------------------------
# unit tests

import unittest

class Test_numfmt(unittest.TestCase):

    def test_fixed1(self):
        assert format_number(1.2, 6) == "1.20000"
        assert format_number(1.2) == "1.20"
        assert format_number(12) == "12.0"
        assert format_number(-212.22) == "-212"
        assert format_number(1.321213) == "1.32"
        assert format_number(0.000123) == "0.000123"

    def test_exponential1(self):
        assert format_number(2132123.21321) == "2.13e+6"
        assert format_number(1e-19) == "1.00e-19"
        assert format_number(1e-7) == "1.00e-7"
        assert format_number(123456) == "1.23e+5"
        assert format_number(-1e21) == "-1.00e+21"

    def test_zero1(self):
        assert format_number(0) == "0.00"
        assert format_number(-0.0) == "0.00"
        assert format_number(0, 1) == "0"

    def test_rounding1(self):
        # half away from zero, on the binary value
        assert format_number(2.5, 1) == "3"
        assert format_number(-2.5, 1) == "-3"
        assert format_number(1.005, 3) == "1.00"
        # rounding up adds a digit in front
        assert format_number(9.999) == "10.0"
        assert format_number(999.9) == "1.00e+3"

    def test_trim_zeros1(self):
        assert format_number(1.2, 6, trim_zeros=True) == "1.2"
        assert format_number(1e-19, 3, trim_zeros=True) == "1e-19"
        assert format_number(12, 3, trim_zeros=True) == "12"
        assert format_number(100, 3, trim_zeros=True) == "100"
        assert format_number(0, 3, trim_zeros=True) == "0"

    def test_nonfinite1(self):
        assert format_number(float('inf')) == "inf"
        assert format_number(float('-inf')) == "-inf"
        assert format_number(float('nan')) == "nan"

    def test_numpy1(self):
        assert format_number(numpy.float64(1.2)) == "1.20"
        assert format_number(numpy.int64(12)) == "12.0"

    def test_precision1(self):
        for bad in (0, -1, 101, 2.5, True, "3"):
            with self.assertRaises(ValueError):
                check_precision(bad)
        with self.assertRaises(ValueError):
            format_number(1.2, 0)
        assert len(format_number(1 / 3.0, 100)) == 102

    def test_is_number1(self):
        assert is_number(3)
        assert is_number(1.5)
        assert is_number(numpy.float32(1.5))
        assert not is_number(True)
        assert not is_number(numpy.bool_(True))
        assert not is_number("3")
        assert not is_number(None)

    def test_number_to_string1(self):
        assert number_to_string(2.0) == "2"
        assert number_to_string(0.5) == "0.5"
        assert number_to_string(7) == "7"

    def test_split_exponent1(self):
        assert split_exponent("2.13e+6") == ("2.13", "+6")
        assert split_exponent("1.00e-19") == ("1.00", "-19")
        assert split_exponent("12.0") == ("12.0", None)
