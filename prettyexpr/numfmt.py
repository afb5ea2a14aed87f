"""
Significant-digit formatting of substituted numbers.

The layout mirrors javascript's Number.prototype.toPrecision: fixed notation
unless the decimal exponent is below -6 or at least the precision, in which
case the result looks like 2.13e+6.
"""

import numbers
from decimal import Decimal, Context, ROUND_HALF_UP

import numpy

MAX_PRECISION = 100


def is_number(value):
    """
    True for real numbers (python or numpy), False for bools and everything else.
    """
    if isinstance(value, (bool, numpy.bool_)):
        return False
    return isinstance(value, numbers.Real)


def check_precision(precision):
    """
    Raise ValueError unless `precision` is a usable count of significant digits.
    """
    if isinstance(precision, bool) or not isinstance(precision, numbers.Integral):
        raise ValueError("precision must be an integer, got %r" % (precision,))
    if not 1 <= precision <= MAX_PRECISION:
        raise ValueError("precision must be between 1 and %d, got %d" % (MAX_PRECISION, precision))


def number_to_string(value):
    """
    Shortest text for a number: 2.0 -> '2', 0.5 -> '0.5'.
    """
    if isinstance(value, numbers.Integral):
        return str(int(value))
    value = float(value)
    if not numpy.isfinite(value):
        return repr(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _exact(value):
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    return Decimal(float(value))


def significant_digits(magnitude, precision):
    """
    Round the positive number `magnitude` half away from zero to `precision`
    digits.

    Returns the digit string and the decimal exponent of its first digit,
    e.g. (2132123.21, 3) -> ('213', 6).
    """
    exact = _exact(magnitude)
    exponent = exact.adjusted()
    context = Context(prec=precision + 2)

    def quantize(exp):
        return exact.quantize(Decimal(1).scaleb(exp - precision + 1),
                              rounding=ROUND_HALF_UP, context=context)

    rounded = quantize(exponent)
    if rounded.adjusted() > exponent:
        # 9.99 -> 10.0 moved the leading digit
        exponent += 1
        rounded = quantize(exponent)
    digits = ''.join(str(d) for d in rounded.as_tuple().digits)
    return digits.ljust(precision, '0'), exponent


def trim_trailing_zeros(text):
    """
    '1.200' -> '1.2', '3.000' -> '3'; integers are left alone.
    """
    if '.' not in text:
        return text
    return text.rstrip('0').rstrip('.')


def format_number(value, precision=3, trim_zeros=False):
    """
    Format `value` to `precision` significant digits.

    e.g. format_number(1.2, 6) -> '1.20000'
         format_number(2132123.21321, 3) -> '2.13e+6'
         format_number(1.2, 6, trim_zeros=True) -> '1.2'

    Non-finite values are passed through as their text.
    """
    check_precision(precision)
    if not isinstance(value, numbers.Integral) and not numpy.isfinite(float(value)):
        return number_to_string(value)

    negative = value < 0
    if value == 0:
        digits, exponent = '0' * precision, 0
        negative = False
    else:
        digits, exponent = significant_digits(abs(value), precision)

    if exponent < -6 or exponent >= precision:
        mantissa = digits[0]
        if precision > 1:
            mantissa += '.' + digits[1:]
        if trim_zeros:
            mantissa = trim_trailing_zeros(mantissa)
        text = "{m}e{s}{e}".format(m=mantissa, s='+' if exponent >= 0 else '-', e=abs(exponent))
    else:
        if exponent >= 0:
            text = digits[:exponent + 1]
            if precision > exponent + 1:
                text += '.' + digits[exponent + 1:]
        else:
            text = '0.' + '0' * (-exponent - 1) + digits
        if trim_zeros:
            text = trim_trailing_zeros(text)

    if negative:
        text = '-' + text
    return text


def split_exponent(text):
    """
    Split a numeral into mantissa and exponent text: '2.13e+6' -> ('2.13', '+6').

    The exponent is None when the numeral has none.
    """
    for marker in ('e', 'E'):
        if marker in text:
            mantissa, _, exponent = text.partition(marker)
            return mantissa, exponent
    return text, None
