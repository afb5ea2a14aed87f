"""
Intermediate pieces of a rendering.

`Rendered` is the output of rendering one node, plus the tags the rewrite
passes decide on: what kind of operand it is, its numeric value if it has
one, the rank used for parenthesizing, whether it starts with a sign that
can be folded away, and the leading numeral if it starts with one.

`FragmentAssembly` is a binary operation before concatenation:

    [left, left_sep, op, right_sep, right]

Rewrites blank, wrap or replace slots; joining the slots always gives a
valid rendering of the operation.
"""

from .precedence import POWER_RANK, MULTIPLY_RANK, ADD_RANK

# kinds of rendered operands
NUMBER = 'number'       # substituted scope number or numeric constant
SYMBOL = 'symbol'       # free variable
TEXT = 'text'           # opaque scope text
STRING = 'string'       # string constant
OPERATOR = 'operator'   # ranked operator
CALL = 'call'           # function call shape

LEFT, LEFT_SEP, OP, RIGHT_SEP, RIGHT = range(5)


class Rendered(object):
    """
    Text produced for one node, with its tags.

    Fields:
     -`text` is the rendered string (plain text or TeX, depending on backend).
     -`kind` is one of NUMBER, SYMBOL, TEXT, STRING, OPERATOR, CALL.
     -`rank` is the precedence rank seen by an enclosing operator (None never
      needs parentheses).
     -`value` is the number for NUMBER renderings, otherwise None.
     -`negative` means `text` starts with a '-' that `negated()` can strip.
     -`head` is the unsigned numeral `text` starts with (after any sign), or None.
     -`body_rank` is the rank once the leading sign is stripped.
     -`pair` holds the (lead, tail) renderings of a numeral times numeral product.
     -`binding` is the scope binding a TEXT rendering came from.
    """
    def __init__(self, text, kind, rank=None, value=None, negative=False, head=None,
                 body_rank=None, pair=None, binding=None):
        self.text = text
        self.kind = kind
        self.rank = rank
        self.value = value
        self.negative = negative
        self.head = head
        self.body_rank = rank if body_rank is None and not negative else body_rank
        self.pair = pair
        self.binding = binding

    @property
    def numeric(self):
        return self.value is not None

    def replace(self, **changes):
        fields = dict(self.__dict__)
        fields.update(changes)
        return Rendered(**fields)

    def negated(self):
        """
        Flip the sign of the rendering.

        A negative rendering loses its leading '-'. A positive one gains a
        '-' prefix, which is only safe for atoms such as numerals.
        """
        value = None if self.value is None else -self.value
        if self.negative:
            return self.replace(text=self.text[1:], value=value, negative=False,
                                rank=self.body_rank, body_rank=self.body_rank)
        return self.replace(text='-' + self.text, value=value, negative=True,
                            rank=ADD_RANK, body_rank=self.rank)

    def __eq__(self, other):
        return isinstance(other, Rendered) and self.__dict__ == other.__dict__

    def __ne__(self, other):
        return not self == other

    def __repr__(self):  # pragma: no cover
        return "<%s %r rank=%s%s>" % (self.kind, self.text, self.rank,
                                      ' negative' if self.negative else '')


def as_rendered(operand):
    """
    Accept a bare string where a Rendered is expected.
    """
    if isinstance(operand, Rendered):
        return operand
    return Rendered(operand, TEXT)


class FragmentAssembly(object):
    """
    The five slots of a binary operation, and the operands they came from.

    `op` is the operator symbol the rewrites reason about; `glyph` is what
    goes in the OP slot when it is spelled differently (TeX).
    """
    def __init__(self, lhs, op, rhs, left_sep=' ', right_sep=' ', glyph=None):
        self.op = op
        self.lhs = as_rendered(lhs)
        self.rhs = as_rendered(rhs)
        self.slots = [self.lhs.text, left_sep, op if glyph is None else glyph, right_sep, self.rhs.text]
        self.wrapped = set()

    def __getitem__(self, slot):
        return self.slots[slot]

    def __setitem__(self, slot, text):
        self.slots[slot] = text

    def __len__(self):
        return len(self.slots)

    def blank(self, *slots):
        for slot in slots:
            self.slots[slot] = ''

    def wrap(self, slot, left='(', right=')'):
        self.slots[slot] = left + self.slots[slot] + right
        self.wrapped.add(slot)

    def swap(self):
        """
        Exchange the operands (and their slots).
        """
        self.lhs, self.rhs = self.rhs, self.lhs
        self.slots[LEFT], self.slots[RIGHT] = self.slots[RIGHT], self.slots[LEFT]

    def replace_operand(self, slot, rendered):
        """
        Put a new rendering in the LEFT or RIGHT slot.
        """
        if slot == LEFT:
            self.lhs = rendered
        elif slot == RIGHT:
            self.rhs = rendered
        else:
            raise Exception("Unknown operand slot %r: coder error" % slot)
        self.slots[slot] = rendered.text
        self.wrapped.discard(slot)

    def set_op(self, op, glyph=None):
        self.op = op
        self.slots[OP] = op if glyph is None else glyph

    def join(self):
        return ''.join(self.slots)

    def finish(self, rank, kind=OPERATOR, **tags):
        """
        Join into a Rendered; sign and leading numeral carry over from an
        unwrapped left operand.
        """
        left_intact = LEFT not in self.wrapped and self.slots[LEFT] == self.lhs.text
        if left_intact and self.slots[LEFT]:
            tags.setdefault('head', self.lhs.head)
            # a sum starting with '-' is not negative as a whole
            negative = self.lhs.negative and rank is not None and rank < ADD_RANK
            tags.setdefault('negative', negative)
        if tags.get('negative'):
            tags.setdefault('body_rank', rank)
        return Rendered(self.join(), kind, rank=rank, **tags)

    def __repr__(self):  # pragma: no cover
        return "FragmentAssembly(%r)" % (self.slots,)


def assemble_binary(lhs, op, rhs, rank=None, spaced=False):
    """
    Start the assembly for `lhs op rhs`.

    Power and multiply ranks get no spaces around the operator unless
    `spaced` is set.
    """
    if spaced or rank not in (POWER_RANK, MULTIPLY_RANK):
        sep = ' '
    else:
        sep = ''
    return FragmentAssembly(lhs, op, rhs, sep, sep)


def join(assembly):
    return assembly.join()
