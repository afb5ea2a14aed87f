"""
Options for one render call.
"""

from collections import namedtuple
from types import MappingProxyType

from .numfmt import check_precision

_FIELDS = ('precision', 'simplify', 'tex', 'trim_zeros', 'ranks', 'verbose')


class RenderConfig(namedtuple('RenderConfig', _FIELDS)):
    """
    Immutable render options.

    precision  - significant digits for substituted numbers (default 3)
    simplify   - apply the simplification rewrites (default False)
    tex        - emit TeX instead of plain text (default False)
    trim_zeros - drop trailing zeros from substituted numbers (default False)
    ranks      - mapping of operator -> rank overriding the precedence table
    verbose    - print what the renderer decides; higher is chattier (default 0)
    """
    __slots__ = ()

    # option names used by earlier versions of the javascript prettyprint
    ALIASES = {
        'doSimplify': 'simplify',
        'doTex': 'tex',
        'texMode': 'tex',
        'tex_mode': 'tex',
        'trimZeros': 'trim_zeros',
    }

    def __new__(cls, precision=3, simplify=False, tex=False, trim_zeros=False, ranks=None, verbose=0):
        check_precision(precision)
        if ranks is not None:
            ranks = MappingProxyType(dict(ranks))
        return super(RenderConfig, cls).__new__(cls, precision, bool(simplify), bool(tex),
                                                bool(trim_zeros), ranks, int(verbose or 0))

    @classmethod
    def from_options(cls, options=None, **overrides):
        """
        Build a config from a dict of options, accepting the legacy names.
        """
        fields = {}
        for key, value in list((options or {}).items()) + list(overrides.items()):
            key = cls.ALIASES.get(key, key)
            if key not in _FIELDS:
                raise ValueError("Unknown render option '{}'".format(key))
            fields[key] = value
        return cls(**fields)

    @classmethod
    def coerce(cls, config=None, **overrides):
        """
        Accept a RenderConfig, a mapping of options or None.
        """
        if config is None:
            return cls.from_options(overrides)
        if isinstance(config, RenderConfig):
            if not overrides:
                return config
            return cls.from_options(config._asdict(), **overrides)
        return cls.from_options(config, **overrides)
