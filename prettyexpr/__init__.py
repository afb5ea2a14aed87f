__version__ = '0.1.0'

from .config import RenderConfig
from .main import prettyprint, InputTypeError
from .render import render
from .texrender import UnsupportedCombination
