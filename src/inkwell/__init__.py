"""
Fluent, immutable text manipulation with title casing and multi-language
pluralization 🖋️.
"""

# std
from importlib.metadata import PackageNotFoundError, version

# third-party
from loguru import logger

# silence logging by default
logger.disable('inkwell')

# relative
from .config import CONFIG
from .logging import configure
from .transliteration import ascii, slug
from .formatting import sprintf, vsprintf
from .casing import title, title_case
from .text import Text, create, s
from .plurals import plural, pluralize, singularize
from .inflection import REGISTRY, Inflector, Registry, RuleTable
from .errors import InkwellError, InvalidArgument, UnsupportedLanguage


# ---------------------------------------------------------------------------- #

# version
try:
    __version__ = version('inkwell')
except PackageNotFoundError:
    __version__ = '0.0.0'


# switch on logging if requested in the user config
configure(CONFIG.logging)
