"""
Turkish inflection rules.

Plural suffixes follow vowel harmony: -ler after the front vowels e, ö, i, ü
and -lar after the back vowels a, o, ı, u.
"""

# std
import re

# relative
from ..core import RuleTable


# ---------------------------------------------------------------------------- #
# Case-insensitive matching would conflate dotted and dotless i, so these
# patterns are compiled case-sensitive.
PLURAL = {
    re.compile(r'([eöiü][^aoıueöiü]{0,6})$'):   r'\1ler',
    re.compile(r'([aoıu][^aoıueöiü]{0,6})$'):   r'\1lar',
}

SINGULAR = {
    r'l[ae]r$':     r'',
}

IRREGULAR = {
    'ben':  'biz',
    'sen':  'siz',
    'o':    'onlar',
}

UNCOUNTABLE = ()


# ---------------------------------------------------------------------------- #
TABLE = RuleTable('tr', PLURAL, SINGULAR, IRREGULAR, UNCOUNTABLE)
