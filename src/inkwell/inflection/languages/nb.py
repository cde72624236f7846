"""
Norwegian Bokmål inflection rules.
"""

# std
import re

# relative
from ..core import RuleTable


# ---------------------------------------------------------------------------- #
PLURAL = {
    r'e$':              r'er',
    r'r$':              r're',
    re.compile(r'$'):   r'er',
}

SINGULAR = {
    r're$':             r'r',
    r'er$':             r'',
}

IRREGULAR = {
    'konto': 'konti',
}

UNCOUNTABLE = {'barn', 'fjell', 'hus'}


# ---------------------------------------------------------------------------- #
TABLE = RuleTable('nb', PLURAL, SINGULAR, IRREGULAR, UNCOUNTABLE)
