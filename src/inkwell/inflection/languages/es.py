"""
Spanish inflection rules.
"""

# std
import re

# relative
from ..core import RuleTable


# ---------------------------------------------------------------------------- #
PLURAL = {
    r'ú([sn])$':            r'u\1es',
    r'ó([sn])$':            r'o\1es',
    r'í([sn])$':            r'i\1es',
    r'é([sn])$':            r'e\1es',
    r'á([sn])$':            r'a\1es',
    r'z$':                  r'ces',
    r'([aeiou]s)$':         r'\1',
    r'([^aeéiou])$':        r'\1es',
    re.compile(r'$'):       r's',
}

# these are matched case-sensitive
SINGULAR = {
    re.compile(r'ereses$'):     r'erés',
    re.compile(r'iones$'):      r'ión',
    re.compile(r'ces$'):        r'z',
    re.compile(r'es$'):         r'',
    re.compile(r's$'):          r'',
}

IRREGULAR = {
    'el':           'los',
    'lunes':        'lunes',
    'rompecabezas': 'rompecabezas',
    'crisis':       'crisis',
    'papá':         'papás',
    'mamá':         'mamás',
    'sofá':         'sofás',
    # 'mes' would otherwise be taken for a plural already
    'mes':          'meses',
}

UNCOUNTABLE = ()


# ---------------------------------------------------------------------------- #
TABLE = RuleTable('es', PLURAL, SINGULAR, IRREGULAR, UNCOUNTABLE)
