"""
French inflection rules.
"""

# std
import re

# relative
from ..core import RuleTable


# ---------------------------------------------------------------------------- #
# French rules are matched case-sensitive
PLURAL = [
    (r'(s|x|z)$',                                                   r'\1'),
    (r'(b|cor|ém|gemm|soupir|trav|vant|vitr)ail$',                  r'\1aux'),
    (r'ail$',                                                       r'ails'),
    (r'al$',                                                        r'aux'),
    (r'(bleu|émeu|landau|lieu|pneu|sarrau)$',                       r'\1s'),
    (r'(bijou|caillou|chou|genou|hibou|joujou|pou|au|eu|eau)$',     r'\1x'),
    (r'$',                                                          r's'),
]

SINGULAR = [
    (r'(b|cor|ém|gemm|soupir|trav|vant|vitr)aux$',                  r'\1ail'),
    (r'ails$',                                                      r'ail'),
    (r'(journ|chev)aux$',                                           r'\1al'),
    (r'(bijou|caillou|chou|genou|hibou|joujou|pou|au|eu|eau)x$',    r'\1'),
    (r's$',                                                         r''),
]

IRREGULAR = {
    'monsieur':     'messieurs',
    'madame':       'mesdames',
    'mademoiselle': 'mesdemoiselles',
}

UNCOUNTABLE = ()


# ---------------------------------------------------------------------------- #
TABLE = RuleTable(
    'fr',
    [(re.compile(pattern), sub) for pattern, sub in PLURAL],
    [(re.compile(pattern), sub) for pattern, sub in SINGULAR],
    IRREGULAR,
    UNCOUNTABLE
)
