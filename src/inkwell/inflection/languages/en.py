"""
English inflection rules.
"""

# std
import re

# relative
from ..core import RuleTable


# ---------------------------------------------------------------------------- #
# Ordered from most to least specific. The penultimate `s$` rule leaves words
# already ending in "s" alone before the final catch-all appends one.
PLURAL = {
    r'(quiz)$':                             r'\1zes',
    r'^(oxen)$':                            r'\1',
    r'^(ox)$':                              r'\1en',
    r'^(m|l)ice$':                          r'\1ice',
    r'^(m|l)ouse$':                         r'\1ice',
    r'(matr|vert|ind)(?:ix|ex)$':           r'\1ices',
    r'(x|ch|ss|sh)$':                       r'\1es',
    r'([^aeiouy]|qu)y$':                    r'\1ies',
    r'(hive)$':                             r'\1s',
    r'(?:([^f])fe|([lr])f)$':               r'\1\2ves',
    r'sis$':                                r'ses',
    r'([ti])a$':                            r'\1a',
    r'([ti])um$':                           r'\1a',
    r'(buffal|tomat|potat|volcan|her)o$':   r'\1oes',
    r'(bu)s$':                              r'\1ses',
    r'(alias|status)$':                     r'\1es',
    r'^(ax|test)is$':                       r'\1es',
    r's$':                                  r's',
    re.compile(r'$'):                       r's',
}

SINGULAR = {
    r'(database)s$':                        r'\1',
    r'(quiz)zes$':                          r'\1',
    r'(matr)ices$':                         r'\1ix',
    r'(vert|ind)ices$':                     r'\1ex',
    r'^(ox)en':                             r'\1',
    r'(alias|status)(es)?$':                r'\1',
    r'^(a)x[ie]s$':                         r'\1xis',
    r'(cris|test)(is|es)$':                 r'\1is',
    r'(shoe)s$':                            r'\1',
    r'(o)es$':                              r'\1',
    r'(bus)(es)?$':                         r'\1',
    r'^(m|l)ice$':                          r'\1ouse',
    r'(x|ch|ss|sh)es$':                     r'\1',
    r'(m)ovies$':                           r'\1ovie',
    r'(s)eries$':                           r'\1eries',
    r'([^aeiouy]|qu)ies$':                  r'\1y',
    r'([lr])ves$':                          r'\1f',
    r'(tive)s$':                            r'\1',
    r'(hive)s$':                            r'\1',
    r'([^f])ves$':                          r'\1fe',
    r'(^analy)(sis|ses)$':                  r'\1sis',
    (r'((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)'
     r'(sis|ses)$'):                        r'\1sis',
    r'([ti])a$':                            r'\1um',
    r'(n)ews$':                             r'\1ews',
    r'(ss)$':                               r'\1',
    r's$':                                  r'',
}

IRREGULAR = {
    'leaf':     'leaves',
    'loaf':     'loaves',
    'octopus':  'octopuses',
    'virus':    'viruses',
    'person':   'people',
    'man':      'men',
    'child':    'children',
    'sex':      'sexes',
    'move':     'moves',
    'zombie':   'zombies',
    'goose':    'geese',
    'genus':    'genera',
}

UNCOUNTABLE = {
    'advice', 'aircraft', 'art', 'baggage', 'butter', 'clothing', 'coal',
    'cotton', 'deer', 'equipment', 'experience', 'feedback', 'fish', 'flour',
    'food', 'furniture', 'gas', 'homework', 'impatience', 'information',
    'jeans', 'knowledge', 'leather', 'love', 'luggage', 'management', 'money',
    'moose', 'music', 'news', 'oil', 'patience', 'police', 'polish',
    'progress', 'research', 'rice', 'salmon', 'sand', 'series', 'sheep',
    'silk', 'sms', 'soap', 'spam', 'species', 'staff', 'sugar', 'swine',
    'talent', 'toothpaste', 'traffic', 'travel', 'vinegar', 'weather', 'wood',
    'wool', 'work',
}


# ---------------------------------------------------------------------------- #
TABLE = RuleTable('en', PLURAL, SINGULAR, IRREGULAR, UNCOUNTABLE)
