"""
Portuguese inflection rules.
"""

# std
import re

# relative
from ..core import RuleTable


# ---------------------------------------------------------------------------- #
PLURAL = {
    r'^(alem|c|p)ao$':                                  r'\1aes',
    r'^(irm|m)ao$':                                     r'\1aos',
    r'ao$':                                             r'oes',
    r'^(alem|c|p)ão$':                                  r'\1ães',
    r'^(irm|m)ão$':                                     r'\1ãos',
    r'ão$':                                             r'ões',
    r'^(|g)ás$':                                        r'\1ases',
    r'^(japon|escoc|ingl|dinamarqu|fregu|portugu)ês$':  r'\1eses',
    r'm$':                                              r'ns',
    r'([^aeou])il$':                                    r'\1is',
    r'ul$':                                             r'uis',
    r'ol$':                                             r'ois',
    r'el$':                                             r'eis',
    r'al$':                                             r'ais',
    r'(z|r)$':                                          r'\1es',
    r'(s)$':                                            r'\1',
    re.compile(r'$'):                                   r's',
}

SINGULAR = {
    r'^(g|)ases$':                                      r'\1ás',
    r'(japon|escoc|ingl|dinamarqu|fregu|portugu)eses$': r'\1ês',
    re.compile(r'(ae|ao|oe)s$'):                        r'ao',
    re.compile(r'(ãe|ão|õe)s$'):                        r'ão',
    r'^(.*[^s]s)es$':                                   r'\1',
    r'sses$':                                           r'sse',
    r'ns$':                                             r'm',
    r'(r|t|f|v)is$':                                    r'\1il',
    r'uis$':                                            r'ul',
    r'ois$':                                            r'ol',
    r'eis$':                                            r'ei',
    r'éis$':                                            r'el',
    r'([^p])ais$':                                      r'\1al',
    r'(r|z)es$':                                        r'\1',
    r'^(á|gá)s$':                                       r'\1s',
    r'([^ê])s$':                                        r'\1',
}

IRREGULAR = {
    'abdomen':      'abdomens',
    'alemão':       'alemães',
    'artesã':       'artesãos',
    'álcool':       'álcoois',
    'árvore':       'árvores',
    'bencão':       'bencãos',
    'cão':          'cães',
    'campus':       'campi',
    'cadáver':      'cadáveres',
    'capelão':      'capelães',
    'capitão':      'capitães',
    'chão':         'chãos',
    'charlatão':    'charlatães',
    'cidadão':      'cidadãos',
    'consul':       'consules',
    'cristão':      'cristãos',
    'difícil':      'difíceis',
    'email':        'emails',
    'escrivão':     'escrivães',
    'fóssil':       'fósseis',
    'gás':          'gases',
    'germens':      'germen',
    'grão':         'grãos',
    'hífen':        'hífens',
    'irmão':        'irmãos',
    'liquens':      'liquen',
    'mal':          'males',
    'mão':          'mãos',
    'orfão':        'orfãos',
    'país':         'países',
    'pai':          'pais',
    'pão':          'pães',
    'projétil':     'projéteis',
    'réptil':       'répteis',
    'sacristão':    'sacristães',
    'sotão':        'sotãos',
    'tabelião':     'tabeliães',
}

UNCOUNTABLE = {'tórax', 'tênis', 'ônibus', 'lápis', 'fênix'}


# ---------------------------------------------------------------------------- #
TABLE = RuleTable('pt', PLURAL, SINGULAR, IRREGULAR, UNCOUNTABLE)
