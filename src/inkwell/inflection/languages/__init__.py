"""
Built-in inflection rule catalogs, one module per language.
"""

from . import en, es, fr, nb, pt, tr


# ---------------------------------------------------------------------------- #
BUILTIN = {module.TABLE.language: module.TABLE
           for module in (en, es, fr, nb, pt, tr)}
