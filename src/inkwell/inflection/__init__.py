"""
Rule-based singular / plural inflection for single words.
"""

from .languages import BUILTIN
from .core import Inflector, RuleTable
from .registry import REGISTRY, Registry
