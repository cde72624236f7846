"""
Pluralization and singularization of words.
"""


# std
import numbers
from collections import abc

# relative
from .config import CONFIG
from .inflection import REGISTRY


# ---------------------------------------------------------------------------- #

def _resolve(language, registry):
    return (CONFIG.language if language is None else language,
            REGISTRY if registry is None else registry)


def pluralize(word, language=None, registry=None):
    """
    Plural form of `word`.

    Parameters
    ----------
    word : str
        A single word. The result is lower case.
    language : str, optional
        Two-letter language code, by default the configured language ('en').
    registry : inkwell.inflection.Registry, optional
        Registry holding the inflection rules, by default the process-wide one.

    Examples
    --------
    >>> pluralize('quiz')
    'quizzes'

    Raises
    ------
    inkwell.errors.UnsupportedLanguage
        If no rules are registered for `language`.
    """
    language, registry = _resolve(language, registry)
    return registry.inflector(word, language).pluralize()


def singularize(word, language=None, registry=None):
    """
    Singular form of `word`.

    >>> singularize('mice')
    'mouse'
    """
    language, registry = _resolve(language, registry)
    return registry.inflector(word, language).singularize()


def plural(word, count=2, language=None, registry=None):
    """Singular form of `word` if `count` equals 1, plural form otherwise."""
    if count == 1:
        return singularize(word, language, registry)

    return pluralize(word, language, registry)


# aliases
pluralise = pluralize
singularise = singularize


# ---------------------------------------------------------------------------- #
def _count(obj):
    if isinstance(obj, numbers.Number):
        return obj

    if isinstance(obj, abc.Sized):
        return len(obj)

    raise TypeError(f'Invalid object type {type(obj).__name__}: {obj!r}.')


def numbered(items, name, language=None):
    """
    Number of `items` followed by `name` in the form agreeing with the count.

    >>> numbered(['a', 'b'], 'file')
    '2 files'
    """
    n = _count(items)
    return f'{n} {plural(name, n, language)}'


def named_items(items, name, fmt=str, language=None):
    """
    Label a collection of items with `name` in the form agreeing with the
    count.

    >>> named_items(['x.txt', 'y.txt'], 'file')
    'files: x.txt, y.txt'
    """
    if isinstance(items, (str, bytes)) or not isinstance(items, abc.Collection):
        items = [items]

    label = plural(name, len(items), language)
    return f'{label}: {", ".join(map(fmt, items))}'
