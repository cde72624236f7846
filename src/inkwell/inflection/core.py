"""
Rule tables and the rule-driven inflector that applies them to single words.
"""


# std
import re
from collections import abc
from functools import cached_property
from dataclasses import dataclass, field
from types import MappingProxyType

# relative
from ..errors import InvalidArgument
from ..logging import LoggingMixin


# ---------------------------------------------------------------------------- #
# Rule helpers

def compile_rule(pattern, flags=re.IGNORECASE):
    """
    Compile `pattern` unless it already is a compiled pattern. Patterns given
    as strings are compiled case-insensitive.
    """
    if isinstance(pattern, re.Pattern):
        return pattern

    if isinstance(pattern, str):
        return re.compile(pattern, flags)

    raise TypeError(
        f'Invalid object type {type(pattern).__name__}: {pattern!r}.'
    )


def rules(items, flags=re.IGNORECASE):
    """
    Resolve an ordered collection of (pattern, replacement) pairs into a tuple
    of (compiled pattern, replacement) pairs.

    Parameters
    ----------
    items : Mapping or Iterable of 2-tuples
        Ordered rules, most specific first.
    flags : int
        Regex flags used for patterns given as strings.

    Returns
    -------
    tuple of (re.Pattern, str)
    """
    if isinstance(items, abc.Mapping):
        items = items.items()

    resolved = []
    for item in items:
        try:
            pattern, replacement = item
        except (TypeError, ValueError):
            raise InvalidArgument(
                f'Rules should be (pattern, replacement) pairs, not {item!r}.'
            ) from None

        resolved.append((compile_rule(pattern, flags), str(replacement)))

    return tuple(resolved)


def words(items):
    if isinstance(items, str):
        items = [items]
    return frozenset(map(str.lower, items))


# ---------------------------------------------------------------------------- #
@dataclass(frozen=True, eq=False)
class RuleTable:
    """
    Inflection rules for a single language.

    Pattern order is significant: the first pattern that matches a word wins.
    Tables are immutable; `extend` builds a new table with additional rules
    appended after the existing ones.
    """

    language: str
    plural: tuple = ()
    singular: tuple = ()
    irregular: abc.Mapping = field(default_factory=dict)
    uncountable: frozenset = frozenset()

    def __post_init__(self):
        # normalize
        set_ = object.__setattr__
        set_(self, 'language', str(self.language).lower())
        set_(self, 'plural', rules(self.plural))
        set_(self, 'singular', rules(self.singular))
        set_(self, 'irregular', MappingProxyType(
            {key.lower(): val.lower() for key, val in dict(self.irregular).items()}
        ))
        set_(self, 'uncountable', words(self.uncountable))

    def __repr__(self):
        return (f'{type(self).__name__}({self.language!r}, '
                f'plural=<{len(self.plural)} rules>, '
                f'singular=<{len(self.singular)} rules>, '
                f'irregular=<{len(self.irregular)} words>, '
                f'uncountable=<{len(self.uncountable)} words>)')

    @cached_property
    def irregular_inverse(self):
        """Irregular plural -> singular mapping."""
        return {plural: singular for singular, plural in self.irregular.items()}

    def extend(self, plural=(), singular=(), irregular=(), uncountable=()):
        """
        Create a new table with the given rules added after the existing ones.
        Existing rules are retained and are checked first.

        Parameters
        ----------
        plural, singular : Mapping or Iterable of 2-tuples
            Additional (pattern, replacement) rules.
        irregular : Mapping or Iterable of 2-tuples
            Additional singular -> plural pairs. Keys already present are
            replaced.
        uncountable : Iterable of str
            Additional uncountable words.

        Returns
        -------
        RuleTable
        """
        return type(self)(
            self.language,
            (*self.plural, *rules(plural)),
            (*self.singular, *rules(singular)),
            {**self.irregular, **dict(irregular)},
            self.uncountable | words(uncountable)
        )


# ---------------------------------------------------------------------------- #
class Inflector(LoggingMixin):
    """
    Pluralize or singularize a single word with the rules of a `RuleTable`.
    """

    def __init__(self, word, table):
        self.word = str(word).lower()
        self.table = table

    def __repr__(self):
        return f'{type(self).__name__}({self.word!r}, {self.table.language!r})'

    @property
    def language(self):
        return self.table.language

    def is_uncountable(self):
        return self.word in self.table.uncountable

    def is_countable(self):
        return not self.is_uncountable()

    def pluralize(self):
        return self.inflect(self.table.plural, self.table.irregular)

    def singularize(self):
        return self.inflect(self.table.singular, self.table.irregular_inverse)

    def inflect(self, rules, irregular):
        """
        Apply the first applicable of: uncountable exemption, irregular
        override, or ordered pattern rules. Return the word unchanged if none
        apply.
        """
        word = self.word

        if self.is_uncountable():
            return word

        if word in irregular:
            return irregular[word]

        for pattern, replacement in rules:
            if pattern.search(word):
                self.logger.opt(lazy=True).debug(
                    '{}', lambda: (f'{self.language}: {word!r} matches '
                                   f'{pattern.pattern!r} -> {replacement!r}')
                )
                return pattern.sub(replacement, word)

        return word
