"""
Registry mapping language codes to inflection rule tables.
"""


# std
import threading

# relative
from ..errors import UnsupportedLanguage
from ..logging import LoggingMixin
from .core import Inflector, RuleTable
from .languages import BUILTIN


# ---------------------------------------------------------------------------- #
def normalize(language):
    return str(language).strip().lower()


class Registry(LoggingMixin):
    """
    Mapping of two-letter language codes to `RuleTable`s.

    Tables are immutable. Registration and rule augmentation replace the table
    for a language under a lock, so readers always see a complete table.

    Examples
    --------
    >>> registry = Registry.default()
    >>> registry.inflector('Goose', 'en').pluralize()
    'geese'
    >>> registry.add_uncountable_rules('en', ['pokemon'])
    >>> registry.inflector('pokemon').pluralize()
    'pokemon'
    """

    @classmethod
    def default(cls):
        """Create a registry holding the built-in languages."""
        return cls(BUILTIN.values())

    def __init__(self, tables=()):
        self._lock = threading.RLock()
        self._tables = {}
        for table in tables:
            self.register(table)

    def __repr__(self):
        return f'{type(self).__name__}({", ".join(self.languages)})'

    def __contains__(self, language):
        return normalize(language) in self._tables

    def __getitem__(self, language):
        return self.lookup(language)

    def __iter__(self):
        return iter(self.languages)

    def __len__(self):
        return len(self._tables)

    @property
    def languages(self):
        return tuple(sorted(self._tables))

    def lookup(self, language):
        """
        Get the rule table for `language`.

        Raises
        ------
        UnsupportedLanguage
            If no table is registered for the language code.
        """
        language = normalize(language)
        if table := self._tables.get(language):
            return table

        raise UnsupportedLanguage(language)

    def inflector(self, word, language='en'):
        """Create an `Inflector` for `word` with the rules for `language`."""
        return Inflector(word, self.lookup(language))

    def pluralize(self, word, language='en'):
        return self.inflector(word, language).pluralize()

    def singularize(self, word, language='en'):
        return self.inflector(word, language).singularize()

    # ------------------------------------------------------------------------ #
    # Mutation

    def register(self, table, *args, **kws):
        """
        Add or replace the rule table for a language.

        Parameters
        ----------
        table : RuleTable or str
            The table, or a language code from which a new table is built with
            the remaining arguments (see `RuleTable`).
        """
        if isinstance(table, str):
            table = RuleTable(table, *args, **kws)
        elif not isinstance(table, RuleTable):
            raise TypeError(
                f'Invalid object type {type(table).__name__}: {table!r}.'
            )

        with self._lock:
            if table.language in self._tables:
                self.logger.debug('Replacing rules for language {!r}.',
                                  table.language)
            self._tables[table.language] = table

        self.logger.debug('Registered {}.', table)
        return table

    def _extend(self, language, **rules):
        with self._lock:
            table = self.lookup(language).extend(**rules)
            self._tables[table.language] = table

        self.logger.debug('Extended {} rules for {!r}.', ', '.join(rules),
                          table.language)
        return table

    def add_plural_rules(self, language, rules):
        """
        Add pluralization rules for `language`. New rules are checked after the
        existing ones.
        """
        self._extend(language, plural=rules)

    def add_singular_rules(self, language, rules):
        """
        Add singularization rules for `language`. New rules are checked after
        the existing ones.
        """
        self._extend(language, singular=rules)

    def add_irregular_rules(self, language, rules):
        """Add irregular singular -> plural pairs for `language`."""
        self._extend(language, irregular=rules)

    def add_uncountable_rules(self, language, words):
        """Add uncountable words for `language`."""
        self._extend(language, uncountable=words)


# ---------------------------------------------------------------------------- #
# Default process-wide registry
REGISTRY = Registry.default()
