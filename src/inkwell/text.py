"""
An immutable, fluent wrapper around a unicode string.
"""


# std
import base64
import unicodedata

# third-party
import regex

# relative
from . import casing, formatting, plurals, transliteration
from .config import CONFIG
from .errors import InvalidArgument


# ---------------------------------------------------------------------------- #
WHITESPACE = ' \t\n\r\0\x0B'
REGEX_WORD = regex.compile(r'[\p{L}\p{M}]+')


# ---------------------------------------------------------------------------- #

def _span(n, start, length=None):
    # Resolve (start, length) to slice indices. Negative `start` counts from the
    # end; negative `length` stops that many characters from the end.
    start = max(n + start, 0) if start < 0 else min(start, n)
    if length is None:
        return start, n

    if length < 0:
        return start, max(n + length, start)

    return start, min(start + length, n)


def width(string):
    """Display width of a string: wide east asian characters count double."""
    return sum((1 + (unicodedata.east_asian_width(char) in 'WF'))
               for char in string)


def _trim_width(string, size):
    # leading characters of `string` that fit into display width `size`
    total = 0
    for i, char in enumerate(string):
        total += 1 + (unicodedata.east_asian_width(char) in 'WF')
        if total > size:
            return string[:i]
    return string


# ---------------------------------------------------------------------------- #
class Text:
    """
    Immutable text value. Every transformation returns a new `Text` with the
    same encoding tag; the original is never modified.

    Examples
    --------
    >>> Text('hellö world').title_case()
    Text('Hellö World')
    >>> Text('person').plural(3)
    Text('people')
    """

    __slots__ = ('_string', '_encoding')

    @classmethod
    def create(cls, string='', encoding=None):
        return cls(string, encoding)

    @classmethod
    def create_from_list(cls, strings, joined_by=' ', encoding=None):
        """
        Trim each of `strings`, join them with `joined_by` and trim the
        result.
        """
        strings = (str(cls(string, encoding).trim()) for string in strings)
        return cls(joined_by.join(strings), encoding).trim()

    @classmethod
    def sprintf(cls, template, *substitutions):
        return cls(formatting.vsprintf(template, substitutions))

    @classmethod
    def vsprintf(cls, template, substitutions, encoding=None):
        return cls(formatting.vsprintf(template, substitutions, encoding),
                   encoding)

    def __init__(self, string='', encoding=None):
        encoding = encoding or CONFIG.encoding

        if isinstance(string, Text):
            string = string._string
        elif isinstance(string, (bytes, bytearray)):
            string = bytes(string).decode(encoding)
        elif not isinstance(string, str):
            raise TypeError(
                f'Invalid object type {type(string).__name__}: {string!r}.'
            )

        object.__setattr__(self, '_string', string)
        object.__setattr__(self, '_encoding', encoding)

    def __setattr__(self, key, value):
        raise AttributeError(f'{type(self).__name__} objects are immutable.')

    def _new(self, string):
        return type(self)(string, self._encoding)

    # ------------------------------------------------------------------------ #
    def __str__(self):
        return self._string

    def __repr__(self):
        return f'{type(self).__name__}({self._string!r})'

    def __format__(self, spec):
        return format(self._string, spec)

    def __bytes__(self):
        return self.encode()

    def __eq__(self, other):
        if isinstance(other, Text):
            return self._string == other._string
        if isinstance(other, str):
            return self._string == other
        return NotImplemented

    def __hash__(self):
        return hash(self._string)

    def __len__(self):
        return len(self._string)

    def __iter__(self):
        return map(self._new, self._string)

    def __contains__(self, search):
        return self.contains(str(search))

    def __add__(self, other):
        return self.append(str(other))

    @property
    def encoding(self):
        return self._encoding

    def with_encoding(self, encoding):
        return type(self)(self._string, encoding)

    def encode(self, errors='strict'):
        return self._string.encode(self._encoding, errors)

    # ------------------------------------------------------------------------ #
    # Slice and manipulate

    def after(self, search):
        """Contents after the first occurrence of `search`."""
        if search == '':
            return self

        _, sep, tail = self._string.partition(search)
        return self._new(tail if sep else self._string)

    def before(self, search):
        """Contents before the first occurrence of `search`."""
        if search == '':
            return self

        return self._new(self._string.partition(search)[0])

    def prepend(self, string, joined_by=''):
        return self._new(f'{string}{joined_by}{self._string}')

    def append(self, string, joined_by=''):
        return self._new(f'{self._string}{joined_by}{string}')

    def start_with(self, prefix):
        """Prefix with a single instance of `prefix`."""
        string = regex.sub(f'^(?:{regex.escape(prefix)})+', '', self._string)
        return self._new(prefix + string)

    def finish_with(self, suffix):
        """Suffix with a single instance of `suffix`."""
        string = regex.sub(f'(?:{regex.escape(suffix)})+$', '', self._string)
        return self._new(string + suffix)

    def limit_characters(self, size, suffix=None):
        """
        Limit the display width to `size`, including the `suffix`.

        >>> Text('hellö world').limit_characters(6)
        Text('hellö…')
        """
        if width(self._string) <= size:
            return self

        suffix = CONFIG.limit.suffix if suffix is None else suffix
        string = _trim_width(self._string, size - len(suffix))
        return self._new(string.rstrip(WHITESPACE) + suffix)

    def limit_words(self, words, suffix=None):
        """
        Limit to the first `words` words, followed by `suffix`.

        >>> Text('hellö world').limit_words(1)
        Text('hellö…')
        """
        match = regex.match(rf'\s*+(?:\S++\s*+){{1,{int(words)}}}',
                            self._string)
        if not match or len(match[0]) == len(self._string):
            return self

        suffix = CONFIG.limit.suffix if suffix is None else suffix
        return self._new(match[0].rstrip(WHITESPACE) + suffix)

    def replace(self, search, replacement, count=-1):
        """Replace occurrences of `search`, at most `count` times if given."""
        return self._new(self._string.replace(search, replacement, count))

    def replace_first(self, search, replacement):
        if search == '' or (start := self._string.find(search)) == -1:
            return self

        return self.replace_sub(replacement, start, len(search))

    def replace_last(self, search, replacement):
        if search == '' or (start := self._string.rfind(search)) == -1:
            return self

        return self.replace_sub(replacement, start, len(search))

    def replace_sub(self, replacement, start, length=None):
        """
        Replace `length` characters from position `start` with `replacement`.
        The rest of the string is replaced if `length` is None.
        """
        i, j = _span(len(self._string), start, length)
        return self._new(self._string[:i] + replacement + self._string[j:])

    def remove(self, search, count=-1):
        return self.replace(search, '', count)

    def remove_first(self, search):
        return self.replace_first(search, '')

    def remove_last(self, search):
        return self.replace_last(search, '')

    def slug(self, separator='-', language=None):
        return self._new(transliteration.slug(self._string, separator, language))

    def chunk(self, size=1):
        """
        Break into pieces of `size` characters.

        Raises
        ------
        InvalidArgument
            If `size` is not positive.
        """
        if size <= 0:
            raise InvalidArgument(
                'The length of each segment must be greater than zero.'
            )

        string = self._string
        return ([self._new(string[i:i + size])
                 for i in range(0, len(string), size)]
                or [self._new('')])

    def split_words(self):
        """Words, made up of letters and combining marks."""
        return [*map(self._new, REGEX_WORD.findall(self._string))]

    def first_word(self):
        return next(iter(self.split_words()), self._new(''))

    def last_word(self):
        words = self.split_words()
        return words[-1] if words else self._new('')

    def slice(self, start, length=None):
        """
        Substring of `length` characters from position `start`. Negative values
        count from the end.
        """
        i, j = _span(len(self._string), start, length)
        return self._new(self._string[i:j])

    def trim(self, chars=WHITESPACE):
        return self._new(self._string.strip(chars))

    def ltrim(self, chars=WHITESPACE):
        return self._new(self._string.lstrip(chars))

    def rtrim(self, chars=WHITESPACE):
        return self._new(self._string.rstrip(chars))

    def base64encode(self):
        return self._new(base64.b64encode(self.encode()).decode('ascii'))

    # ------------------------------------------------------------------------ #
    # Search and query

    def contains(self, search):
        return search != '' and search in self._string

    def starts_with(self, search):
        return search != '' and self._string.startswith(search)

    def ends_with(self, search):
        return search != '' and self._string.endswith(search)

    def matches(self, pattern):
        """
        Whether the whole string matches `pattern`, where "*" matches any
        sequence of characters.

        >>> Text('library/text.py').matches('library/*')
        True
        """
        if pattern == self._string:
            return True

        pattern = regex.escape(pattern).replace(r'\*', '.*')
        return regex.fullmatch(pattern, self._string) is not None

    def length(self):
        return len(self._string)

    # ------------------------------------------------------------------------ #
    # Casing

    def lower_case(self):
        return self._new(self._string.lower())

    def lower_case_first(self):
        return self._new(casing.lower_first(self._string))

    def lower_case_words(self, delimiters=casing.DELIMITERS):
        return self._new(casing.lower_words(self._string, delimiters))

    def upper_case(self):
        return self._new(self._string.upper())

    def upper_case_first(self):
        return self._new(casing.upper_first(self._string))

    def upper_case_words(self, delimiters=casing.DELIMITERS):
        return self._new(casing.upper_words(self._string, delimiters))

    def title_case(self, ignore=()):
        """
        Title case, keeping small words lower case. See `casing.title_case`.
        """
        if isinstance(ignore, str):
            ignore = [ignore]

        ignore = (*CONFIG.casing.small_words, *ignore)
        return self._new(casing.title_case(self._string, ignore))

    def camel_case(self):
        return self._new(casing.camel_case(self._string))

    def studly_case(self):
        return self._new(casing.studly_case(self._string))

    def snake_case(self, delimiter='_'):
        return self._new(casing.snake_case(self._string, delimiter))

    def kebab_case(self):
        return self._new(casing.kebab_case(self._string))

    # ------------------------------------------------------------------------ #
    # Inflection

    def pluralize(self, language=None, registry=None):
        return self._new(plurals.pluralize(self._string, language, registry))

    def singularize(self, language=None, registry=None):
        return self._new(plurals.singularize(self._string, language, registry))

    def plural(self, count=2, language=None, registry=None):
        """Singular form if `count` equals 1, plural form otherwise."""
        return self._new(plurals.plural(self._string, count, language, registry))

    # alias
    singular = singularize

    # ------------------------------------------------------------------------ #
    # Utilities

    def ascii(self, language=None):
        return self._new(transliteration.ascii(self._string, language))


# ---------------------------------------------------------------------------- #
def create(string='', encoding=None):
    """Create a new `Text`."""
    return Text(string, encoding)


# alias
s = create
