"""
Transliteration to ASCII and url-safe slugs.
"""

# third-party
import regex
from unidecode import unidecode

# relative
from .config import CONFIG


# ---------------------------------------------------------------------------- #
REGEX_NON_PRINTABLE = regex.compile(r'[^\x20-\x7E]')

# Replacements that differ from the generic transliteration for a language.
# These are applied before the generic transliteration.
LANGUAGE_SPECIFIC = {
    'bg': {
        'х': 'h',
        'Х': 'H',
        'щ': 'sht',
        'Щ': 'SHT',
        'ъ': 'a',
        'Ъ': 'A',
        'ь': 'y',
        'Ь': 'Y',
    },
    'de': {
        'ä': 'ae',
        'ö': 'oe',
        'ü': 'ue',
        'Ä': 'AE',
        'Ö': 'OE',
        'Ü': 'UE',
    },
}


# ---------------------------------------------------------------------------- #

def ascii(string, language=None):  # pylint: disable=redefined-builtin
    """
    Transliterate `string` to printable ASCII. Characters without a
    transliteration are removed.

    Parameters
    ----------
    string : str
        Any string.
    language : str, optional
        Two-letter language code selecting language-specific replacements, by
        default the configured language.

    Examples
    --------
    >>> ascii('hellö wörld')
    'hello world'
    >>> ascii('hellö wörld', 'de')
    'helloe woerld'

    Returns
    -------
    str
    """
    language = str(language or CONFIG.language).lower()
    for old, new in LANGUAGE_SPECIFIC.get(language, {}).items():
        string = string.replace(old, new)

    return REGEX_NON_PRINTABLE.sub('', unidecode(string))


def slug(string, separator='-', language=None):
    """
    Transform `string` into a url-safe slug.

    Examples
    --------
    >>> slug('Hellö Wörld!')
    'hello-world'
    >>> slug('me@home', '_')
    'me_at_home'
    """
    string = ascii(string, language)

    # convert all dashes / underscores into separator
    flip = '_' if separator == '-' else '-'
    string = regex.sub(f'[{regex.escape(flip)}]+', separator, string)

    # replace @ with the word 'at'
    string = string.replace('@', f'{separator}at{separator}').lower()

    # remove everything except the separator, letters, numbers and whitespace
    sep = regex.escape(separator)
    string = regex.sub(rf'[^{sep}\p{{L}}\p{{N}}\s]+', '', string)

    # replace separators and whitespace by a single separator
    string = regex.sub(rf'[{sep}\s]+', separator, string)

    return string.strip(separator)
