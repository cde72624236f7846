"""
Special casing for strings.
"""

# std
import functools as ftl

# third-party
import regex


# ---------------------------------------------------------------------------- #
REGEX_SPACE = regex.compile(r'\s+')
REGEX_LOWER = regex.compile(r'[[:lower:]]')
REGEX_CAPS = regex.compile(r'(.)(?=[A-Z])')

DELIMITERS = (' ', '\t', '\r', '\n', '\f', '\v')

# Words kept lower case in titles, except at the boundaries of the title or of a
# sub-phrase. The lookarounds keep "Q&A" and "AT&T" intact.
SMALL_WORDS = (
    '(?<!q&)a',
    'an',
    'and',
    'as',
    'at(?!&t)',
    'but',
    'by',
    'en',
    'for',
    'if',
    'in',
    'of',
    'on',
    'or',
    'the',
    'to',
    'v[.]?',
    'via',
    'vs[.]?',
    'with',
)

# optional possessive / contraction suffix
APOSTROPHE = r"(?: ['’] [[:lower:]]* )?"


# ---------------------------------------------------------------------------- #
# Simple casing

def upper_first(string):
    return string[:1].upper() + string[1:]


def lower_first(string):
    return string[:1].lower() + string[1:]


def _case_words(string, convert, delimiters):
    # convert the first character, and the character following each delimiter
    chars = []
    flag = True
    for char in string:
        if flag:
            char = convert(char)
            flag = False
        elif char in delimiters:
            flag = True

        chars.append(char)

    return ''.join(chars)


def upper_words(string, delimiters=DELIMITERS):
    """
    Upper case the first character of each word. Words are separated by any of
    the characters in `delimiters`.

    Examples
    --------
    >>> upper_words('hellö world')
    'Hellö World'
    """
    return _case_words(string, str.upper, delimiters)


def lower_words(string, delimiters=DELIMITERS):
    """
    Lower case the first character of each word.

    Examples
    --------
    >>> lower_words('HELLÖ WORLD')
    'hELLÖ wORLD'
    """
    return _case_words(string, str.lower, delimiters)


def studly_case(string):
    """
    >>> studly_case('hellö world')
    'HellöWorld'
    """
    return upper_words(string.replace('-', ' ').replace('_', ' ')).replace(' ', '')


# alias
pascal_case = studly_case


def camel_case(string):
    """
    >>> camel_case('hellö world')
    'hellöWorld'
    """
    return lower_first(studly_case(string))


def snake_case(string, delimiter='_'):
    """
    >>> snake_case('hellö world')
    'hellö_world'
    """
    string = REGEX_SPACE.sub('', upper_words(string))
    return REGEX_CAPS.sub(rf'\1{delimiter}', string).lower()


def kebab_case(string):
    """
    >>> kebab_case('hellö world')
    'hellö-world'
    """
    return snake_case(string, '-')


# ---------------------------------------------------------------------------- #
# Title case

@ftl.lru_cache()
def _title_patterns(ignore=()):
    """Compile the title case patterns for the given extra small words."""

    small = '|'.join((*SMALL_WORDS, *map(regex.escape, ignore)))
    flags = regex.VERBOSE | regex.IGNORECASE

    # The main substitutions
    main = regex.compile(
        r"""
        \b (_*) (?:                                             # leading underscore
            ( (?<=[ ][/\\]) [[:alpha:]]+ [-_[:alpha:]/\\]+      # file path or
            | [-_[:alpha:]]+ [@.:] [-_[:alpha:]@.:/]+ """ + APOSTROPHE + r""" )
                                                                # URL, domain, email
            |
            ( (?i: """ + small + r""" ) """ + APOSTROPHE + r""" )
                                                                # small word
            |
            ( [[:alpha:]] [[:lower:]'’()\[\]{}]* """ + APOSTROPHE + r""" )
                                                                # word w/o internal caps
            |
            ( [[:alpha:]] [[:alpha:]'’()\[\]{}]* """ + APOSTROPHE + r""" )
                                                                # some other word
        ) (_*) \b                                               # trailing underscore
        """,
        regex.VERBOSE
    )

    # small words at the start of the title or of a sub-phrase
    start = regex.compile(
        r"""
        (   \A [[:punct:]]*                 # start of title...
        |   [:.;?!][ ]+                     # or of sub-sentence...
        |   [ ]['"“‘(\[][ ]*                # or of inserted sub-phrase...
        )
        ( """ + small + r""" ) \b           # ...followed by small word
        """,
        flags
    )

    # small words at the end of the title or of a sub-phrase
    end = regex.compile(
        r"""
        \b ( """ + small + r""" )           # small word...
        (?= [[:punct:]]* \Z                 # ...at the end of the title...
        |   ['"’”)\]] [ ] )                 # ...or of an inserted sub-phrase
        """,
        flags
    )

    # small words leading a hyphenated compound: "in-flight" -> "In-Flight", but
    # leave "man-in-the-middle" alone
    hyphen_head = regex.compile(
        r"""
        \b (?<! -)
        ( """ + small + r""" )
        (?= -[[:alpha:]]+ )                 # followed by "-word"
        """,
        flags
    )

    # small words trailing a hyphenated compound: "Stand-in" -> "Stand-In"
    hyphen_tail = regex.compile(
        r"""
        \b (?<!…)
        ( [[:alpha:]]+- )                   # first word (already capped) and hyphen
        ( """ + small + r""" )              # ...followed by small word
        (?! - )                             # not followed by another hyphen
        """,
        flags
    )

    return main, start, end, hyphen_head, hyphen_tail


def _sub_main(match):
    lead, preserved, small, plain, other, trail = match.groups(default='')

    if preserved:
        # URLs, domains, emails and file paths
        word = preserved
    elif small:
        word = small.lower()
    elif plain:
        # no internal caps
        word = upper_first(plain)
    else:
        # other kinds of words (eg. iPhone)
        word = other

    return f'{lead}{word}{trail}'


def _sub_prefixed(match):
    return match[1] + upper_first(match[2])


def _sub_first(match):
    return upper_first(match[1])


def title_case(string, ignore=()):
    """
    Title case a string.

    Small words (articles, short prepositions and conjunctions) are kept lower
    case, except at the start or end of the title or of a sub-phrase, and in
    hyphenated compounds. URLs, email addresses, domains and file paths are left
    untouched, as are words with internal capitals ("iPhone", "DVDs").

    Parameters
    ----------
    string : str
        String to convert to title case.
    ignore : str or tuple of str
        Additional words that will be treated as small words.

    Examples
    --------
    >>> title_case('testing the method')
    'Testing the Method'
    >>> title_case('i like to watch DVDs at home', ['watch'])
    'I Like to watch DVDs at Home'

    Returns
    -------
    str
    """
    if isinstance(ignore, str):
        ignore = [ignore]

    main, start, end, hyphen_head, hyphen_tail = \
        _title_patterns(tuple(filter(None, map(str.strip, ignore))))

    string = str(string).strip()

    # all caps input
    if not REGEX_LOWER.search(string):
        string = string.lower()

    string = main.sub(_sub_main, string)
    string = start.sub(_sub_prefixed, string)
    string = end.sub(_sub_first, string)
    string = hyphen_head.sub(_sub_first, string)
    return hyphen_tail.sub(_sub_prefixed, string)


# alias
title = title_case
