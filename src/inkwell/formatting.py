"""
printf-style formatting where widths and precisions count characters rather
than bytes.

Supported directive syntax is::

    %[+][0| |'c][-][width][.precision]type

where `'c` selects any character `c` for padding. Argument swapping is not
supported.
"""

# third-party
import regex

# relative
from .config import CONFIG
from .errors import InvalidArgument


# ---------------------------------------------------------------------------- #
REGEX_DIRECTIVE = regex.compile(
    r"""
    %
    (?P<sign>\+?)
    (?P<filler>'.|[0 ]|)
    (?P<align>-?)
    (?P<width>[1-9][0-9]*|)
    (?P<precision>\.[1-9][0-9]*|)
    (?P<kind>[%a-zA-Z])
    """,
    regex.VERBOSE | regex.DOTALL
)

# conversions delegated to the `%` operator
CONVERSIONS = set('cdeEfFgGiouxX')


# ---------------------------------------------------------------------------- #

def _decode(obj, encoding):
    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj).decode(encoding or CONFIG.encoding)
    return obj


def _pad(text, width, filler, align):
    if not width or len(text) >= (width := int(width)):
        return text

    padding = (filler or ' ') * (width - len(text))
    return f'{text}{padding}' if align == '-' else f'{padding}{text}'


def _string(value, filler, align, width, precision):
    text = str(value)

    # truncate
    if precision and len(text) > (precision := int(precision[1:])):
        text = text[:precision]

    return _pad(text, width, filler.lstrip("'"), align)


def _convert(value, sign, filler, align, width, precision, kind):
    if kind == 'b':
        return _pad(format(int(value), f'{sign}b'), width,
                    filler.lstrip("'"), align)

    if kind not in CONVERSIONS:
        raise InvalidArgument(f'Unknown format specifier: {kind!r}.')

    if kind == 'u':
        kind = 'd'

    if filler.startswith("'"):
        # custom padding character
        text = f'%{sign}{precision}{kind}' % value
        return _pad(text, width, filler[1], align)

    return f'%{sign}{filler}{align}{width}{precision}{kind}' % value


def vsprintf(template, substitutions, encoding=None):
    """
    Format `template` with the sequence of `substitutions`.

    Parameters
    ----------
    template : str or bytes
        The format string.
    substitutions : sequence
        Values consumed by the directives in order.
    encoding : str, optional
        Encoding used to decode `bytes` input, by default the configured
        encoding.

    Examples
    --------
    >>> vsprintf("%'*8s|%-5s|%.2s", ['wörld', 'ö', 'ünïcode'])
    '***wörld|ö    |ün'

    Returns
    -------
    str

    Raises
    ------
    InvalidArgument
        If there are fewer substitutions than directives or a directive is not
        recognized.
    """
    template = _decode(template, encoding)
    values = iter(_decode(val, encoding) for val in substitutions)

    def substitute(match):
        spec = match.groupdict()
        kind = spec['kind']
        if kind == '%':
            return '%'

        try:
            value = next(values)
        except StopIteration:
            raise InvalidArgument(
                f'Too few arguments for format string {template!r}.'
            ) from None

        if kind == 's':
            spec.pop('sign')
            spec.pop('kind')
            return _string(value, **spec)

        return _convert(value, **spec)

    return REGEX_DIRECTIVE.sub(substitute, template)


def sprintf(template, *substitutions):
    """
    Format `template` with `substitutions`.

    >>> sprintf('%5s|%-3d|%05.1f', 'ö', 7, 3.14159)
    '    ö|7  |003.1'
    """
    return vsprintf(template, substitutions)
