"""
Helpers for writing table-driven pytest tests.

Examples
--------
A table of calls and the results they should produce becomes a parametrized
test when wrapped with `Expected`
>>> from inkwell.testing import Expected, mock
>>> test_title_case = Expected(title_case)({
...     'TITLE CASE':                                       'Title Case',
...     mock.title_case('i like to watch DVDs at home',
...                     ['watch']):                         'I Like to watch DVDs at Home'
... })

Bare keys are passed as the only positional argument, tuples are unpacked as
positional arguments, and `mock.<anything>(*args, **kws)` records a call with
keywords.
"""

# std
import difflib
from collections import abc
from inspect import signature

# third-party
import pytest

# relative
from .logging import LoggingMixin


# ---------------------------------------------------------------------------- #
class Call:
    """
    A recorded set of call arguments. Hashed by identity, so calls with
    unhashable arguments can still be used as keys of a test table.
    """

    __slots__ = ('args', 'kws')

    def __init__(self, *args, **kws):
        self.args = args
        self.kws = kws

    def __repr__(self):
        params = (*map(repr, self.args),
                  *(f'{key}={val!r}' for key, val in self.kws.items()))
        return f'({", ".join(params)})'


class _Mock:
    # `mock(...)` and `mock.name(...)` both record a call. The attribute name is
    # only there to make the test table read like the function under test.
    def __getattr__(self, _):
        return Call

    def __call__(self, *args, **kws):
        return Call(*args, **kws)


mock = _Mock()


class Throws:
    """Expect the call to raise `error`."""

    def __init__(self, error=Exception):
        self.error = error

    def __repr__(self):
        return f'Throws({self.error.__name__})'


class ECHO:
    """Expect the call to return its first argument unchanged."""


# ---------------------------------------------------------------------------- #
def _as_call(spec):
    if isinstance(spec, Call):
        return spec

    if isinstance(spec, tuple):
        return Call(*spec)

    return Call(spec)


def _diff(answer, expected):
    lines = difflib.ndiff([repr(answer)], [repr(expected)])
    return '\n'.join(lines)


class Expected(LoggingMixin):
    """
    Build a parametrized test of `func` from a table of calls and expected
    results.

    Parameters
    ----------
    func : callable
        The function under test.
    **defaults
        Keyword arguments passed to every call, unless the call overrides them.

    Examples
    --------
    >>> test_pluralize = Expected(pluralize)({
    ...     mock.pluralize('person'):               'people',
    ...     mock.pluralize('ratón', 'es'):          'ratones',
    ...     mock.pluralize('word', 'xx'):           Throws(UnsupportedLanguage),
    ... })

    The result must be bound to a name starting with 'test_' for pytest to
    collect it.
    """

    def __init__(self, func, **defaults):
        self.func = func
        self.defaults = defaults
        self.signature = signature(func)

    def __call__(self, cases, *args, **kws):
        """
        Parametrize a new test over `cases`, a mapping of calls to expected
        results or a sequence of (call, expected) pairs. Extra arguments are
        passed on to `pytest.mark.parametrize`.
        """
        if isinstance(cases, abc.Mapping):
            cases = cases.items()

        calls, results = [], []
        for spec, expected in cases:
            call = _as_call(spec)
            if expected is ECHO:
                expected = self._first_argument(call)

            calls.append(call)
            results.append(expected)

        test = self._make_test()
        self.logger.debug('Parametrizing {!r} with {} cases.',
                          test.__name__, len(calls))

        kws.setdefault('ids', [repr(call) for call in calls])
        return pytest.mark.parametrize('call, expected',
                                       list(zip(calls, results)),
                                       *args, **kws)(test)

    def _kws(self, call):
        return {**self.defaults, **call.kws}

    def _first_argument(self, call):
        bound = self.signature.bind(*call.args, **self._kws(call))
        bound.apply_defaults()
        return next(iter(bound.arguments.values()))

    def _make_test(self):
        func = self.func

        def test(call, expected):
            if isinstance(expected, Throws):
                with pytest.raises(expected.error):
                    func(*call.args, **self._kws(call))
                return

            answer = func(*call.args, **self._kws(call))
            if answer == expected:
                return

            message = (f'{func.__name__}{call!r} returned an unexpected result.'
                       f'\nRESULT:   {answer!r}'
                       f'\nEXPECTED: {expected!r}')
            if isinstance(answer, str) and isinstance(expected, str):
                message += f'\nDIFF\n{_diff(answer, expected)}'

            raise AssertionError(message)

        test.__name__ = test.__qualname__ = f'test_{func.__name__}'
        return test


class expected:
    """
    Decorator version of `Expected`.

    Examples
    --------
    >>> test_upper = expected({
    ...     'hellö':    'HELLÖ',
    ... })(str.upper)
    """

    def __init__(self, cases, *args, **kws):
        self.cases = cases
        self.args = args
        self.kws = kws

    def __call__(self, func):
        return Expected(func)(self.cases, *self.args, **self.kws)
