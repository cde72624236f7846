"""
Logging helpers.
"""


# std
import inspect
import functools as ftl
import contextlib as ctx

# third-party
from loguru import logger


# ---------------------------------------------------------------------------- #
@ctx.contextmanager
def disabled(*libraries):
    """
    Temporarily disable logging for `libraries`.
    """

    for lib in libraries:
        logger.disable(lib)

    try:
        yield

    finally:
        # re-enable
        for lib in libraries:
            logger.enable(lib)


@ctx.contextmanager
def enabled(*libraries):
    """
    Temporarily enable logging for `libraries`.
    """

    for lib in libraries:
        logger.enable(lib)

    try:
        yield

    finally:
        for lib in libraries:
            logger.disable(lib)


def configure(config, name='inkwell'):
    """
    Switch logging for the package on or off according to the `logging` section
    of the config.
    """
    if config.get('enable', False):
        logger.enable(name)
    else:
        logger.disable(name)


# ---------------------------------------------------------------------------- #
def get_defining_class(method):
    """
    Get the class that defined a method.

    Parameters
    ----------
    method : types.MethodType or types.FunctionType
        The method for which the defining class will be retrieved.

    Returns
    -------
    type or None
        Class that defined the method.
    """
    # bound methods
    if inspect.ismethod(method):
        for kls in inspect.getmro(method.__self__.__class__):
            if kls.__dict__.get(method.__name__) is method.__func__:
                return kls
        method = method.__func__

    # plain functions defined in a class body
    if inspect.isfunction(method):
        qualname = method.__qualname__.split('.<locals>', 1)[0]
        owner, _, _ = qualname.rpartition('.')
        kls = getattr(inspect.getmodule(method), owner, None)
        if isinstance(kls, type):
            return kls

    return getattr(method, '__objclass__', None)


class LoggingMixin:
    class Logger:

        # use descriptor so we can access the logger via logger and cls().logger
        # Making this attribute a property also avoids pickling errors since
        # the patched logger cannot be pickled

        @staticmethod
        def add_parent(record, parent):
            """Prepend the class name to the function name in the log record."""
            fname = record['function']

            if fname.startswith(('<cell line:', '<module>')):
                # interactive use
                return

            if method := getattr(parent, fname, None):
                parent = get_defining_class(method) or parent

            record['function'] = f'{parent.__name__}.{fname}'

        def __get__(self, obj, kls=None):
            return logger.patch(
                ftl.partial(self.add_parent, parent=(kls or type(obj)))
            )

    logger = Logger()
