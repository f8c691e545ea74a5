"""
Mapping contexts (functor instances).

fmap(fn, fa) dispatches on the type of the context fa. Built-in instances:
- kungfu Result (Ok / Error): maps the Ok value, Error passes through
- kungfu LazyCoroResult: maps the eventual Ok value when awaited
- list, tuple: element-wise
- dict: over values, keys untouched
- anything else exposing .map(fn)

New contexts are registered on map_over:

    @map_over.register(Box)
    def _(fa: Box, fn): return Box(fn(fa.value))
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from functools import partial, singledispatch

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import NotMappableError
from .._types import Fmap

logger = logging.getLogger(__name__)


@singledispatch
def map_over(fa: typing.Any, fn: Callable[[typing.Any], typing.Any]) -> typing.Any:
    """Instance lookup. Falls back to a .map method when no instance is registered."""
    method = getattr(fa, "map", None)
    if callable(method):
        logger.debug("fmap: no instance for %s, using its .map method", type(fa).__qualname__)
        return method(fn)

    logger.debug("fmap: %s is not mappable", type(fa).__qualname__)
    raise NotMappableError(type(fa))


@map_over.register(Ok)
@map_over.register(Error)
def _map_result[T, U, E](fa: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    match fa:
        case Ok(value):
            return Ok(fn(value))
        case Error(_):
            return fa


@map_over.register(LazyCoroResult)
def _map_lazy_coro_result[T, U, E](
    fa: LazyCoroResult[T, E],
    fn: Callable[[T], U],
) -> LazyCoroResult[U, E]:
    async def run() -> Result[U, E]:
        result = await fa()
        return _map_result(result, fn)

    return LazyCoroResult(run)


@map_over.register(list)
def _map_list[T, U](fa: list[T], fn: Callable[[T], U]) -> list[U]:
    return [fn(x) for x in fa]


@map_over.register(tuple)
def _map_tuple[T, U](fa: tuple[T, ...], fn: Callable[[T], U]) -> tuple[U, ...]:
    return tuple(fn(x) for x in fa)


@map_over.register(dict)
def _map_dict[K, T, U](fa: dict[K, T], fn: Callable[[T], U]) -> dict[K, U]:
    return {k: fn(v) for k, v in fa.items()}


def fmap(fn: Callable[[typing.Any], typing.Any], fa: typing.Any) -> typing.Any:
    """
    Map fn over the context fa.

    **When to use:** Default mapping operation of the lifted combinators.
    Pass your own function with the same shape to the *M variants to
    override it per call.

    Example:
        fmap(lambda x: x + 1, Ok(1))      # Ok(2)
        fmap(lambda x: x + 1, Error("e")) # Error("e"), fn never called
        fmap(str, [1, 2])                 # ["1", "2"]

    NOTE: Raises NotMappableError for contexts without an instance or a
          .map method.
    """
    return map_over(fa, fn)


def lift(
    fn: Callable[[typing.Any], typing.Any],
    *,
    fmap: Fmap = fmap,
) -> Callable[[typing.Any], typing.Any]:
    """
    Section fmap(fn, _): turn a plain function into one over contexts.

    Example:
        inc = lift(lambda x: x + 1)
        inc(Ok(1))    # Ok(2)
        inc([1, 2])   # [2, 3]
    """
    return partial(fmap, fn)


__all__ = ("fmap", "lift", "map_over")
