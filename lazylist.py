"""
Lazy, immutable, replayable list with functional combinators.

A LazyList keeps a re-iterable source, a tuple of pending operations and the
exact number of elements those operations produce. Nothing runs until you
iterate, and every iteration replays the pipeline from the source, so any
number of independent consumers can walk the same list.

Derived lists are views: they share the parent's source and extend its
operation tuple. The free functions below accept a LazyList or a plain
list/tuple/range wherever they take a list.
"""

import builtins
import functools
import itertools
import logging
import operator
from typing import Callable, Iterable, Iterator, Tuple

import models
from utils import EmptyListError, IndexOutOfRangeError, TypeMismatchError

logger = logging.getLogger(__name__)

# Plain containers read as lists; str and bytes stay scalars
_LIST_LIKE = (list, tuple, range)

_CHAIN = (("chain", None),)


class LazyList:
    """
    An immutable ordered sequence whose elements are produced on demand.
    Transformations are stored as operations and applied only when you
    iterate. The length is always known without iterating.
    """
    def __init__(self, iterable: Iterable = ()):
        # tuples and ranges are immutable and re-iterable; anything else is snapshotted
        self._source = iterable if isinstance(iterable, (tuple, range)) else tuple(iterable)
        self._ops = ()
        self._length = len(self._source)

    @classmethod
    def empty(cls) -> "LazyList":
        return cls()

    @classmethod
    def _view(cls, source, ops, length) -> "LazyList":
        view = cls.__new__(cls)
        view._source = source
        view._ops = ops
        view._length = length
        return view

    def _derive(self, op, length) -> "LazyList":
        ops = self._ops
        if ops and ops[-1][0] == op[0]:
            # fold repeated skips/takes into one so head/tail walks stay flat
            kind, previous = ops[-1]
            if kind == "skip":
                return self._view(self._source, ops[:-1] + (("skip", previous + op[1]),), length)
            if kind == "take":
                return self._view(self._source, ops[:-1] + (("take", builtins.min(previous, op[1])),), length)
        return self._view(self._source, ops + (op,), length)

    # --------- iterator protocol ----------
    def __iter__(self) -> Iterator:
        # Build the pipeline from a fresh pass over the source
        it = iter(self._source)
        for op, arg in self._ops:
            if op == "map":
                it = builtins.map(arg, it)
            elif op == "skip":
                it = itertools.islice(it, arg, None)
            elif op == "take":
                it = itertools.islice(it, arg)
            elif op == "chain":
                it = itertools.chain.from_iterable(it)
            elif op == "zip":
                # the source is a pair of lists; zip them element-wise
                it = builtins.map(arg, *it)
            else:
                raise ValueError(f"Unknown op: {op}")
        return builtins.map(_normalize, it)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def __getitem__(self, index):
        if isinstance(index, slice):
            if index.step not in (None, 1):
                raise ValueError("slice steps are not supported")
            start = 0 if index.start is None else index.start
            if start < 0 or (index.stop is not None and index.stop < 0):
                raise ValueError("negative slice bounds are not supported")
            rest = drop(start, self)
            if index.stop is None:
                return rest
            return take(builtins.max(index.stop - start, 0), rest)
        return get(index, self)

    # --------- comparison ----------
    def __eq__(self, other):
        if not _is_list(other):
            return NotImplemented
        try:
            return equals(self, other)
        except TypeMismatchError:
            return False

    def __hash__(self):
        # only hash what equals() looks at; custom-equals elements collapse to a marker
        return hash((self._length,) + tuple(builtins.map(_hash_key, self)))

    # --------- concatenation ----------
    def __add__(self, other):
        if not _is_list(other):
            return NotImplemented
        return concat(self, other)

    def __radd__(self, other):
        if not _is_list(other):
            return NotImplemented
        return concat(other, self)

    def __repr__(self):
        limit = models.get_settings().repr_limit
        items = [repr(x) for x in itertools.islice(self, limit)]
        if self._length > limit:
            items.append("...")
        return f"LazyList([{', '.join(items)}])"


def _is_list(value) -> bool:
    return isinstance(value, (LazyList,) + _LIST_LIKE)


def _normalize(value):
    """Wrap plain nested containers so readers always see a LazyList"""
    if isinstance(value, _LIST_LIKE):
        return LazyList(value)
    return value


def _has_custom_equals(value) -> bool:
    return callable(getattr(value, "equals", None)) and not isinstance(value, (type, LazyList))


def _hash_key(value):
    if _has_custom_equals(value):
        return type(None)
    return value


def _coerce(xs, operation: str = "list operation") -> LazyList:
    if isinstance(xs, LazyList):
        return xs
    if isinstance(xs, _LIST_LIKE):
        return LazyList(xs)
    raise TypeMismatchError(f"{operation} expects a list, got {type(xs).__name__}")


def _check_count(n, operation: str) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"{operation} count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{operation} count must be >= 0, got {n}")


def _parts(xs: LazyList) -> Tuple[LazyList, ...]:
    # Splice existing concatenations so chains of cons/concat stay one level deep
    if xs._ops == _CHAIN:
        return xs._source
    return (xs,) if xs else ()


# --------- construction ----------

def empty() -> LazyList:
    """The empty list; identity element of concat."""
    return LazyList.empty()


def from_values(*values) -> LazyList:
    return LazyList(values)


def from_array(sequence: Iterable) -> LazyList:
    """Snapshot an iterable into a replayable list. A LazyList is returned as is."""
    if isinstance(sequence, LazyList):
        return sequence
    return LazyList(sequence)


def l(*args) -> LazyList:
    """
    Convenience constructor: l([1, 2, 3]) and l(1, 2, 3) build the same list,
    l() builds the empty list.
    """
    if len(args) == 1 and _is_list(args[0]):
        return from_array(args[0])
    return from_values(*args)


def to_list(xs) -> list:
    return list(_coerce(xs, "to_list"))


# --------- structural accessors ----------

def is_empty(xs) -> bool:
    return len(_coerce(xs, "is_empty")) == 0


def head(xs):
    """Return the first element, raising EmptyListError for an empty list"""
    xs = _coerce(xs, "head")
    if not xs:
        raise EmptyListError("head of an empty list")
    return next(iter(xs))


def tail(xs) -> LazyList:
    """Return a view of everything after the first element"""
    xs = _coerce(xs, "tail")
    if not xs:
        raise EmptyListError("tail of an empty list")
    return drop(1, xs)


def get(index: int, xs):
    """Return the element at a 0-based index, scanning no further than it"""
    xs = _coerce(xs, "get")
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"get index must be an int, got {type(index).__name__}")
    if index < 0 or index >= len(xs):
        raise IndexOutOfRangeError(f"index {index} out of range for list of length {len(xs)}")
    return next(itertools.islice(iter(xs), index, None))


def last(xs):
    xs = _coerce(xs, "last")
    if not xs:
        raise EmptyListError("last of an empty list")
    return get(len(xs) - 1, xs)


# --------- transformations ----------

def map(fn: Callable, xs) -> LazyList:
    """Lazily apply fn to every element; the length is unchanged"""
    xs = _coerce(xs, "map")
    return xs._derive(("map", fn), len(xs))


def filter(predicate: Callable, xs) -> LazyList:
    """
    Keep the elements satisfying predicate.

    Unlike the other transformations this runs eagerly: the kept elements are
    materialized at call time so the result's length is exact from the start.
    """
    xs = _coerce(xs, "filter")
    kept = LazyList(x for x in xs if predicate(x))
    logger.debug(f"filter materialized {len(kept)} of {len(xs)} elements")
    return kept


def take(n: int, xs) -> LazyList:
    xs = _coerce(xs, "take")
    _check_count(n, "take")
    if n >= len(xs):
        return xs
    return xs._derive(("take", n), n)


def drop(n: int, xs) -> LazyList:
    xs = _coerce(xs, "drop")
    _check_count(n, "drop")
    if n == 0:
        return xs
    if n >= len(xs):
        return empty()
    return xs._derive(("skip", n), len(xs) - n)


def concat(xs, ys) -> LazyList:
    """A view that replays xs fully, then ys fully"""
    xs, ys = _coerce(xs, "concat"), _coerce(ys, "concat")
    if not xs:
        return ys
    if not ys:
        return xs
    return LazyList._view(_parts(xs) + _parts(ys), _CHAIN, len(xs) + len(ys))


def cons(element, xs) -> LazyList:
    return concat(from_values(element), xs)


def take_while(predicate: Callable, xs) -> LazyList:
    """Leading elements satisfying predicate; stops testing at the first failure"""
    xs = _coerce(xs, "take_while")
    count = 0
    for x in xs:
        if not predicate(x):
            break
        count += 1
    return take(count, xs)


def drop_while(predicate: Callable, xs) -> LazyList:
    xs = _coerce(xs, "drop_while")
    count = 0
    for x in xs:
        if not predicate(x):
            break
        count += 1
    return drop(count, xs)


def reverse(xs) -> LazyList:
    """Reverse eagerly; a forward-only pipeline cannot be replayed backwards"""
    xs = _coerce(xs, "reverse")
    reversed_list = LazyList(reversed(to_list(xs)))
    logger.debug(f"reverse materialized {len(reversed_list)} elements")
    return reversed_list


def split_at(n: int, xs) -> Tuple[LazyList, LazyList]:
    xs = _coerce(xs, "split_at")
    _check_count(n, "split_at")
    if not xs:
        return xs, xs
    return take(n, xs), drop(n, xs)


def flatten(xss) -> LazyList:
    """
    Concatenate a list of lists one level deep.

    The outer list is walked once to learn each inner length; inner lists are
    only replayed when the result is iterated.
    """
    xss = _coerce(xss, "flatten")
    parts = []
    for inner in xss:
        if not isinstance(inner, LazyList):
            raise TypeMismatchError(f"flatten expects a list of lists, found {type(inner).__name__}")
        parts.append(inner)

    if not parts:
        return empty()
    if len(parts) == 1:
        return parts[0]

    spliced = tuple(p for part in parts for p in _parts(part))
    length = builtins.sum(len(p) for p in spliced)
    logger.debug(f"flatten joined {len(parts)} lists into {length} elements")
    if not spliced:
        return empty()
    return LazyList._view(spliced, _CHAIN, length)


def chain(xs, fn: Callable) -> LazyList:
    """Map fn over xs (each result list-shaped) and flatten one level"""
    return flatten(map(fn, xs))


def zip_with(fn: Callable, xs, ys) -> LazyList:
    """Combine elements pairwise with fn(x, y), stopping at the shorter list"""
    xs, ys = _coerce(xs, "zip_with"), _coerce(ys, "zip_with")
    return LazyList._view((xs, ys), (("zip", fn),), builtins.min(len(xs), len(ys)))


def flip(fn: Callable) -> Callable:
    """Swap the two arguments of fn"""
    @functools.wraps(fn)
    def flipped(x, y):
        return fn(y, x)
    return flipped


# --------- reductions ----------

def foldl(fn: Callable, initial, xs):
    """Left fold: fn(...fn(fn(initial, x0), x1)..., xn)"""
    return functools.reduce(fn, _coerce(xs, "foldl"), initial)


def foldr(fn: Callable, initial, xs):
    """
    Right fold: fn(x0, fn(x1, ... fn(xn, initial))).

    Evaluated from the end of a materialized copy, so long lists do not
    grow the call stack.
    """
    acc = initial
    for x in reversed(to_list(xs)):
        acc = fn(x, acc)
    return acc


def sum(xs):
    return foldl(operator.add, 0, xs)


def product(xs):
    return foldl(operator.mul, 1, xs)


def and_(xs) -> bool:
    """False as soon as an element is the boolean False; True otherwise"""
    for x in _coerce(xs, "and_"):
        if x is False:
            return False
    return True


def or_(xs) -> bool:
    """True as soon as an element is the boolean True; False otherwise"""
    for x in _coerce(xs, "or_"):
        if x is True:
            return True
    return False


def all(predicate: Callable, xs) -> bool:
    for x in _coerce(xs, "all"):
        if predicate(x) is False:
            return False
    return True


def any(predicate: Callable, xs) -> bool:
    for x in _coerce(xs, "any"):
        if predicate(x) is True:
            return True
    return False


def min(a, b):
    return a if a <= b else b


def max(a, b):
    return a if a >= b else b


def minimum(xs):
    xs = _coerce(xs, "minimum")
    if not xs:
        raise EmptyListError("minimum of an empty list")
    return functools.reduce(min, xs)


def maximum(xs):
    xs = _coerce(xs, "maximum")
    if not xs:
        raise EmptyListError("maximum of an empty list")
    return functools.reduce(max, xs)


# --------- equality ----------

def equals(a, b) -> bool:
    """
    Structural equality.

    Two lists are equal when their lengths match and their elements are
    pairwise equal, recursing into nested lists. Comparing a list with a
    non-list raises TypeMismatchError. Other values use their own ``equals``
    method when they have one, and ``==`` otherwise, except that a bool
    never equals a non-bool.
    """
    a_is_list, b_is_list = _is_list(a), _is_list(b)
    if a_is_list != b_is_list:
        raise TypeMismatchError(
            f"cannot compare {type(a).__name__} with {type(b).__name__}: exactly one is a list"
        )

    if a_is_list:
        a, b = _coerce(a), _coerce(b)
        if len(a) != len(b):
            return False
        return builtins.all(equals(x, y) for x, y in zip(a, b))

    if _has_custom_equals(a):
        return bool(a.equals(b))
    # booleans are not numbers here: True never equals 1
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b
