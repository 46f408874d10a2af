from __future__ import annotations

from abc import ABCMeta
from typing import Any, Callable, Never, Self
from functools import lru_cache, partial

__all__ = [
    "ClassPropMeta",
    "classProp",
    "cachedClassProp",
    "cachedGetter",
    "noInstance",
    "NewHelperMixin",
]

_DUMMY = object()

type FGet[T, P] = Callable[[T], P]
type FSet[T, P] = Callable[[T, P], None]
type FDel[T] = Callable[[T], None]


class ClassPropMeta(ABCMeta):
    def __setattr__(cls, name: str, value: Any):
        if isinstance(desc := vars(cls).get(name), classProp):
            desc.__set__(cls, value)
        else:
            super().__setattr__(name, value)

    def __delattr__(cls, name: str):
        if isinstance(desc := vars(cls).get(name), classProp):
            desc.__delete__(cls)
        else:
            super().__delattr__(name)


class classProp[T, P](property):
    """
    A class-level property that can be overridden by subclasses. Class properties can be
    accessed from both the class and its instances.

    Chaining `@property` and `@classmethod` used to achieve the same thing, but it has been
    [deprecated since Python 3.11 and removed in 3.13](https://docs.python.org/3.13/library/functions.html#classmethod).

    For a class to have class properties, its metaclass must be set to `ClassPropMeta` (or its
    subtype) so that illegal modifications to class properties can be detected.
    """

    def __init__(
        self,
        fget: FGet[T, P] | None = None,
        fset: FSet[T, P] | None = None,
        fdel: FDel[T] | None = None,
        doc: str | None = None,
    ):
        super().__init__(fget, fset, fdel, doc)

    def __get__(self, instance: T | None, owner: type[T] = None) -> P:
        if owner is None:
            owner = instance.__class__
        # Raises `AttributeError` while `ABCMeta` is still collecting the abstract methods
        # of `owner`, which keeps the getter from running on a half-built class.
        getattr(owner, "__abstractmethods__")
        return self.fget(owner)

    def __set_name__(self, owner: type[T], name: str):
        if not isinstance(owner, ClassPropMeta):
            raise TypeError(
                f"Class {owner.__name__} must use {ClassPropMeta.__name__} (or its subtype) as "
                "metaclass to have class properties."
            )
        self._cls = owner

    def __set__(self, instance: T, value: P) -> Never:
        raise AttributeError(f"Class property of {self._cls.__name__} is read-only.")

    def __delete__(self, instance: T) -> Never:
        raise AttributeError(f"Class property of {self._cls.__name__} is read-only.")


class _cachedClassProp[T, P](classProp[T, P]):
    def __init__(
        self,
        fget: FGet[T, P] | None = None,
        fset: FSet[T, P] | None = None,
        fdel: FDel[T] | None = None,
        doc: str | None = None,
        *,
        key: str | None = None,
    ):
        super().__init__(fget, fset, fdel, doc)
        if key is None:
            key = "_" + fget.__name__
        self._key = key

    def __get__(self, instance: T | None, owner: type[T] = None) -> P:
        if owner is None:
            owner = instance.__class__
        # look up `vars(owner)` so that every subclass gets its own cached value
        if (value := vars(owner).get(self._key, _DUMMY)) is _DUMMY:
            value = super().__get__(instance, owner)
            setattr(owner, self._key, value)
        return value


def cachedClassProp(arg1=None, *args, **kwargs):
    """
    A class property whose value is computed once per class and then stored on the class,
    by default under the property name preceded by a leading underscore, or, when a key is
    specified, under the key.
    """
    hasKey = False
    if isinstance(arg1, str):
        key: str = arg1
        hasKey = True
    elif "key" in kwargs:
        key: str = kwargs.pop("key")
        hasKey = True
    if hasKey:
        return partial(_cachedClassProp, key=key)
    else:
        return _cachedClassProp(arg1, *args, **kwargs)


def _cachedGetter[T, P](fget: FGet[T, P], *, key: str = None) -> FGet[T, P]:
    if key is None:
        fname = fget.__name__
        if fname.startswith("__") and fname.endswith("__"):
            # "dunder" method
            key = f"_{fname[2:-2]}"
        else:
            key = f"_{fname}"

    def wrapper(self: T) -> P:
        if (value := getattr(self, key, _DUMMY)) is _DUMMY:
            value = fget(self)
            setattr(self, key, value)
        return value

    wrapper.__name__ = fget.__name__
    wrapper.__doc__ = fget.__doc__
    return wrapper


def cachedGetter(arg1=None, *args, **kwargs):
    """
    Caches the result of a getter function on the instance. The cached value is stored in a
    private attribute with the same name as the getter function preceded by a leading
    underscore, or, when a key is specified, with the key as the attribute name.

    **Note**: Make sure that the key is included in `__slots__` when using this decorator on
    a slotted class.
    """
    hasKey = False
    if isinstance(arg1, str):
        key = arg1
        hasKey = True
    elif "key" in kwargs:
        key = kwargs.pop("key")
        hasKey = True
    if hasKey:
        return partial(_cachedGetter, key=key)
    else:
        return _cachedGetter(arg1, *args, **kwargs)


def noInstance[T](cls: type[T]) -> type[T]:
    """
    Marks a class as a plain namespace of constants or static functions. Instantiating it
    raises `TypeError`.
    """

    def __new__(cls, *args, **kwargs) -> Never:
        raise TypeError(f"{cls.__name__} cannot be instantiated.")

    cls.__new__ = __new__
    return cls


class NewHelperMixin:
    """
    Mixin for immutable value types that are created through a cached factory.

    Subclasses implement `_newImpl`, which builds a fresh instance from already validated
    fields, and create instances through `_newHelper`, which interns them.
    """

    __slots__ = ()

    @classmethod
    def _newImpl(cls, *args) -> Self:
        raise NotImplementedError

    @classmethod
    @lru_cache
    def _newHelper(cls, *args) -> Self:
        # create a new instance with caching
        return cls._newImpl(*args)

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo) -> Self:
        return self
