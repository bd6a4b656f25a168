from typing import Any, Generic, TypeVar, get_args, get_origin

T = TypeVar("T")


class TypeReference(Generic[T]):
    """
    Carries a parameterized target type such as ``list[Item]`` or
    ``dict[str, Item]`` to the deserialization boundary.

    Three equivalent spellings:
        TypeReference[list[Item]]()
        TypeReference(list[Item])
        class Items(TypeReference[list[Item]]): ...
    """

    def __init__(self, type_: Any = None) -> None:
        self._type = type_

    @property
    def type(self) -> Any:
        if self._type is not None:
            return self._type

        # Set by typing after __init__ when built as TypeReference[X]()
        orig = self.__dict__.get("__orig_class__")
        if orig is not None:
            return self._concrete(get_args(orig)[0])

        for base in getattr(type(self), "__orig_bases__", ()):
            if get_origin(base) is TypeReference:
                return self._concrete(get_args(base)[0])

        raise TypeError(
            "TypeReference requires a type argument, "
            "e.g. TypeReference[list[int]]() or TypeReference(list[int])"
        )

    @staticmethod
    def _concrete(arg: Any) -> Any:
        if isinstance(arg, TypeVar):
            raise TypeError(f"TypeReference argument {arg} is not a concrete type")
        return arg
