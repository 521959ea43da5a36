from typing import Generic, List, Tuple, TypeVar

T = TypeVar("T")


class PartsBuilder(Generic[T]):
    """
    Collects the parts of one geometry (holes, multi-geometry members)

    build() finalises the parts into a tuple; the builder rejects further
    additions afterwards.
    """

    def __init__(self):
        self._parts: List[T] = []
        self._built = False

    def add(self, part: T) -> None:
        if self._built:
            raise RuntimeError("Cannot add parts after build()")
        self._parts.append(part)

    def __len__(self) -> int:
        return len(self._parts)

    def build(self) -> Tuple[T, ...]:
        self._built = True
        return tuple(self._parts)
