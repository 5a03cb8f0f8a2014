"""
Registry of named declarations produced during one analyzer run.
"""

from __future__ import annotations

from ..errors import NameCollisionError
from .ir_nodes import NamedDeclaration


class TypeRegistry:
    """Append-only map of declaration name -> declaration.

    Registering the same declaration twice is a no-op. Registering a
    different declaration under an existing name raises NameCollisionError.
    """

    def __init__(self):
        self._declarations: dict[str, NamedDeclaration] = {}

    def register(self, declaration: NamedDeclaration) -> None:
        existing = self._declarations.get(declaration.name)
        if existing is None:
            self._declarations[declaration.name] = declaration
            return

        if existing != declaration:
            raise NameCollisionError(
                declaration.name,
                f"{type(existing).__name__} and {type(declaration).__name__} with different content",
            )

    def all(self) -> list[NamedDeclaration]:
        """Snapshot of every registered declaration."""
        return list(self._declarations.values())

    def names(self) -> set[str]:
        return set(self._declarations)

    def __contains__(self, name: str) -> bool:
        return name in self._declarations

    def __len__(self) -> int:
        return len(self._declarations)
