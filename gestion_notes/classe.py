"""Classes (student groups) and their in-memory table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

NOM_MAX_LENGTH = 29

_SEPARATOR = "+-----+-------+----------------------+----------+"
_HEADER = "| Idx | Code  | Nom                  | Niveau   |"


class Niveau(Enum):
    """Study level of a class."""

    LICENSE = "LICENSE"
    MASTER = "MASTER"

    def __str__(self) -> str:
        return self.value


@dataclass
class Classe:
    """A class identified by its code."""

    code: int
    nom: str
    niveau: Niveau = Niveau.LICENSE


class ClasseDB:
    """Ordered collection of classes addressed by position."""

    def __init__(self) -> None:
        self._classes: list[Classe] = []

    def __len__(self) -> int:
        return len(self._classes)

    def __iter__(self) -> Iterator[Classe]:
        return iter(self._classes)

    def __getitem__(self, index: int) -> Classe:
        self._check(index)
        return self._classes[index]

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._classes):
            raise IndexError(
                "Index invalide, doit être inférieur au nombre de classes"
            )

    def add(self, classe: Classe) -> None:
        """Append a class."""
        self._classes.append(classe)

    def remove(self, index: int) -> Classe:
        """Remove and return the class at ``index``."""
        self._check(index)
        return self._classes.pop(index)

    def update(self, index: int, classe: Classe) -> None:
        """Replace the class at ``index``."""
        if not 0 <= index < len(self._classes):
            raise IndexError("Index invalide pour modification.")
        self._classes[index] = classe

    def find(self, code: int) -> int | None:
        """Return the position of the first class with ``code``, or None."""
        return next(
            (i for i, classe in enumerate(self._classes) if classe.code == code),
            None,
        )

    def clear(self) -> None:
        """Remove every class."""
        self._classes.clear()

    def render(self) -> str:
        """Return the classes as a text table."""
        if not self._classes:
            return "Aucune classe a afficher.\n"
        lines = [_SEPARATOR, _HEADER, _SEPARATOR]
        lines.extend(
            f"| {i:3d} | {c.code:5d} | {c.nom:<20} | {c.niveau.value:<8} |"
            for i, c in enumerate(self._classes)
        )
        lines.append(_SEPARATOR)
        return "\n".join(lines) + "\n"