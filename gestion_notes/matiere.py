"""Subjects and their in-memory table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

LIBELLE_MAX_LENGTH = 14

_SEPARATOR = "+-----+-----------+----------------------+-------------+"
_HEADER = "| Idx | Reference | Libelle              | Coefficient |"


@dataclass
class Matiere:
    """A subject identified by its reference."""

    reference: int
    libelle: str
    coefficient: int = 1


class MatiereDB:
    """Ordered collection of subjects addressed by position."""

    def __init__(self) -> None:
        self._matieres: list[Matiere] = []

    def __len__(self) -> int:
        return len(self._matieres)

    def __iter__(self) -> Iterator[Matiere]:
        return iter(self._matieres)

    def __getitem__(self, index: int) -> Matiere:
        self._check(index)
        return self._matieres[index]

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._matieres):
            raise IndexError(
                "Index invalide, doit être inférieur au nombre de matières"
            )

    def add(self, matiere: Matiere) -> None:
        """Append a subject."""
        self._matieres.append(matiere)

    def remove(self, index: int) -> Matiere:
        """Remove and return the subject at ``index``."""
        self._check(index)
        return self._matieres.pop(index)

    def update(self, index: int, matiere: Matiere) -> None:
        """Replace the subject at ``index``."""
        if not 0 <= index < len(self._matieres):
            raise IndexError("Index invalide pour modification.")
        self._matieres[index] = matiere

    def find(self, reference: int) -> int | None:
        """Return the position of the first subject with ``reference``, or None."""
        return next(
            (i for i, m in enumerate(self._matieres) if m.reference == reference),
            None,
        )

    def clear(self) -> None:
        """Remove every subject."""
        self._matieres.clear()

    def render(self) -> str:
        """Return the subjects as a text table."""
        if not self._matieres:
            return "Aucune matiere a afficher.\n"
        lines = [_SEPARATOR, _HEADER, _SEPARATOR]
        lines.extend(
            f"| {i:3d} | {m.reference:9d} | {m.libelle:<20} | {m.coefficient:11d} |"
            for i, m in enumerate(self._matieres)
        )
        lines.append(_SEPARATOR)
        return "\n".join(lines) + "\n"