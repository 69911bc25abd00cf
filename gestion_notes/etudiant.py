"""Students and their in-memory table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

NOM_MAX_LENGTH = 29
PRENOM_MAX_LENGTH = 19
EMAIL_MAX_LENGTH = 19

_SEPARATOR = (
    "+-----+--------+----------------------+----------------------+"
    "----------------------+------------+------------+------------+-------------+"
)
_HEADER = (
    "| Idx | Numero | Nom                  | Prenom               | Email"
    "                | Naissance  | ClasseCode |"
)


@dataclass
class Date:
    """A calendar date as day, month and year."""

    jour: int
    mois: int
    annee: int

    def __str__(self) -> str:
        return f"{self.jour:02d}/{self.mois:02d}/{self.annee:04d}"


@dataclass
class Etudiant:
    """A student, linked to a class by its code."""

    numero: int
    nom: str
    prenom: str
    email: str
    date_naissance: Date = field(default_factory=lambda: Date(1, 1, 2000))
    classe_code: int = 0


class EtudiantDB:
    """Ordered collection of students addressed by position."""

    def __init__(self) -> None:
        self._etudiants: list[Etudiant] = []

    def __len__(self) -> int:
        return len(self._etudiants)

    def __iter__(self) -> Iterator[Etudiant]:
        return iter(self._etudiants)

    def __getitem__(self, index: int) -> Etudiant:
        self._check(index)
        return self._etudiants[index]

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._etudiants):
            raise IndexError(
                "Index invalide, doit etre inferieur aux nombre d'etudiants"
            )

    def add(self, etudiant: Etudiant) -> None:
        """Append a student."""
        self._etudiants.append(etudiant)

    def remove(self, index: int) -> Etudiant:
        """Remove and return the student at ``index``."""
        self._check(index)
        return self._etudiants.pop(index)

    def update(self, index: int, etudiant: Etudiant) -> None:
        """Replace the student at ``index``."""
        if not 0 <= index < len(self._etudiants):
            raise IndexError("Index invalide pour modification.")
        self._etudiants[index] = etudiant

    def find(self, numero: int) -> int | None:
        """Return the position of the first student with ``numero``, or None."""
        return next(
            (i for i, e in enumerate(self._etudiants) if e.numero == numero),
            None,
        )

    def clear(self) -> None:
        """Remove every student."""
        self._etudiants.clear()

    def render(self) -> str:
        """Return the students as a text table."""
        if not self._etudiants:
            return "Aucun etudiant a afficher.\n"
        lines = [_SEPARATOR, _HEADER, _SEPARATOR]
        lines.extend(
            f"| {i:3d} | {e.numero:6d} | {e.nom:<20} | {e.prenom:<20} | "
            f"{e.email:<20} | {e.date_naissance} | {e.classe_code:10d} |"
            for i, e in enumerate(self._etudiants)
        )
        lines.append(_SEPARATOR)
        return "\n".join(lines) + "\n"