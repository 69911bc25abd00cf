"""Links between classes and the subjects taught in them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from gestion_notes.classe import ClasseDB
from gestion_notes.matiere import MatiereDB

_SEPARATOR = "+-----+------------+-----------------+"
_HEADER = "| Idx | CodeClasse | RefMatiere      |"


@dataclass(frozen=True)
class ClasseMatiere:
    """A subject taught in a class."""

    code_classe: int
    reference_matiere: int


class ClasseMatiereDB:
    """Ordered collection of class-subject links addressed by position."""

    def __init__(self) -> None:
        self._relations: list[ClasseMatiere] = []

    def __len__(self) -> int:
        return len(self._relations)

    def __iter__(self) -> Iterator[ClasseMatiere]:
        return iter(self._relations)

    def __getitem__(self, index: int) -> ClasseMatiere:
        self._check(index)
        return self._relations[index]

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._relations):
            raise IndexError("Index invalide")

    def add(
        self, relation: ClasseMatiere, classes: ClasseDB, matieres: MatiereDB
    ) -> None:
        """Append a link once its class and subject are known to exist."""
        if classes.find(relation.code_classe) is None:
            raise LookupError("Classe inexistante !")
        if matieres.find(relation.reference_matiere) is None:
            raise LookupError("Matiere inexistante !")
        self._relations.append(relation)

    def remove(self, index: int) -> ClasseMatiere:
        """Remove and return the link at ``index``."""
        self._check(index)
        return self._relations.pop(index)

    def find(self, code_classe: int, reference_matiere: int) -> int | None:
        """Return the position of the link, or None."""
        target = ClasseMatiere(code_classe, reference_matiere)
        return next(
            (i for i, rel in enumerate(self._relations) if rel == target), None
        )

    def clear(self) -> None:
        """Remove every link."""
        self._relations.clear()

    def render(self) -> str:
        """Return the links as a text table."""
        if not self._relations:
            return "Aucune relation classe-matiere a afficher.\n"
        lines = [_SEPARATOR, _HEADER, _SEPARATOR]
        lines.extend(
            f"| {i:3d} | {rel.code_classe:10d} | {rel.reference_matiere:13d} |"
            for i, rel in enumerate(self._relations)
        )
        lines.append(_SEPARATOR)
        return "\n".join(lines) + "\n"