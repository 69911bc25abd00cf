"""Marks and their in-memory table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from gestion_notes.etudiant import EtudiantDB
from gestion_notes.matiere import MatiereDB


@dataclass
class Note:
    """Continuous-assessment and exam marks of one student in one subject."""

    numero_etudiant: int
    reference_matiere: int
    note_cc: float = 0.0
    note_ds: float = 0.0


class NoteDB:
    """Ordered collection of marks addressed by position."""

    def __init__(self) -> None:
        self._notes: list[Note] = []

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def __getitem__(self, index: int) -> Note:
        self._check(index)
        return self._notes[index]

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._notes):
            raise IndexError("index invalide")

    def add(self, note: Note, etudiants: EtudiantDB, matieres: MatiereDB) -> None:
        """Append a mark once its student and subject are known to exist."""
        if etudiants.find(note.numero_etudiant) is None:
            raise LookupError("etudiant inexistant")
        if matieres.find(note.reference_matiere) is None:
            raise LookupError("matiere inexistante")
        self._notes.append(note)

    def remove(self, index: int) -> Note:
        """Remove and return the mark at ``index``."""
        self._check(index)
        return self._notes.pop(index)

    def update(self, index: int, note: Note) -> None:
        """Replace the mark at ``index``."""
        if not 0 <= index < len(self._notes):
            raise IndexError("index invalide pour modification")
        self._notes[index] = note

    def find(self, numero_etudiant: int, reference_matiere: int) -> int | None:
        """Return the position of the mark for this student and subject, or None."""
        return next(
            (
                i
                for i, n in enumerate(self._notes)
                if n.numero_etudiant == numero_etudiant
                and n.reference_matiere == reference_matiere
            ),
            None,
        )

    def clear(self) -> None:
        """Remove every mark."""
        self._notes.clear()

    def render(self) -> str:
        """Return the marks one per line."""
        if not self._notes:
            return "aucune note a afficher\n"
        return "".join(
            f"[{i}] etudiant: {n.numero_etudiant} | matiere: {n.reference_matiere}"
            f" | cc: {n.note_cc:.2f} | ds: {n.note_ds:.2f}\n"
            for i, n in enumerate(self._notes)
        )