"""Reading and writing the session tables as comma-separated files."""

from __future__ import annotations

import os
import re
from typing import Iterator

from gestion_notes.classe import NOM_MAX_LENGTH as CLASSE_NOM_MAX_LENGTH
from gestion_notes.classe import Classe, ClasseDB, Niveau
from gestion_notes.classe_matiere import ClasseMatiere, ClasseMatiereDB
from gestion_notes.etudiant import (
    EMAIL_MAX_LENGTH,
    NOM_MAX_LENGTH,
    PRENOM_MAX_LENGTH,
    Date,
    Etudiant,
    EtudiantDB,
)
from gestion_notes.matiere import LIBELLE_MAX_LENGTH, Matiere, MatiereDB
from gestion_notes.note import Note, NoteDB

CLASSES_HEADER = "code,nom,niveau"
MATIERES_HEADER = "reference,libelle,coefficient"
ETUDIANTS_HEADER = "numero,nom,prenom,email,jour,mois,annee,classe_code"
NOTES_HEADER = "numero_etudiant,reference_matiere,noteCC,noteDS"

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

PathLike = "str | os.PathLike[str]"


def _to_int(text: str) -> int | None:
    match = _INT.match(text)
    return int(match.group(1)) if match else None


def _atoi(text: str) -> int:
    value = _to_int(text)
    return 0 if value is None else value


def _atof(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _fields(line: str) -> list[str]:
    """Split a line on commas, dropping empty fields."""
    return [field for field in line.rstrip("\r\n").split(",") if field]


def _records(path: str | os.PathLike[str], width: int) -> Iterator[tuple[int, list[str]]]:
    """Yield rows that have ``width`` fields and start with an integer key.

    Rows that are too short, and the header whose first field is not a
    number, are skipped.
    """
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fields = _fields(line)
            if len(fields) < width:
                continue
            key = _to_int(fields[0])
            if key is None:
                continue
            yield key, fields


def load_matieres(path: str | os.PathLike[str], db: MatiereDB) -> int:
    """Append the subjects of ``path`` to ``db`` and return how many were read."""
    count = 0
    for reference, fields in _records(path, 3):
        db.add(
            Matiere(
                reference=reference,
                libelle=fields[1][:LIBELLE_MAX_LENGTH],
                coefficient=_atoi(fields[2]),
            )
        )
        count += 1
    return count


def load_classes(path: str | os.PathLike[str], db: ClasseDB) -> int:
    """Append the classes of ``path`` to ``db`` and return how many were read."""
    count = 0
    for code, fields in _records(path, 3):
        niveau = Niveau.LICENSE if fields[2] == "LICENSE" else Niveau.MASTER
        db.add(Classe(code=code, nom=fields[1][:CLASSE_NOM_MAX_LENGTH], niveau=niveau))
        count += 1
    return count


def _parse_date(text: str) -> Date | None:
    parts = [_to_int(part) for part in text.split("/")]
    if len(parts) != 3 or None in parts:
        return None
    jour, mois, annee = parts
    return Date(jour, mois, annee)


def _parse_etudiant(line: str) -> Etudiant | None:
    fields = line.rstrip("\r\n").split(",")
    if len(fields) == 8:
        numbers = [_to_int(field) for field in fields[4:8]]
        if None in numbers:
            return None
        jour, mois, annee, classe_code = numbers
        date = Date(jour, mois, annee)
    elif len(fields) == 6:
        date = _parse_date(fields[4])
        classe_code = _to_int(fields[5])
        if date is None or classe_code is None:
            return None
    else:
        return None
    numero = _to_int(fields[0])
    if numero is None or not all(fields[1:4]):
        return None
    return Etudiant(
        numero=numero,
        nom=fields[1][:NOM_MAX_LENGTH],
        prenom=fields[2][:PRENOM_MAX_LENGTH],
        email=fields[3][:EMAIL_MAX_LENGTH],
        date_naissance=date,
        classe_code=classe_code,
    )


def load_etudiants(path: str | os.PathLike[str], db: EtudiantDB) -> int:
    """Replace the content of ``db`` with the students of ``path``.

    The first line is a header. Rows give the birth date either as three
    columns (day, month, year) or as one ``JJ/MM/AAAA`` column.
    """
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        etudiants = [e for e in map(_parse_etudiant, handle) if e is not None]
    db.clear()
    for etudiant in etudiants:
        db.add(etudiant)
    return len(etudiants)


def load_notes(
    path: str | os.PathLike[str],
    db: NoteDB,
    etudiants: EtudiantDB,
    matieres: MatiereDB,
) -> int:
    """Append the marks of ``path`` whose student and subject exist."""
    count = 0
    for numero, fields in _records(path, 4):
        note = Note(
            numero_etudiant=numero,
            reference_matiere=_atoi(fields[1]),
            note_cc=_atof(fields[2]),
            note_ds=_atof(fields[3]),
        )
        try:
            db.add(note, etudiants, matieres)
        except LookupError:
            continue
        count += 1
    return count


def _append_link(db: ClasseMatiereDB, relation: ClasseMatiere) -> None:
    # Links read from a session file are taken as they stand.
    classes = ClasseDB()
    classes.add(Classe(relation.code_classe, ""))
    matieres = MatiereDB()
    matieres.add(Matiere(relation.reference_matiere, ""))
    db.add(relation, classes, matieres)


def load_classe_matieres(path: str | os.PathLike[str], db: ClasseMatiereDB) -> int:
    """Replace the content of ``db`` with the class-subject links of ``path``."""
    relations = [
        ClasseMatiere(code, second)
        for code, fields in _records(path, 2)
        if (second := _to_int(fields[1])) is not None
    ]
    db.clear()
    for relation in relations:
        _append_link(db, relation)
    return len(relations)


def export_classes(path: str | os.PathLike[str], db: ClasseDB) -> None:
    """Write every class to ``path``, header first."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(CLASSES_HEADER + "\n")
        handle.writelines(f"{c.code},{c.nom},{c.niveau.value}\n" for c in db)


def export_matieres(path: str | os.PathLike[str], db: MatiereDB) -> None:
    """Write every subject to ``path``, header first."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(MATIERES_HEADER + "\n")
        handle.writelines(f"{m.reference},{m.libelle},{m.coefficient}\n" for m in db)


def export_etudiants(path: str | os.PathLike[str], db: EtudiantDB) -> None:
    """Write every student to ``path``, header first."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(ETUDIANTS_HEADER + "\n")
        handle.writelines(
            f"{e.numero},{e.nom},{e.prenom},{e.email},{e.date_naissance.jour},"
            f"{e.date_naissance.mois},{e.date_naissance.annee},{e.classe_code}\n"
            for e in db
        )


def export_notes(path: str | os.PathLike[str], db: NoteDB) -> None:
    """Write every mark to ``path``, header first."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(NOTES_HEADER + "\n")
        handle.writelines(
            f"{n.numero_etudiant},{n.reference_matiere},{n.note_cc:.2f},{n.note_ds:.2f}\n"
            for n in db
        )


def export_classe_matieres(
    path: str | os.PathLike[str],
    db: ClasseMatiereDB,
    classes: ClasseDB,
    matieres: MatiereDB,
) -> None:
    """Write the links whose class and subject both exist, with their details."""
    with open(path, "w", encoding="utf-8") as handle:
        for relation in db:
            ci = classes.find(relation.code_classe)
            mi = matieres.find(relation.reference_matiere)
            if ci is None or mi is None:
                continue
            c = classes[ci]
            m = matieres[mi]
            handle.write(
                f"{c.code},{m.reference},{c.nom},{c.niveau.value},"
                f"{m.libelle},{m.coefficient}\n"
            )