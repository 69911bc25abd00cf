"""Session directories and the files they hold."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


class SessionExistsError(FileExistsError):
    """Raised when a session of that name already exists."""


@dataclass(frozen=True)
class SessionPaths:
    """Locations of the files of one session."""

    directory: Path
    classes: Path
    matieres: Path
    etudiants: Path
    notes: Path
    associations: Path


_INITIAL_CONTENT = {
    "classes": "code,nom,niveau\n",
    "matieres": "reference,libelle,coeficient\n",
    "etudiants": "numero,nom,prenom,email,date_naissance,classe_code\n",
    "notes": "",
    "associations": "code_classe,reference_matiere\n",
}


def session_paths(directory: str | os.PathLike[str]) -> SessionPaths:
    """Return the file locations of the session stored in ``directory``."""
    root = Path(directory)
    return SessionPaths(
        directory=root,
        classes=root / "classes.csv",
        matieres=root / "matieres.csv",
        etudiants=root / "etudiants.csv",
        notes=root / "notes.csv",
        associations=root / "matiere_clas_asso.csv",
    )


def create_session_dir(name: str, base: str | os.PathLike[str] = ".") -> Path:
    """Create the directory of a new session and return its path."""
    path = Path(base) / name
    if path.exists():
        raise SessionExistsError(
            "Ce nom de session existe deja. Veuillez en choisir un autre."
        )
    path.mkdir(mode=0o700)
    return path


def create_session_files(paths: SessionPaths) -> None:
    """Create each missing session file with its header; keep existing ones."""
    for attribute, content in _INITIAL_CONTENT.items():
        try:
            with open(getattr(paths, attribute), "x", encoding="utf-8") as handle:
                handle.write(content)
        except FileExistsError:
            continue