"""Interactive management of classes, subjects, students and marks."""

from __future__ import annotations

import argparse
import os
import re
import sys
from pathlib import Path
from typing import Callable, TextIO

from gestion_notes.classe import NOM_MAX_LENGTH as CLASSE_NOM_MAX_LENGTH
from gestion_notes.classe import Classe, ClasseDB, Niveau
from gestion_notes.classe_matiere import ClasseMatiere, ClasseMatiereDB
from gestion_notes.csv_io import (
    export_classe_matieres,
    export_classes,
    export_etudiants,
    export_matieres,
    load_classes,
    load_etudiants,
    load_matieres,
    load_notes,
)
from gestion_notes.etudiant import (
    EMAIL_MAX_LENGTH,
    NOM_MAX_LENGTH,
    PRENOM_MAX_LENGTH,
    Date,
    Etudiant,
    EtudiantDB,
)
from gestion_notes.matiere import LIBELLE_MAX_LENGTH, Matiere, MatiereDB
from gestion_notes.menu import (
    classe_matiere_menu,
    classes_menu,
    etudiants_menu,
    main_menu,
    matieres_menu,
)
from gestion_notes.note import NoteDB
from gestion_notes.session import (
    SessionExistsError,
    SessionPaths,
    create_session_dir,
    create_session_files,
    session_paths,
)

_INT = re.compile(r"\s*([+-]?\d+)")
_LEAVE = object()
_NO_CLASS = "Aucune classe existante. Veuillez d'abord créer une classe."


class _InvalidInput(Exception):
    """A typed answer could not be read as expected."""


def _scan_ints(text: str, count: int) -> list[int] | None:
    """Read ``count`` integers from the start of ``text``, or None."""
    values = []
    position = 0
    for _ in range(count):
        match = _INT.match(text, position)
        if match is None:
            return None
        values.append(int(match.group(1)))
        position = match.end()
    return values


def _scan_int(text: str) -> int | None:
    values = _scan_ints(text, 1)
    return None if values is None else values[0]


def _as_signed_byte(value: int) -> int:
    return (value + 128) % 256 - 128


class Application:
    """Menu-driven editor of one session's tables."""

    def __init__(
        self,
        classes: ClasseDB,
        matieres: MatiereDB,
        etudiants: EtudiantDB,
        notes: NoteDB,
        paths: SessionPaths,
        input_fn: Callable[[], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.classes = classes
        self.matieres = matieres
        self.etudiants = etudiants
        self.notes = notes
        self.paths = paths
        self.classe_matieres = ClasseMatiereDB()
        self._input = input_fn
        self._output = output if output is not None else sys.stdout

    # -- terminal helpers -------------------------------------------------

    def _write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def _say(self, text: str) -> None:
        self._write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._input()

    def _ask_int(self, prompt: str, what: str) -> int:
        value = _scan_int(self._ask(prompt))
        if value is None:
            raise _InvalidInput(f"Entree invalide. Veuillez entrer {what} valide.")
        return value

    def _ask_niveau(self) -> Niveau:
        answer = self._ask("Niveau (LICENSE/MASTER) : ")
        return Niveau.LICENSE if answer == "LICENSE" else Niveau.MASTER

    def _ask_coefficient(self, prompt: str) -> int:
        return _as_signed_byte(self._ask_int(prompt, "un coefficient"))

    def _ask_date(self, prompt: str) -> Date:
        values = _scan_ints(self._ask(prompt), 3)
        if values is None:
            raise _InvalidInput("Entree invalide. Veuillez entrer une date valide.")
        return Date(*values)

    def _save(self, export, path, *dbs, label: str) -> None:
        try:
            export(path, *dbs)
        except OSError:
            self._say(f"Erreur ouverture {path} pour ecrire les {label}")

    def _load(self, loader, *dbs) -> None:
        path = self._ask("Chemin du CSV : ")
        try:
            loader(path, *dbs)
        except (OSError, ValueError):
            self._say("Erreur chargement.")
        else:
            self._say("Chargement reussi.")

    def _submenu(self, text: str, actions: dict[int, Callable[[], object]]) -> None:
        while True:
            try:
                choice = self._ask_int(text, "un nombre")
                if choice == 0:
                    return
                action = actions.get(choice)
                if action is not None and action() is _LEAVE:
                    return
            except _InvalidInput as exc:
                self._say(str(exc))

    # -- main loop --------------------------------------------------------

    def run(self) -> None:
        """Run the menus until the user quits or input runs out."""
        try:
            self._main_loop()
        except EOFError:
            return

    def _main_loop(self) -> None:
        handlers = {
            1: self._classes_loop,
            2: self._matieres_loop,
            3: self._etudiants_loop,
        }
        while True:
            try:
                choice = self._ask_int(main_menu(), "un nombre")
            except _InvalidInput as exc:
                self._say(str(exc))
                continue
            if choice == 0:
                self._say("Au revoir !")
                return
            if choice == 4:
                self._say("Gestion des notes non implementee.")
            elif choice in handlers:
                handlers[choice]()
            else:
                self._say("Choix invalide. Veuillez reessayer.")

    # -- classes ----------------------------------------------------------

    def _classes_loop(self) -> None:
        self._submenu(
            classes_menu(),
            {
                1: lambda: self._write(self.classes.render()),
                2: self._add_classe,
                3: self._remove_classe,
                4: self._update_classe,
                5: self._load_classes,
            },
        )

    def _save_classes(self) -> None:
        self._save(export_classes, self.paths.classes, self.classes, label="classes")

    def _read_classe(self, code_prompt: str, nom_prompt: str) -> Classe:
        code = self._ask_int(code_prompt, "un code")
        nom = self._ask(nom_prompt)[:CLASSE_NOM_MAX_LENGTH]
        return Classe(code, nom, self._ask_niveau())

    def _add_classe(self) -> None:
        self.classes.add(self._read_classe("Code : ", "Nom : "))
        self._save_classes()

    def _remove_classe(self) -> None:
        index = self._ask_int("Index a supprimer : ", "un index")
        try:
            self.classes.remove(index)
        except IndexError as exc:
            self._say(str(exc))
        self._save_classes()

    def _update_classe(self) -> None:
        index = self._ask_int("Index a modifier : ", "un index")
        classe = self._read_classe("Nouveau code : ", "Nouveau nom : ")
        try:
            self.classes.update(index, classe)
        except IndexError as exc:
            self._say(str(exc))
        self._save_classes()

    def _load_classes(self) -> None:
        self._load(load_classes, self.classes)
        self._save_classes()

    # -- subjects ---------------------------------------------------------

    def _matieres_loop(self) -> None:
        self._submenu(
            matieres_menu(),
            {
                1: lambda: self._write(self.matieres.render()),
                2: self._add_matiere,
                3: self._remove_matiere,
                4: self._update_matiere,
                5: self._links_loop,
                6: self._load_matieres,
            },
        )

    def _save_matieres(self) -> None:
        self._save(
            export_matieres, self.paths.matieres, self.matieres, label="matieres"
        )

    def _read_matiere(self, ref_prompt: str, lib_prompt: str, coef_prompt: str) -> Matiere:
        reference = self._ask_int(ref_prompt, "une reference")
        libelle = self._ask(lib_prompt)[:LIBELLE_MAX_LENGTH]
        return Matiere(reference, libelle, self._ask_coefficient(coef_prompt))

    def _add_matiere(self) -> object:
        if not self.classes:
            self._say(_NO_CLASS)
            return _LEAVE
        self.matieres.add(
            self._read_matiere("Reference : ", "Libelle : ", "Coefficient : ")
        )
        self._save_matieres()
        return None

    def _remove_matiere(self) -> None:
        index = self._ask_int("Index a supprimer : ", "un index")
        if not 0 <= index < len(self.matieres):
            self._say("Index hors borne.")
            return
        self.matieres.remove(index)
        self._save_matieres()

    def _update_matiere(self) -> None:
        index = self._ask_int("Index a modifier : ", "un index")
        matiere = self._read_matiere(
            "Nouvelle reference : ", "Nouveau libelle : ", "Nouveau coefficient : "
        )
        try:
            self.matieres.update(index, matiere)
        except IndexError as exc:
            self._say(str(exc))
        self._save_matieres()

    def _load_matieres(self) -> None:
        self._load(load_matieres, self.matieres)
        self._save_matieres()

    # -- class-subject links ---------------------------------------------

    def _links_loop(self) -> None:
        self._submenu(
            classe_matiere_menu(),
            {
                1: lambda: self._write(self.classe_matieres.render()),
                2: self._add_link,
                3: self._remove_link,
            },
        )

    def _save_links(self) -> None:
        self._save(
            export_classe_matieres,
            self.paths.associations,
            self.classe_matieres,
            self.classes,
            self.matieres,
            label="associations",
        )

    def _add_link(self) -> None:
        code = self._ask_int("Code classe : ", "un code")
        reference = self._ask_int("Reference matiere : ", "une reference")
        try:
            self.classe_matieres.add(
                ClasseMatiere(code, reference), self.classes, self.matieres
            )
        except LookupError as exc:
            self._say(str(exc))
        else:
            self._say("Association ajoutee.")
        self._save_links()

    def _remove_link(self) -> None:
        index = self._ask_int("Index a dissocier : ", "un index")
        try:
            self.classe_matieres.remove(index)
        except IndexError as exc:
            self._say(str(exc))
        self._save_links()

    # -- students ---------------------------------------------------------

    def _etudiants_loop(self) -> None:
        self._submenu(
            etudiants_menu(),
            {
                1: lambda: self._write(self.etudiants.render()),
                2: self._add_etudiant,
                3: self._remove_etudiant,
                4: self._update_etudiant,
                5: self._load_etudiants,
            },
        )

    def _save_etudiants(self) -> None:
        self._save(
            export_etudiants, self.paths.etudiants, self.etudiants, label="etudiants"
        )

    def _read_identity(self, prompts: tuple[str, str, str, str, str]) -> tuple:
        numero_p, nom_p, prenom_p, date_p, email_p = prompts
        numero = self._ask_int(numero_p, "un numero")
        nom = self._ask(nom_p)[:NOM_MAX_LENGTH]
        prenom = self._ask(prenom_p)[:PRENOM_MAX_LENGTH]
        date = self._ask_date(date_p)
        email = self._ask(email_p)[:EMAIL_MAX_LENGTH]
        return numero, nom, prenom, email, date

    def _add_etudiant(self) -> object:
        if not self.classes:
            self._say(_NO_CLASS)
            return _LEAVE
        numero, nom, prenom, email, date = self._read_identity(
            (
                "Numéro : ",
                "Nom : ",
                "Prenom : ",
                "Date de naissance (JJ MM AAAA) : ",
                "Email: ",
            )
        )
        self._say("Sélectionnez la classe à associer :")
        for position, classe in enumerate(self.classes, start=1):
            self._say(f"  {position}. {classe.nom} (code {classe.code})")
        code = self._ask_int("Code de la classe : ", "un code")
        if self.classes.find(code) is None:
            self._say("Code de classe inexistant.")
            return None
        self.etudiants.add(Etudiant(numero, nom, prenom, email, date, code))
        self._save_etudiants()
        return None

    def _remove_etudiant(self) -> None:
        index = self._ask_int("Index a supprimer : ", "un index")
        if not 0 <= index < len(self.etudiants):
            self._say("Index hors borne.")
            return
        self.etudiants.remove(index)
        self._save_etudiants()

    def _update_etudiant(self) -> None:
        index = self._ask_int("Index a modifier : ", "un index")
        numero, nom, prenom, email, date = self._read_identity(
            (
                "Nouveau numero : ",
                "Nouveau nom : ",
                "Nouveau prenom : ",
                "Nouvelle date de naissance (JJ MM AAAA) : ",
                "Nouvel email: ",
            )
        )
        if 0 <= index < len(self.etudiants):
            classe_code = self.etudiants[index].classe_code
        else:
            classe_code = 0
        try:
            self.etudiants.update(
                index, Etudiant(numero, nom, prenom, email, date, classe_code)
            )
        except IndexError as exc:
            self._say(str(exc))
        self._save_etudiants()

    def _load_etudiants(self) -> None:
        self._load(load_etudiants, self.etudiants)
        self._save_etudiants()


def _create_session(ask: Callable[[str], str], out: TextIO) -> Path | None:
    while True:
        name = ask("Nom de la session : ")
        try:
            return create_session_dir(name)
        except SessionExistsError as exc:
            print(exc, file=out)
        except OSError as exc:
            print(f"Erreur creation dossier : {exc.strerror}", file=out)
            return None


def main(argv: list[str] | None = None) -> int:
    """Open or create a session, then run the interactive menus."""
    parser = argparse.ArgumentParser(
        prog="gestion-notes", description="Gestion des notes d'etudiants."
    )
    parser.parse_args(argv)
    out = sys.stdout

    def ask(prompt: str) -> str:
        out.write(prompt)
        out.flush()
        return input()

    try:
        mode = _scan_int(
            ask("1. Creer une nouvelle session\n2. Importer une session existante\nChoix : ")
        )
        if mode == 1:
            directory = _create_session(ask, out)
            if directory is None:
                return 1
        else:
            directory = Path(ask("Chemin du dossier de session a importer : "))
            if not os.path.exists(directory):
                print("Ce dossier n'existe pas.", file=out)
                return 1
    except EOFError:
        return 1

    paths = session_paths(directory)
    create_session_files(paths)

    classes = ClasseDB()
    matieres = MatiereDB()
    etudiants = EtudiantDB()
    notes = NoteDB()

    if mode == 2:
        loads = (
            ("classes.csv", lambda: load_classes(paths.classes, classes)),
            ("matieres.csv", lambda: load_matieres(paths.matieres, matieres)),
            ("etudiants.csv", lambda: load_etudiants(paths.etudiants, etudiants)),
            (
                "notes.csv",
                lambda: load_notes(paths.notes, notes, etudiants, matieres),
            ),
        )
        for filename, load in loads:
            try:
                load()
            except (OSError, ValueError):
                print(f"Attention : {filename} manquant ou vide.", file=out)

    Application(classes, matieres, etudiants, notes, paths, input, out).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())