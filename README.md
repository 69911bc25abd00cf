# gestion_notes

A console application for keeping classes, subjects (matières), students
(étudiants) and class–subject associations in a session directory made of CSV
files. The prompts and menus are in French.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Usage

Start the application:

    gestion-notes

The command takes no options other than `--help`. You are first asked to
choose:

1. **Créer une nouvelle session**: you give a session name, and a directory of
   that name is created in the current directory. If it already exists, you are
   asked for another name.
2. **Importer une session existante**: you give the path of an existing session
   directory. If it does not exist, the program stops. Its `classes.csv`,
   `matieres.csv`, `etudiants.csv` and `notes.csv` are loaded; a warning
   (`Attention : ... manquant ou vide.`) is printed for a file that cannot be
   read.

Any other answer to the first question also asks for a directory to open, but
loads nothing from it.

In every case, each CSV file missing from the session directory (`classes.csv`,
`matieres.csv`, `etudiants.csv`, `notes.csv`, `matiere_clas_asso.csv`) is
created with its header line before anything is loaded; files that exist are
left as they are.

The main menu then offers:

- **Gestion des classes**: list, add, delete, edit, or load classes from another
  CSV file (appended to the current ones). A class has a code, a name (up to 29
  characters) and a level; typing `LICENSE` gives `LICENSE`, any other answer
  gives `MASTER`.
- **Gestion des matières**: list, add, delete, edit, or load subjects from
  another CSV file (appended). A subject has a reference, a label (up to 14
  characters) and a coefficient. A subject can only be added once at least one
  class exists. The **Association Classe** entry lists, adds and removes
  class–subject links; a link is accepted only if both the class code and the
  subject reference exist.
- **Gestion des étudiants**: list, add, delete, edit, or load students from
  another CSV file (which replaces the current list). A student has a number, a
  last name (up to 29 characters), a first name and an e-mail address such as
  `alice@example.com` (up to 19 characters each), a birth date typed as
  `JJ MM AAAA`, and the code of an existing class. Students can only be added
  once at least one class exists; editing a student keeps their class code.
- **Gestion des notes**: prints that grade management is not available.

After each change, the affected table is written back to its file in the
session: `classes.csv`, `matieres.csv`, `etudiants.csv`, or, for associations,
`matiere_clas_asso.csv`.

## What it does not do

- The application has no screen for grades: they can be entered or edited only
  through the library, and the application never writes `notes.csv` back.
- Class–subject associations are written to `matiere_clas_asso.csv` but are not
  read back when a session is imported.

## Library use

Each table is an ordered collection addressed by position:

    from gestion_notes.classe import Classe, ClasseDB, Niveau

    classes = ClasseDB()
    classes.add(Classe(code=1, nom="L1 Info", niveau=Niveau.LICENSE))
    classes.find(1)         # -> 0, or None when the code is unknown
    print(classes.render())  # text table

`ClasseDB`, `MatiereDB` (`gestion_notes.matiere`), `EtudiantDB`
(`gestion_notes.etudiant`), `NoteDB` (`gestion_notes.note`) and
`ClasseMatiereDB` (`gestion_notes.classe_matiere`) support `len()`, iteration,
indexing, `add`, `remove`, `find`, `clear` and `render`; all but
`ClasseMatiereDB` also have `update`. An index out of range raises
`IndexError`. `NoteDB.add` and `ClasseMatiereDB.add` take the related tables
and raise `LookupError` when the student, class or subject does not exist.

`gestion_notes.csv_io` reads and writes the session files:
`load_classes`, `load_matieres`, `load_etudiants`, `load_notes`,
`load_classe_matieres` and `export_classes`, `export_matieres`,
`export_etudiants`, `export_notes`, `export_classe_matieres`. The loaders
return the number of rows read; `load_notes` skips marks whose student or
subject is unknown.

`gestion_notes.session` provides `session_paths(directory)`,
`create_session_dir(name, base=".")` (raising `SessionExistsError` when the
directory exists) and `create_session_files(paths)`. The menu texts are in
`gestion_notes.menu`, and the interactive loop is
`gestion_notes.app.Application`.