import pytest

from gestion_notes import csv_io
from gestion_notes.classe import Classe, ClasseDB, Niveau
from gestion_notes.classe_matiere import ClasseMatiere, ClasseMatiereDB
from gestion_notes.etudiant import Date, Etudiant, EtudiantDB
from gestion_notes.matiere import LIBELLE_MAX_LENGTH, Matiere, MatiereDB
from gestion_notes.note import Note, NoteDB


def _classes():
    db = ClasseDB()
    db.add(Classe(1, "L1", Niveau.LICENSE))
    db.add(Classe(2, "M2", Niveau.MASTER))
    return db


def _matieres():
    db = MatiereDB()
    db.add(Matiere(10, "Maths", 3))
    db.add(Matiere(20, "Physique", 2))
    return db


def _etudiants():
    db = EtudiantDB()
    db.add(Etudiant(7, "Doe", "Jane", "jane@example.com", Date(5, 6, 2001), 1))
    db.add(Etudiant(8, "Roe", "John", "john@example.com", Date(12, 11, 1999), 2))
    return db


def test_export_classes_format(tmp_path):
    path = tmp_path / "classes.csv"
    db = ClasseDB()
    db.add(Classe(1, "L1", Niveau.LICENSE))
    csv_io.export_classes(path, db)
    assert path.read_text(encoding="utf-8") == "code,nom,niveau\n1,L1,LICENSE\n"


def test_classes_round_trip(tmp_path):
    path = tmp_path / "classes.csv"
    original = _classes()
    csv_io.export_classes(path, original)
    loaded = ClasseDB()
    assert csv_io.load_classes(path, loaded) == len(original)
    assert list(loaded) == list(original)


def test_load_classes_appends(tmp_path):
    path = tmp_path / "classes.csv"
    csv_io.export_classes(path, _classes())
    db = ClasseDB()
    db.add(Classe(99, "X", Niveau.MASTER))
    csv_io.load_classes(path, db)
    assert len(db) == 3
    assert db[0].code == 99


def test_load_classes_unknown_level_is_master(tmp_path):
    path = tmp_path / "classes.csv"
    path.write_text("code,nom,niveau\n4,Prepa,DOCTORAT\n", encoding="utf-8")
    db = ClasseDB()
    csv_io.load_classes(path, db)
    assert db[0].niveau is Niveau.MASTER


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        csv_io.load_classes(tmp_path / "absent.csv", ClasseDB())


def test_matieres_round_trip(tmp_path):
    path = tmp_path / "matieres.csv"
    original = _matieres()
    csv_io.export_matieres(path, original)
    loaded = MatiereDB()
    csv_io.load_matieres(path, loaded)
    assert list(loaded) == list(original)


def test_export_matieres_header(tmp_path):
    path = tmp_path / "matieres.csv"
    csv_io.export_matieres(path, _matieres())
    first = path.read_text(encoding="utf-8").splitlines()[0]
    assert first == "reference,libelle,coefficient"


def test_load_matieres_truncates_libelle(tmp_path):
    path = tmp_path / "matieres.csv"
    long_name = "Mathematiques appliquees"
    path.write_text(f"5,{long_name},4\n", encoding="utf-8")
    db = MatiereDB()
    csv_io.load_matieres(path, db)
    assert db[0].libelle == long_name[:LIBELLE_MAX_LENGTH]


def test_load_matieres_skips_short_rows(tmp_path):
    path = tmp_path / "matieres.csv"
    path.write_text("5,Chimie\n6,Bio,2\n", encoding="utf-8")
    db = MatiereDB()
    assert csv_io.load_matieres(path, db) == 1
    assert db[0].reference == 6


def test_etudiants_round_trip(tmp_path):
    path = tmp_path / "etudiants.csv"
    original = _etudiants()
    csv_io.export_etudiants(path, original)
    loaded = EtudiantDB()
    csv_io.load_etudiants(path, loaded)
    assert list(loaded) == list(original)


def test_load_etudiants_replaces_content(tmp_path):
    path = tmp_path / "etudiants.csv"
    csv_io.export_etudiants(path, _etudiants())
    db = EtudiantDB()
    db.add(Etudiant(1, "A", "B", "a@example.com"))
    csv_io.load_etudiants(path, db)
    assert [e.numero for e in db] == [7, 8]


def test_load_etudiants_single_date_column(tmp_path):
    path = tmp_path / "etudiants.csv"
    path.write_text(
        "numero,nom,prenom,email,date_naissance,classe_code\n"
        "7,Doe,Jane,jane@example.com,05/06/2001,3\n",
        encoding="utf-8",
    )
    db = EtudiantDB()
    csv_io.load_etudiants(path, db)
    assert db[0] == Etudiant(7, "Doe", "Jane", "jane@example.com", Date(5, 6, 2001), 3)


def test_notes_round_trip(tmp_path):
    path = tmp_path / "notes.csv"
    etudiants, matieres = _etudiants(), _matieres()
    original = NoteDB()
    original.add(Note(7, 10, 12.5, 14.25), etudiants, matieres)
    original.add(Note(8, 20, 9.0, 11.5), etudiants, matieres)
    csv_io.export_notes(path, original)
    loaded = NoteDB()
    assert csv_io.load_notes(path, loaded, etudiants, matieres) == 2
    assert list(loaded) == list(original)


def test_export_notes_header(tmp_path):
    path = tmp_path / "notes.csv"
    csv_io.export_notes(path, NoteDB())
    assert path.read_text(encoding="utf-8") == "numero_etudiant,reference_matiere,noteCC,noteDS\n"


def test_load_notes_skips_unknown_references(tmp_path):
    path = tmp_path / "notes.csv"
    path.write_text("7,10,12,13\n99,10,1,2\n7,99,1,2\n", encoding="utf-8")
    db = NoteDB()
    assert csv_io.load_notes(path, db, _etudiants(), _matieres()) == 1
    assert db[0].numero_etudiant == 7


def test_export_classe_matieres_skips_missing(tmp_path):
    path = tmp_path / "asso.csv"
    classes, matieres = _classes(), _matieres()
    db = ClasseMatiereDB()
    db.add(ClasseMatiere(1, 10), classes, matieres)
    db.add(ClasseMatiere(2, 20), classes, matieres)
    classes.remove(1)
    csv_io.export_classe_matieres(path, db, classes, matieres)
    assert path.read_text(encoding="utf-8") == "1,10,L1,LICENSE,Maths,3\n"


def test_classe_matieres_round_trip(tmp_path):
    path = tmp_path / "asso.csv"
    classes, matieres = _classes(), _matieres()
    original = ClasseMatiereDB()
    original.add(ClasseMatiere(1, 10), classes, matieres)
    original.add(ClasseMatiere(2, 20), classes, matieres)
    csv_io.export_classe_matieres(path, original, classes, matieres)
    loaded = ClasseMatiereDB()
    loaded.add(ClasseMatiere(1, 20), classes, matieres)
    csv_io.load_classe_matieres(path, loaded)
    assert list(loaded) == list(original)


def test_load_classe_matieres_skips_header(tmp_path):
    path = tmp_path / "asso.csv"
    path.write_text("code_classe,reference_matiere\n3,30\n", encoding="utf-8")
    db = ClasseMatiereDB()
    csv_io.load_classe_matieres(path, db)
    assert list(db) == [ClasseMatiere(3, 30)]