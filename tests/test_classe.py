import pytest

from gestion_notes.classe import Classe, ClasseDB, Niveau


@pytest.fixture
def db():
    table = ClasseDB()
    table.add(Classe(10, "L1 Info", Niveau.LICENSE))
    table.add(Classe(20, "M1 Data", Niveau.MASTER))
    table.add(Classe(30, "L2 Math", Niveau.LICENSE))
    return table


def test_add_keeps_order(db):
    assert [c.code for c in db] == [10, 20, 30]
    assert len(db) == 3


def test_getitem(db):
    assert db[1].nom == "M1 Data"


def test_getitem_out_of_range(db):
    assert db[2].code == 30
    with pytest.raises(IndexError):
        db[3]
    assert len(db) == 3
    assert [c.code for c in db] == [10, 20, 30]


def test_remove_shifts(db):
    removed = db.remove(0)
    assert removed.code == 10
    assert [c.code for c in db] == [20, 30]


def test_remove_invalid_index(db):
    with pytest.raises(IndexError):
        db.remove(5)
    with pytest.raises(IndexError):
        db.remove(-1)
    assert len(db) == 3


def test_update(db):
    db.update(2, Classe(31, "L3 Math", Niveau.MASTER))
    assert db[2] == Classe(31, "L3 Math", Niveau.MASTER)


def test_update_invalid(db):
    with pytest.raises(IndexError):
        db.update(3, Classe(1, "x", Niveau.LICENSE))


def test_find(db):
    assert db.find(20) == 1
    assert db.find(99) is None


def test_find_returns_first_match(db):
    db.add(Classe(20, "Autre", Niveau.LICENSE))
    assert db.find(20) == 1


def test_clear(db):
    db.clear()
    assert len(db) == 0
    assert list(db) == []


def test_render_empty():
    assert ClasseDB().render() == "Aucune classe a afficher.\n"


def test_render_table(db):
    lines = db.render().splitlines()
    assert lines[1] == "| Idx | Code  | Nom                  | Niveau   |"
    assert lines[0] == lines[2] == lines[-1]
    assert len(lines) == 3 + len(db) + 1
    for row in lines[3:-1]:
        assert len(row) == len(lines[0])
    assert "M1 Data" in lines[4]
    assert "MASTER" in lines[4]


def test_niveau_str():
    assert str(Niveau.LICENSE) == "LICENSE"
    assert Niveau("MASTER") is Niveau.MASTER