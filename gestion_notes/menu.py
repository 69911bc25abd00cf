"""Texts of the interactive menus."""

from __future__ import annotations


def main_menu() -> str:
    """Return the main menu."""
    return (
        "\n--- MENU PRINCIPAL ---\n"
        "1. Gestion des classes\n"
        "2. Gestion des matières\n"
        "3. Gestion des étudiants\n"
        "4. Gestion des notes\n"
        "0. Quitter\n"
        "Choix : "
    )


def classes_menu() -> str:
    """Return the class management menu."""
    return (
        "\n--- CLASSES ---\n"
        "1. Afficher\n2. Ajouter\n3. Supprimer\n4. Modifier\n5. Charger CSV\n"
        "0. Retour\nChoix : "
    )


def matieres_menu() -> str:
    """Return the subject management menu."""
    return (
        "\n--- MATIERES ---\n"
        "1. Afficher\n2. Ajouter\n3. Supprimer\n4. Modifier\n5. Association Classe\n"
        "6. Charger CSV\n0. Retour\nChoix : "
    )


def etudiants_menu() -> str:
    """Return the student management menu."""
    return (
        "\n--- ETUDIANTS ---\n"
        "1. Afficher\n2. Ajouter\n3. Supprimer\n4. Modifier\n5. Charger CSV\n"
        "0. Retour\nChoix : "
    )


def notes_menu() -> str:
    """Return the mark management menu."""
    return (
        "\n--- NOTES ---\n"
        "1. Afficher\n2. Ajouter une note (étudiant)\n3. Ajouter une note "
        "(matière)\n4. Ajouter une note (classe/matière)\n5. Supprimer\n6. "
        "Modifier\n7. Charger CSV\n0. Retour\nChoix : "
    )


def classe_matiere_menu() -> str:
    """Return the class-subject link menu."""
    return (
        "\n--- ASSOCIATION CLASSE-MATIERE ---\n"
        "1. Afficher les associations\n"
        "2. Associer une matiere a une classe\n"
        "3. Dissocier une matiere d'une classe\n"
        "0. Retour\n"
        "Votre choix : "
    )