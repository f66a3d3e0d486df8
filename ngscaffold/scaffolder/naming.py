"""Identifier derivation from user-supplied component and field names.

Every generated file agrees on these three forms, so they are the only place
names are transformed:

- ``class_form("register")`` -> ``"Register"`` (class names)
- ``path_form("Register")`` -> ``"register"`` (route paths, selectors, directories)
- ``label_form("first name")`` -> ``"First Name"`` (labels and messages)
"""

from __future__ import annotations


def class_form(name: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    return name[:1].upper() + name[1:]


def path_form(name: str) -> str:
    """Lowercase the whole name."""
    return name.lower()


def label_form(name: str) -> str:
    """Title-case each space-separated word.

    Only the first character of a word is uppercased; the remainder is
    lowercased, so ``"eMAIL address"`` becomes ``"Email Address"``.
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split(" "))


def component_class_name(name: str) -> str:
    """Class identifier of the generated component, e.g. ``RegisterComponent``."""
    return f"{class_form(name)}Component"


def component_selector(name: str) -> str:
    return f"app-{path_form(name)}"
