"""Shared pytest fixtures for compound names tests."""

import pytest

from compound_names.files import Directory, File, RootNode
from compound_names.grammar import Name


def make_name(*components, delimiter="."):
    """Create a Name from raw components (helper shared across tests)."""
    return Name(list(components), delimiter)


@pytest.fixture
def name_factory():
    """Fixture providing the make_name helper function."""
    return make_name


@pytest.fixture
def root():
    return RootNode()


@pytest.fixture
def tree(root):
    """Small tree: /usr/bin/ls, /usr/lib, /home/riehle/.bashrc"""
    usr = Directory("usr", root)
    bin_dir = Directory("bin", usr)
    ls = File("ls", bin_dir)
    lib = Directory("lib", usr)
    home = Directory("home", root)
    user = Directory("riehle", home)
    bashrc = File(".bashrc", user)
    return {
        "root": root,
        "usr": usr,
        "bin": bin_dir,
        "ls": ls,
        "lib": lib,
        "home": home,
        "user": user,
        "bashrc": bashrc,
    }
