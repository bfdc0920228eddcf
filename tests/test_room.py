"""
Tests for the room tree.
"""

import pytest
from mansion.core import Room, create_room, destroy_tree, iter_rooms, build_tree
from mansion.core.exceptions import MapDefinitionError


def test_create_room_with_clue():
    """Test creating a room that holds a clue."""
    room = create_room("Cozinha", "Chave perdida")
    assert room.name == "Cozinha"
    assert room.clue == "Chave perdida"
    assert room.has_clue
    assert not room.has_left
    assert not room.has_right


def test_create_room_empty_clue_means_no_clue():
    """Test that an empty clue is stored as no clue."""
    assert create_room("Corredor", "").clue is None
    assert create_room("Corredor").clue is None
    assert not create_room("Corredor", "").has_clue


def test_create_room_requires_name():
    """Test that a room cannot be nameless."""
    with pytest.raises(ValueError):
        create_room("")


def test_seeded_mansion_layout(mansion_root):
    """Test the shape of the built-in mansion."""
    assert mansion_root.name == "Hall de Entrada"
    assert mansion_root.clue == "Pegadas de lama"
    assert mansion_root.left.name == "Sala de Estar"
    assert mansion_root.left.clue == "Livro com página faltando"
    assert mansion_root.right.name == "Corredor"
    assert mansion_root.right.clue is None
    assert mansion_root.left.left.name == "Cozinha"
    assert mansion_root.right.right.clue == "Gaveta perdida"

    names = [room.name for room in iter_rooms(mansion_root)]
    assert names == [
        "Hall de Entrada", "Sala de Estar", "Cozinha", "Biblioteca",
        "Corredor", "Quarto", "Jardim",
    ]


def test_child_lookup(mansion_root):
    """Test getting children by direction."""
    assert mansion_root.child("left") is mansion_root.left
    assert mansion_root.child("right") is mansion_root.right
    assert mansion_root.left.left.child("left") is None
    with pytest.raises(ValueError):
        mansion_root.child("up")


def test_destroy_tree(mansion_root):
    """Test that destroying the root detaches the whole tree."""
    kitchen = mansion_root.left.left
    left = mansion_root.left
    destroy_tree(mansion_root)

    assert mansion_root.left is None
    assert mansion_root.right is None
    assert left.left is None
    assert kitchen.clue is None


def test_destroy_empty_tree():
    """Test that destroying an empty tree is a no-op."""
    destroy_tree(None)
    assert list(iter_rooms(None)) == []


def test_build_tree_rejects_bad_nodes():
    """Test map validation."""
    with pytest.raises(MapDefinitionError):
        build_tree({"clue": "no name"})
    with pytest.raises(MapDefinitionError):
        build_tree({"name": "Hall", "left": "Kitchen"})
    with pytest.raises(MapDefinitionError):
        build_tree({"name": "Hall", "clue": 42})


def test_build_tree_none_is_empty_map():
    """Test that no room data means an empty map."""
    assert build_tree(None) is None
