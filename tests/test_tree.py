import pytest

from pdfweave.tree import Tree


def test_new_tree_keeps_object_number():
    tree = Tree(7)
    assert tree.object_number == 7
    assert tree.dictionary == {}


def test_set_kids():
    tree = Tree(1)
    tree.set_kids([3, 4])
    assert tree.dictionary["Kids"] == [3, 4]


def test_string_keys_make_name_tree():
    tree = Tree(1)
    tree.set_entries([("first_key", 10), ("second", 20)])
    assert tree.dictionary["Names"] == ["first_key", 10, "second", 20]
    assert "Nums" not in tree.dictionary


def test_integer_keys_make_number_tree():
    tree = Tree(1)
    tree.set_entries([(42, "value")])
    assert tree.dictionary["Nums"] == [42, "value"]
    assert "Names" not in tree.dictionary


def test_set_limits():
    tree = Tree(1)
    tree.set_limits("a", "z")
    assert tree.dictionary["Limits"] == ["a", "z"]
    other = Tree(2)
    other.set_limits(1, 99)
    assert other.dictionary["Limits"] == [1, 99]


def test_mixed_keys_rejected():
    tree = Tree(1)
    with pytest.raises(TypeError):
        tree.set_entries([("a", 1), (2, 3)])
    with pytest.raises(TypeError):
        tree.set_limits("a", 5)


def test_unsupported_key_type_rejected():
    with pytest.raises(TypeError):
        Tree(1).set_entries([(1.5, 0)])
    with pytest.raises(TypeError):
        Tree(1).set_entries([(True, 0)])


def test_empty_entries_rejected():
    with pytest.raises(ValueError):
        Tree(1).set_entries([])


def test_duplicate_entry_rejected():
    tree = Tree(1)
    tree.set_limits(1, 2)
    with pytest.raises(ValueError):
        tree.set_limits(3, 4)
    assert tree.dictionary["Limits"] == [1, 2]