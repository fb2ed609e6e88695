from sblex.naive_trie import NaiveTrie, NaiveTrieBuilder


def walk(node, word):
    for char in word:
        node = next(child for child in node.children if child.label == char)
    return node


def test_building_naive_trie():
    root = NaiveTrie.make_root()
    root.insert("ösja", '{"head":"ösja","pos":"vb"}')
    root.insert("örliga", '{"head":"örliga","pos":"vb"}')
    assert root.num_children() == 1


def test_children_are_sorted():
    root = NaiveTrie.make_root()
    root.insert("ösja", "1")
    root.insert("örliga", "2")
    root.insert("öa", "3")
    assert [child.label for child in walk(root, "ö").children] == ["a", "r", "s"]


def test_terminal_node_carries_decoration():
    root = NaiveTrie.make_root()
    root.insert("ösja", '{"head":"ösja","pos":"vb"}')
    leaf = walk(root, "ösja")
    assert leaf.is_terminal
    assert leaf.decoration == '{"head":"ösja","pos":"vb"}'.encode("utf-8")
    middle = walk(root, "ösj")
    assert not middle.is_terminal
    assert middle.decoration is None


def test_existing_prefix_is_not_marked_terminal():
    root = NaiveTrie.make_root()
    root.insert("ab", "1")
    root.insert("a", "2")
    node = walk(root, "a")
    assert not node.is_terminal
    assert node.decoration is None


def test_make_node_encodes_text():
    node = NaiveTrie.make_node("x", True, "ö")
    assert node.decoration == "ö".encode("utf-8")
    assert node.label == "x"
    assert not node.is_root
    assert NaiveTrie.make_root().is_root


def test_builder_can_build():
    trie_builder = NaiveTrieBuilder()
    trie_builder.insert("ösja", '{"head":"ösja","pos":"vb"}')
    assert trie_builder.number_of_insertions() == 1
    assert trie_builder.root.num_children() == 1