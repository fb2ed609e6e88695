import pytest

from sblex.char_trie import CharTrie, CharTrieBuilder


def test_can_build():
    trie_builder = CharTrieBuilder()
    trie_builder.insert("ösja", '{"head":"ösja","pos":"vb"}')
    assert trie_builder.number_of_insertions() == 1
    trie = trie_builder.build()

    assert trie.lookup("ösj") == '{"a":[],"c":"a"}'
    assert trie.lookup("ösja") == '{"a":[{"head":"ösja","pos":"vb"}],"c":""}'


def test_missing_word_is_empty_string():
    builder = CharTrieBuilder()
    builder.insert("ösja", "1")
    trie = builder.build()
    assert trie.lookup("ösx") == ""
    assert trie.lookup("ösjaa") == ""


def test_branches_keep_insertion_order():
    builder = CharTrieBuilder()
    builder.insert("ac", "1")
    builder.insert("ab", "2")
    trie = builder.build()
    assert trie.lookup("a") == '{"a":[],"c":"cb"}'
    assert trie.lookup("ab") == '{"a":[2],"c":""}'


def test_existing_path_is_not_decorated():
    builder = CharTrieBuilder()
    builder.insert("abc", "1")
    builder.insert("ab", "2")
    trie = builder.build()
    assert trie.lookup("ab") == '{"a":[],"c":"c"}'
    assert builder.number_of_insertions() == 2


def test_lookup_with_state():
    builder = CharTrieBuilder()
    builder.insert("ösja", "1")
    trie = builder.build()
    assert trie.lookup_with_state("sja", 1) == trie.lookup("ösja")
    assert trie.lookup_with_state("x", 99) == ""


def test_unknown_final_state_raises():
    trie = CharTrie({0: ({}, "{}")})
    with pytest.raises(KeyError):
        trie.lookup_with_state("", 5)