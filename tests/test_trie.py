import pytest

from contestkit.trie import Alphabet, Trie


@pytest.fixture
def trie():
    t = Trie()
    for word in ("app", "apple", "bat", "bath"):
        t.insert(word)
    return t


def test_search_whole_words(trie):
    assert trie.search("apple")
    assert trie.search("app")
    assert not trie.search("ap")
    assert not trie.search("batman")


def test_prefixes(trie):
    assert trie.is_prefix("ap")
    assert trie.is_prefix("bath")
    assert trie.is_prefix("")
    assert not trie.is_prefix("c")
    assert not trie.is_prefix("apples")


def test_erase_prunes_unused_branch(trie):
    assert trie.erase("apple")
    assert not trie.search("apple")
    assert not trie.is_prefix("appl")
    assert trie.search("app")


def test_erase_missing_word_is_noop(trie):
    assert not trie.erase("ap")
    assert not trie.erase("zebra")
    assert trie.search("app")
    assert trie.search("apple")


def test_duplicate_insert_needs_two_erases():
    t = Trie()
    t.insert("cat")
    t.insert("cat")
    assert t.erase("cat")
    assert t.search("cat")
    assert t.erase("cat")
    assert not t.search("cat")
    assert not t.is_prefix("c")


def test_erase_then_reinsert(trie):
    trie.erase("bat")
    trie.insert("bat")
    assert trie.search("bat")
    assert trie.search("bath")


@pytest.mark.parametrize(
    "alphabet, word",
    [(Alphabet.UPPERCASE, "HELLO"), (Alphabet.DIGITS, "0429"), (Alphabet.LOWERCASE, "zz")],
)
def test_alphabets(alphabet, word):
    t = Trie(alphabet)
    t.insert(word)
    assert t.search(word)
    assert t.is_prefix(word[:2])


@pytest.mark.parametrize(
    "alphabet, word",
    [(Alphabet.LOWERCASE, "Abc"), (Alphabet.UPPERCASE, "abc"), (Alphabet.DIGITS, "1a")],
)
def test_characters_outside_alphabet_raise(alphabet, word):
    t = Trie(alphabet)
    with pytest.raises(ValueError):
        t.insert(word)
    with pytest.raises(ValueError):
        t.search(word)