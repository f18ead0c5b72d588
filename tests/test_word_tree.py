from indexador.word_tree import WordTree


def build(words):
    index = WordTree()
    for line, word in words:
        index.insert(word, line)
    return index


def test_empty_render():
    assert WordTree().render() == "Arvore vazia\n"


def test_empty_find():
    assert WordTree().find("casa") is None


def test_iteration_is_ascending():
    index = build([(1, "banana"), (1, "apple"), (2, "cherry"), (3, "date")])
    assert [entry.word for entry in index] == ["apple", "banana", "cherry", "date"]


def test_len_counts_distinct_words():
    index = build([(1, "a"), (1, "b"), (2, "A"), (3, "b")])
    assert len(index) == 2


def test_find_is_case_insensitive_and_keeps_first_spelling():
    index = build([(1, "Casa"), (2, "casa")])
    entry = index.find("CASA")
    assert entry.word == "Casa"
    assert entry.count == 2
    assert entry.lines == [1, 2]


def test_repeated_word_on_same_line():
    index = build([(4, "ola"), (4, "ola"), (4, "ola")])
    entry = index.find("ola")
    assert entry.count == 3
    assert entry.lines == [4]


def test_find_missing_word():
    index = build([(1, "alfa"), (1, "gama")])
    assert index.find("beta") is None


def test_render_matches_entries():
    index = build([(1, "b"), (2, "a")])
    assert index.render() == "".join(entry.describe() for entry in index)
    assert index.render().startswith("Palavra: a\n")


def test_sorted_input_does_not_overflow():
    words = [f"w{chr(97 + i % 26)}{i:05d}" for i in range(5000)]
    words = sorted(words)
    index = build([(1, word) for word in words])
    assert len(index) == len(words)
    assert [entry.word for entry in index] == words


def test_iteration_sorted_invariant():
    words = ["Zeta", "alpha", "Mu", "beta", "omega", "Alpha"]
    index = build(list(enumerate(words, start=1)))
    keys = [entry.word.lower() for entry in index]
    assert keys == sorted(keys)