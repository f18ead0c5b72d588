from indexador.accents import remove_accents


def test_worked_example():
    assert remove_accents("árvóres") == "arvores"


def test_every_accented_letter_is_mapped():
    assert remove_accents("áàâãéèêíìîóòôõúùûç") == "aaaaeeeiiioooouuuc"


def test_plain_text_is_unchanged():
    assert remove_accents("indice remissivo") == "indice remissivo"


def test_upper_case_accents_are_left_alone():
    assert remove_accents("ÁRVORE") == "ÁRVORE"


def test_length_is_preserved():
    text = "ação, coração e pão"
    assert len(remove_accents(text)) == len(text)


def test_result_has_no_mapped_letters():
    result = remove_accents("não é fácil à noite, você")
    assert result == "nao e facil a noite, voce"
    assert [ch for ch in result if ch in "áàâãéèêíìîóòôõúùûç"] == []


def test_idempotent():
    once = remove_accents("lição número três")
    assert remove_accents(once) == once