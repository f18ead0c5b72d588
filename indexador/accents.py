"""Replacement of accented Portuguese letters by their plain forms."""

_ACCENTED = "áàâãéèêíìîóòôõúùûç"
_PLAIN = "aaaaeeeiiioooouuuc"

_TABLE = str.maketrans(_ACCENTED, _PLAIN)


def remove_accents(text):
    """Return ``text`` with lower-case accented letters replaced by plain ones."""
    return text.translate(_TABLE)