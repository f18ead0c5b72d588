"""Command line front end: load a text file, index its words and answer searches."""

import sys
import time
from string import ascii_letters

from indexador.tokenize import split_words
from indexador.word_list import WordList
from indexador.word_tree import WordTree

LINE_BUFFER = 1000
"""Size of the line buffer; a stored line holds at most one character less."""

COMMAND_BUFFER = 64
"""Size of the command buffer; a command holds at most one character less."""

INDEX_TYPES = {"lista": WordList, "arvore": WordTree}

_SEARCH_PREFIX = "busca "
_QUIT_COMMAND = "fim\n"
_INVALID = "Opcao invalida!\n"


def _chunks(raw, size):
    """Yield ``raw`` in pieces of at most ``size`` characters."""
    start = 0
    while start < len(raw):
        yield raw[start:start + size]
        start += size


def read_lines(path):
    """Return the lines of the file at ``path`` without their line breaks.

    Physical lines longer than the line buffer are split into several lines,
    each holding at most ``LINE_BUFFER - 1`` characters.
    """
    lines = []
    with open(path, encoding="utf-8", errors="replace") as handle:
        for raw in handle:
            for chunk in _chunks(raw, LINE_BUFFER - 1):
                lines.append(chunk.removesuffix("\n"))
    return lines


def build_index(lines, kind):
    """Index every word of ``lines`` in a structure of type ``kind``.

    ``kind`` is ``"lista"`` or ``"arvore"``; line numbers start at 1.
    """
    try:
        factory = INDEX_TYPES[kind]
    except KeyError:
        raise ValueError(f"unknown index type: {kind!r}") from None
    index = factory()
    for number, line in enumerate(lines, start=1):
        for word in split_words(line):
            index.insert(word, number)
    return index


def parse_search(command):
    """Return the word asked for by a ``busca`` command, as read with its newline.

    The word runs from after ``"busca "`` up to the first space or the end of
    the command, and its final character (normally the newline) is dropped.
    Raises ValueError when the command is not a valid search.
    """
    if not command.startswith(_SEARCH_PREFIX):
        raise ValueError("command does not start with 'busca '")
    rest = command[len(_SEARCH_PREFIX):]
    if not rest or rest[0] not in ascii_letters:
        raise ValueError("search word must start with a letter")
    word = rest.split(" ", 1)[0]
    return word[:-1]


def _elapsed_ms(start):
    return (time.process_time() - start) * 1000.0


def _show_loading(path, out):
    out.write(">>>>> Carregando arquivo...\n")
    try:
        lines = read_lines(path)
    except OSError:
        lines = []
    for number, line in enumerate(lines, start=1):
        out.write(f'linha {number:03d}: "{line}"\n')
        for word in split_words(line):
            out.write(f"\t   '{word}'\n")
    out.write(">>>>> Arquivo carregado!\n")
    out.write(f"linhas: {len(lines)}")
    return 0


def _answer(index, lines, word, out):
    if index is None:
        return
    entry = index.find(word)
    if entry is None:
        out.write(f"Palavra '{word}' nao encontrada.\n")
        return
    out.write(
        f"Existe(m) {entry.count} ocorrencia(s) da palavra '{word}' "
        "na(s) seguinte(s) linha(s):\n"
    )
    out.write(entry.format_lines(lines))


def _serve(path, kind, stdin, out):
    start = time.process_time()
    try:
        lines = read_lines(path)
    except OSError as error:
        sys.stderr.write(f"{path}: {error.strerror or error}\n")
        return 1
    index = build_index(lines, kind) if kind in INDEX_TYPES else None
    elapsed = _elapsed_ms(start)

    out.write(f"Tipo de indice: '{kind}'\n")
    out.write(f"Arquivo texto: '{path}'\n")
    out.write(f"Numero de linhas no arquivo: {len(lines)}\n")
    out.write(f"Tempo para carregar o arquivo e construir o indice: {elapsed:05.0f} ms\n")

    while True:
        out.write("> ")
        out.flush()
        command = stdin.readline(COMMAND_BUFFER - 1)
        if not command or command == _QUIT_COMMAND:
            return 0
        try:
            word = parse_search(command)
        except ValueError:
            out.write(_INVALID)
            continue
        start = time.process_time()
        _answer(index, lines, word, out)
        out.write(f"Tempo de busca: {_elapsed_ms(start):05.0f} ms\n")


def main(argv=None):
    """Run the indexer.

    With one argument, show how the file is split into lines and words.
    With a file and an index type, build the index and answer searches
    read from standard input until ``fim`` or end of input.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 1:
        return _show_loading(args[0], sys.stdout)
    if len(args) == 2:
        return _serve(args[0], args[1], sys.stdin, sys.stdout)
    return 1


if __name__ == "__main__":
    sys.exit(main())