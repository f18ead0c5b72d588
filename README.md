# indexador

Builds a word index of a text file and answers searches for words. Each
answer shows how many times a word occurs and which lines it occurs on.

The index is held in one of two structures:

- `lista`: an ordered list. Iterating it gives words in descending
  alphabetical order.
- `arvore`: an unbalanced binary search tree. Iterating it gives words in
  ascending alphabetical order.

Words are compared without regard to case. The separators are
` ,.;:-/'"`. The text between two separators is cut at its first
character that is not an ASCII letter, and text left empty is skipped.
For example, `abc1def` indexes as `abc`. Each line is indexed once per
word, but every occurrence adds to the count. The file is read as
UTF-8. A line longer than 999 characters is split into several lines.

## Installation

```
pip install .
```

## Usage

To list the lines and words of a file as they are read:

```
indexador texto.txt
```

To build an index and search it interactively:

```
indexador texto.txt lista
indexador texto.txt arvore
```

Once the index is built, the program reports the index type, the file,
the number of lines and the CPU time taken. It then shows a `> ` prompt
and accepts these commands:

- `busca <palavra>` prints the number of occurrences of the word, then
  each line it appears on in the form `00012: text of the line`. The word
  must start with an ASCII letter and ends at the first space or at the
  end of the input line. The command also reports the search time.
- `fim`, or the end of input, exits.

Any other input prints `Opcao invalida!`.

If the index type is neither `lista` nor `arvore`, no index is built. The
prompt still runs, but searches print only their time. Calling the
command with no arguments or more than two exits with status 1.

## Library use

```python
from indexador.cli import read_lines, build_index, parse_search

lines = read_lines("texto.txt")
index = build_index(lines, "arvore")   # or "lista"; any other kind raises ValueError
entry = index.find("palavra")
if entry is not None:
    print(entry.count, entry.lines)
    print(entry.describe(), end="")
    print(entry.format_lines(lines), end="")

parse_search("busca palavra\n")        # "palavra"
```

The module `indexador.word_list` provides `WordList`, and the module
`indexador.word_tree` provides `WordTree`. Both have:

- `insert(word, line)`
- `find(word)`, which returns an `indexador.entry.WordEntry` or `None`
- `len()` and iteration over their entries
- `render()`, which returns a full listing, or `Lista vazia` / `Arvore vazia`
  when the index is empty

Two more helpers are available:

- `indexador.tokenize.split_words(line)` splits a line into words.
- `indexador.tokenize.split_fields(line, delimiters)` splits at every
  delimiter and keeps empty fields.

`indexador.accents.remove_accents(text)` replaces lower-case accented
Portuguese letters (`á à â ã é è ê í ì î ó ò ô õ ú ù û ç`) with plain
ones. The indexer itself does not apply it.

## Tests

```
pip install .[test]
pytest
```