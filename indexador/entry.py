"""An indexed word with its occurrence count and the lines it appears on."""

from dataclasses import dataclass, field


@dataclass
class WordEntry:
    """A word, how often it occurred and the distinct lines it occurred on."""

    word: str
    lines: list = field(default_factory=list)
    count: int = 1

    def add_occurrence(self, line):
        """Count one more occurrence and record ``line`` if it is new."""
        self.count += 1
        if line not in self.lines:
            self.lines.append(line)

    def describe(self):
        """Return the report block for this word."""
        parts = [
            f"Palavra: {self.word}\n",
            f"Quantidade de Ocorrencias: {self.count}\n",
        ]
        parts.extend(f"Posicao: {line}\n" for line in self.lines)
        parts.append("\n")
        return "".join(parts)

    def format_lines(self, lines):
        """Return the text of each recorded line, numbered, from ``lines``.

        Line numbers start at 1 and index into ``lines``.
        """
        return "".join(f"{number:05d}: {lines[number - 1]}\n" for number in self.lines)