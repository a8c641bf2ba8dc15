"""
Example files: markup paired with its expected rendering.

Format:

    # comment lines and blank lines separate examples
    ## fraction
    1/2
     1
    ───
     2

A "##" line names the example, the next line is the markup, and every
following line up to a blank line, a "#" line or the end of the file is
the expected output. Trailing spaces in expected lines are significant.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union


@dataclass(frozen=True)
class Example:
    name: str
    source: str
    expected: str


def parse_examples(text: str) -> List[Example]:
    """Split example-file text into Example records."""
    examples = []
    lines = text.split("\n")
    i = 0

    while i < len(lines):
        line = lines[i]
        i += 1
        if not line.startswith("##") or i >= len(lines):
            continue

        name = line[2:].strip()
        source = lines[i]
        i += 1

        expected = []
        while i < len(lines) and lines[i] and not lines[i].startswith("#"):
            expected.append(lines[i])
            i += 1
        examples.append(Example(name, source, "\n".join(expected)))

    return examples


def load_examples(path: Union[str, Path]) -> List[Example]:
    """Read and parse an example file (UTF-8)."""
    return parse_examples(Path(path).read_text(encoding="utf-8"))
