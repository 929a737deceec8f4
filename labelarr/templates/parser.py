"""Template parser.

Scans a template once, left to right, and builds a flat list of nodes:

    Literal           plain text
    Placeholder       {{ name }}
    ConditionalBlock  {% if c %}...{% elif c %}...{% else %}...{% endif %}

Scanning uses str.find over the directive and placeholder markers, so
cost stays linear in template length whatever the input looks like.

Blocks are single level. An {% if %} inside a branch body is kept as body
text, and the first {% endif %} closes the open block. Anything that does
not form a valid block (unknown tags, stray elif/else/endif, an if with no
matching endif) is kept verbatim as literal text.
"""

from dataclasses import dataclass
from typing import NamedTuple

TAG_OPEN = "{%"
TAG_CLOSE = "%}"
VAR_OPEN = "{{"
VAR_CLOSE = "}}"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    name: str  # Whitespace-stripped variable name
    raw: str  # Original "{{ name }}" text, emitted when unresolved


@dataclass(frozen=True)
class Branch:
    condition: str | None  # None only for the else branch
    body: tuple[Literal | Placeholder, ...]

    @property
    def is_else(self) -> bool:
        return self.condition is None

    @property
    def raw_body(self) -> str:
        """Body text with placeholders still unresolved."""
        return "".join(node.text if isinstance(node, Literal) else node.raw for node in self.body)


@dataclass(frozen=True)
class ConditionalBlock:
    branches: tuple[Branch, ...]


Node = Literal | Placeholder | ConditionalBlock


class _Tag(NamedTuple):
    start: int  # Index of "{%"
    end: int  # Index just past "%}"
    keyword: str  # "if", "elif", "else" or "endif"
    condition: str | None


def _parse_tag(inner: str) -> tuple[str, str | None] | None:
    """Parse the text between {% and %} into (keyword, condition)."""
    stripped = inner.strip()
    if stripped in ("else", "endif"):
        return stripped, None

    parts = stripped.split(None, 1)
    if len(parts) != 2 or parts[0] not in ("if", "elif"):
        return None
    condition = parts[1].strip()
    # Conditions never contain directive delimiters
    if "%" in condition or "}" in condition:
        return None
    return parts[0], condition


def _scan_tags(template: str):
    """Yield every well-formed directive tag in order."""
    pos = 0
    while True:
        start = template.find(TAG_OPEN, pos)
        if start == -1:
            return
        close = template.find(TAG_CLOSE, start + 2)
        if close == -1:
            return
        # An earlier "{%" before the same "%}" would put "%" inside the tag
        start = template.rfind(TAG_OPEN, start, close)

        parsed = _parse_tag(template[start + 2 : close])
        if parsed is None:
            # A "{" right before "%}" can open the next tag
            pos = close - 1
            continue

        yield _Tag(start, close + 2, parsed[0], parsed[1])
        pos = close + 2


def parse_placeholders(text: str) -> list[Literal | Placeholder]:
    """Split text into Literal and Placeholder nodes."""
    nodes: list[Literal | Placeholder] = []
    literal_start = 0
    pos = 0
    while True:
        open_at = text.find(VAR_OPEN, pos)
        if open_at == -1:
            break
        close = text.find(VAR_CLOSE, open_at + 2)
        if close == -1:
            break
        # "{{{x}}}" -> literal "{", placeholder "{{x}}", literal "}"
        open_at = text.rfind(VAR_OPEN, open_at, close)

        name = text[open_at + 2 : close].strip()
        if name:
            if open_at > literal_start:
                nodes.append(Literal(text[literal_start:open_at]))
            nodes.append(Placeholder(name=name, raw=text[open_at : close + 2]))
            literal_start = close + 2
        pos = close + 2

    if literal_start < len(text):
        nodes.append(Literal(text[literal_start:]))
    return nodes


class _OpenBlock:
    """Branch boundaries collected while an if is open."""

    def __init__(self, tag: _Tag):
        self.start = tag.start
        # (condition, body start index)
        self.branches: list[tuple[str | None, int]] = [(tag.condition, tag.end)]
        self.ends: list[int] = []
        self.has_else = False

    def split(self, tag: _Tag) -> None:
        self.ends.append(tag.start)
        self.branches.append((tag.condition, tag.end))

    def close(self, template: str, end: int) -> ConditionalBlock:
        self.ends.append(end)
        branches = []
        for (condition, body_start), body_end in zip(self.branches, self.ends):
            body = template[body_start:body_end].strip()
            branches.append(Branch(condition=condition, body=tuple(parse_placeholders(body))))
        return ConditionalBlock(branches=tuple(branches))


def parse_template(template: str) -> list[Node]:
    """Parse a template into a flat list of nodes."""
    nodes: list[Node] = []
    pos = 0
    block: _OpenBlock | None = None

    for tag in _scan_tags(template):
        if block is None:
            # Stray elif/else/endif stay literal
            if tag.keyword == "if":
                block = _OpenBlock(tag)
            continue

        if tag.keyword == "elif":
            block.split(tag)
        elif tag.keyword == "else":
            # A second else is part of the first else's body
            if not block.has_else:
                block.has_else = True
                block.split(tag)
        elif tag.keyword == "endif":
            nodes.extend(parse_placeholders(template[pos : block.start]))
            nodes.append(block.close(template, tag.start))
            pos = tag.end
            block = None
        # A nested "if" stays as body text

    # Includes an unterminated if block, kept verbatim
    nodes.extend(parse_placeholders(template[pos:]))
    return nodes
