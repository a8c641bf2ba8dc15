"""
AsciiMath spelling tables.

Maps the names and operator spellings users type to the glyphs printed
on the canvas, and lists the words the tokenizer treats as functions,
unary operators and binary operators.
"""

from types import MappingProxyType
from typing import Mapping, Optional


SYMBOLS = MappingProxyType({
    # Greek letters
    "alpha": "α",
    "beta": "β",
    "chi": "χ",
    "delta": "δ",
    "Delta": "Δ",
    "epsi": "ε",
    "varepsilon": "ɛ",
    "eta": "η",
    "gamma": "γ",
    "Gamma": "Γ",
    "iota": "ι",
    "kappa": "κ",
    "lambda": "λ",
    "Lambda": "Λ",
    "lamda": "λ",
    "Lamda": "Λ",
    "mu": "μ",
    "nu": "ν",
    "omega": "ω",
    "Omega": "Ω",
    "phi": "ϕ",
    "varphi": "φ",
    "Phi": "Φ",
    "pi": "π",
    "Pi": "Π",
    "psi": "ψ",
    "Psi": "Ψ",
    "rho": "ρ",
    "sigma": "σ",
    "Sigma": "Σ",
    "tau": "τ",
    "theta": "θ",
    "vartheta": "ϑ",
    "Theta": "Θ",
    "upsilon": "υ",
    "xi": "ξ",
    "Xi": "Ξ",
    "zeta": "ζ",
    # Binary operation symbols
    "*": "⋅",
    "**": "∗",
    "***": "⋆",
    "//": "/",
    "\\\\": "\\",
    "setminus": "\\",
    "xx": "×",
    "|><": "⋉",
    "><|": "⋊",
    "|><|": "⋈",
    "-:": "÷",
    "divide": "÷",
    "@": "∘",
    "o+": "⊕",
    "ox": "⊗",
    "o.": "⊙",
    "sum": "∑",
    "prod": "∏",
    "^^": "∧",
    "^^^": "⋀",
    "vv": "∨",
    "vvv": "⋁",
    "nn": "∩",
    "nnn": "⋂",
    "uu": "∪",
    "uuu": "⋃",
    # Binary relation symbols
    "!=": "≠",
    ":=": ":=",
    "lt": "<",
    "<=": "≤",
    "lt=": "≤",
    "gt": ">",
    "mlt": "≪",
    ">=": "≥",
    "gt=": "≥",
    "mgt": "≫",
    "-<": "≺",
    "-lt": "≺",
    ">-": "≻",
    "-<=": "⪯",
    ">-=": "⪰",
    "in": "∈",
    "!in": "∉",
    "sub": "⊂",
    "sup": "⊃",
    "sube": "⊆",
    "supe": "⊇",
    "-=": "≡",
    "~=": "≅",
    "~~": "≈",
    "~": "∼",
    "prop": "∝",
    # Logical symbols
    "and": "and",
    "or": "or",
    "not": "¬",
    "=>": "⇒",
    "if": "if",
    "<=>": "⇔",
    "AA": "∀",
    "EE": "∃",
    "_|_": "⊥",
    "TT": "⊤",
    "|--": "⊢",
    "|==": "⊨",
    # Grouping brackets, shown as-is when left unmatched
    "(": "(",
    ")": ")",
    "[": "[",
    "]": "]",
    "{": "{",
    "}": "}",
    "|": "|",
    ":|:": "|",
    "|:": "|",
    ":|": "|",
    "(:": "〈",
    ":)": "〉",
    "<<": "〈",
    ">>": "〉",
    "{:": "{:",
    ":}": ":}",
    # Arrows
    "uarr": "↑",
    "darr": "↓",
    "rarr": "→",
    "->": "→",
    ">->": "↣",
    "->>": "↠",
    ">->>": "⤖",
    "|->": "↦",
    "larr": "←",
    "harr": "↔",
    "rArr": "⇒",
    "lArr": "⇐",
    "hArr": "⇔",
    # Miscellaneous symbols
    "int": "∫",
    "oint": "∮",
    "del": "∂",
    "grad": "∇",
    "+-": "±",
    "-+": "∓",
    "O/": "∅",
    "oo": "∞",
    "aleph": "ℵ",
    "...": "...",
    ":.": "∴",
    ":'": "∵",
    "/_": "∠",
    "/_\\": "△",
    "'": "′",
    "\\ ": " ",
    "frown": "⌢",
    "quad": "  ",
    "qquad": "    ",
    "cdots": "⋯",
    "vdots": "⋮",
    "ddots": "⋱",
    "diamond": "⋄",
    "square": "□",
    "|__": "⌊",
    "__|": "⌋",
    "|~": "⌈",
    "~|": "⌉",
    "CC": "ℂ",
    "NN": "ℕ",
    "QQ": "ℚ",
    "RR": "ℝ",
    "ZZ": "ℤ",
})

FUNCTIONS = frozenset({
    "sin", "cos", "tan", "sec", "csc", "cot",
    "arcsin", "arccos", "arctan",
    "sinh", "cosh", "tanh", "sech", "csch", "coth",
    "exp", "log", "ln", "det", "dim", "mod",
    "gcd", "lcm", "lub", "glb", "min", "max",
})

# Only sqrt and abs have a text layout; the rest are recognised so that
# they fail loudly instead of being printed as plain words
UNARY_OPERATORS = frozenset({
    "sqrt", "abs",
    "hat", "bar", "ul", "vec", "tilde", "dot", "ddot",
    "overline", "underline", "ubrace", "obrace", "cancel",
    "bb", "bbb", "cc", "tt", "fr", "sf",
})

BINARY_OPERATORS = frozenset({
    "frac", "root", "stackrel", "overset", "underset", "color",
})

LEFT_BRACKETS = MappingProxyType({
    "(": "round",
    "[": "square",
    "{": "curly",
    "(:": "angled",
    "<<": "angled",
    "{:": "none",
})

RIGHT_BRACKETS = MappingProxyType({
    ")": "round",
    "]": "square",
    "}": "curly",
    ":)": "angled",
    ">>": "angled",
    ":}": "none",
})

VERTICAL_BAR = "|"


def get_symbol(name: str, table: Optional[Mapping[str, str]] = None) -> str:
    """Glyph for a symbol spelling; unknown spellings are returned unchanged."""
    if table is None:
        table = SYMBOLS
    return table.get(name, name)


def list_symbols() -> list:
    """List all symbol spellings, sorted."""
    return sorted(SYMBOLS)
