import re
from dataclasses import dataclass

from .errors import GoSyntaxError


# token kinds
IDENT = "ident"
STRING = "string"
RAW_STRING = "raw_string"
RUNE = "rune"
NUMBER = "number"
OPERATOR = "operator"


@dataclass
class Token:
    kind: str
    text: str
    line: int
    col: int
    end_line: int
    end_col: int


@dataclass
class Comment:
    text: str
    line: int
    end_line: int
    end_col: int


# Longest operators first so that "+=" and "++" never read as "+"
OPERATORS = [
    "<<=", ">>=", "&^=", "...",
    "&&", "||", "<-", "++", "--", "==", "!=", "<=", ">=", ":=",
    "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<", ">>", "&^",
    "+", "-", "*", "/", "%", "&", "|", "^", "<", ">", "=", "!", "~",
    "(", ")", "[", "]", "{", "}", ",", ";", ".", ":",
]

TOKEN_RE = re.compile(r"""
    (?P<space>[ \t\r\n\f\ufeff]+)
  | (?P<line_comment>//[^\n]*)
  | (?P<block_comment>/\*.*?\*/)
  | (?P<unclosed_comment>/\*)
  | (?P<string>"(?:[^"\\\n]|\\.)*")
  | (?P<unclosed_string>")
  | (?P<raw_string>`[^`]*`)
  | (?P<unclosed_raw>`)
  | (?P<rune>'(?:[^'\\\n]|\\[^\n]+?)')
  | (?P<number>\.?[0-9](?:[eEpP][+-]|[0-9a-zA-Z_.])*)
  | (?P<ident>[^\W\d]\w*)
  | (?P<operator>""" + "|".join(re.escape(op) for op in OPERATORS) + r""")
""", re.VERBOSE | re.DOTALL)

ERRORS = {
    "unclosed_comment": "comment not terminated",
    "unclosed_string": "string literal not terminated",
    "unclosed_raw": "raw string literal not terminated",
}


def tokenize(source, origin="<source>"):
    """
    Split Go source text into tokens and comments.

    Returns a tuple (tokens, comments). Positions are 1-based.
    Raises GoSyntaxError on text that is not valid Go at the token level.
    """
    tokens = []
    comments = []
    line = 1
    line_start = 0
    pos = 0
    while pos < len(source):
        m = TOKEN_RE.match(source, pos)
        if m is None:
            raise GoSyntaxError(origin, line,
                                f"unexpected character {source[pos]!r}")
        kind = m.lastgroup
        text = m.group()
        if kind in ERRORS:
            raise GoSyntaxError(origin, line, ERRORS[kind])

        col = pos - line_start + 1
        newlines = text.count("\n")
        end_line = line + newlines
        if newlines:
            end_line_start = m.start() + text.rindex("\n") + 1
        else:
            end_line_start = line_start

        if kind in ("line_comment", "block_comment"):
            comments.append(Comment(text, line, end_line,
                                    m.end() - end_line_start + 1))
        elif kind != "space":
            tokens.append(Token(kind, text, line, col, end_line,
                                m.end() - end_line_start + 1))

        line = end_line
        line_start = end_line_start
        pos = m.end()

    return tokens, comments
