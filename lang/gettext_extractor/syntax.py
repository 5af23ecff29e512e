from .errors import GoSyntaxError
from .lexer import IDENT, OPERATOR, RAW_STRING, STRING, tokenize
from .nodes import Call, Concat, Literal, Opaque


OPENERS = {"(": ")", "[": "]", "{": "}"}
CLOSERS = {")", "]", "}"}

# placeholder for a "+" between operands of an item
PLUS = object()


class SyntaxReader:
    '''
    Recursive-descent reader building a reduced Go syntax tree.

    Only the shapes needed for string extraction are modelled: calls
    with a dotted callee, string literals and their "+" chains. Every
    other construct becomes an Opaque node that still holds whatever
    calls and groups it contains, so nested calls are never lost.
    '''
    def __init__(self, tokens, origin):
        self.tokens = tokens
        self.origin = origin
        self.pos = 0

    def read_file(self):
        return Opaque(self._read_items(None))

    def _peek(self, offset=0):
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return None

    def _last_line(self):
        return self.tokens[-1].line if self.tokens else 1

    def _read_items(self, closer):
        """
        Read comma separated items up to `closer`, consuming it.
        At file level `closer` is None and the items run to end of input.
        """
        items = []
        while True:
            item = self._read_item()
            if item is not None:
                items.append(item)
            tok = self._peek()
            if tok is None:
                if closer is not None:
                    raise GoSyntaxError(self.origin, self._last_line(),
                                        f"missing closing {closer!r}")
                return items
            self.pos += 1
            if tok.text == ",":
                continue
            if tok.text != closer:
                raise GoSyntaxError(self.origin, tok.line,
                                    f"unexpected {tok.text!r}")
            return items

    def _at_boundary(self, tok):
        return tok.kind == OPERATOR and (tok.text == "," or
                                         tok.text in CLOSERS)

    def _read_item(self):
        elements = []
        children = []
        while True:
            tok = self._peek()
            if tok is None or self._at_boundary(tok):
                break
            if tok.kind in (STRING, RAW_STRING):
                literal = Literal(tok.text[1:-1], tok.kind == RAW_STRING,
                                  tok.line)
                elements.append(literal)
                children.append(literal)
                self.pos += 1
            elif tok.kind == IDENT:
                call = self._read_name()
                elements.append(None)
                if call is not None:
                    children.append(call)
            elif tok.kind == OPERATOR and tok.text in OPENERS:
                self.pos += 1
                children.append(Opaque(self._read_items(OPENERS[tok.text])))
                elements.append(None)
            elif tok.kind == OPERATOR and tok.text == "+":
                elements.append(PLUS)
                self.pos += 1
            else:
                elements.append(None)
                self.pos += 1

        if not elements:
            return None
        return concat_chain(elements) or Opaque(children)

    def _read_name(self):
        """
        Read an identifier chain "a.b.c". Returns a Call node when the
        chain is followed by "(", otherwise None.
        """
        first = self._peek()
        previous = self.tokens[self.pos - 1] if self.pos > 0 else None
        qualified = previous is None or previous.text != "."
        parts = [first.text]
        self.pos += 1
        while True:
            dot = self._peek()
            ident = self._peek(1)
            if dot is None or dot.text != "." or \
               ident is None or ident.kind != IDENT:
                break
            parts.append(ident.text)
            self.pos += 2

        paren = self._peek()
        if paren is None or paren.kind != OPERATOR or paren.text != "(":
            return None
        self.pos += 1
        args = self._read_items(")")
        name = ".".join(parts) if qualified else None
        after = (previous.end_line, previous.end_col) if previous else None
        return Call(name, args, first.line, first.col, after)


def concat_chain(elements):
    """
    Fold [lit, PLUS, lit, PLUS, lit] into a flat Concat node.
    Returns None if the elements are anything else.
    """
    if len(elements) % 2 == 0:
        return None
    for idx, element in enumerate(elements):
        if idx % 2:
            if element is not PLUS:
                return None
        elif not isinstance(element, Literal):
            return None
    if len(elements) == 1:
        return elements[0]
    return Concat(elements[::2])


def parse_source(source, origin="<source>"):
    """
    Parse Go source text. Returns (tree, comments).
    Raises GoSyntaxError when the text cannot be parsed.
    """
    tokens, comments = tokenize(source, origin)
    return SyntaxReader(tokens, origin).read_file(), comments
