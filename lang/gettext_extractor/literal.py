from .nodes import Concat, Literal


ESCAPES = {
    "\\": "\\\\",
    "\"": "\\\"",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def escape_raw(text):
    """
    Escape the content of a raw string literal so that it reads the same
    inside a double-quoted catalog string.
    """
    result = []
    # Go drops carriage returns from raw string literals
    for char in text.replace("\r", ""):
        if char in ESCAPES:
            result.append(ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7f:
            result.append(f"\\x{ord(char):02x}")
        else:
            result.append(char)
    return "".join(result)


def resolve_literal(node):
    """
    Resolve a string literal or a "+" chain of string literals to its
    escaped text. Returns None for anything else.
    """
    if isinstance(node, Literal):
        return escape_raw(node.text) if node.raw else node.text
    if isinstance(node, Concat):
        parts = []
        for operand in node.operands:
            text = resolve_literal(operand)
            if text is None:
                return None
            parts.append(text)
        return "".join(parts)
    return None
