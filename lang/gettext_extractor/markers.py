import logging

from .literal import resolve_literal


log = logging.getLogger(__name__)


def extract_singular(call):
    """Return (text, "") for a singular marker call, or None."""
    if len(call.args) < 1:
        return None
    text = resolve_literal(call.args[0])
    if text is None:
        return None
    return text, ""


def extract_plural(call):
    """Return (text, text_plural) for a plural marker call, or None."""
    if len(call.args) < 2:
        return None
    text = resolve_literal(call.args[0])
    text_plural = resolve_literal(call.args[1])
    if text is None or text_plural is None:
        return None
    return text, text_plural


def build_markers(options):
    """Map every configured marker name to its extraction function."""
    markers = dict()
    for name in options.keywords:
        markers[name] = extract_singular
    for name in options.keywords_plural:
        markers[name] = extract_plural
    return markers


def match_marker(call, markers):
    """
    Classify a call against the marker table.
    Returns (text, text_plural) for an extractable marker call, else None.
    """
    if call.name is None or call.name not in markers:
        return None
    result = markers[call.name](call)
    if result is None:
        log.debug("line %d: skipping %s() without a literal argument",
                  call.line, call.name)
    return result
