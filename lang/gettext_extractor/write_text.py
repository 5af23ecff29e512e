import logging

from .message import Occurrence


log = logging.getLogger(__name__)


def write_text(catalog, text, origin, line, comment="", text_plural=""):
    """
    Record a text for translation.

    Parameters:
        catalog (Catalog): Where the occurrence is recorded
        text (str): The escaped msgid
        origin (str): Path of the Go source file
        line (int): Line of the marker call
        comment (str): Formatted "#. " translator comment lines
        text_plural (str): The escaped plural msgid, if any
    """
    if not text:
        log.debug("%s:%d: skipping empty msgid", origin, line)
        return

    format_tag = ""
    if "%" in text:
        format_tag = "c-format"

    log.debug("%s:%d: %r", origin, line, text)
    catalog.add(text, Occurrence(comment, origin, line,
                                 text_plural, format_tag))
