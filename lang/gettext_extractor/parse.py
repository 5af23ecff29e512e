import logging

from .comments import CommentIndex
from .markers import build_markers, match_marker
from .message import Catalog
from .nodes import Call, walk
from .syntax import parse_source
from .write_text import write_text


log = logging.getLogger(__name__)


def parse_go_source(source, origin, options, catalog, markers=None):
    """
    Extract strings from Go source text into the catalog.
    Raises GoSyntaxError if the source cannot be parsed.
    """
    if markers is None:
        markers = build_markers(options)
    tree, comments = parse_source(source, origin)
    index = CommentIndex(comments)

    found = 0
    for node in walk(tree):
        if not isinstance(node, Call):
            continue
        result = match_marker(node, markers)
        if result is None:
            continue
        text, text_plural = result
        comment = index.find(node.line, node.col, options.comments_tag,
                             after=node.after)
        write_text(catalog, text, origin, node.line,
                   comment=comment, text_plural=text_plural)
        found += 1
    log.debug("%s: %d marker call(s)", origin, found)


def parse_go_file(file_path, options, catalog, markers=None):
    """Extract strings from the specified Go file."""
    with open(file_path, encoding="utf-8") as fp:
        source = fp.read()
    log.info("parsing %s", file_path)
    parse_go_source(source, file_path, options, catalog, markers)


def process_files(file_paths, options, catalog=None):
    """
    Extract strings from every file, in the given order.
    Any syntax or read error aborts the whole run.
    """
    if catalog is None:
        catalog = Catalog()
    markers = build_markers(options)
    for file_path in file_paths:
        parse_go_file(file_path, options, catalog, markers)
    return catalog
