import logging
from datetime import datetime, timezone

from .literal import escape_raw


log = logging.getLogger(__name__)

HEADER_COMMENT = """\
# SOME DESCRIPTIVE TITLE.
# Copyright (C) YEAR THE PACKAGE'S COPYRIGHT HOLDER
# This file is distributed under the same license as the PACKAGE package.
# FIRST AUTHOR <EMAIL@ADDRESS>, YEAR.
#
#, fuzzy
"""


def format_time():
    tzinfo = datetime.now(timezone.utc).astimezone().tzinfo
    return datetime.now(tzinfo).strftime('%Y-%m-%d %H:%M%z')


def split_newlines(text):
    """
    Split escaped text after every "\\n" escape sequence. An escaped
    backslash followed by "n" is not a split point. A trailing empty
    segment is dropped.
    """
    segments = []
    start = 0
    idx = 0
    while idx < len(text):
        if text[idx] != "\\":
            idx += 1
            continue
        if text[idx + 1:idx + 2] == "n":
            segments.append(text[start:idx + 2])
            start = idx + 2
        idx += 2
    if start < len(text) or not segments:
        segments.append(text[start:])
    return segments


def format_field(prefix, text):
    """
    Render `prefix "text"`, continuing every line of a multi-line text
    on its own line aligned under the opening quote.
    """
    indent = " " * len(prefix)
    lines = []
    for idx, segment in enumerate(split_newlines(text)):
        lines.append(f"{prefix if idx == 0 else indent}\"{segment}\"\n")
    return "".join(lines)


def render_header(options, timestamp):
    metadata = [
        ("Project-Id-Version", options.package_name),
        ("Report-Msgid-Bugs-To", options.msgid_bugs_address),
        ("POT-Creation-Date", timestamp),
        ("PO-Revision-Date", "YEAR-MO-DA HO:MI+ZONE"),
        ("Last-Translator", "FULL NAME <EMAIL@ADDRESS>"),
        ("Language-Team", "LANGUAGE <LL@li.org>"),
        ("Language", ""),
        ("MIME-Version", "1.0"),
        ("Content-Type", "text/plain; charset=CHARSET"),
        ("Content-Transfer-Encoding", "8bit"),
    ]
    text = "".join(f"{key}: {escape_raw(value)}\\n" for key, value in metadata)
    return HEADER_COMMENT + format_field("msgid   ", "") + \
        format_field("msgstr  ", text)


def process_comments(occurrences):
    # remove duplicate comments while preserving order
    result = []
    seen = set()
    for occurrence in occurrences:
        comment = occurrence.comment
        if not comment or comment in seen:
            continue
        seen.add(comment)
        result.append(comment if comment.endswith("\n") else comment + "\n")
    return result


def render_entry(text, occurrences, options):
    entry = process_comments(occurrences)

    # reference
    if not options.no_location:
        origin = " ".join(f"{o.origin}:{o.line}" for o in occurrences)
        entry.append(f"#: {origin}\n")

    # c-format
    format_tag = next((o.format_tag for o in occurrences if o.format_tag), "")
    if format_tag:
        entry.append(f"#, {format_tag}\n")

    # text
    entry.append(format_field("msgid   ", text))
    text_plural = next((o.text_plural for o in occurrences
                        if o.text_plural), "")
    if text_plural:
        entry.append(format_field("msgid_plural   ", text_plural))
        entry.append("msgstr[0]  \"\"\n")
        entry.append("msgstr[1]  \"\"\n")
    else:
        entry.append("msgstr  \"\"\n")

    return "".join(entry)


def render_pot(catalog, options, timestamp=format_time):
    """
    Render the whole catalog as .pot text.

    `timestamp` is either the POT-Creation-Date string or a callable
    returning it.
    """
    if callable(timestamp):
        timestamp = timestamp()
    result = [render_header(options, timestamp), "\n"]
    for text in catalog.keys(sort=options.sort_output):
        result.append(render_entry(text, catalog[text], options))
        result.append("\n")
    return "".join(result)


def write_to_pot(fp, catalog, options, timestamp=format_time):
    fp.write(render_pot(catalog, options, timestamp))
    log.debug("rendered %d message(s)", len(catalog))
