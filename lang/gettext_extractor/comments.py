DEFAULT_TAG = "TRANSLATORS:"


def comment_lines(text):
    """
    Strip the comment delimiters from a raw "//" or "/* */" comment and
    return its non-empty lines, each stripped of surrounding whitespace.
    """
    if text.startswith("//"):
        body = text[2:]
    elif text.startswith("/*"):
        body = text[2:-2] if text.endswith("*/") else text[2:]
    else:
        body = text
    lines = [line.strip() for line in body.split("\n")]
    return [line for line in lines if line]


def format_blocks(blocks, tag=None):
    """
    Render consecutive comment blocks (lists of lines) as "#. " lines.

    With a tag, output starts at the first block whose first line begins
    with the tag, and the tag itself is dropped. Without a tag every
    block is kept. Returns "" when nothing is eligible.
    """
    blocks = [block for block in blocks if block]
    if tag:
        for idx, block in enumerate(blocks):
            if block[0].startswith(tag):
                blocks = blocks[idx:]
                break
        else:
            return ""
    lines = [line for block in blocks for line in block]
    if tag:
        first = lines[0][len(tag):].strip()
        lines = [first] + lines[1:] if first else lines[1:]
    return "".join(f"#. {line}\n" for line in lines)


def format_comment(text, tag=None):
    return format_blocks([comment_lines(text)], tag)


class CommentIndex:
    '''
    Comments of one file indexed by the line they end on, for finding the
    comment group right above a call.
    '''
    def __init__(self, comments):
        self.by_end_line = dict()
        for comment in comments:
            self.by_end_line.setdefault(comment.end_line, []).append(comment)

    def preceding(self, line, col, after=None):
        """
        Return the comments directly preceding a call at (line, col):
        those ending earlier on the same line, then every comment ending on
        the line right above the group, repeated upwards.

        `after` is the end (line, col) of the last token before the call.
        Comments ending before it are separated from the call by code and
        cut the group off.
        """
        group = [comment for comment in self.by_end_line.get(line, [])
                 if comment.end_col <= col]
        top = group[0].line if group else line
        while top - 1 in self.by_end_line:
            above = self.by_end_line[top - 1]
            group = above + group
            top = above[0].line
        if after is not None:
            while group and (group[0].end_line, group[0].end_col) <= after:
                group.pop(0)
        return group

    def find(self, line, col, tag=None, after=None):
        """Formatted translator comment for a call at (line, col), or ""."""
        group = self.preceding(line, col, after)
        return format_blocks([comment_lines(c.text) for c in group], tag)
