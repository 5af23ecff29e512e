from dataclasses import dataclass


@dataclass(frozen=True)
class Occurrence:
    comment: str
    origin: str
    line: int
    text_plural: str = ""
    format_tag: str = ""


class Catalog:
    '''
    Messages collected during one run, keyed by escaped msgid.
    Keys keep the order they were first seen in.
    '''
    def __init__(self):
        self.messages = dict()

    def add(self, text, occurrence):
        if text not in self.messages:
            self.messages[text] = list()
        self.messages[text].append(occurrence)

    def keys(self, sort=False):
        if sort:
            return sorted(self.messages)
        return list(self.messages)

    def __getitem__(self, text):
        return self.messages[text]

    def __contains__(self, text):
        return text in self.messages

    def __len__(self):
        return len(self.messages)
