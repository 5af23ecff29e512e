from dataclasses import dataclass
from typing import Optional, Tuple

from .comments import DEFAULT_TAG


DEFAULT_KEYWORD = "gettext.Gettext"
DEFAULT_KEYWORD_PLURAL = "gettext.NGettext"


def split_keywords(value) -> Tuple[str, ...]:
    """Split a comma separated list of marker names."""
    if not value:
        return ()
    return tuple(name.strip() for name in value.split(",") if name.strip())


@dataclass(frozen=True)
class ExtractOptions:
    no_location: bool = False
    comments_tag: Optional[str] = DEFAULT_TAG
    keywords: Tuple[str, ...] = (DEFAULT_KEYWORD,)
    keywords_plural: Tuple[str, ...] = (DEFAULT_KEYWORD_PLURAL,)
    sort_output: bool = False
    package_name: str = ""
    msgid_bugs_address: str = "EMAIL"

    @classmethod
    def from_args(
        cls,
        keyword: str = DEFAULT_KEYWORD,
        keyword_plural: str = DEFAULT_KEYWORD_PLURAL,
        add_comments: bool = False,
        add_comments_tag: str = DEFAULT_TAG,
        **kwargs,
    ) -> "ExtractOptions":
        '''
        Build options from command line style values: comma separated
        keyword strings, and --add-comments disabling the tag filter
        '''
        return cls(
            keywords=split_keywords(keyword),
            keywords_plural=split_keywords(keyword_plural),
            comments_tag=None if add_comments else add_comments_tag,
            **kwargs,
        )
