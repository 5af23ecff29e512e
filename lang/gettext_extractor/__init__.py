from .errors import ExtractionError, GoSyntaxError
from .message import Catalog, Occurrence
from .options import ExtractOptions
from .parse import parse_go_file, parse_go_source, process_files
from .pot_export import format_time, render_pot, write_to_pot

__all__ = [
    "Catalog",
    "ExtractOptions",
    "ExtractionError",
    "GoSyntaxError",
    "Occurrence",
    "format_time",
    "parse_go_file",
    "parse_go_source",
    "process_files",
    "render_pot",
    "write_to_pot",
]
