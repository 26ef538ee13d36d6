"""Pure text operations over a buffer string and a caret offset."""

from .formatting import delete_white_spaces, format_alternatives, replace_home_path
from .indent import (
    INDENT,
    SECTION_MARKERS,
    compute_line_break_insertion,
    insert_line_break,
)
from .insertion import duplicate_line, insert_at, insert_at_with_cursor, line_bounds
from .state import CursorState, TextEditResult
from .symbols import (
    SymbolPatternError,
    compile_type_pattern,
    extract_declared_identifiers,
    extract_label_names,
    with_bracketed,
)
from .validation import TextValidationError, ensure_cursor, ensure_offset
from .words import (
    accept_completion,
    extract_surrounding_word,
    insert_at_cursor_replacing_partial_word,
    last_word,
)

__all__ = [
    "CursorState",
    "TextEditResult",
    "TextValidationError",
    "SymbolPatternError",
    "ensure_cursor",
    "ensure_offset",
    "extract_surrounding_word",
    "insert_at_cursor_replacing_partial_word",
    "accept_completion",
    "last_word",
    "insert_at",
    "insert_at_with_cursor",
    "line_bounds",
    "duplicate_line",
    "compute_line_break_insertion",
    "insert_line_break",
    "SECTION_MARKERS",
    "INDENT",
    "compile_type_pattern",
    "extract_declared_identifiers",
    "extract_label_names",
    "with_bracketed",
    "delete_white_spaces",
    "replace_home_path",
    "format_alternatives",
]
