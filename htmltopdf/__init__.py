# Purpose: Render HTML strings to PDF files through a pluggable web engine.


from .converter import ConversionResult, convert, convert_many, convert_to_directory, pdf_path_for
from .errors import CleanupError, ConversionError, ConversionTimeoutError, RenderError, WriteError
from .geometry import A4, A4_MARGINS, Insets, InvalidPageConfiguration, PageConfiguration, a4_page_configuration

__all__ = [
    "A4", "A4_MARGINS", "Insets", "InvalidPageConfiguration", "PageConfiguration", "a4_page_configuration",
    "ConversionResult", "convert", "convert_many", "convert_to_directory", "pdf_path_for",
    "ConversionError", "WriteError", "RenderError", "CleanupError", "ConversionTimeoutError",
]
