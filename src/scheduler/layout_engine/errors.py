"""Error hierarchy for the layers around the layout engine.

The layout pipeline itself never raises on malformed OCR input; it degrades
to fewer or zero class blocks. These exceptions belong to the file handling,
OCR and orchestration code that wraps it.
"""


class LayoutEngineError(Exception):
    """Base exception for all schedule processing errors."""

    pass


class ValidationError(LayoutEngineError):
    """Input file is missing or of an unsupported format."""

    pass


class OCRError(LayoutEngineError):
    """The OCR engine failed to read the image."""

    pass


class EmptyScheduleError(LayoutEngineError):
    """Processing finished but produced nothing usable.

    Raised when OCR finds no text at all, or when no class block could be
    reconstructed from the text it found.
    """

    pass
