"""Exception hierarchy for pathcompose."""


class PathComposeError(Exception):
    """Base exception for all pathcompose errors."""

    pass


class EngineFailure(PathComposeError):
    """The path engine could not perform a degenerate boolean operation.

    Raised by engine adapters for the cases the engine itself cannot
    resolve (total overlap, total disjointness, numerically unstable
    inputs). Callers recover from it locally.
    """

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Path engine failed to {operation}: {reason}")


class MalformedInputError(PathComposeError):
    """Input that cannot be interpreted as outline data."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed input: {reason}")


class FontError(PathComposeError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")
