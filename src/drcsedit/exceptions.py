"""Exception hierarchy for drcsedit."""


class DrcsEditError(Exception):
    """Base exception for all drcsedit errors."""

    pass


class FontError(DrcsEditError):
    """Errors related to font loading or saving."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontSaveError(FontError):
    """Error saving a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")


class FontFormatError(FontError):
    """Unsupported or invalid font format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class PresetError(DrcsEditError):
    """Invalid combination of new-font options."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid font preset: {reason}")
