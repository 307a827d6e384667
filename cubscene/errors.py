"""Error type shared by the scene parsers."""


class SceneError(Exception):
    """Raised when a scene description or its map is rejected."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message