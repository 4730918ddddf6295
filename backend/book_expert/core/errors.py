from __future__ import annotations

class CorpusValidationError(ValueError):
    """Raised at load time when answer records break a corpus invariant."""

    def __init__(self, message: str, answer_id: str | None = None):
        self.answer_id = answer_id
        if answer_id:
            message = f"answer {answer_id!r}: {message}"
        super().__init__(message)
