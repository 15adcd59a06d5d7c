from __future__ import annotations

class PostError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

class PostNotFound(PostError, KeyError):
    status_code = 404

class PostValidationError(PostError, ValueError):
    status_code = 400
