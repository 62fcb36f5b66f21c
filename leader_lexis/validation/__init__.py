from .errors import ValidationIssue, ValidationError

__all__ = ["ValidationIssue", "ValidationError"]
