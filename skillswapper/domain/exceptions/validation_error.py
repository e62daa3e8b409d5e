"""
Validation-related domain exceptions.
"""


class ValidationError(Exception):
    """Base exception for validation errors."""

    pass


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing")


class InvalidSkillError(ValidationError):
    """Raised when a skill entry cannot be accepted."""

    def __init__(self, skill_name: str, reason: str):
        self.skill_name = skill_name
        self.reason = reason
        super().__init__(f"Invalid skill '{skill_name}': {reason}")


class InvalidLevelError(ValidationError):
    """Raised when a proficiency or urgency level is not recognised."""

    def __init__(self, kind: str, value: str, allowed: list):
        self.kind = kind
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid {kind} level '{value}', expected one of: {', '.join(allowed)}"
        )


class WeakPasswordError(ValidationError):
    """Raised when a password does not meet strength requirements."""

    pass
