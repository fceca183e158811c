from typing import Any


class ServiceError(Exception):
    error_code: int
    http_status: int
    emoji: str

    def __init__(
        self,
        message: str,
        error_code: int,
        http_status: int = 500,
        emoji: str = "⚠️",
    ):
        super().__init__(message)
        self.error_code = error_code
        self.http_status = http_status
        self.emoji = emoji

    def __str__(self) -> str:
        return self.to_log_string()

    @property
    def message(self) -> str:
        return super().__str__()

    def to_log_string(self) -> str:
        cause_str = f" # Caused by: {self.__cause__}" if self.__cause__ else ""
        return f"[{self.emoji} E{self.error_code}] {self.message}{cause_str}"

    def to_api_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": str(self),
            "emoji": self.emoji,
        }


class BadRequestError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "🚫"):
        super().__init__(message, error_code, http_status = 400, emoji = emoji)


class ValidationError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "✏️"):
        super().__init__(message, error_code, http_status = 422, emoji = emoji)


class AuthorizationError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "🔒"):
        super().__init__(message, error_code, http_status = 403, emoji = emoji)


class AuthenticationError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "🔑"):
        super().__init__(message, error_code, http_status = 401, emoji = emoji)


class InternalError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "⚠️"):
        super().__init__(message, error_code, http_status = 500, emoji = emoji)


class ConfigurationError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "⚙️"):
        super().__init__(message, error_code, http_status = 500, emoji = emoji)
