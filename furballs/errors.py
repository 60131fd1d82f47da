from furballs.utils.custom_exception import CustomMessageException


class ValidationError(CustomMessageException):
    def __init__(self, fields: dict[str, str]) -> None:
        self.fields = fields
        super().__init__([f"[{field}] {message}" for field, message in fields.items()], 422)

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls({field: message})


class RemoteOperationError(CustomMessageException):
    def __init__(self, message: str) -> None:
        super().__init__(message, 502)


class FetchError(RemoteOperationError):
    ...


class ListError(RemoteOperationError):
    ...


class SaveError(RemoteOperationError):
    ...


class UploadError(RemoteOperationError):
    ...


class DeleteError(RemoteOperationError):
    def __init__(self, message: str, deleted: int = 0) -> None:
        super().__init__(message)
        self.deleted = deleted
