"""Custom exceptions for the uploader service."""


class UploaderException(Exception):
    """Base exception for the uploader service."""
    pass


class UnreadableFileError(UploaderException):
    """Exception raised when the selected file cannot be read or encoded."""

    def __init__(self, message: str = "Unreadable file"):
        super().__init__(message)


class UploadRejectedError(UploaderException):
    """Exception raised when the signed URL request is not accepted.

    The status code and response body are deliberately not part of the
    message; callers only ever see the fixed text.
    """

    def __init__(self):
        super().__init__("The upload could not be completed")


class MalformedResponseError(UploaderException):
    """Exception raised when the signed URL response cannot be parsed."""

    def __init__(self):
        super().__init__("The upload service returned an invalid response")


class TransferFailedError(UploaderException):
    """Exception raised when the binary PUT to the signed URL fails."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Upload failed with status {status_code}")
