"""Exception hierarchy for mapper SQL restoration."""


class RestoreError(Exception):
    """Base exception for mapper SQL restoration errors.

    Raised while assembling a statement tree or writing restored SQL to a
    sink. The user-facing message never quotes mapper text, tag names or
    sink details; those go to internal_details. wrapped holds the parser or
    sink exception that caused the failure, if any.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class SinkWriteError(RestoreError):
    """Raised when the output sink rejects a write."""


class UnsupportedDirectiveError(RestoreError):
    """Raised when tree assembly meets a tag with no node type."""


class MarkupError(RestoreError):
    """Raised when statement markup cannot be parsed."""


# Sanitized user-facing error message constants
ERR_MSG_SINK_WRITE_FAILED = "failed to write restored SQL"
ERR_MSG_UNSUPPORTED_DIRECTIVE = "unsupported mapper directive"
ERR_MSG_MALFORMED_MARKUP = "malformed mapper markup"
