class PreventDeletionError(Exception):
    """Raised from the pre_delete signal when a record may not be deleted.

    Args:
        message: Human-readable reason, shown to whoever requested the deletion.
        code: Optional numeric code.
        previous: Optional exception that led to the refusal, chained as the cause.
    """

    def __init__(self, message="", code=0, previous=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.__cause__ = previous
