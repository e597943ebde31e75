class TermpicError(Exception):
    """Base class for errors reported to the user by the command line."""


class InputNotSpecifiedError(TermpicError):
    pass


class FileUnreadableError(TermpicError):
    pass


class ImageUndecodableError(TermpicError):
    pass


class OutputWriteError(TermpicError):
    pass
