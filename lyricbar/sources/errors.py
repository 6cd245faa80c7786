class LyricsError(RuntimeError):
    pass


class FileTooLargeError(LyricsError):
    """Fetched document exceeded the size ceiling; the whole fetch attempt is void."""


class TemplateError(LyricsError, ValueError):
    pass
