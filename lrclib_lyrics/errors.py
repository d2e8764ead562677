class LyricsError(RuntimeError):
    pass


class ResourceNotFound(LyricsError):
    pass


class UnknownLyricVariant(ResourceNotFound):
    pass


class InvalidLyricId(LyricsError, ValueError):
    pass


class UpstreamDecodeError(LyricsError):
    pass
