class MdslidesError(Exception):
    pass


class SourceReadError(MdslidesError):
    pass


class OutputWriteError(MdslidesError):
    pass
