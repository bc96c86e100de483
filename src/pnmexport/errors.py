class ExportError(Exception):
    """ Base class for everything that can make an export fail """


class DimensionError(ExportError, ValueError):
    pass


class ShapeMismatchError(ExportError, ValueError):
    def __init__(self, actual: int, expected: int):
        super().__init__(f'Image buffer is {actual} bytes, expected {expected}')
        self.actual = actual
        self.expected = expected


class AllocationError(ExportError, MemoryError):
    pass


class FileCreationError(ExportError, OSError):
    """ The destination file could not be created, nothing has been written """


class WriteError(ExportError, OSError):
    """ Writing to an already created file failed, the file is left incomplete on disk """
