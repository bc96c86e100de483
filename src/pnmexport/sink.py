from pathlib import Path
from typing import Union

from pnmexport.errors import FileCreationError, WriteError
from pnmexport.log import Log


class FileSink:
    """
    Write-only destination file for a single export.
    The file is created when the sink is entered and closed on every way out of the `with` block.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.file = None
        self.bytes_written = 0

    def __enter__(self) -> 'FileSink':
        try:
            self.file = open(self.path, 'wb')
        except OSError as e:
            Log.error(f'Cannot create {self.path}: {e}')
            raise FileCreationError(f'Cannot create {self.path}: {e}') from e

        Log.debug(f'Created {self.path}')
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.close()
            return

        try:
            self.close()
        except WriteError:
            # Already logged by close(), the error in flight is the one the caller gets
            pass

    def write_bytes(self, data):
        if self.file is None:
            raise WriteError(f'{self.path} is not open')

        try:
            self.file.write(data)
        except OSError as e:
            Log.error(f'Writing to {self.path} failed after {self.bytes_written} bytes: {e}')
            raise WriteError(f'Writing to {self.path} failed: {e}') from e

        self.bytes_written += memoryview(data).nbytes

    def write_text(self, text: str):
        self.write_bytes(text.encode('ascii'))

    def close(self):
        if self.file is None:
            return

        file, self.file = self.file, None
        try:
            file.close()
        except OSError as e:
            # Buffered data is flushed on close, so a full disk may only show up here
            Log.error(f'Closing {self.path} failed: {e}')
            raise WriteError(f'Closing {self.path} failed: {e}') from e

        Log.debug(f'Closed {self.path} ({self.bytes_written} bytes)')
