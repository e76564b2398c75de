# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Generated script lifecycle.

The generated script lives next to its document (`bench.py` becomes
`bench.pybm.py`) so relative imports and data files behave the same as in
the document itself. It is written atomically and removed again once the
run is over, unless the caller asked to keep it.
"""

from pathlib import Path
from types import TracebackType

from pybm.logging.logger import get_logger
from pybm.utils.filesystem import atomic_write, safe_delete

logger = get_logger(__name__)

SCRIPT_TAG = "pybm"


def script_path_for(document: Path) -> Path:
    """
    Where the generated script for `document` goes.

    The tag is inserted before the last extension: `bench.py` becomes
    `bench.pybm.py`, a document without an extension gets `.pybm` appended.
    """
    if document.suffix:
        return document.with_name(f"{document.stem}.{SCRIPT_TAG}{document.suffix}")
    return document.with_name(f"{document.name}.{SCRIPT_TAG}")


class GeneratedScript:
    """
    Context manager that writes a generated script on enter and deletes it on exit.

    Usage:
        with GeneratedScript(path, text, keep=args.keep) as script:
            run_script("python3", script, sink)
        # script is gone here unless keep=True

    Cleanup also happens when the block is left through an exception,
    including KeyboardInterrupt.
    """

    def __init__(self, path: Path, text: str, keep: bool = False) -> None:
        self._path = path
        self._text = text
        self._keep = keep

    @property
    def path(self) -> Path:
        return self._path

    def __enter__(self) -> Path:
        atomic_write(self._path, self._text)
        logger.debug("Generated script written", extra={"path": str(self._path)})
        return self._path

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._keep:
            logger.info("Generated script kept", extra={"path": str(self._path)})
            return
        try:
            removed = safe_delete(self._path)
        except OSError as err:
            logger.error(
                "Could not remove generated script",
                extra={"path": str(self._path), "error": str(err)},
            )
            return
        if removed:
            logger.debug("Generated script removed", extra={"path": str(self._path)})
