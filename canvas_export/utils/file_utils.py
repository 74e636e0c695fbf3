"""
File helpers for export output

Exports are written next to their final name and moved into place only once
complete, so a failed save never leaves a truncated PNG or SVG behind.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

PARTIAL_SUFFIX = '.part'
MAX_NAME_ATTEMPTS = 1000


def partial_path_for(path: Path) -> Path:
    """Hidden sibling used while `path` is being written."""
    return path.with_name(f".{path.name}{PARTIAL_SUFFIX}")


@contextmanager
def atomic_write(path: Path) -> Iterator[Path]:
    """
    Yield a partial file path; move it onto `path` when the block succeeds.

    The partial file is deleted if the block raises (including
    KeyboardInterrupt), and the exception propagates.

    Example:
        >>> with atomic_write(svg_path) as tmp_path:
        ...     tmp_path.write_bytes(svg.encode('utf-8'))
    """
    partial = partial_path_for(path)
    try:
        yield partial
        if not partial.exists():
            raise OSError(f"Nothing was written for {path.name}")
        partial.replace(path)
    except BaseException:
        try:
            partial.unlink()
        except FileNotFoundError:
            pass
        except OSError as cleanup_error:
            logger.warning(f"Could not remove partial file {partial}: {cleanup_error}")
        raise


def ensure_parent_exists(path: Path) -> bool:
    """Create the folder that will hold `path`; False if that is impossible."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create folder {path.parent}: {e}")
        return False
    return True


def _candidate_paths(path: Path) -> Iterator[Path]:
    yield path
    for counter in range(2, MAX_NAME_ATTEMPTS + 2):
        yield path.with_name(f"{path.stem}_{counter}{path.suffix}")


def claim_unique_path(path: Path) -> Path:
    """
    Create an empty placeholder at `path`, or at the first free
    `<stem>_<n><suffix>` with n >= 2, and return it.

    The name is taken with an exclusive create, so two writers never end up
    with the same file. The caller replaces the placeholder with real content
    or removes it.

    Raises:
        ValueError: If no free name is found within MAX_NAME_ATTEMPTS
        OSError: If the folder is not writable
    """
    for candidate in _candidate_paths(path):
        try:
            with candidate.open('x'):
                pass
        except FileExistsError:
            continue
        return candidate
    raise ValueError(f"No free file name for {path.name} in {path.parent}")


__all__ = [
    'partial_path_for',
    'atomic_write',
    'ensure_parent_exists',
    'claim_unique_path',
]
