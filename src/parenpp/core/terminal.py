"""
Parenpp TERMINAL WIDTH
----------------------
Works out how many columns the output may use.

Resolution order:
1. Explicit override (the --width flag)
2. PARENPP_WIDTH environment variable
3. The controlling terminal (/dev/tty), so piping stdout does not matter
4. The terminal attached to stdout
5. DEFAULT_WIDTH
"""

import os
import sys
import logging
from typing import Mapping, Optional

from parenpp.core.engine import DEFAULT_WIDTH

logger = logging.getLogger("parenpp.core.terminal")

WIDTH_ENV_VAR = "PARENPP_WIDTH"


def terminal_columns() -> Optional[int]:
    """Column count of the controlling terminal, or None if there is none."""
    try:
        fd = os.open("/dev/tty", os.O_RDONLY)
    except OSError:
        fd = None

    if fd is not None:
        try:
            columns = os.get_terminal_size(fd).columns
            if columns:
                return columns
        except OSError as e:
            logger.debug(f"/dev/tty has no size: {e}")
        finally:
            os.close(fd)

    try:
        columns = os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, AttributeError, ValueError):
        # stdout may be a pipe, a closed file or a StringIO without fileno
        return None
    return columns or None


def width_from_env(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    environ = os.environ if environ is None else environ
    raw = environ.get(WIDTH_ENV_VAR)
    if raw is None:
        return None
    try:
        width = int(raw)
    except ValueError:
        width = 0
    if width <= 0:
        logger.warning(f"Ignoring {WIDTH_ENV_VAR}={raw!r}: expected a positive integer")
        return None
    return width


def resolve_width(override: Optional[int] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    if override is not None:
        logger.debug(f"Width {override} from command line")
        return override

    width = width_from_env(environ)
    if width is not None:
        logger.debug(f"Width {width} from {WIDTH_ENV_VAR}")
        return width

    width = terminal_columns()
    if width is not None:
        logger.debug(f"Width {width} from terminal")
        return width

    logger.debug(f"No terminal found, using {DEFAULT_WIDTH} columns")
    return DEFAULT_WIDTH
