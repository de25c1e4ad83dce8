"""Host platform identifier lookup."""

from __future__ import annotations

import sys
import sysconfig

from ..utils.config import get_config
from ..utils.constants import NATIVE_HOST_ALIASES


def host_identifier() -> str:
    """
    Return the raw host platform identifier for this process.

    Sources, first non-empty wins:
      1. ``platform.host_os`` from the configuration (``NAMEWISE_HOST_OS``
         overrides the file)
      2. the interpreter's build triple, e.g. ``x86_64-pc-linux-gnu``
      3. ``sys.platform``, with ``win32`` reported as ``mswin32``
    """
    configured = get_config().platform.host_os
    if configured:
        return configured

    host_type = sysconfig.get_config_var("HOST_GNU_TYPE")
    if host_type:
        return host_type

    return NATIVE_HOST_ALIASES.get(sys.platform, sys.platform)
