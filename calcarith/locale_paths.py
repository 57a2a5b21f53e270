"""Location of the application root and its locales directory."""

from __future__ import annotations

import os
import re


def get_pwd_dir_path() -> str:
    """Return the part of the working directory up to and including APPROOTDIR.

    Raises ValueError when APPROOTDIR is empty or not part of the path.
    """
    root_path = os.getcwd()
    expected_suffix = os.environ.get("APPROOTDIR", "")

    match = re.match(rf"(.*?)({re.escape(expected_suffix)})", root_path, re.DOTALL)
    if match is None or not match.group(0) or not match.group(0).endswith(expected_suffix):
        raise ValueError(f"path is empty or does not contain {expected_suffix}")
    return match.group(0)


def get_locale_path() -> str:
    """Return the locales directory, LOCALESDIR under the application root."""
    root_path = get_pwd_dir_path()
    return os.path.normpath(os.path.join(root_path, os.environ.get("LOCALESDIR", "")))