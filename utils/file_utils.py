import os
from typing import Optional


def resolve_existing_file(raw_path: str, base_dir: Optional[str] = None) -> Optional[str]:
    """
    Finds a file given as typed by the operator.

    The path resolved against `base_dir` (the current working directory by default)
    is tried first, then the path exactly as given. The first existing match wins.

    Returns:
        The matching path, or None if neither candidate is an existing file.
    """
    resolved = os.path.abspath(os.path.join(base_dir or os.getcwd(), raw_path))
    for candidate in (resolved, raw_path):
        if os.path.isfile(candidate):
            return candidate
    return None
