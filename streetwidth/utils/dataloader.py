"""Shared data loading utilities.

This module locates packaged data files (module-local ``data/`` directories or
an explicit override path) and loads YAML configuration from them.
"""

import os
from pathlib import Path
from typing import List, Optional, Tuple, Union


def find_data_file(
    module_file: str,
    filenames: List[str],
    override: Optional[Union[str, Path]] = None,
    env_var: Optional[str] = None,
) -> Optional[Path]:
    """Find data file by searching standard locations.

    Search priority:
    1. Explicit override path (if given)
    2. Path from environment variable ``env_var`` (if set)
    3. Module-local data: {module_dir}/data/

    Args:
        module_file: __file__ from the calling module
        filenames: Candidate filenames to search for (e.g., ['widthconfig.yaml'])
        override: Explicit file path that takes priority over everything else
        env_var: Name of an environment variable holding a file path

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From widths/widthtables.py (data is in widths/data/)
        >>> path = find_data_file(__file__, ['widthconfig.yaml'],
        ...                       env_var='STREETWIDTH_CONFIG')
    """
    # Priority 0: caller-supplied path
    if override is not None:
        p = Path(override)
        return p if p.exists() else None

    # Priority 1: environment override
    if env_var:
        env_path = os.environ.get(env_var)
        if env_path:
            p = Path(env_path)
            return p if p.exists() else None

    # Priority 2: module-local data (distributed with pip)
    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p

    return None


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def format_not_found_error(
    subject: str,
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        subject: What was being looked for (e.g., 'width configuration')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subject} found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "load_yaml_file",
    "format_not_found_error",
]
