"""
Package information utility.

This module provides a command-line utility for displaying
information about the namewise installation and host platform.
"""

import sys
import platform
from typing import Dict, Any

import namewise
from namewise.utils.exceptions import UnknownPlatformError


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to namewise.

    Returns:
        Dictionary containing system information
    """
    return {
        'python_version': sys.version,
        'platform': platform.platform(),
        'architecture': platform.architecture(),
        'processor': platform.processor(),
    }


def get_namewise_info() -> Dict[str, Any]:
    """
    Get namewise-specific information.

    Returns:
        Dictionary containing namewise information
    """
    from namewise.host import host_identifier, current_platform

    info = {
        'version': namewise.__version__,
        'author': namewise.__author__,
        'host_identifier': host_identifier(),
    }

    try:
        info['platform_family'] = current_platform().value
    except UnknownPlatformError as e:
        info['platform_error'] = str(e)

    return info


def print_info() -> None:
    """Print formatted information about namewise and the system."""
    print("namewise")
    print("=" * 40)

    namewise_info = get_namewise_info()
    print(f"\nnamewise Version: {namewise_info['version']}")
    print(f"Author: {namewise_info['author']}")
    print(f"Host Identifier: {namewise_info['host_identifier']}")

    if 'platform_family' in namewise_info:
        print(f"Platform Family: {namewise_info['platform_family']}")

    if 'platform_error' in namewise_info:
        print(f"Platform Error: {namewise_info['platform_error']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Architecture: {system_info['architecture'][0]}")


def main() -> None:
    """Main entry point for the namewise-info command."""
    try:
        print_info()
    except Exception as e:
        print(f"Error getting system information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
