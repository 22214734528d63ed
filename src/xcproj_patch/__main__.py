"""
`python -m xcproj_patch` entrypoint.

This is mainly for convenience; the installed console script `xcproj-patch`
calls the same `xcproj_patch.cli:main`.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
