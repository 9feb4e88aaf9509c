"""
Go-style semantic version helpers.

Go module versions carry a "v" prefix: v1.2.3, v2.0.0-rc.1, v0.9.0+build.5.
The shorthands v1 and v1.2 stand for v1.0.0 and v1.2.0.
"""

import re

_NUM = r'(0|[1-9]\d*)'
_PRERELEASE = (
    r'(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?'
)
_BUILD = r'(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?'

# Full form only, as written in versions.yaml
SEMVER_REGEX = rf'v{_NUM}\.{_NUM}\.{_NUM}{_PRERELEASE}{_BUILD}'

# Pre-release and build metadata are only allowed after a full MAJOR.MINOR.PATCH
_GO_SEMVER_RE = re.compile(
    rf'v{_NUM}(?:\.{_NUM}(?:\.{_NUM}{_PRERELEASE}{_BUILD})?)?'
)


def parse_core(version: str):
    """Return the numeric (major, minor, patch) core of a version, or None if malformed."""
    match = _GO_SEMVER_RE.fullmatch(version) if isinstance(version, str) else None
    if not match:
        return None
    major, minor, patch = match.group(1, 2, 3)
    return int(major), int(minor or 0), int(patch or 0)


def is_stable(version: str) -> bool:
    """
    Check whether a version is stable (major version >= 1).

    Pre-release and build metadata are ignored: v2.0.0-rc1 is stable.
    Malformed versions are treated as unstable rather than raising.
    """
    core = parse_core(version)
    return core is not None and core[0] >= 1
