"""
go.mod manifest parsing.

Only the module directive is needed: it declares the import path of the
module whose root directory holds the go.mod file.
"""

import re

from .errors import ManifestFormatError

MANIFEST_FILENAME = "go.mod"

# module go.opentelemetry.io/otel
# module "go.opentelemetry.io/otel"   (quoted form)
# module ( go.opentelemetry.io/otel ) (block form, rare but legal)
_MODULE_RE = re.compile(
    r'^\s*module(?=[\s("`])\s*(?:\(\s*)?(?:"([^"]+)"|`([^`]+)`|([^\s()"`]+))',
    re.MULTILINE,
)


def _strip_comments(text: str) -> str:
    return re.sub(r'//[^\n]*', '', text)


def module_path(data: bytes) -> str:
    """
    Return the module path declared in go.mod contents.

    Args:
        data: Raw bytes of a go.mod file

    Returns:
        The declared module import path

    Raises:
        ManifestFormatError: If there is no module directive
    """
    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise ManifestFormatError(f"go.mod is not valid UTF-8: {e}") from e

    match = _MODULE_RE.search(_strip_comments(text))
    if not match:
        raise ManifestFormatError("no module directive found")
    return next(g for g in match.groups() if g)
