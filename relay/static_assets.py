"""Static front-end assets: path resolution and content types."""

from pathlib import Path

from relay.models.errors import PathTraversal, StaticAssetNotFound

INDEX_DOCUMENT = "index.html"
DEFAULT_CONTENT_TYPE = "text/plain"

CONTENT_TYPES: dict[str, str] = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
}


def resolve_asset(public_dir: Path, path: str) -> Path:
    """Map a request path (without its leading slash) to a file under public_dir.

    Raises PathTraversal if the resolved path escapes public_dir and
    StaticAssetNotFound if it is not an existing file.
    """
    root = Path(public_dir).resolve()
    try:
        target = (root / (path or INDEX_DOCUMENT)).resolve()
    except (ValueError, OSError) as e:
        # e.g. an embedded NUL byte
        raise StaticAssetNotFound("Not Found") from e
    if not target.is_relative_to(root):
        raise PathTraversal("Forbidden")
    if not target.is_file():
        raise StaticAssetNotFound("Not Found")
    return target


def content_type_for(path: Path) -> str:
    return CONTENT_TYPES.get(path.suffix, DEFAULT_CONTENT_TYPE)
