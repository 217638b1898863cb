"""
Resource URLs derived from a media file ID.
"""

from urllib.parse import quote


def download_url(root_url: str, media_id: str, filename: str = "") -> str:
    """Download URL for a media file, with the filename appended when given."""
    if filename:
        return f"{root_url}/download/{media_id}/{quote(filename, safe='')}"
    return f"{root_url}/download/{media_id}"


def thumbnail_url(root_url: str, media_id: str) -> str:
    """Thumbnail URL for a media file. Only resolves when the file has a thumbnail."""
    return f"{root_url}/thumbnail/{media_id}"
