"""Gallery storage for named pose documents."""

from posesandbox.core.gallery.directory import DirectoryGallery, sanitize_entry_name

__all__ = [
    "DirectoryGallery",
    "sanitize_entry_name",
]
