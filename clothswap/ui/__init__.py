"""HTML rendering for the browser UI."""

from .page import render_page
from .uploader import ImageUploader, select_first_file

__all__ = ["ImageUploader", "render_page", "select_first_file"]
