"""Image upload control: a drop target that doubles as a file picker label."""

from dataclasses import dataclass
from html import escape
from typing import Sequence, TypeVar


ACCEPTED_IMAGE_TYPES = "image/png, image/jpeg, image/webp"

UPLOAD_PROMPT = "Click or drag & drop to upload"

T = TypeVar("T")


@dataclass
class ImageUploader:
    """One upload slot on the page.

    Holds no state of its own: the current image is passed in at render
    time and selected files are reported by the page script to the upload
    endpoint for ``slot``.
    """
    id: str
    title: str
    slot: str
    accept: str = ACCEPTED_IMAGE_TYPES

    def render(self, image_url: str | None) -> str:
        """Render the drop target, showing ``image_url`` or the upload prompt."""
        if image_url:
            body = (
                f'<img src="{escape(image_url)}" alt="{escape(self.title)}" '
                'class="preview"/>'
            )
        else:
            body = (
                '<div class="prompt">'
                '<span class="icon">&#8679;</span>'
                f'<p>{UPLOAD_PROMPT}</p>'
                '</div>'
            )

        return (
            '<div class="uploader-wrap">'
            f'<h2>{escape(self.title)}</h2>'
            f'<label for="{escape(self.id)}" class="uploader drop-target" '
            f'data-slot="{escape(self.slot)}">'
            f'<input id="{escape(self.id)}" type="file" accept="{escape(self.accept)}" hidden/>'
            f'{body}'
            '</label>'
            '</div>'
        )


def select_first_file(files: Sequence[T] | None) -> T | None:
    """Return the first selected file; any others in a multi-file drop are ignored."""
    if not files:
        return None
    return files[0]
