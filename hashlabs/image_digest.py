"""SHA-256 of decoded image pixels and how it reacts to a one-pixel change."""

from __future__ import annotations

import hashlib
import sys
from collections.abc import Sequence
from pathlib import Path

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

DEFAULT_IMAGE = "kkk.jpg"
DEFAULT_OUTPUT = "output.txt"


class ImageHashError(RuntimeError):
    """Raised when an image cannot be loaded."""


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


class ImageHash:
    """Holds a decoded colour image as BGR bytes and hashes its pixel data."""

    def __init__(self, image_path) -> None:
        self.image_path = Path(image_path)
        try:
            with Image.open(self.image_path) as loaded:
                upright = ImageOps.exif_transpose(loaded)
                rgb = np.asarray(upright.convert("RGB"), dtype=np.uint8)
        except (OSError, UnidentifiedImageError) as exc:
            raise ImageHashError("Could not open or find the image") from exc
        if rgb.size == 0:
            raise ImageHashError("Could not open or find the image")
        self._image = np.ascontiguousarray(rgb[:, :, ::-1])

    @property
    def image(self) -> np.ndarray:
        """The pixels as a height x width x 3 array in BGR order."""
        return self._image

    def calculate_sha256(self) -> str:
        """Return the lowercase hex SHA-256 of the raw pixel bytes."""
        return hashlib.sha256(self._image.tobytes()).hexdigest()

    def modify_single_pixel(self) -> None:
        """Increment the blue channel of the top-left pixel, wrapping at 256."""
        if self._image.size > 0:
            self._image[0, 0, 0] = (int(self._image[0, 0, 0]) + 1) % 256

    def save_results_to_file(self, filename, original_hash: str,
                             modified_hash: str, hashes_match: bool) -> None:
        """Write the comparison report to *filename*."""
        report = (
            f"Original Image SHA256: {original_hash}\n"
            f"Modified Image SHA256: {modified_hash}\n"
            f"Hashes Match: {_yes_no(hashes_match)}\n"
        )
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(report)


def main(argv: Sequence[str] | None = None) -> int:
    """Hash an image, change one pixel, hash again and save the comparison."""
    args = list(sys.argv[1:] if argv is None else argv)
    image_path = args[0] if args else DEFAULT_IMAGE
    output_file = args[1] if len(args) > 1 else DEFAULT_OUTPUT

    try:
        image_hash = ImageHash(image_path)
        original = image_hash.calculate_sha256()
        print(f"Original Image SHA256: {original}")

        image_hash.modify_single_pixel()

        modified = image_hash.calculate_sha256()
        print(f"Modified Image SHA256: {modified}")

        match = original == modified
        print(f"Hashes Match: {_yes_no(match)}")

        image_hash.save_results_to_file(output_file, original, modified, match)
        print(f"Results saved to {output_file}")
    except (ImageHashError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())