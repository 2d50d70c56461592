import posixpath
import re
from typing import NamedTuple, Optional, Tuple
from urllib.parse import urlparse

# Ex: https://a.example.com/f/287488/1400x900/2fc896c892/icon.svg --> 1400 x 900
_DIMENSIONS_RE = re.compile(r"/([0-9]+)x([0-9]+)/")


class ImageUrlParts(NamedTuple):
    width: Optional[int]
    height: Optional[int]
    name: str
    extension: str


def parse_dimensions(url: str) -> Optional[Tuple[int, int]]:
    """
    Extracts the original image dimensions embedded in an asset URL.

    :param url: Asset URL.
    :type url: str
    :returns: ``(width, height)`` of the first ``/{width}x{height}/`` segment, or None
    :rtype: :class:`tuple` or :class:`NoneType`
    :Usage example:

     .. code-block:: python

        parse_dimensions("https://a.example.com/f/1/1400x900/abc/image.jpg")
        # Output: (1400, 900)
    """
    match = _DIMENSIONS_RE.search(url)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def get_file_name(url: str) -> str:
    """
    Extracts file name without extension from the path of a URL.

    :param url: Asset URL.
    :type url: str
    :returns: File name without extension
    :rtype: :class:`str`
    :Usage example:

     .. code-block:: python

        get_file_name("https://a.example.com/f/1/1400x900/abc/image.jpg")
        # Output: image
    """
    return posixpath.splitext(posixpath.basename(urlparse(url).path))[0]


def get_file_ext(url: str) -> str:
    """
    Extracts file extension, without the leading dot, from the path of a URL.

    :param url: Asset URL.
    :type url: str
    :returns: File extension, empty if the file has none
    :rtype: :class:`str`
    """
    return posixpath.splitext(posixpath.basename(urlparse(url).path))[1].lstrip(".")


def parse_image_url(url: str) -> ImageUrlParts:
    """
    Splits an asset URL into its original dimensions and file name parts.

    Missing dimensions are reported as None; deciding whether that is an
    error is left to the caller.
    """
    dimensions = parse_dimensions(url)
    width, height = dimensions if dimensions is not None else (None, None)
    return ImageUrlParts(
        width=width,
        height=height,
        name=get_file_name(url),
        extension=get_file_ext(url),
    )
