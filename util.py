import base64
import binascii
import json
import logging
from io import BytesIO

from PIL import Image

logger = logging.getLogger("ecosense.util")

# how much of the uploaded image string is quoted into a prompt
IMAGE_EXCERPT_LENGTH = 100


def strip_data_url(img_data):
    # Remove "data:image/png;base64," header if present
    if "," in img_data:
        img_data = img_data.split(",", 1)[1]
    return img_data


def describe_image(img_data):
    """Return e.g. "JPEG 640x480" for a base64 image, or None if it won't decode."""
    try:
        img_bytes = base64.b64decode(strip_data_url(img_data), validate=True)
        with Image.open(BytesIO(img_bytes)) as img:
            return f"{img.format} {img.width}x{img.height}"
    except (binascii.Error, OSError, ValueError, TypeError, Image.DecompressionBombError) as e:
        logger.warning("Could not read uploaded image: %s", e)
        return None


def image_excerpt(img_data):
    """First characters of the upload plus its format, as quoted in prompts."""
    excerpt = f"{img_data[:IMAGE_EXCERPT_LENGTH]}..."
    description = describe_image(img_data)
    if description:
        excerpt += f" ({description})"
    return excerpt


def to_json(value):
    # compact, same shape as the browser's JSON.stringify
    if value is UNDEFINED:
        return str(UNDEFINED)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class _Undefined:
    """Stands in for a request field the client left out."""

    def __str__(self):
        return "undefined"

    __repr__ = __str__


# quoted as "undefined", the way the browser stringifies a missing value
UNDEFINED = _Undefined()
