"""
Image alt-text placeholder rewrite.
"""

import re

DEFAULT_PLACEHOLDER = "Illustration"

# "![" then anything but a closing bracket, then "]"
IMAGE_ALT_RE = re.compile(r"!\[[^\]]*\]")


def rewrite_image_placeholders(text: str, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Replace every image alt text with `placeholder`, keeping the link target."""
    replacement = f"![{placeholder}]"
    return IMAGE_ALT_RE.sub(lambda _match: replacement, text)
