"""
Sample converter output for use in tests.
"""

# Raw output as written by an Aspose.Words evaluation build
RAW_CONVERTER_MARKDOWN = (
    "\n"
    "\n"
    "**Evaluation Only. Created with Aspose.Words. Copyright 2003-2024 Aspose Pty Ltd.**\n"
    "\n"
    "\n"
    "# Title\n"
    "Intro text\twith tab   \n"
    "\n"
    "\n"
    "\n"
    "## Section\n"
    "| Name | Value |\n"
    "|---|---|\n"
    "| alpha | 1 |\n"
    "| b | 22 |\n"
    "Text after table.\n"
    "![A photo of a cat](images/cat.png)\n"
)

CLEANED_MARKDOWN = (
    "# Title\n"
    "\n"
    "Intro text  with tab\n"
    "\n"
    "## Section\n"
    "\n"
    "|Name |Value|\n"
    "|---  |---  |\n"
    "|alpha|1    |\n"
    "|b    |22   |\n"
    "Text after table.\n"
    "![Illustration](images/cat.png)\n"
)

RAW_MARKDOWN_NO_BANNER = """Some paragraph
# Heading One
Paragraph under heading.



Another paragraph.
## Heading Two
"""

CLEANED_MARKDOWN_NO_BANNER = """Some paragraph

# Heading One

Paragraph under heading.

Another paragraph.

## Heading Two
"""


def make_pdf_converter(markdown: str = RAW_CONVERTER_MARKDOWN, calls: list = None):
    """Stand-in for PDFConverter.convert returning fixed Markdown."""

    def convert(file_path, image_dir=None):
        if calls is not None:
            calls.append((file_path, image_dir))
        return markdown

    return convert
