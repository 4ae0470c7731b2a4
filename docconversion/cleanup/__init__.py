"""
Markdown cleanup pipeline.

Submodules:
  lines        -- per-line classification (blank, heading, table row)
  boilerplate  -- converter attribution banner filter
  spacing      -- blank-line and whitespace normalization
  tables       -- pipe-table grouping and column alignment
  images       -- image alt-text placeholder rewrite
  pipeline     -- clean_text() / clean_and_format() entry points
"""

from .pipeline import clean_and_format, clean_text

__all__ = ["clean_and_format", "clean_text"]
