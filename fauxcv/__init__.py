"""
fauxcv - Fake resume synthesis and export

Generates plausible resume records from industry profiles and experience tiers,
and renders them to markdown and paginated PDF documents.

Architecture:
- Synthesis Context: Industry knowledge base, content generators, orchestration
- Templating Context: Markdown rendering of resume records
- Rendering Context: Markdown to PDF export (single and batch)
"""

__version__ = "2.1.0"
