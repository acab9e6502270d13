"""Git working-tree status model, Git operations, themes and key handling for a terminal Git client."""

__version__ = "0.1.0"