"""Application orchestration package for the Steam News Fetcher.

Contains controller-adjacent modules:
- controller: fetch, save and link workflows
- views: Tk widget builders for the main window
- helpers: environment reporting helpers
"""

__all__ = ["controller", "views", "helpers"]
