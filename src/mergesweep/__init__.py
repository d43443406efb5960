"""Clean up git branches already merged into a target branch.

Features:
- Auto-detect the target branch (main, then master)
- Interactive selection of the branches to delete
- Safe, non-forced deletion with per-branch reporting
- Dry-run mode
"""

__version__ = "0.1.0"
