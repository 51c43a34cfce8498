"""Interactive git branch picker.

Features:
- Full-screen list of local branches with a movable cursor
- Delete or force delete the highlighted branch, result shown inline
- Checkout the highlighted branch and exit
- Help panel showing the exact git command each key would run
"""

__version__ = "0.1.0"
