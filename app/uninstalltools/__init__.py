"""uninstalltools - discovery of program roots and leftover application data.

Identifies and classifies the directories that applications get installed
into and the directories where they leave data behind after removal.
"""

__version__ = "0.1.0"
