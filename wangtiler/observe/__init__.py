"""Observer module for wangtiler.

Provides the human interface for viewing and saving tilings.
"""
