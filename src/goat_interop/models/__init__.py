"""Data models used by the interfaces."""
