"""
Grid Hull - Formats

Snapshot bitfield codec and JSON session files.
"""
