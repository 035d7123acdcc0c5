"""
Grid Hull - Rendering

Color mapping and static image export for sessions.
"""
