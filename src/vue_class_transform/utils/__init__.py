"""
Utility helpers shared by the CLI and the transform engine.
"""
