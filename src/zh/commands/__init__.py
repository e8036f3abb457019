"""Built-in CLI command groups for zh.

Sub-modules:
    issue: ``zh issue mv`` -- move an issue between pipelines.
"""
