"""flow CLI package.

This package provides a Click-based CLI that wraps everyday git operations:
checking out branches from names or GitHub URLs, cloning GitHub
repositories, and creating branches from the clipboard. See `flow --help`.
"""
