"""github-extended: convenience operations on top of PyGithub repositories."""

__version__ = "0.1.0"
