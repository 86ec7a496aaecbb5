"""Course registration service: REST API plus a static single-page client."""

__version__ = "0.1.0"
