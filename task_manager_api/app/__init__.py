"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: configuration and logging in ``core``, the HTTP routes in
``api/v1/endpoints``, request/response models in ``schemas``, the
service layer in ``services`` and the pluggable task stores in
``storage``.
"""

from .main import app  # noqa: F401
