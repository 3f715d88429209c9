"""Vendor onboarding: asynchronous creation pipeline, submission and polling"""

from .pipeline import VendorCreationPipeline, build_creation_pipeline
from .submission import get_processing, submit_vendor_creation

__all__ = [
    "VendorCreationPipeline",
    "build_creation_pipeline",
    "get_processing",
    "submit_vendor_creation",
]
