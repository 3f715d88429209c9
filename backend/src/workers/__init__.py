"""Background workers module for async task processing.

Vendor creation runs as a Celery task; each task opens its own database
session and drives one processing record to a terminal state.
"""
