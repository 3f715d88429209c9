"""Prometheus metrics for vendor onboarding.

Defines operational metrics for the creation pipeline.
"""

from prometheus_client import Counter, Histogram

# Vendor creation outcomes
vendor_creations_total = Counter(
    "roster_vendor_creations_total",
    "Total vendor creation attempts by terminal status",
    ["status", "error_kind"]  # status: CONCLUDED|ERROR, error_kind: none|VALIDATION|PERSISTENCE
)

vendor_creation_duration_seconds = Histogram(
    "roster_vendor_creation_duration_seconds",
    "Time spent running the vendor creation pipeline in seconds",
    ["status"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)

registration_numbers_allocated_total = Counter(
    "roster_registration_numbers_allocated_total",
    "Registration sequence numbers handed out",
    ["contract_type"]
)
