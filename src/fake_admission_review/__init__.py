"""Generate fake Kubernetes AdmissionReview requests for webhook testing."""

__version__ = "0.1.0"
