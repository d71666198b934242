# =============================================================================
# SKIN PROPOSAL BACKEND - ERRORS
# =============================================================================
"""
Error taxonomy for the proposal pipeline.
Every error carries the HTTP status the route answers with.
"""


class ProposalError(Exception):
    """Base class for all pipeline errors."""
    status_code: int = 500


class ConfigurationError(ProposalError):
    """Missing or malformed service credentials."""


class ValidationError(ProposalError):
    """The inbound request is unusable (missing upload field)."""


class MethodNotAllowed(ValidationError):
    """Any HTTP method other than POST."""
    status_code = 405


class DetectionError(ProposalError):
    """The vision service found no face in the upload."""


class UpstreamError(ProposalError):
    """Failure or malformed response from an external service."""
