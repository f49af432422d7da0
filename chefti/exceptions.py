"""
Custom exception classes for the recipe service
"""


class ChefTiError(Exception):
    """Base exception for the recipe service"""
    pass


class ValidationError(ChefTiError):
    """Raised when a request carries no usable ingredients"""
    def __init__(self, message: str = "no ingredients provided"):
        super().__init__(message)


class UpstreamError(ChefTiError):
    """Raised when an external collaborator fails; the request is aborted"""
    service = "upstream"
    default_message = "upstream service failed"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class UpstreamSearchError(UpstreamError):
    """Raised when the video search service is unreachable or errors"""
    service = "video_search"
    default_message = "video search failed"


class UpstreamGenerationError(UpstreamError):
    """Raised when the text generation service errors or returns nothing"""
    service = "generation"
    default_message = "generation failed"
