from .security import EnvelopeHostCredentialDecoder

__all__ = [
    "EnvelopeHostCredentialDecoder",
]
