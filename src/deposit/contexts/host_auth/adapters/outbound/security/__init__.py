from .host_credential import EnvelopeHostCredentialDecoder

__all__ = [
    "EnvelopeHostCredentialDecoder",
]
