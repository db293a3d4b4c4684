from __future__ import annotations

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import padding as symmetric_padding
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.serialization import load_pem_private_key

from deposit.contexts.host_auth.application.ports.host_credential_decoder import (
    AsymmetricDecryptFailedError,
    SymmetricDecryptFailedError,
)
from deposit.contexts.host_auth.domain.value_objects import AuthEnvelope

AES_256_KEY_LENGTH = 32
_AES_BLOCK_SIZE_BITS = 128


def decrypt_key_material(*, envelope: AuthEnvelope, auth_key: bytes) -> str:
    """
    Decrypt envelope ciphertext with AES-256-CBC into PEM private key text.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        sha3_hmac_integrity_verifier.py
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        envelope_host_credential_decoder.py

    Args:
        envelope: Envelope whose integrity was already verified.
        auth_key: Raw 32-byte auth key (not the derived verification key).
    Returns:
        str: Recovered key material, UTF-8 decoded.
    Assumptions:
        Plaintext is PKCS#7 padded. Returned text is transient and never logged.
    Raises:
        SymmetricDecryptFailedError: On key length, cipher, padding or UTF-8 failure.
    Side Effects:
        None.
    """
    if len(auth_key) != AES_256_KEY_LENGTH:
        raise SymmetricDecryptFailedError(
            message=f"Auth key must be {AES_256_KEY_LENGTH} bytes for AES-256-CBC",
        )

    try:
        decryptor = Cipher(algorithms.AES(auth_key), modes.CBC(envelope.iv)).decryptor()
        padded = decryptor.update(envelope.ciphertext) + decryptor.finalize()
        unpadder = symmetric_padding.PKCS7(_AES_BLOCK_SIZE_BITS).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
    except ValueError as error:
        raise SymmetricDecryptFailedError(
            message="Auth envelope ciphertext could not be decrypted",
        ) from error

    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as error:
        raise SymmetricDecryptFailedError(
            message="Recovered key material is not valid UTF-8",
        ) from error


def decrypt_message(*, key_material: str, message: bytes) -> bytes:
    """
    Decrypt credential message with recovered RSA private key using OAEP padding.

    Args:
        key_material: PEM private key text from `decrypt_key_material`.
        message: Raw bytes decoded from credential `Signature` field.
    Returns:
        bytes: Decrypted payload bytes.
    Assumptions:
        Issuer uses OAEP with MGF1-SHA1, SHA1 and no label.
    Raises:
        AsymmetricDecryptFailedError: On key parse, key type or OAEP failure.
    Side Effects:
        None.
    """
    try:
        private_key = load_pem_private_key(key_material.encode("utf-8"), password=None)
    except (TypeError, ValueError, UnsupportedAlgorithm) as error:
        raise AsymmetricDecryptFailedError(
            message="Recovered key material is not a loadable private key",
        ) from error

    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise AsymmetricDecryptFailedError(message="Recovered key material is not an RSA key")

    try:
        return private_key.decrypt(
            message,
            padding.OAEP(
                mgf=padding.MGF1(algorithm=hashes.SHA1()),
                algorithm=hashes.SHA1(),
                label=None,
            ),
        )
    except ValueError as error:
        raise AsymmetricDecryptFailedError(
            message="Credential message OAEP decryption failed",
        ) from error
