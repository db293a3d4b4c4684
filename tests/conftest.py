from __future__ import annotations

import base64
import hashlib
import hmac
import json
from dataclasses import dataclass
from typing import Any, Callable, Mapping

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives import padding as symmetric_padding
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

TEST_AUTH_KEY = bytes(range(32))
TEST_IV = bytes(range(0xA0, 0xB0))


@dataclass(frozen=True, slots=True)
class IssuedCredential:
    """
    Reference-encoded credential plus the envelope configured on the server side.
    """

    credential: str
    envelope_b64: str
    envelope: bytes
    auth_key: bytes
    message: bytes


IssueCredential = Callable[..., IssuedCredential]


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """
    Generate one RSA key shared by every test in the session.

    Args:
        None.
    Returns:
        rsa.RSAPrivateKey: 2048-bit test key.
    Assumptions:
        Key generation is the slowest step, so it happens once.
    Raises:
        None.
    Side Effects:
        Uses OS CSPRNG.
    """
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_private_key_pem(rsa_private_key: rsa.RSAPrivateKey) -> bytes:
    """Return PKCS#8 PEM encoding of the session test key."""
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture
def issue_credential(
    rsa_private_key: rsa.RSAPrivateKey,
    rsa_private_key_pem: bytes,
) -> IssueCredential:
    """
    Provide reference encoder mirroring the credential-issuing system.

    Args:
        rsa_private_key: Session RSA key used for OAEP encryption.
        rsa_private_key_pem: PEM text wrapped into the envelope.
    Returns:
        IssueCredential: Callable building credential and envelope.
    Assumptions:
        Tag is computed independently with stdlib `hmac` over SHA3-512.
    Raises:
        None.
    Side Effects:
        None.
    """

    def _issue(
        *,
        document: Mapping[str, Any] | None = None,
        payload: bytes | None = None,
        auth_key: bytes = TEST_AUTH_KEY,
        iv: bytes = TEST_IV,
        key_material: bytes | None = None,
    ) -> IssuedCredential:
        if payload is None:
            payload = json.dumps(document if document is not None else {"idagen": "AG-001"}).encode(
                "utf-8"
            )
        wrapped_key = rsa_private_key_pem if key_material is None else key_material

        ciphertext = aes_cbc_encrypt(key=auth_key, iv=iv, plaintext=wrapped_key)
        tag = reference_tag(auth_key=auth_key, ciphertext=ciphertext)
        envelope = iv + tag + ciphertext

        message = rsa_private_key.public_key().encrypt(
            payload,
            padding.OAEP(
                mgf=padding.MGF1(algorithm=hashes.SHA1()),
                algorithm=hashes.SHA1(),
                label=None,
            ),
        )
        return IssuedCredential(
            credential=build_credential(auth_key=auth_key, message=message),
            envelope_b64=base64.b64encode(envelope).decode("ascii"),
            envelope=envelope,
            auth_key=auth_key,
            message=message,
        )

    return _issue


def build_credential(*, auth_key: bytes, message: bytes) -> str:
    """Format raw fields into `ENC Key="…", Signature="…"` wire form."""
    key_b64 = base64.b64encode(auth_key).decode("ascii")
    message_b64 = base64.b64encode(message).decode("ascii")
    return f'ENC Key="{key_b64}", Signature="{message_b64}"'


def aes_cbc_encrypt(*, key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    """PKCS#7-pad and AES-CBC-encrypt plaintext."""
    padder = symmetric_padding.PKCS7(128).padder()
    padded = padder.update(plaintext) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def reference_tag(*, auth_key: bytes, ciphertext: bytes) -> bytes:
    """Compute envelope tag with stdlib HMAC over SHA3-512 (72-byte block)."""
    verification_key = hashlib.sha512(auth_key).digest()
    return hmac.new(verification_key, ciphertext, hashlib.sha3_512).digest()
