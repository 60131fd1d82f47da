import json
from base64 import urlsafe_b64encode, urlsafe_b64decode
from time import time

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey
from cryptography.hazmat.primitives.serialization import load_pem_public_key
from cryptography.x509 import load_pem_x509_certificate

JWT_RS_PADDING = padding.PKCS1v15()
JWT_RS_SHA256 = hashes.SHA256()


def b64url_encode(data: bytes | dict) -> str:
    if isinstance(data, dict):
        data = json.dumps(data, separators=(",", ":")).encode("utf8")
    return urlsafe_b64encode(data).decode("utf8").rstrip("=")


def b64url_decode(data: str) -> bytes:
    raw = data.encode("utf8")
    return urlsafe_b64decode(raw + b"=" * (-len(raw) % 4))


def load_public_key(pem: str) -> RSAPublicKey | None:
    # Google serves x509 certificates, tests serve bare public keys
    pem_bytes = pem.encode("utf8")
    try:
        if b"BEGIN CERTIFICATE" in pem_bytes:
            key = load_pem_x509_certificate(pem_bytes).public_key()
        else:
            key = load_pem_public_key(pem_bytes)
    except ValueError:
        return None

    return key if isinstance(key, RSAPublicKey) else None


class JWT:
    @staticmethod
    def decode(token: str, keys: dict[str, str]) -> dict | None:
        """Verifies an RS256 token against a mapping of key id to PEM key or certificate.

        Returns the payload, or None if the token is malformed, signed with an unknown key,
        has an invalid signature or is expired.
        """
        try:
            header_b64, payload_b64, signature_b64 = token.split(".")
            header = json.loads(b64url_decode(header_b64))
            payload = json.loads(b64url_decode(payload_b64))
            signature = b64url_decode(signature_b64)
        except ValueError:
            return None

        if not isinstance(header, dict) or not isinstance(payload, dict) or header.get("alg") != "RS256":
            return None
        if not isinstance(kid := header.get("kid"), str) or (pem := keys.get(kid)) is None:
            return None
        if (public_key := load_public_key(pem)) is None:
            return None

        try:
            public_key.verify(signature, f"{header_b64}.{payload_b64}".encode("utf8"), JWT_RS_PADDING, JWT_RS_SHA256)
        except (ValueError, InvalidSignature):
            return None

        if not isinstance(exp := payload.get("exp"), int) or exp <= time():
            return None

        return payload
