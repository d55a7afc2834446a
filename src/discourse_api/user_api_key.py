"""User api key handshake.

Discourse hands out delegated user api keys through an authorization page:
the client publishes an RSA public key and a nonce in the page URL, the
user approves the request, and Discourse answers with the key encrypted
(RSA, PKCS#1 v1.5 padding) for that public key.

The nonce is only returned, never checked here: callers must compare the
``nonce`` of the decrypted payload with the one they generated.

See https://meta.discourse.org/t/user-api-keys-specification/48536
"""

import base64
import binascii
import json
import secrets
from typing import Any, Optional, Tuple
from urllib.parse import urlencode

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .errors import DecryptionError, PayloadParseError
from .types import GenerateUserApiKeyParamsType, UserApiKeyLinkType, UserApiKeyPayloadType

DEFAULT_APPLICATION_NAME = "PythonDiscourseApi"
DEFAULT_CLIENT_ID = "PythonDiscourseApi"
DEFAULT_SCOPES = "read"
KEY_SIZE = 2048
NONCE_BYTES = 16


def generate_keypair() -> Tuple[str, str]:
    """Generate a 2048-bit RSA keypair.

    Returns:
        (public_key, private_key), both PKCS#1 PEM strings
    """
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=KEY_SIZE)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.PKCS1,
    ).decode("utf-8")
    return public_pem, private_pem


def generate_user_api_key(
    base_url: str,
    params: Optional[GenerateUserApiKeyParamsType] = None,
) -> UserApiKeyLinkType:
    """Build the authorization link for a new user api key.

    Without ``public_key`` in params a keypair is generated and both halves
    are returned; only the public half goes into the URL. Keypair generation
    is slow.

    Args:
        base_url: Site URL without the trailing slash
        params: application_name, scopes, client_id, public_key,
            auth_redirect, push_url

    Returns:
        url, nonce, and the generated public_key/private_key when no
        public_key was supplied
    """
    params = params or {}
    result: UserApiKeyLinkType = {
        "url": "",
        "nonce": secrets.token_hex(NONCE_BYTES),
    }

    public_key = params.get("public_key")
    if not public_key:
        public_key, private_key = generate_keypair()
        result["public_key"] = public_key
        result["private_key"] = private_key

    query = {
        "application_name": params.get("application_name") or DEFAULT_APPLICATION_NAME,
        "scopes": params.get("scopes") or DEFAULT_SCOPES,
        "client_id": params.get("client_id") or DEFAULT_CLIENT_ID,
        "public_key": public_key,
    }
    if params.get("auth_redirect"):
        query["auth_redirect"] = params["auth_redirect"]
    if params.get("push_url"):
        query["push_url"] = params["push_url"]
    query["nonce"] = result["nonce"]

    result["url"] = f"{base_url.rstrip('/')}/user-api-key/new?{urlencode(query)}"
    return result


async def generate_user_api_key_async(
    base_url: str,
    params: Optional[GenerateUserApiKeyParamsType] = None,
) -> UserApiKeyLinkType:
    """Async version of generate_user_api_key."""
    return generate_user_api_key(base_url, params)


def _load_private_key(private_key_pem: str) -> Any:
    try:
        return serialization.load_pem_private_key(private_key_pem.encode("utf-8"), password=None)
    except (ValueError, TypeError) as exc:
        raise DecryptionError(f"Invalid private key: {exc}") from exc


def decrypt_user_api_key(private_key: str, encrypted: str) -> UserApiKeyPayloadType:
    """Decrypt the payload Discourse returns after authorization.

    Args:
        private_key: PEM private key matching the published public key
        encrypted: Base64 payload from the authorization page or redirect

    Returns:
        key, nonce, push, api

    Raises:
        DecryptionError: Bad base64, bad key, or ciphertext not made for this key
        PayloadParseError: Decrypted bytes are not a JSON object
    """
    try:
        ciphertext = base64.b64decode("".join(encrypted.split()), validate=True)
    except (ValueError, binascii.Error) as exc:
        raise DecryptionError(f"Invalid base64 payload: {exc}") from exc

    key = _load_private_key(private_key)
    if not isinstance(key, rsa.RSAPrivateKey):
        raise DecryptionError("Private key is not an RSA key")

    try:
        plaintext = key.decrypt(ciphertext, padding.PKCS1v15())
    except ValueError as exc:
        raise DecryptionError(f"User api key decryption failed: {exc}") from exc

    # With implicit rejection a foreign ciphertext decrypts to random bytes
    try:
        text = plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecryptionError("User api key decryption failed: payload is not text") from exc
    if not text:
        raise DecryptionError("User api key decryption failed: empty payload")

    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise PayloadParseError(f"Decrypted payload is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise PayloadParseError("Decrypted payload must be a JSON object")
    return payload
