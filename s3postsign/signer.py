#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 11:48:20 2026

@author: mike
"""
import hmac
import hashlib
from typing import NamedTuple, Union
from pydantic import SecretStr

from . import utils
from .context import SigningContext

#######################################################
### Key derivation


class SigningKeyChain(NamedTuple):
    k_date: bytes
    k_region: bytes
    k_service: bytes
    k_signing: bytes


def hmac_sha256(key: bytes, msg: Union[str, bytes]):
    """
    All hmac messages go through here so they are always utf-8 encoded. bytes are taken as already encoded.
    """
    if not key:
        raise utils.MissingInput('hmac: no key')
    if not msg:
        raise utils.MissingInput('hmac: no data')
    if isinstance(msg, str):
        msg = msg.encode('utf-8')
    elif not isinstance(msg, bytes):
        raise TypeError(f'hmac: data must be str or bytes, not {type(msg).__name__}.')

    return hmac.new(key, msg, hashlib.sha256).digest()


def derive_signing_key(secret_key: Union[str, SecretStr], context: SigningContext):
    """
    Derive the signing key from the secret key. Because the key is specific to the date, region, and service, a leaked signing key can't be used outside of that scope (http://docs.aws.amazon.com/general/latest/gr/sigv4-calculate-signature.html).

    Parameters
    ----------
    secret_key : str or SecretStr
        The secret access key also known as aws_secret_access_key.
    context : SigningContext
        The session's signing context.

    Returns
    -------
    SigningKeyChain
    """
    if isinstance(secret_key, SecretStr):
        secret_key = secret_key.get_secret_value()
    if not secret_key:
        raise utils.MissingInput('secret_key must not be empty.')

    k_date = hmac_sha256((utils.key_prefix + secret_key).encode('utf-8'), context.sign_date)
    k_region = hmac_sha256(k_date, context.region)
    k_service = hmac_sha256(k_region, context.service)
    k_signing = hmac_sha256(k_service, utils.scope_terminator)

    return SigningKeyChain(k_date, k_region, k_service, k_signing)


#######################################################
### Signing


def sign_policy(k_signing: bytes, encoded_policy: Union[str, bytes]):
    """
    Sign the encoded policy with the derived signing key.

    Returns
    -------
    str
        The 64 character lowercase hex signature.
    """
    if not encoded_policy:
        raise utils.MissingInput('encoded_policy must not be empty.')

    return hmac_sha256(k_signing, encoded_policy).hex()


def get_signature(secret_key: Union[str, SecretStr], context: SigningContext, encoded_policy: str):
    """ """
    chain = derive_signing_key(secret_key, context)

    return sign_policy(chain.k_signing, encoded_policy)
