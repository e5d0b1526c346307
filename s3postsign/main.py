#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 14:02:55 2026

@author: mike
"""
import logging
import datetime
from typing import Union
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, model_validator

from . import utils
from .context import Credentials, SigningContext
from . import policy as policy_mod
from . import signer
from . import form

logger = logging.getLogger(__name__)

#######################################################
### Config


class UploadConfig(BaseModel):
    """
    Everything needed to authorize one kind of browser upload.
    """
    model_config = ConfigDict(frozen=True)

    bucket_name: str = Field(min_length=1)
    acl: str = Field(min_length=1)
    expires_interval: int = Field(ge=0)
    content_type_prefix: str
    content_length_min: int = Field(0, ge=0)
    content_length_max: int = Field(ge=0)
    file_destination: str = Field(min_length=1)
    key_prefix: str = ''
    region: str = Field(min_length=1)
    service: str = Field(utils.default_service, min_length=1)
    access_key_id: str = Field(min_length=1)
    secret_key: SecretStr
    domain: str = utils.default_domain

    @model_validator(mode='after')
    def _check_constraints(self):
        if self.content_length_min > self.content_length_max:
            raise ValueError('content_length_min must not be greater than content_length_max.')
        if not self.secret_key.get_secret_value():
            raise ValueError('secret_key must not be empty.')
        if not self.file_destination.startswith(self.key_prefix):
            raise ValueError(f'file_destination {self.file_destination} does not start with key_prefix {self.key_prefix}.')
        return self

    @property
    def credentials(self):
        return Credentials(access_key_id=self.access_key_id, secret_key=self.secret_key)


def validate_config(config: Union[UploadConfig, dict]):
    """
    Returns an UploadConfig, raising InvalidConfig when the dict doesn't validate.
    """
    if isinstance(config, UploadConfig):
        return config

    try:
        return UploadConfig(**config)
    except ValidationError as err:
        raise utils.InvalidConfig(str(err)) from err


def config_from_file(path=None, env=None):
    """
    Load and validate the upload config from a toml file and/or the environment. See utils.load_config.
    """
    return validate_config(utils.load_config(path, env))


#######################################################
### Main function


def create_upload_form(config: Union[UploadConfig, dict], now: datetime.datetime=None):
    """
    Function to create everything a browser needs to upload a file straight to the bucket without ever seeing the credentials.

    Parameters
    ----------
    config : UploadConfig or dict
        The upload configuration. A dict is validated into an UploadConfig.
    now : datetime.datetime or None
        The request time. None uses the current time. It's read once and shared by every part of the result.

    Returns
    -------
    form.UploadForm
    """
    config = validate_config(config)

    context = SigningContext.create(config.access_key_id, config.region, config.service, now)
    logger.debug('Signing context %s/%s/%s', context.sign_date, context.region, context.service)

    policy = policy_mod.build_policy(config.bucket_name, config.acl, config.expires_interval, config.content_type_prefix, config.content_length_max, context, content_length_min=config.content_length_min, key_prefix=config.key_prefix)
    logger.debug('Policy for bucket %s expires at %s', config.bucket_name, policy.expiration)
    encoded_policy = policy.encode()

    chain = signer.derive_signing_key(config.secret_key, context)
    signature = signer.sign_policy(chain.k_signing, encoded_policy)

    upload_form = form.build_upload_form(config.bucket_name, config.acl, config.file_destination, signature, encoded_policy, context, domain=config.domain, content_length_max=config.content_length_max, content_type_prefix=config.content_type_prefix)
    logger.debug('Upload form ready for %s', upload_form.form_action)

    return upload_form
