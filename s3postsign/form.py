#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 13:21:09 2026

@author: mike
"""
import orjson
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

from . import utils
from .context import SigningContext

#######################################################
### Parameters

form_method = 'POST'
form_enctype = 'multipart/form-data'

#######################################################
### Classes


class FormParameters(BaseModel):
    """
    The fields the upload form has to carry. Every one of them is matched against a condition of the signed policy, so the names must stay exactly as the storage service expects them.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str
    acl: str
    x_amz_algorithm: str = Field(alias='x-amz-algorithm')
    x_amz_server_side_encryption: str = Field(alias='x-amz-server-side-encryption')
    x_amz_credential: str = Field(alias='x-amz-credential')
    x_amz_date: str = Field(alias='x-amz-date')
    x_amz_signature: str = Field(alias='x-amz-signature')
    policy: str

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)

    def __getitem__(self, name):
        return self.to_dict()[name]


class UploadForm(BaseModel):
    """ """
    model_config = ConfigDict(frozen=True)

    form_action: str
    fields: FormParameters
    method: str = form_method
    enctype: str = form_enctype
    content_length_max: Optional[int] = None
    content_type_prefix: Optional[str] = None

    def to_dict(self):
        """
        The payload for the client, as the upload widget expects it.
        """
        return {
            'formAction': self.form_action,
            'method': self.method,
            'enctype': self.enctype,
            'contentLengthMax': self.content_length_max,
            'contentTypePrefix': self.content_type_prefix,
            'fields': self.fields.to_dict(),
            }

    def to_json(self):
        return orjson.dumps(self.to_dict())


#######################################################
### Functions


def get_form_params(acl: str, file_destination: str, signature: str, encoded_policy: str, context: SigningContext):
    """
    Get the fields for an upload form.

    Parameters
    ----------
    acl : str
        An S3 canned access control list. It must be the same one that's in the policy.
    file_destination : str
        Path and name of the object, like "user/user1/${filename}". The placeholder is left for the client to fill in.
    signature : str
        The hex signature of encoded_policy.
    encoded_policy : str
        The base64 policy.
    context : SigningContext
        The same context the policy and signature were made with.

    Returns
    -------
    FormParameters
    """
    return FormParameters(
        key=file_destination,
        acl=acl,
        x_amz_algorithm=context.algorithm_id,
        x_amz_server_side_encryption=context.server_side_encryption_id,
        x_amz_credential=context.credential_scope,
        x_amz_date=context.amz_date,
        x_amz_signature=signature,
        policy=encoded_policy,
        )


def get_form_action(bucket: str, context: SigningContext, domain: str=utils.default_domain):
    """
    The url the form gets posted to, https://{bucket}.{service}-{region}.{domain}/
    """
    url = f'https://{bucket}.{context.service}-{context.region}.{domain}/'
    if not utils.is_url(url) or utils.is_blank(bucket) or utils.is_blank(domain):
        raise utils.InvalidConfig(f'{url} is not a proper http url.')

    return url


def build_upload_form(bucket: str, acl: str, file_destination: str, signature: str, encoded_policy: str, context: SigningContext, domain: str=utils.default_domain, content_length_max: int=None, content_type_prefix: str=None):
    """ """
    fields = get_form_params(acl, file_destination, signature, encoded_policy, context)
    form_action = get_form_action(bucket, context, domain)

    return UploadForm(form_action=form_action, fields=fields, content_length_max=content_length_max, content_type_prefix=content_type_prefix)
