#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 11:05:47 2026

@author: mike
"""
import base64
import binascii
import datetime
import orjson
from typing import Annotated, Literal, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import utils
from .context import SigningContext

#######################################################
### Condition classes


class ExactMatch(BaseModel):
    """
    The form field must equal value. Serialised as {field: value}.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal['exact'] = 'exact'
    field: str
    value: str

    def to_wire(self):
        return {self.field: self.value}


class Range(BaseModel):
    """
    Inclusive bounds, only used for content-length-range. Serialised as [field, min, max].
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal['range'] = 'range'
    field: str
    min: int
    max: int

    def to_wire(self):
        return [self.field, self.min, self.max]


class Prefix(BaseModel):
    """
    The form field must start with value. The field keeps its leading $. Serialised as ["starts-with", field, value].
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal['prefix'] = 'prefix'
    field: str
    value: str

    def to_wire(self):
        return ['starts-with', self.field, self.value]


PolicyCondition = Annotated[Union[ExactMatch, Range, Prefix], Field(discriminator='kind')]


class PolicyDocument(BaseModel):
    """ """
    model_config = ConfigDict(frozen=True)

    expiration: str
    conditions: Tuple[PolicyCondition, ...]

    def to_wire(self):
        return {'expiration': self.expiration, 'conditions': [c.to_wire() for c in self.conditions]}

    def encode(self):
        """
        base64 of the utf-8 json.
        """
        return base64.b64encode(orjson.dumps(self.to_wire())).decode('ascii')


#######################################################
### Functions


def check_constraints(bucket: str, expires_interval: int, content_length_min: int, content_length_max: int):
    """ """
    if utils.is_blank(bucket):
        raise utils.InvalidConfig('bucket must not be empty.')
    if expires_interval < 0:
        raise utils.InvalidConfig(f'expires_interval must be >= 0, not {expires_interval}.')
    if content_length_min < 0 or content_length_max < 0:
        raise utils.InvalidConfig('content length bounds must be >= 0.')
    if content_length_min > content_length_max:
        raise utils.InvalidConfig(f'content_length_min ({content_length_min}) is greater than content_length_max ({content_length_max}).')


def build_policy(bucket: str, acl: str, expires_interval: int, content_type_prefix: str, content_length_max: int, context: SigningContext, content_length_min: int=0, key_prefix: str=''):
    """
    Builds the policy document for a browser based POST upload (http://docs.aws.amazon.com/AmazonS3/latest/API/sigv4-post-example.html).

    Parameters
    ----------
    bucket : str
        The bucket the content can be uploaded to.
    acl : str
        The canned acl that the form must carry.
    expires_interval : int
        Seconds from the context's request time until the policy expires. 0 makes a policy that has already expired.
    content_type_prefix : str
        Allowed types of content, like image/ or video/.
    content_length_max : int
        Max length of content, in bytes.
    context : SigningContext
        The session's signing context.
    content_length_min : int
        Min length of content, in bytes.
    key_prefix : str
        The object key must start with this. The default of an empty string allows any key.

    Returns
    -------
    PolicyDocument
    """
    check_constraints(bucket, expires_interval, content_length_min, content_length_max)

    try:
        expires = context.request_time + datetime.timedelta(seconds=expires_interval)
    except OverflowError as err:
        raise utils.InvalidConfig(f'expires_interval of {expires_interval} seconds is out of the date range.') from err

    conditions = (
        ExactMatch(field='bucket', value=bucket),
        ExactMatch(field='acl', value=acl),
        Range(field='content-length-range', min=content_length_min, max=content_length_max),
        Prefix(field='$Content-Type', value=content_type_prefix),
        Prefix(field='$key', value=key_prefix),
        ExactMatch(field='x-amz-algorithm', value=context.algorithm_id),
        ExactMatch(field='x-amz-date', value=context.amz_date),
        ExactMatch(field='x-amz-credential', value=context.credential_scope),
        ExactMatch(field='x-amz-server-side-encryption', value=context.server_side_encryption_id),
        )

    return PolicyDocument(expiration=utils.format_iso8601_ms(expires), conditions=conditions)


def get_base64_policy(bucket: str, acl: str, expires_interval: int, content_type_prefix: str, content_length_max: int, context: SigningContext, content_length_min: int=0, key_prefix: str=''):
    """
    Same as build_policy, but returns the encoded policy string that gets signed and put on the form.
    """
    policy = build_policy(bucket, acl, expires_interval, content_type_prefix, content_length_max, context, content_length_min=content_length_min, key_prefix=key_prefix)

    return policy.encode()


def condition_from_wire(item):
    """ """
    if isinstance(item, dict) and len(item) == 1:
        field, value = next(iter(item.items()))
        return ExactMatch(field=field, value=value)

    if isinstance(item, list) and len(item) == 3:
        op = item[0]
        if op == 'starts-with':
            return Prefix(field=item[1], value=item[2])
        if op == 'eq' and isinstance(item[1], str):
            return ExactMatch(field=item[1].lstrip('$'), value=item[2])
        if isinstance(op, str) and all(isinstance(i, int) and not isinstance(i, bool) for i in item[1:]):
            return Range(field=op, min=item[1], max=item[2])

    raise utils.InvalidConfig(f'{item} is not a recognised policy condition.')


def decode_policy(encoded_policy: str):
    """
    Parses an encoded policy back into a PolicyDocument.
    """
    if not encoded_policy:
        raise utils.InvalidConfig('encoded_policy is empty.')

    try:
        raw = base64.b64decode(encoded_policy, validate=True)
        data = orjson.loads(raw)
    except (binascii.Error, orjson.JSONDecodeError) as err:
        raise utils.InvalidConfig(f'encoded_policy could not be decoded: {err}') from err

    if not isinstance(data, dict) or 'expiration' not in data or not isinstance(data.get('conditions'), list):
        raise utils.InvalidConfig('encoded_policy must hold an expiration and a list of conditions.')

    try:
        conditions = tuple(condition_from_wire(item) for item in data['conditions'])
        return PolicyDocument(expiration=data['expiration'], conditions=conditions)
    except ValidationError as err:
        raise utils.InvalidConfig(f'encoded_policy has invalid values: {err}') from err
