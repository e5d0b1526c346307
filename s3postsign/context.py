#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 10:40:02 2026

@author: mike
"""
import datetime
from pydantic import BaseModel, ConfigDict, SecretStr

from . import utils

#######################################################
### Models


class Credentials(BaseModel):
    """
    The long-term key pair. The secret is never serialised or shown in reprs.
    """
    model_config = ConfigDict(frozen=True)

    access_key_id: str
    secret_key: SecretStr


class SigningContext(BaseModel):
    """
    The time-scoped identity that every artifact of one signing session is built from. It is frozen, so the policy, the signing key, and the form fields of a session always agree on the date and the credential scope.
    """
    model_config = ConfigDict(frozen=True)

    access_key_id: str
    region: str
    service: str
    request_time: datetime.datetime
    algorithm_id: str = utils.algorithm_id
    server_side_encryption_id: str = utils.server_side_encryption_id

    @classmethod
    def create(cls, access_key_id: str, region: str, service: str=utils.default_service, now: datetime.datetime=None):
        """
        Build a context, reading the clock once if now isn't given.

        Parameters
        ----------
        access_key_id : str
            The access key id also known as aws_access_key_id.
        region : str
            The region, like eu-west-1.
        service : str
            The service identifier, like s3.
        now : datetime.datetime or None
            The request time. Naive datetimes are taken as UTC. None uses the current time.

        Returns
        -------
        SigningContext
        """
        for name, value in (('access_key_id', access_key_id), ('region', region), ('service', service)):
            if utils.is_blank(value):
                raise utils.InvalidConfig(f'{name} must not be empty.')

        return cls(access_key_id=access_key_id, region=region, service=service, request_time=utils.to_utc(now))

    @property
    def sign_date(self):
        """
        Signature date, YYYYMMDD.
        """
        return self.request_time.strftime('%Y%m%d')

    @property
    def amz_date(self):
        """
        The x-amz-date value. It's fixed to midnight of the signing day.
        """
        return self.sign_date + 'T000000Z'

    @property
    def credential_scope(self):
        """
        <access-key-id>/<date>/<region>/<service>/aws4_request
        """
        return '/'.join([self.access_key_id, self.sign_date, self.region, self.service, utils.scope_terminator])
