#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 10:12:31 2026

@author: mike
"""
import os
import pathlib
import datetime
import tomllib
from urllib.parse import urlparse

#######################################################
### Parameters

algorithm_id = 'AWS4-HMAC-SHA256'
server_side_encryption_id = 'AES256'
scope_terminator = 'aws4_request'
key_prefix = 'AWS4'

default_service = 's3'
default_domain = 'amazonaws.com'

config_table = 'upload_config'

env_credentials = {
    'access_key_id': 'AWS_ACCESS_KEY_ID',
    'secret_key': 'AWS_SECRET_ACCESS_KEY',
    }

#######################################################
### Exceptions


class MissingInput(ValueError):
    """
    Raised when an HMAC step gets empty or absent message or key data.
    """


class InvalidConfig(ValueError):
    """
    Raised when the signing scope or the upload constraints are unusable.
    """


#######################################################
### Helper Functions


def is_url(url):
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except AttributeError:
        return False


def is_blank(value):
    return value is None or not str(value).strip()


def to_utc(dt: datetime.datetime=None):
    """
    Returns dt as an aware UTC datetime. None returns the current time and naive datetimes are taken to already be in UTC.
    """
    if dt is None:
        return datetime.datetime.now(datetime.timezone.utc)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)

    return dt.astimezone(datetime.timezone.utc)


def format_iso8601_ms(dt: datetime.datetime):
    """
    ISO8601 UTC with millisecond precision, e.g. 2014-10-17T09:00:00.000Z
    """
    dt = to_utc(dt)
    return dt.strftime('%Y-%m-%dT%H:%M:%S.') + f'{dt.microsecond // 1000:03d}Z'


def parse_iso8601_ms(text: str):
    """ """
    dt = datetime.datetime.strptime(text, '%Y-%m-%dT%H:%M:%S.%fZ')
    return dt.replace(tzinfo=datetime.timezone.utc)


def load_config(path=None, env=None):
    """
    Function to load the upload configuration as a dict. The values come from the upload_config table of a toml file, with the credentials falling back to the standard AWS environment variables when the file doesn't have them.

    Parameters
    ----------
    path : str, pathlib.Path, or None
        The toml file. None will only read the environment.
    env : dict or None
        The environment mapping. None uses os.environ.

    Returns
    -------
    dict
    """
    if env is None:
        env = os.environ

    config = {}
    if path is not None:
        path = pathlib.Path(path)
        if not path.is_file():
            raise InvalidConfig(f'{path} is not a file.')
        with open(path, 'rb') as f:
            try:
                toml_data = tomllib.load(f)
            except tomllib.TOMLDecodeError as err:
                raise InvalidConfig(f'{path} is not valid toml: {err}') from err

        if config_table not in toml_data:
            raise InvalidConfig(f'{path} has no [{config_table}] table.')
        config.update(toml_data[config_table])

    for field, var in env_credentials.items():
        if is_blank(config.get(field)) and var in env:
            config[field] = env[var]

    return config
