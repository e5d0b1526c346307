import pytest
import datetime
from pydantic import ValidationError
from s3postsign import utils
from s3postsign.context import Credentials, SigningContext

from conftest import access_key_id, region, service, request_time

################################################
### Tests


def test_context_dates(context):
    assert context.sign_date == '20240102'
    assert context.amz_date == '20240102T000000Z'
    assert context.request_time == request_time


def test_context_scope(context):
    assert context.credential_scope == 'accesskeyid/20240102/eu-west-1/s3/aws4_request'
    assert context.algorithm_id == 'AWS4-HMAC-SHA256'
    assert context.server_side_encryption_id == 'AES256'


def test_context_captures_now_once():
    before = datetime.datetime.now(datetime.timezone.utc)
    context = SigningContext.create(access_key_id, region, service)
    after = datetime.datetime.now(datetime.timezone.utc)

    assert before <= context.request_time <= after
    assert context.request_time.tzinfo is not None


def test_context_naive_and_offset_times():
    naive = SigningContext.create(access_key_id, region, service, now=datetime.datetime(2024, 1, 2, 23, 30))
    assert naive.sign_date == '20240102'

    # 01:30 at +02:00 is still the previous day in UTC
    tz = datetime.timezone(datetime.timedelta(hours=2))
    offset = SigningContext.create(access_key_id, region, service, now=datetime.datetime(2024, 1, 3, 1, 30, tzinfo=tz))
    assert offset.sign_date == '20240102'
    assert offset.request_time.tzinfo == datetime.timezone.utc


@pytest.mark.parametrize('key_id, reg, serv', [('', region, service), (access_key_id, '', service), (access_key_id, region, ' '), (None, region, service)])
def test_context_blank_scope(key_id, reg, serv):
    with pytest.raises(utils.InvalidConfig):
        SigningContext.create(key_id, reg, serv, now=request_time)


def test_context_is_frozen(context):
    with pytest.raises(ValidationError):
        context.region = 'us-east-1'


def test_credentials_hide_secret():
    creds = Credentials(access_key_id=access_key_id, secret_key='nosecret')

    assert 'nosecret' not in repr(creds)
    assert 'nosecret' not in creds.model_dump_json()
    assert creds.secret_key.get_secret_value() == 'nosecret'
