import pytest
import datetime
from s3postsign.context import SigningContext

#################################################
### Parameters

access_key_id = 'accesskeyid'
secret_key = 'nosecret'
service = 's3'
region = 'eu-west-1'

bucket = 'my-bucket'
acl = 'public-read'
expires_interval = 120
content_type_prefix = 'image/'
content_length_max = 5 * 1024 * 1024
file_destination = 'user/user/filename.png'

request_time = datetime.datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=datetime.timezone.utc)

################################################
### Fixtures


@pytest.fixture
def context():
    return SigningContext.create(access_key_id, region, service, now=request_time)


@pytest.fixture
def upload_config():
    return {
        'bucket_name': bucket,
        'acl': acl,
        'expires_interval': expires_interval,
        'content_type_prefix': content_type_prefix,
        'content_length_min': 0,
        'content_length_max': content_length_max,
        'file_destination': file_destination,
        'region': region,
        'service': service,
        'access_key_id': access_key_id,
        'secret_key': secret_key,
        }
