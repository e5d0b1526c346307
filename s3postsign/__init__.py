from s3postsign.utils import MissingInput, InvalidConfig, load_config
from s3postsign.context import Credentials, SigningContext
from s3postsign.policy import ExactMatch, Range, Prefix, PolicyDocument, build_policy, get_base64_policy, decode_policy
from s3postsign.signer import SigningKeyChain, derive_signing_key, sign_policy, get_signature
from s3postsign.form import FormParameters, UploadForm, get_form_params, get_form_action, build_upload_form
from s3postsign.main import UploadConfig, validate_config, config_from_file, create_upload_form

__version__ = '0.1.0'
