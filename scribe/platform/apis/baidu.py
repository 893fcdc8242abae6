"""Baidu OAuth 2.0 Api."""

from scribe.core.shared_models import SignatureType, TokenFormat, Verb
from scribe.platform.apis._base import DefaultApi20
from scribe.platform.decorators import api


@api(name="Baidu", short_name="baidu", labels=["Social"])
class BaiduApi(DefaultApi20):
    """Baidu Open Platform. Token responses are JSON; REST calls take ``access_token``."""

    AUTHORIZE_URL = (
        "https://openapi.baidu.com/oauth/2.0/authorize?response_type=code&client_id=%s"
        "&redirect_uri=%s"
    )
    ACCESS_TOKEN_ENDPOINT = "https://openapi.baidu.com/oauth/2.0/token"

    access_token_verb = Verb.GET
    token_format = TokenFormat.JSON
    signature_type = SignatureType.QUERY_STRING
