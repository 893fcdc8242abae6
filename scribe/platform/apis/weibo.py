"""Sina Weibo OAuth 2.0 Api."""

from scribe.core.shared_models import SignatureType, TokenFormat, Verb
from scribe.platform.apis._base import DefaultApi20
from scribe.platform.decorators import api


@api(name="Sina Weibo", short_name="weibo", labels=["Social"])
class WeiboApi(DefaultApi20):
    """Weibo requires a POST token exchange and answers JSON."""

    AUTHORIZE_URL = (
        "https://api.weibo.com/oauth2/authorize?client_id=%s&redirect_uri=%s&response_type=code"
    )
    ACCESS_TOKEN_ENDPOINT = "https://api.weibo.com/oauth2/access_token"

    access_token_verb = Verb.POST
    token_format = TokenFormat.JSON
    signature_type = SignatureType.QUERY_STRING
