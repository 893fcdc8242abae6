"""QQ (Tencent) OAuth 2.0 Api.

QQ answers the token exchange form-encoded
(``access_token=...&expires_in=7776000&refresh_token=...``) and reports
errors as a JSONP ``callback( {...} );`` body with status 200, which the form
extractor rejects. Protected resources take the token as a query parameter;
most also expect ``oauth_consumer_key`` (the app id) and ``openid``, which the
caller adds after looking the openid up at ``https://graph.qq.com/oauth2.0/me``.
"""

from scribe.core.shared_models import SignatureType, TokenFormat, Verb
from scribe.platform.apis._base import DefaultApi20
from scribe.platform.decorators import api


@api(name="QQ", short_name="qq", labels=["Social"])
class QQApi(DefaultApi20):
    """QQ Connect."""

    AUTHORIZE_URL = (
        "https://graph.qq.com/oauth2.0/authorize?client_id=%s&redirect_uri=%s&response_type=code"
    )
    ACCESS_TOKEN_ENDPOINT = "https://graph.qq.com/oauth2.0/token"

    access_token_verb = Verb.GET
    token_format = TokenFormat.FORM
    signature_type = SignatureType.QUERY_STRING
