"""GitHub OAuth 2.0 Api."""

from scribe.core.shared_models import SignatureType, TokenFormat, Verb
from scribe.platform.apis._base import DefaultApi20
from scribe.platform.decorators import api


@api(name="GitHub", short_name="github", labels=["Developer Tools"])
class GitHubApi(DefaultApi20):
    """GitHub OAuth apps. The exchange asks for JSON; API calls use a bearer header."""

    AUTHORIZE_URL = "https://github.com/login/oauth/authorize?client_id=%s&redirect_uri=%s"
    ACCESS_TOKEN_ENDPOINT = "https://github.com/login/oauth/access_token"

    access_token_verb = Verb.POST
    token_format = TokenFormat.JSON
    signature_type = SignatureType.HEADER
