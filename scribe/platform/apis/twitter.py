"""Twitter (X) OAuth 1.0a Api."""

from scribe.platform.apis._base import DefaultApi10a
from scribe.platform.decorators import api


@api(name="Twitter", short_name="twitter", labels=["Social"])
class TwitterApi(DefaultApi10a):
    """Three-legged OAuth 1.0a with HMAC-SHA1 and header placement."""

    REQUEST_TOKEN_ENDPOINT = "https://api.twitter.com/oauth/request_token"
    ACCESS_TOKEN_ENDPOINT = "https://api.twitter.com/oauth/access_token"
    AUTHORIZE_URL = "https://api.twitter.com/oauth/authorize?oauth_token=%s"


@api(name="Twitter (authenticate)", short_name="twitter_authenticate", labels=["Social"])
class TwitterAuthenticateApi(TwitterApi):
    """Sign in with Twitter: skips the consent screen for already-authorized users."""

    AUTHORIZE_URL = "https://api.twitter.com/oauth/authenticate?oauth_token=%s"
